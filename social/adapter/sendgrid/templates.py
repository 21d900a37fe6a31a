"""Mail templates."""

from dataclasses import dataclass
from html import escape
from typing import Any, Callable

from social.adapter.error import MailError
from social.domain.service.mailer import USER_INVITATION_TEMPLATE


@dataclass(frozen=True)
class RenderedMail:
    """Subject and HTML body ready to send."""

    subject: str
    html: str


def _user_invitation(template_vars: dict[str, Any]) -> RenderedMail:
    username = escape(str(template_vars["username"]))
    activation_url = escape(str(template_vars["activation_url"]), quote=True)

    return RenderedMail(
        subject="Finish registration with Social",
        html=(
            "<!doctype html>"
            "<html><body>"
            f"<p>Hi {username},</p>"
            "<p>Thanks for signing up. Please confirm your email address "
            f'by following <a href="{activation_url}">this link</a>.</p>'
            f"<p>If the link does not work, copy it into your browser: {activation_url}</p>"
            "<p>If you did not sign up, you can safely ignore this email.</p>"
            "</body></html>"
        ),
    )


TEMPLATES: dict[str, Callable[[dict[str, Any]], RenderedMail]] = {
    USER_INVITATION_TEMPLATE: _user_invitation,
}


def render(template: str, template_vars: dict[str, Any]) -> RenderedMail:
    """Render a named template.

    Raises:
        MailError: If the template is unknown or a variable is missing
    """
    renderer = TEMPLATES.get(template)
    if renderer is None:
        raise MailError(f"Unknown mail template: {template}")

    try:
        return renderer(template_vars)
    except KeyError as e:
        raise MailError(f"Missing template variable {e} for {template}") from e
