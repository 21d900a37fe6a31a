"""Outbound mail interface."""

from typing import Any

USER_INVITATION_TEMPLATE = "user_invitation"


class MailClient:
    """Generic transactional mail client interface."""

    async def send(
        self,
        template: str,
        display_name: str,
        address: str,
        template_vars: dict[str, Any],
        sandbox: bool,
    ) -> None:
        """Render a template and deliver it to one recipient.

        Args:
            template: Template name (e.g. USER_INVITATION_TEMPLATE)
            display_name: Recipient display name
            address: Recipient email address
            template_vars: Values substituted into the template
            sandbox: When True the provider validates but does not deliver

        Raises:
            MailError: If the message could not be delivered
        """
        raise NotImplementedError
