"""Register user use case."""

import logfire
from pydantic import BaseModel

from social.config import Settings
from social.domain.error import InternalError
from social.domain.service import UserService
from social.domain.service.mailer import USER_INVITATION_TEMPLATE, MailClient
from social.application.usecase.user.common import UserResponse


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str
    email: str
    password: str


class RegisterUserResponse(UserResponse):
    """Created user plus the plain invitation token."""

    token: str


class RegisterUserUseCase:
    """Use case for signing up a new, inactive user."""

    def __init__(
        self, user_service: UserService, mail_client: MailClient, settings: Settings
    ) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            mail_client: Client used to send the welcome mail
            settings: Application settings (frontend URL, environment)
        """
        self.user_service = user_service
        self.mail_client = mail_client
        self.settings = settings

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Steps:
        1. Create the inactive user and its invitation
        2. Mail the activation link (sandboxed outside production)
        3. If mailing fails, delete the user again

        Args:
            request: Registration details

        Returns:
            The created user with its invitation token

        Raises:
            DuplicateEmailError: If the email is already registered
            DuplicateUsernameError: If the username is already taken
            InternalError: If the welcome mail could not be sent
        """
        user, plain_token = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )

        activation_url = f"{self.settings.api.frontend_url}/confirm/{plain_token}"

        try:
            await self.mail_client.send(
                USER_INVITATION_TEMPLATE,
                user.username.root,
                user.email,
                {"username": user.username.root, "activation_url": activation_url},
                sandbox=not self.settings.is_production,
            )
        except Exception as e:
            logfire.error("Failed to send welcome mail", user_id=user.id, error=str(e))
            try:
                await self.user_service.delete(user.id)
            except Exception as delete_error:
                logfire.error(
                    "Failed to delete user after mail failure",
                    user_id=user.id,
                    error=str(delete_error),
                )
            raise InternalError("failed to send welcome mail") from e

        response = UserResponse.from_user(user)
        return RegisterUserResponse(**response.model_dump(), token=plain_token)
