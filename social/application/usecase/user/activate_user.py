"""Activate user use case."""

from pydantic import BaseModel, Field

from social.domain.service import UserService


class ActivateUserRequest(BaseModel):
    """Activate user request."""

    token: str = Field(min_length=1)


class ActivateUserUseCase:
    """Use case for redeeming an invitation token."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ActivateUserRequest) -> None:
        """Activate the invited user.

        Raises:
            NotFoundError: If the token is unknown or expired
        """
        await self.user_service.activate(request.token)
