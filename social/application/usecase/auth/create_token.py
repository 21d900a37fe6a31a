"""Create token use case."""

from pydantic import BaseModel

from social.domain.service import JWTService, UserService


class CreateTokenRequest(BaseModel):
    """Create token request."""

    email: str
    password: str


class CreateTokenResponse(BaseModel):
    """Create token response."""

    token: str


class CreateTokenUseCase:
    """Use case for exchanging credentials for a bearer token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize create token use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: CreateTokenRequest) -> CreateTokenResponse:
        """Authenticate by email and password and issue a token.

        Raises:
            AuthenticationError: If the credentials do not match an active user
            SigningError: If the token cannot be signed
        """
        user = await self.user_service.authenticate(request.email, request.password)
        return CreateTokenResponse(token=self.jwt_service.create_token(user.id))
