"""Registration and token routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field, field_validator

from social.application.usecase.auth import (
    CreateTokenRequest,
    CreateTokenResponse,
    CreateTokenUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from social.domain.value.password import MAX_PASSWORD_BYTES

router = APIRouter(
    prefix="/authentication", tags=["authentication"], route_class=DishkaRoute
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterUserAPIRequest(BaseModel):
    """API request for signing up."""

    username: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=3, max_length=MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # max_length counts characters; bcrypt limits bytes
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class CreateTokenAPIRequest(BaseModel):
    """API request for exchanging credentials for a token."""

    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=3, max_length=72)


@router.post(
    "/user",
    response_model=RegisterUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    request: RegisterUserAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Sign up a new user.

    The user starts inactive; the response carries the invitation token that
    the welcome mail links to.
    """
    return await register_user_use_case.execute(
        RegisterUserRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )


@router.post(
    "/token",
    response_model=CreateTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_token(
    request: CreateTokenAPIRequest,
    create_token_use_case: FromDishka[CreateTokenUseCase],
) -> CreateTokenResponse:
    """Issue a bearer token for an active user's credentials."""
    return await create_token_use_case.execute(
        CreateTokenRequest(email=request.email, password=request.password)
    )
