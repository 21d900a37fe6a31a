"""Authentication use cases."""

from .create_token import CreateTokenRequest, CreateTokenResponse, CreateTokenUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "CreateTokenRequest",
    "CreateTokenResponse",
    "CreateTokenUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]
