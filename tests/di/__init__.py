"""Mock providers for testing."""

from .cache import MockCacheProvider
from .mailer import MockMailerProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCacheProvider",
    "MockMailerProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
