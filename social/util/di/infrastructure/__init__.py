"""Infrastructure providers."""

# Import bases
from .cache import CacheProvider
from .mailer import MailerProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .cache import ProdCacheProvider  # noqa: F401
from .mailer import ProdMailerProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CacheProvider",
    "MailerProvider",
    "PersistenceProvider",
    "ProdCacheProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
]
