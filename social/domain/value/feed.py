"""Feed query value object."""

from pydantic import AwareDatetime, Field

from social.domain.value.common import ValueObject
from social.domain.value.types import SortDirection

DEFAULT_FEED_LIMIT = 10
MAX_FEED_LIMIT = 20
MAX_FEED_TAGS = 5


class FeedQuery(ValueObject):
    """Filters, ordering and window for a user's feed.

    An empty ``search`` matches everything and an empty ``tags`` list
    disables tag filtering. ``since`` and ``until`` bound the creation
    timestamp inclusively; either may be absent.
    """

    limit: int = Field(default=DEFAULT_FEED_LIMIT, ge=1, le=MAX_FEED_LIMIT)
    offset: int = Field(default=0, ge=0)
    sort: SortDirection = SortDirection.DESC
    search: str = Field(default="", max_length=100)
    tags: list[str] = Field(default_factory=list, max_length=MAX_FEED_TAGS)
    since: AwareDatetime | None = None
    until: AwareDatetime | None = None
