"""Feed query string parsing."""

from collections.abc import Mapping
from datetime import datetime

import pydantic

from social.domain.error import ValidationError
from social.domain.value import FeedQuery, SortDirection
from social.domain.value.feed import DEFAULT_FEED_LIMIT


def parse_feed_query(params: Mapping[str, str]) -> FeedQuery:
    """Build a FeedQuery from raw query string parameters.

    Lenient about syntax and strict about ranges: a ``limit`` or ``offset``
    that is not an integer keeps its default, and a ``since`` or ``until``
    that is not an RFC 3339 timestamp is ignored. ``tags`` is a comma
    separated list.

    Args:
        params: Query string parameters

    Returns:
        Validated feed query

    Raises:
        ValidationError: If sort is not asc/desc, limit or offset is out of
            range, search is too long or more than five tags are given
    """
    values: dict = {
        "limit": _parse_int(params.get("limit"), DEFAULT_FEED_LIMIT),
        "offset": _parse_int(params.get("offset"), 0),
        "sort": params.get("sort") or SortDirection.DESC.value,
        "search": params.get("search") or "",
        "tags": [tag for tag in (params.get("tags") or "").split(",") if tag],
        "since": _parse_timestamp(params.get("since")),
        "until": _parse_timestamp(params.get("until")),
    }

    try:
        return FeedQuery.model_validate(values)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise ValidationError(f"{field}: {error['msg']}") from e


def _parse_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_timestamp(raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        # RFC 3339 UTC designator
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None

    # Dates and offset-less times are not RFC 3339
    if parsed.tzinfo is None:
        return None
    return parsed
