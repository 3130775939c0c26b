"""Shared service-layer helper functions."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any, TypeVar

from tenantctl.domain.models import FindOptions

T = TypeVar("T")


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def paginate(
    items: Sequence[T],
    opts: tuple[FindOptions, ...],
    *,
    sort_key: Callable[[T, str], Any] | None = None,
    default_sort: str = "",
) -> list[T]:
    """Order and slice *items* according to the first of *opts*.

    Only the first ``FindOptions`` is honoured; with none, *items* are
    returned in their original order.

    Examples:
        >>> paginate([1, 2, 3, 4], (FindOptions(offset=1, limit=2),))
        [2, 3]
        >>> paginate([1, 2, 3], ())
        [1, 2, 3]
    """
    if not opts:
        return list(items)
    opt = opts[0]
    result = list(items)
    field = opt.sort_by or default_sort
    if sort_key is not None and field:
        result.sort(key=lambda item: sort_key(item, field), reverse=opt.descending)
    elif opt.descending:
        result.reverse()
    result = result[opt.offset :]
    if opt.limit:
        result = result[: opt.limit]
    return result
