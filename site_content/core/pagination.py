"""Per-group "see all" pagination for the topic sections of the blog.

Each topic section shows a short preview until the reader clicks "see all",
which activates paging for that group only. State is an immutable value; the
controller returns a new state for every interaction.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationState:
    """Which groups are paging, and the current page of each.

    ``pages`` and ``active`` always hold the same keys. ``pages`` is stored as
    a read-only mapping, so states can be hashed and shared between renders.
    """

    pages: Mapping[str, int] = field(default_factory=dict)
    active: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pages", MappingProxyType(dict(self.pages)))
        object.__setattr__(self, "active", frozenset(self.active))

    def __hash__(self) -> int:
        return hash((frozenset(self.pages.items()), self.active))

    def is_active(self, group_key: str) -> bool:
        return group_key in self.active

    def current_page(self, group_key: str) -> int:
        """Zero-based page of a group, 0 for groups that are not paging."""
        return self.pages.get(group_key, 0)

    def can_go_next(self, group_key: str, total_pages: int) -> bool:
        return self.current_page(group_key) < total_pages - 1

    def can_go_previous(self, group_key: str) -> bool:
        return self.current_page(group_key) > 0


class PaginationController:
    """State transitions for :class:`PaginationState`.

    Every method is total: unknown groups behave as inactive groups on page 0,
    and a move that is not allowed returns the input state unchanged.
    """

    def activate(self, state: PaginationState, group_key: str) -> PaginationState:
        """Start paging a group from its first page."""
        return self._with_page(state, group_key, 0)

    def deactivate(self, state: PaginationState, group_key: str) -> PaginationState:
        """Collapse a group back to its preview."""
        if group_key not in state.active and group_key not in state.pages:
            return state
        pages = {key: page for key, page in state.pages.items() if key != group_key}
        return PaginationState(pages=pages, active=state.active - {group_key})

    def go_next(
        self, state: PaginationState, group_key: str, total_pages: int
    ) -> PaginationState:
        """Advance one page if there is one.

        Moving a group that was not paging activates it, so the page map and
        the active set never disagree.
        """
        if not state.can_go_next(group_key, total_pages):
            return state
        return self._with_page(state, group_key, state.current_page(group_key) + 1)

    def go_previous(self, state: PaginationState, group_key: str) -> PaginationState:
        if not state.can_go_previous(group_key):
            return state
        return self._with_page(state, group_key, state.current_page(group_key) - 1)

    def reset_all(self) -> PaginationState:
        """Forget every group, used when the topic selection changes."""
        return PaginationState()

    def _with_page(
        self, state: PaginationState, group_key: str, page: int
    ) -> PaginationState:
        pages = dict(state.pages)
        pages[group_key] = page
        return PaginationState(pages=pages, active=state.active | {group_key})


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for ``count`` items, 0 when there is nothing to page."""
    if count <= 0 or page_size <= 0:
        return 0
    return math.ceil(count / page_size)


def page_slice(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Items on a zero-based page. Out-of-range pages are empty."""
    if page < 0 or page_size <= 0:
        return []
    start = page * page_size
    return list(items[start : start + page_size])


def should_show_see_all(count: int, page_size: int) -> bool:
    """A group only offers "see all" when it overflows its preview."""
    return count > page_size


def _published_timestamp(record: Mapping[str, Any]) -> float | None:
    value = record.get("publishedAt")
    if not isinstance(value, str) or not value:
        return None
    try:
        published = datetime.fromisoformat(value)
    except ValueError:
        return None
    if published.tzinfo is None:
        published = published.replace(tzinfo=UTC)
    return published.timestamp()


def sort_by_published_desc(records: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Newest first. Undated records go last; ties keep their input order."""

    def sort_key(record: Mapping[str, Any]) -> tuple[bool, float]:
        timestamp = _published_timestamp(record)
        if timestamp is None:
            return (True, 0.0)
        return (False, -timestamp)

    return sorted(records, key=sort_key)


def displayed_records(
    state: PaginationState,
    group_key: str,
    records: Sequence[Mapping[str, Any]],
    page_size: int,
) -> list[Mapping[str, Any]]:
    """Records a topic section renders.

    Inactive groups show their first ``page_size`` records; active groups show
    their current page. Both views are sorted newest first. A non-positive
    ``page_size`` shows nothing.
    """
    if page_size <= 0:
        return []
    ordered = sort_by_published_desc(records)
    if not state.is_active(group_key):
        return ordered[:page_size]
    return page_slice(ordered, state.current_page(group_key), page_size)
