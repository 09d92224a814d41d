"""Carousel navigation - bounds-safe index stepping.

Used by multi-image gallery posts and the video playlist modal. Functions take
a navigation state and return the new index; nothing here raises.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CarouselNavigationState:
    """Position within a carousel of ``total_images`` slides."""

    current_index: int = 0
    total_images: int = 0

    @property
    def has_next(self) -> bool:
        return can_navigate_next(self)

    @property
    def has_prev(self) -> bool:
        return can_navigate_previous(self)


def navigate_next(state: CarouselNavigationState) -> int:
    """Index after a "next" click, clamped to the last slide."""
    if state.total_images <= 0:
        return 0
    return min(state.current_index + 1, state.total_images - 1)


def navigate_previous(state: CarouselNavigationState) -> int:
    """Index after a "previous" click, clamped to the first slide."""
    return max(state.current_index - 1, 0)


def can_navigate_next(state: CarouselNavigationState) -> bool:
    return state.total_images > 0 and state.current_index < state.total_images - 1


def can_navigate_previous(state: CarouselNavigationState) -> bool:
    return state.current_index > 0


def indicator_count(images: Any) -> int:
    """Number of indicator dots for a carousel.

    CMS payloads are not typed end to end, so anything that is not a list or
    tuple (None, a string, a dict) counts as zero images.
    """
    if not isinstance(images, Sequence) or isinstance(images, (str, bytes)):
        return 0
    return len(images)


class CarouselController:
    """Moves a :class:`CarouselNavigationState`, returning new states."""

    def next_slide(self, state: CarouselNavigationState) -> CarouselNavigationState:
        if not state.has_next:
            return state
        return CarouselNavigationState(navigate_next(state), state.total_images)

    def prev_slide(self, state: CarouselNavigationState) -> CarouselNavigationState:
        if not state.has_prev:
            return state
        return CarouselNavigationState(navigate_previous(state), state.total_images)

    def go_to_index(
        self, state: CarouselNavigationState, index: int
    ) -> CarouselNavigationState:
        """Jump to a slide (indicator click). Out-of-range indices are ignored."""
        if 0 <= index < state.total_images:
            return CarouselNavigationState(index, state.total_images)
        return state

    def for_images(self, images: Any) -> CarouselNavigationState:
        """Initial state for a list of images."""
        return CarouselNavigationState(0, indicator_count(images))
