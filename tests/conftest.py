"""Shared pytest fixtures for site_content tests."""

from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture
def week_of_posts() -> list[dict[str, Any]]:
    """Seven posts published Jan 7 down to Jan 1, newest first.

    Titles are "Post 1" (Jan 7) to "Post 7" (Jan 1).
    """
    return [
        {
            "_id": f"post-{n}",
            "title": {"en": f"Post {n}", "vi": f"Bài viết {n}"},
            "publishedAt": f"2024-01-{8 - n:02d}T09:00:00Z",
        }
        for n in range(1, 8)
    ]


@pytest.fixture
def topics() -> list[dict[str, Any]]:
    """Two blog topics in display order."""
    return [
        {
            "_id": "topic-coffee",
            "title": {"en": "Coffee", "vi": "Cà phê"},
            "slug": {"current": "coffee"},
        },
        {
            "_id": "topic-travel",
            "title": {"en": "Travel", "vi": "Du lịch"},
            "slug": {"current": "travel"},
        },
    ]


@pytest.fixture
def gallery_posts() -> list[dict[str, Any]]:
    """Five gallery posts, two of them in theHomeCafe."""
    return [
        {"_id": "g1", "category": "littleLifeAtArt", "caption": "Latte art"},
        {"_id": "g2", "category": "theHomeCafe", "caption": "Morning pour-over"},
        {"_id": "g3", "category": "littleLifeAtArt", "caption": "Rosetta"},
        {"_id": "g4", "category": "theHomeCafe", "caption": "Cold brew"},
        {"_id": "g5", "category": "littleLifeAtArt", "caption": "Tulip"},
    ]


@pytest.fixture
def make_raw_video() -> Callable[..., dict[str, Any]]:
    """Factory for raw CMS video records.

    Keyword arguments override top-level fields; pass a value of ``None`` to
    drop a field entirely.

    Example:
        def test_missing_title(make_raw_video):
            raw = make_raw_video(title=None)
    """

    def factory(**overrides: Any) -> dict[str, Any]:
        raw: dict[str, Any] = {
            "_id": "video-1",
            "title": "Sunrise over Da Lat",
            "description": "Clouds rolling through the pines",
            "videoUrl": "https://videos.example.com/dalat.mp4",
            "thumbnail": {
                "asset": {"_ref": "image-abc123-800x600-jpg", "_type": "reference"},
            },
            "publishedAt": "2024-03-01T06:30:00Z",
        }
        raw.update(overrides)
        return {key: value for key, value in raw.items() if value is not None}

    return factory
