"""Padding the video strip so the infinite scroll never runs dry."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from site_content.core.config import VIDEO_MIN_ITEMS

UNIQUE_KEY = "_uniqueKey"
ORIGINAL_ID = "_originalId"


def duplicate_videos_for_infinite_scroll(
    videos: Sequence[Mapping[str, Any]],
    min_items: int = VIDEO_MIN_ITEMS,
) -> list[dict[str, Any]]:
    """Repeat the video list until it holds at least ``min_items`` cards.

    Each card is a shallow copy tagged with ``_uniqueKey``
    (``"<id>-<copy>-<index>"``) and ``_originalId``; the input is not touched.
    Lists that are already long enough are tagged but not repeated.
    """
    if not videos:
        return []

    copies = 1 if len(videos) >= min_items else math.ceil(min_items / len(videos))
    return [
        {
            **video,
            UNIQUE_KEY: f"{video['_id']}-{copy}-{index}",
            ORIGINAL_ID: video["_id"],
        }
        for copy in range(copies)
        for index, video in enumerate(videos)
    ]


def get_video_key(video: Mapping[str, Any]) -> str:
    """Render key for a card: the unique key when duplicated, else ``_id``."""
    if UNIQUE_KEY in video:
        return video[UNIQUE_KEY]
    return video["_id"]


def split_columns(
    videos: Sequence[Mapping[str, Any]],
) -> tuple[list[Mapping[str, Any]], list[Mapping[str, Any]]]:
    """Split cards into two scroll columns; the left one takes the odd card."""
    split_point = math.ceil(len(videos) / 2)
    return list(videos[:split_point]), list(videos[split_point:])
