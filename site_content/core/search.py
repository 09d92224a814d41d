"""Title search and topic grouping for the writing blog."""

from collections.abc import Mapping, Sequence
from typing import Any

from site_content.core.config import GENERAL_GROUP
from site_content.core.localization import localized_values

Record = Mapping[str, Any]


def filter_by_search(records: Sequence[Record], query: str) -> Sequence[Record]:
    """Records whose English or Vietnamese title contains ``query``.

    Matching is plain substring containment after lower-casing both sides.
    There is no tokenizing and no accent folding, so "ca phe" does not match
    "cà phê". A blank query returns ``records`` itself.
    """
    if not query.strip():
        return records

    needle = query.lower()
    return [
        record
        for record in records
        if any(needle in title.lower() for title in localized_values(record.get("title")))
    ]


def _topic_slug(record: Record) -> str | None:
    topic = record.get("topic")
    if not isinstance(topic, Mapping):
        return None
    slug = topic.get("slug")
    if not isinstance(slug, Mapping):
        return None
    current = slug.get("current")
    return current if isinstance(current, str) and current else None


def group_by_topic(
    records: Sequence[Record], topics: Sequence[Record]
) -> dict[str, list[Record]]:
    """Bucket records by topic id.

    Every topic gets a bucket, even an empty one, and there is always a
    "general" bucket. Records with no topic, or a topic slug that no known
    topic uses, land in "general".
    """
    groups: dict[str, list[Record]] = {topic["_id"]: [] for topic in topics}
    groups[GENERAL_GROUP] = []

    topic_ids_by_slug: dict[str, str] = {}
    for topic in topics:
        slug = _topic_slug({"topic": topic})
        # First topic with a slug wins, as a linear search would.
        if slug is not None and slug not in topic_ids_by_slug:
            topic_ids_by_slug[slug] = topic["_id"]

    for record in records:
        slug = _topic_slug(record)
        group_key = topic_ids_by_slug.get(slug, GENERAL_GROUP) if slug else GENERAL_GROUP
        groups[group_key].append(record)
    return groups


def visible_groups(
    groups: Mapping[str, Sequence[Record]],
    topics: Sequence[Record],
    selected_topic: str | None = None,
) -> list[tuple[str, Sequence[Record]]]:
    """Topic sections to render, in topic order.

    Args:
        groups: Output of :func:`group_by_topic`.
        topics: Known topics in display order.
        selected_topic: A topic id, "general", or None for everything.

    Returns:
        ``(group_key, records)`` pairs. "general" comes last and only when it
        has records and either nothing or "general" is selected.
    """
    shown = [
        (topic["_id"], groups.get(topic["_id"], []))
        for topic in topics
        if selected_topic is None or topic["_id"] == selected_topic
    ]
    general = groups.get(GENERAL_GROUP, [])
    if general and selected_topic in (None, GENERAL_GROUP):
        shown.append((GENERAL_GROUP, general))
    return shown
