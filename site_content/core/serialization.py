"""Video record (de)serialization for the cloud-walker video gallery.

Raw records are the JSON objects the CMS query returns::

    {
        "_id": "...",
        "title": "...",
        "description": "...",          # optional
        "videoUrl": "https://...",
        "thumbnail": {"asset": {"_ref": "image-<id>-<WxH>-<fmt>", "_type": "reference"},
                      "hotspot": {...}, "crop": {...}},   # hotspot/crop optional
        "publishedAt": "2024-01-07T00:00:00Z",            # optional
    }

:func:`serialize_video` checks the mandatory fields and returns a frozen
:class:`Video`; :func:`deserialize_video` maps it back to the raw shape.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from site_content.core.config import image_base_url
from site_content.core.errors import (
    ContentError,
    InvalidContentError,
    MissingRequiredFieldError,
    classify_error,
)
from site_content.core.logging import get_logger, record_logger

logger = get_logger(__name__)

IMAGE_REF_PREFIX = "image-"


class AssetReference(BaseModel):
    """Pointer to a stored media file. Unknown keys are kept for the round trip."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    ref: str = Field(..., alias="_ref")
    type: str | None = Field(None, alias="_type")


class Video(BaseModel):
    """A video card as the gallery renders it."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    video_url: str
    thumbnail_url: str
    thumbnail_asset: AssetReference
    hotspot: dict[str, Any] | None = None
    crop: dict[str, Any] | None = None
    published_at: str | None = None


def build_thumbnail_url(ref: str) -> str:
    """Derive a CDN URL from an asset reference.

    ``image-abc123-800x600-jpg`` becomes ``<base>abc123-800x600.jpg``. A
    reference that does not split into at least two parts is returned as-is.
    """
    parts = ref.removeprefix(IMAGE_REF_PREFIX).split("-")
    if len(parts) < 2:
        return ref
    asset_id = "-".join(parts[:-1])
    return f"{image_base_url()}{asset_id}.{parts[-1]}"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _string_keyed(value: Any) -> dict[str, Any] | None:
    """A non-empty mapping with string keys, else None."""
    if not isinstance(value, Mapping) or not value:
        return None
    return {key: item for key, item in value.items() if isinstance(key, str)} or None


def _missing_video_fields(raw: Mapping[str, Any]) -> tuple[str, ...]:
    # Wrong-typed values count as missing: they cannot be rendered either.
    missing = [name for name in ("_id", "title", "videoUrl") if not _text(raw.get(name))]

    thumbnail = raw.get("thumbnail")
    asset = thumbnail.get("asset") if isinstance(thumbnail, Mapping) else None
    ref = asset.get("_ref") if isinstance(asset, Mapping) else None
    if not _text(ref):
        missing.append("thumbnail.asset._ref")
    return tuple(missing)


def _asset_reference(asset: Mapping[str, Any]) -> AssetReference:
    fields = _string_keyed(asset) or {}
    if not isinstance(fields.get("_type"), str):
        fields.pop("_type", None)
    return AssetReference.model_validate(fields)


def serialize_video(raw: Any) -> Video:
    """Validate a raw CMS video record and normalize it.

    Args:
        raw: One element of the CMS query result.

    Returns:
        The normalized video. Optional text defaults to "" and optional
        timestamps and image metadata to None, including when the CMS sent
        a value of the wrong type.

    Raises:
        InvalidContentError: If ``raw`` is not a mapping.
        MissingRequiredFieldError: If the id, title, video URL or thumbnail
            asset reference is absent, empty or not a string.
    """
    if not isinstance(raw, Mapping):
        raise InvalidContentError(f"Expected a video object, got {type(raw).__name__}")

    missing = _missing_video_fields(raw)
    if missing:
        record_id = _text(raw.get("_id")) or None
        raise MissingRequiredFieldError(missing, record_id=record_id, kind="video")

    thumbnail = raw["thumbnail"]
    asset = _asset_reference(thumbnail["asset"])
    return Video(
        id=raw["_id"],
        title=raw["title"],
        description=_text(raw.get("description")),
        video_url=raw["videoUrl"],
        thumbnail_url=build_thumbnail_url(asset.ref),
        thumbnail_asset=asset,
        hotspot=_string_keyed(thumbnail.get("hotspot")),
        crop=_string_keyed(thumbnail.get("crop")),
        published_at=_text(raw.get("publishedAt")) or None,
    )


def deserialize_video(video: Video) -> dict[str, Any]:
    """Map a normalized video back to the raw CMS shape.

    Empty optional values are left out rather than written as "" or None.
    """
    thumbnail: dict[str, Any] = {
        "asset": video.thumbnail_asset.model_dump(by_alias=True, exclude_none=True),
    }
    if video.hotspot:
        thumbnail["hotspot"] = dict(video.hotspot)
    if video.crop:
        thumbnail["crop"] = dict(video.crop)

    raw: dict[str, Any] = {
        "_id": video.id,
        "title": video.title,
        "videoUrl": video.video_url,
        "thumbnail": thumbnail,
    }
    if video.description:
        raw["description"] = video.description
    if video.published_at:
        raw["publishedAt"] = video.published_at
    return raw


def validate_video(video: Video) -> bool:
    """True when every field a video card needs is non-empty."""
    return bool(
        video.id
        and video.title
        and video.video_url
        and video.thumbnail_url
        and video.thumbnail_asset.ref
    )


def serialize_videos(raws: Iterable[Any]) -> tuple[list[Video], list[ContentError]]:
    """Serialize a query result, skipping records that fail.

    Returns:
        The videos that serialized, in input order, and the errors for the
        ones that did not.
    """
    videos: list[Video] = []
    errors: list[ContentError] = []
    for position, raw in enumerate(raws):
        try:
            videos.append(serialize_video(raw))
        except ContentError as ex:
            record_logger(logger, kind="video", record_id=ex.record_id, position=position).warning(
                "video_record_skipped",
                reason=classify_error(ex).name,
                error=str(ex),
            )
            errors.append(ex)
    if errors:
        logger.info("video_batch_serialized", serialized=len(videos), skipped=len(errors))
    return videos, errors
