"""Tests for video record serialization."""

from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from site_content.core.errors import (
    ErrorCategory,
    InvalidContentError,
    MissingRequiredFieldError,
    classify_error,
)
from site_content.core.serialization import (
    AssetReference,
    Video,
    build_thumbnail_url,
    deserialize_video,
    serialize_video,
    serialize_videos,
    validate_video,
)

asset_refs = st.from_regex(r"image-[a-z0-9]{1,12}-[0-9]{1,4}x[0-9]{1,4}-[a-z]{3,4}", fullmatch=True)
unit_floats = st.floats(min_value=0, max_value=1, allow_nan=False)
raw_videos = st.fixed_dictionaries(
    {
        "_id": st.uuids().map(str),
        "title": st.text(min_size=1, max_size=200),
        "videoUrl": st.from_regex(r"https://[a-z]{1,10}\.example\.com/[a-z0-9]{1,10}\.mp4", fullmatch=True),
        "thumbnail": st.fixed_dictionaries(
            {"asset": st.fixed_dictionaries({"_ref": asset_refs, "_type": st.just("reference")})},
            optional={
                "hotspot": st.fixed_dictionaries(
                    {"x": unit_floats, "y": unit_floats, "height": unit_floats, "width": unit_floats}
                ),
            },
        ),
    },
    optional={
        "description": st.text(min_size=1, max_size=300),
        "publishedAt": st.datetimes().map(lambda d: d.isoformat() + "Z"),
    },
)


class TestBuildThumbnailUrl:
    def test_standard_reference(self) -> None:
        assert (
            build_thumbnail_url("image-abc123-800x600-jpg")
            == "https://cdn.sanity.io/images/abc123-800x600.jpg"
        )

    def test_uses_configured_base(self) -> None:
        with patch.dict("os.environ", {"SANITY_IMAGE_BASE_URL": "https://img.example.com/p/d"}):
            assert build_thumbnail_url("image-abc-1x1-png") == "https://img.example.com/p/d/abc-1x1.png"

    def test_malformed_reference_returned_unchanged(self) -> None:
        assert build_thumbnail_url("abc123") == "abc123"
        assert build_thumbnail_url("image-abc123") == "image-abc123"


class TestSerializeVideo:
    def test_normalizes_fields(self, make_raw_video) -> None:
        video = serialize_video(make_raw_video())
        assert video.id == "video-1"
        assert video.title == "Sunrise over Da Lat"
        assert video.video_url == "https://videos.example.com/dalat.mp4"
        assert video.thumbnail_url == "https://cdn.sanity.io/images/abc123-800x600.jpg"
        assert video.thumbnail_asset.ref == "image-abc123-800x600-jpg"
        assert video.published_at == "2024-03-01T06:30:00Z"

    def test_optional_fields_default(self, make_raw_video) -> None:
        video = serialize_video(make_raw_video(description=None, publishedAt=None))
        assert video.description == ""
        assert video.published_at is None
        assert video.hotspot is None

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"_id": ""}, "_id"),
            ({"title": ""}, "title"),
            ({"videoUrl": ""}, "videoUrl"),
            ({"videoUrl": None}, "videoUrl"),
            ({"thumbnail": {"asset": {"_ref": ""}}}, "thumbnail.asset._ref"),
            ({"thumbnail": {}}, "thumbnail.asset._ref"),
            ({"thumbnail": None}, "thumbnail.asset._ref"),
        ],
    )
    def test_missing_required_field(self, make_raw_video, overrides, field) -> None:
        with pytest.raises(MissingRequiredFieldError, match="Missing required fields") as exc_info:
            serialize_video(make_raw_video(**overrides))
        assert field in exc_info.value.missing_fields

    def test_error_names_record(self, make_raw_video) -> None:
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            serialize_video(make_raw_video(title=""))
        assert exc_info.value.record_id == "video-1"
        assert "id=video-1" in str(exc_info.value)

    def test_error_without_id(self, make_raw_video) -> None:
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            serialize_video(make_raw_video(_id=""))
        assert exc_info.value.record_id is None

    def test_optional_fields_never_raise(self, make_raw_video) -> None:
        """Only the mandatory fields are enforced."""
        raw = make_raw_video(description="", publishedAt="")
        assert validate_video(serialize_video(raw))

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(InvalidContentError):
            serialize_video(["not", "a", "record"])

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"title": 42}, "title"),
            ({"_id": 7}, "_id"),
            ({"videoUrl": ["https://example.com"]}, "videoUrl"),
            ({"thumbnail": {"asset": {"_ref": 123}}}, "thumbnail.asset._ref"),
        ],
    )
    def test_wrong_typed_required_field_counts_as_missing(
        self, make_raw_video, overrides, field
    ) -> None:
        """Callers only need to catch MissingRequiredFieldError."""
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            serialize_video(make_raw_video(**overrides))
        assert field in exc_info.value.missing_fields

    def test_wrong_typed_optional_fields_default(self, make_raw_video) -> None:
        """Bad optional values are defaulted, never fatal."""
        raw = make_raw_video(
            description=42,
            publishedAt=20240301,
            thumbnail={
                "asset": {"_ref": "image-abc-1x1-jpg", "_type": 5},
                "hotspot": "center",
                "crop": [0, 0, 1, 1],
            },
        )
        video = serialize_video(raw)
        assert video.description == ""
        assert video.published_at is None
        assert video.hotspot is None
        assert video.crop is None
        assert video.thumbnail_asset.type is None
        assert validate_video(video)


class TestRoundTrip:
    @given(raw=raw_videos)
    def test_round_trip_preserves_fields(self, raw) -> None:
        video = serialize_video(raw)
        assert validate_video(video)
        assert deserialize_video(video) == raw

    def test_empty_optionals_are_omitted(self, make_raw_video) -> None:
        raw = deserialize_video(serialize_video(make_raw_video(description="")))
        assert "description" not in raw
        assert raw["publishedAt"] == "2024-03-01T06:30:00Z"

    def test_extra_asset_keys_survive(self, make_raw_video) -> None:
        asset = {"_ref": "image-abc-1x1-jpg", "_type": "reference", "source": "upload"}
        raw = make_raw_video(thumbnail={"asset": asset})
        assert deserialize_video(serialize_video(raw))["thumbnail"]["asset"] == asset


class TestValidateVideo:
    def test_missing_ref_is_invalid(self) -> None:
        video = Video(
            id="v",
            title="t",
            video_url="https://example.com/v.mp4",
            thumbnail_url="https://cdn.sanity.io/images/a.jpg",
            thumbnail_asset=AssetReference(ref=""),
        )
        assert not validate_video(video)

    def test_complete_video_is_valid(self, make_raw_video) -> None:
        assert validate_video(serialize_video(make_raw_video()))


class TestSerializeVideos:
    def test_skips_bad_records(self, make_raw_video) -> None:
        raws = [make_raw_video(), make_raw_video(_id="video-2", title=""), None]
        videos, errors = serialize_videos(raws)
        assert [v.id for v in videos] == ["video-1"]
        assert [classify_error(e) for e in errors] == [
            ErrorCategory.MISSING_FIELD,
            ErrorCategory.INVALID_SHAPE,
        ]
        assert errors[0].record_id == "video-2"
