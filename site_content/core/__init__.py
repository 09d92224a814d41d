"""Pure content utilities for the site's pages.

Pagination, category and search filtering, carousel navigation and CMS record
serialization. Nothing here does I/O; pages call these functions on every
interaction and render whatever they return.
"""

from site_content.core.carousel_logic import (
    CarouselController,
    CarouselNavigationState,
    can_navigate_next,
    can_navigate_previous,
    indicator_count,
    navigate_next,
    navigate_previous,
)
from site_content.core.category_filter import (
    CATEGORY_LABELS,
    FilterState,
    GalleryCategory,
    apply_filter_change,
    extract_image_order,
    filter_by_category,
    is_valid_category,
    is_valid_category_filter,
    should_render_portfolio_link,
    validate_image_array_bounds,
    validate_portfolio_url,
    verify_image_order_preserved,
)
from site_content.core.errors import (
    ContentError,
    ErrorCategory,
    InvalidContentError,
    MissingRequiredFieldError,
    classify_error,
)
from site_content.core.localization import localized, resolve_locale
from site_content.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    record_logger,
    unbind_contextvars,
)
from site_content.core.pagination import (
    PaginationController,
    PaginationState,
    displayed_records,
    page_slice,
    should_show_see_all,
    sort_by_published_desc,
    total_pages,
)
from site_content.core.search import filter_by_search, group_by_topic, visible_groups
from site_content.core.seo import (
    blog_posting_schema,
    breadcrumb_schema,
    person_schema,
    website_schema,
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
from site_content.core.video_duplication import (
    duplicate_videos_for_infinite_scroll,
    get_video_key,
    split_columns,
)

__all__ = [
    # Carousel
    "CarouselController",
    "CarouselNavigationState",
    "can_navigate_next",
    "can_navigate_previous",
    "indicator_count",
    "navigate_next",
    "navigate_previous",
    # Gallery categories
    "CATEGORY_LABELS",
    "FilterState",
    "GalleryCategory",
    "apply_filter_change",
    "extract_image_order",
    "filter_by_category",
    "is_valid_category",
    "is_valid_category_filter",
    "should_render_portfolio_link",
    "validate_image_array_bounds",
    "validate_portfolio_url",
    "verify_image_order_preserved",
    # Errors
    "ContentError",
    "ErrorCategory",
    "InvalidContentError",
    "MissingRequiredFieldError",
    "classify_error",
    # Localization
    "localized",
    "resolve_locale",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "record_logger",
    "unbind_contextvars",
    # Pagination
    "PaginationController",
    "PaginationState",
    "displayed_records",
    "page_slice",
    "should_show_see_all",
    "sort_by_published_desc",
    "total_pages",
    # Search
    "filter_by_search",
    "group_by_topic",
    "visible_groups",
    # Serialization
    "AssetReference",
    "Video",
    "build_thumbnail_url",
    "deserialize_video",
    "serialize_video",
    "serialize_videos",
    "validate_video",
    # Structured data
    "blog_posting_schema",
    "breadcrumb_schema",
    "person_schema",
    "website_schema",
    # Video strip
    "duplicate_videos_for_infinite_scroll",
    "get_video_key",
    "split_columns",
]
