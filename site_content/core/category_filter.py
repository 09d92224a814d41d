"""Category filtering and post validation for the barista photo gallery."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import urlparse

from site_content.core.config import ALL_FILTER, MAX_GALLERY_IMAGES, MIN_GALLERY_IMAGES
from site_content.core.logging import get_logger

logger = get_logger(__name__)


class GalleryCategory(str, Enum):
    """Category values as stored by the CMS schema."""

    LITTLE_LIFE_AT_ART = "littleLifeAtArt"
    THE_HOME_CAFE = "theHomeCafe"


# A filter is a category value or "all"
CategoryFilter = str

CATEGORY_LABELS: dict[CategoryFilter, str] = {
    ALL_FILTER: "All",
    GalleryCategory.LITTLE_LIFE_AT_ART.value: "Little life at Art",
    GalleryCategory.THE_HOME_CAFE.value: "The home cafe",
}


def is_valid_category(category: Any) -> bool:
    return isinstance(category, str) and any(category == c.value for c in GalleryCategory)


def is_valid_category_filter(value: Any) -> bool:
    return value == ALL_FILTER or is_valid_category(value)


def filter_by_category(
    records: Sequence[Mapping[str, Any]], category_filter: CategoryFilter
) -> Sequence[Mapping[str, Any]]:
    """Records in one category, in their original order.

    Returns:
        ``records`` itself for the "all" filter, otherwise a new list holding
        the same record objects.
    """
    if category_filter == ALL_FILTER:
        return records
    return [record for record in records if record.get("category") == category_filter]


@dataclass(frozen=True)
class FilterState:
    """Gallery page and active category filter."""

    current_page: int = 0
    current_filter: CategoryFilter = ALL_FILTER


def apply_filter_change(state: FilterState, new_filter: CategoryFilter) -> FilterState:
    """Switch filters, restarting from the first page.

    Selecting the filter that is already active returns ``state`` itself so
    callers can skip a re-render. Unknown filters are ignored.
    """
    if not is_valid_category_filter(new_filter):
        logger.debug("unknown_category_filter_ignored", filter=new_filter)
        return state
    if new_filter == state.current_filter:
        return state
    return FilterState(current_page=0, current_filter=new_filter)


def validate_image_array_bounds(images: Any) -> bool:
    """A gallery post needs between 1 and 10 images."""
    if not isinstance(images, (list, tuple)):
        return False
    return MIN_GALLERY_IMAGES <= len(images) <= MAX_GALLERY_IMAGES


def validate_portfolio_url(url: Any) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url or not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def should_render_portfolio_link(portfolio_link: str | None) -> bool:
    if portfolio_link is None:
        return False
    return portfolio_link.strip() != ""


def extract_image_order(images: Any) -> list[str]:
    """Stable identifiers for a list of image objects.

    Uses ``_key``, then ``asset._ref``, then ``index-<n>``.
    """
    if not isinstance(images, (list, tuple)):
        return []

    order = []
    for index, image in enumerate(images):
        image = image if isinstance(image, Mapping) else {}
        asset = image.get("asset")
        ref = asset.get("_ref") if isinstance(asset, Mapping) else None
        order.append(image.get("_key") or ref or f"index-{index}")
    return order


def verify_image_order_preserved(source: Any, displayed: Any) -> bool:
    """Check that ``displayed`` shows the same images as ``source`` in the same order."""
    return extract_image_order(source) == extract_image_order(displayed)
