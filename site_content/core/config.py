"""Site configuration.

Fixed layout constants live here as module attributes. Deployment-specific
values are read from the environment on every call so a changed environment
(or a patched one in tests) is picked up without re-importing.
"""

import os

# Locales the site is published in. The first is the fallback.
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "vi")

# Pagination
POSTS_PER_PAGE = 3  # Topic sections on the writing blog
GALLERY_ITEMS_PER_PAGE = 9  # Barista photo gallery grid

# Minimum cards in the infinite-scroll video strip
VIDEO_MIN_ITEMS = 30

# Gallery posts carry 1..10 images
MIN_GALLERY_IMAGES = 1
MAX_GALLERY_IMAGES = 10

# Special group and filter values
GENERAL_GROUP = "general"
ALL_FILTER = "all"

DEFAULT_IMAGE_BASE_URL = "https://cdn.sanity.io/images/"
DEFAULT_SITE_URL = "http://localhost:3000"


def image_base_url() -> str:
    """Base URL that derived image URLs are appended to. Always ends in '/'."""
    base = os.getenv("SANITY_IMAGE_BASE_URL", DEFAULT_IMAGE_BASE_URL) or DEFAULT_IMAGE_BASE_URL
    return base if base.endswith("/") else base + "/"


def site_url() -> str:
    """Public origin of the site, without a trailing slash."""
    url = os.getenv("NEXT_PUBLIC_SITE_URL", DEFAULT_SITE_URL) or DEFAULT_SITE_URL
    return url.rstrip("/")


def default_locale() -> str:
    """Configured fallback locale; unsupported values fall back to 'en'."""
    locale = os.getenv("DEFAULT_LOCALE", SUPPORTED_LOCALES[0]).lower()
    if locale not in SUPPORTED_LOCALES:
        return SUPPORTED_LOCALES[0]
    return locale
