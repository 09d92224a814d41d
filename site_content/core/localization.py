"""Helpers for the CMS's ``{"en": ..., "vi": ...}`` localized fields."""

from collections.abc import Mapping
from typing import Any

from site_content.core.config import SUPPORTED_LOCALES, default_locale


def resolve_locale(locale: str | None) -> str:
    """Return ``locale`` if the site supports it, otherwise the default."""
    if locale and locale.lower() in SUPPORTED_LOCALES:
        return locale.lower()
    return default_locale()


def localized(field: Any, locale: str | None = None) -> str:
    """Read one locale out of a localized field.

    Args:
        field: A locale mapping, a plain string, or anything else (missing
            fields arrive as None).
        locale: Requested locale. Unsupported values resolve to the default.

    Returns:
        The requested translation, else the default locale's, else "".
        Plain strings are returned as-is.
    """
    if isinstance(field, str):
        return field
    if not isinstance(field, Mapping):
        return ""

    value = field.get(resolve_locale(locale))
    if isinstance(value, str) and value:
        return value
    fallback = field.get(default_locale())
    return fallback if isinstance(fallback, str) else ""


def localized_values(field: Any) -> list[str]:
    """All supported translations of a field, "" where one is missing."""
    if not isinstance(field, Mapping):
        return ["" for _ in SUPPORTED_LOCALES]
    values = []
    for locale in SUPPORTED_LOCALES:
        value = field.get(locale)
        values.append(value if isinstance(value, str) else "")
    return values
