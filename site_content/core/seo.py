"""schema.org JSON-LD documents embedded in page heads."""

from collections.abc import Iterable, Mapping
from typing import Any

from site_content.core.config import site_url

SCHEMA_CONTEXT = "https://schema.org"
AUTHOR_NAME = "Tram Meo"


def blog_posting_schema(
    title: str,
    published_at: str,
    slug: str,
    category: str,
    excerpt: str | None = None,
    cover_image: str | None = None,
) -> dict[str, Any]:
    """BlogPosting document for a single post page."""
    base_url = site_url()
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": title,
        "description": excerpt or "",
        "image": cover_image or f"{base_url}/og-image.jpg",
        "datePublished": published_at,
        "dateModified": published_at,
        "author": {"@type": "Person", "name": AUTHOR_NAME},
        "publisher": {
            "@type": "Organization",
            "name": "Personal Blog",
            "logo": {"@type": "ImageObject", "url": f"{base_url}/logo.png"},
        },
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": f"{base_url}/{category}/{slug}",
        },
    }


def website_schema() -> dict[str, Any]:
    base_url = site_url()
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": "Personal Blog - Bên Rìa Thế Giới & BeTheFlow",
        "description": "Personal branding blog featuring writing and barista journey",
        "url": base_url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": f"{base_url}/search?q={{search_term_string}}",
            },
            "query-input": "required name=search_term_string",
        },
    }


def person_schema(same_as: Iterable[str] = ()) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": AUTHOR_NAME,
        "url": site_url(),
        "sameAs": list(same_as),
        "jobTitle": "Writer & Barista",
        "description": "Personal brand combining literary writing and coffee culture",
    }


def breadcrumb_schema(items: Iterable[Mapping[str, str]]) -> dict[str, Any]:
    """BreadcrumbList from ``{"name", "url"}`` items; positions start at 1."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": item["name"],
                "item": item["url"],
            }
            for position, item in enumerate(items, start=1)
        ],
    }
