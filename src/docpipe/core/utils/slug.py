"""Slug helpers: path segments and site hrefs for docs pages"""


DOCS_ROOT = "/docs"


def split_slug(slug: str) -> list[str]:
    """'features/channels' -> ['features', 'channels']; '' -> []."""
    return slug.split("/") if slug else []


def join_slug(parts: list[str]) -> str:
    return "/".join(parts)


def doc_href(slug: str) -> str:
    """Site path for a docs page; the index is served at the docs root."""
    return DOCS_ROOT if slug == "" else f"{DOCS_ROOT}/{slug}"


def is_active(slug: str, pathname: str) -> bool:
    """True when pathname is the page's href (sidebar highlighting)."""
    return pathname == doc_href(slug)
