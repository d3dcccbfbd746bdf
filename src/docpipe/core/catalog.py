"""Navigation catalog: ordered docs page groups, slug lookup, and prev/next"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import model_validator

from docpipe.core.models import DocGroup, DocPage, PrevNext, FrozenModel
from docpipe.core.utils.slug import split_slug


class NavigationCatalog(FrozenModel):
    """Immutable catalog of docs pages; group-then-page order is reading order."""
    groups: tuple[DocGroup, ...] = ()

    @model_validator(mode="after")
    def _unique_slugs(self) -> "NavigationCatalog":
        seen: set[str] = set()
        for page in self.pages():
            if page.slug in seen:
                raise ValueError(f"Duplicate slug in navigation catalog: {page.slug!r}")
            seen.add(page.slug)
        return self

    def pages(self) -> list[DocPage]:
        """All pages flattened in reading order."""
        return [page for group in self.groups for page in group.pages]

    def all_slugs(self) -> list[list[str]]:
        """Path segments for every page except the index (served at the root)."""
        return [split_slug(p.slug) for p in self.pages() if p.slug != ""]

    def lookup(self, slug: str) -> Optional[DocPage]:
        return next((p for p in self.pages() if p.slug == slug), None)

    def prev_next(self, slug: str) -> PrevNext:
        """Neighbours of slug in reading order; None at either boundary.

        A slug that is not in the catalog has no neighbours.
        """
        pages = self.pages()
        idx = next((i for i, p in enumerate(pages) if p.slug == slug), None)
        if idx is None:
            return PrevNext()
        return PrevNext(
            prev=pages[idx - 1] if idx > 0 else None,
            next=pages[idx + 1] if idx < len(pages) - 1 else None,
        )


def load_catalog(path: Path) -> NavigationCatalog:
    """Load a catalog from a YAML list of {group, pages: [{slug, title}]} mappings."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or []
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid catalog file {path}: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"Invalid catalog file {path}: expected a list of groups, got {type(data).__name__}")
    return NavigationCatalog(groups=data)


def _group(name: str, *pages: tuple[str, str]) -> DocGroup:
    return DocGroup(group=name, pages=tuple(DocPage(slug=s, title=t) for s, t in pages))


DEFAULT_CATALOG = NavigationCatalog(groups=(
    _group("Getting Started",
           ("", "Introduction"),
           ("getting-started", "Getting Started"),
           ("how-it-works", "How It Works")),
    _group("Features",
           ("features", "Overview"),
           ("features/channels", "Chat Channels"),
           ("features/skills", "Skills & Integrations")),
    _group("Platform",
           ("platform/dashboard", "Dashboard"),
           ("platform/cost-tracking", "Cost Tracking"),
           ("platform/security", "Security")),
    _group("Help",
           ("help/faq", "FAQ"),
           ("help/support", "Support")),
))
