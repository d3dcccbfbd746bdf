"""Export: write rendered HTML pages and sidecar JSON for the static site"""

import json
from pathlib import Path
from typing import Optional

from docpipe.core.catalog import NavigationCatalog
from docpipe.core.models import DocView, PostView
from docpipe.core.render import render_doc_html, render_post_html
from docpipe.core.utils.slug import doc_href


def build_doc_sidecar(view: DocView) -> dict:
    """Minimal sidecar: slug, href, frontmatter, and prev/next hrefs."""
    def _link(page):
        return {"slug": page.slug, "title": page.title, "href": doc_href(page.slug)} if page else None

    return {
        "slug": view.slug,
        "href": doc_href(view.slug),
        "frontmatter": view.document.frontmatter.model_dump(),
        "prev": _link(view.prev),
        "next": _link(view.next),
    }


def build_post_sidecar(view: PostView) -> dict:
    """Post metadata plus the block sequence (content itself is not repeated)."""
    return {
        **view.post.model_dump(by_alias=True, exclude={"content"}),
        "blocks": [b.model_dump() for b in view.blocks],
    }


def _write(page_dir: Path, html: str, sidecar: dict) -> Path:
    page_dir.mkdir(parents=True, exist_ok=True)
    html_path = page_dir / "index.html"
    html_path.write_text(html, encoding="utf-8")
    (page_dir / "page.json").write_text(
        json.dumps(sidecar, indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return html_path


def write_doc(
    view: DocView,
    output_dir: Path,
    preset: str = "gfm-like",
    catalog: Optional[NavigationCatalog] = None,
    ) -> Path:
    """Write docs/<slug>/index.html + page.json under output_dir. Returns the HTML path."""
    page_dir = Path(output_dir).joinpath("docs", *view.slug.split("/")) if view.slug else Path(output_dir) / "docs"
    return _write(page_dir, render_doc_html(view, preset, catalog), build_doc_sidecar(view))


def write_post(view: PostView, output_dir: Path) -> Path:
    """Write blog/<slug>/index.html + page.json under output_dir. Returns the HTML path."""
    page_dir = Path(output_dir) / "blog" / view.post.slug
    return _write(page_dir, render_post_html(view), build_post_sidecar(view))
