"""Pipeline step functions: docs and blog rendering, static build orchestration"""

import logging
from pathlib import Path

from docpipe.config import Settings
from docpipe.core.catalog import NavigationCatalog
from docpipe.core.export import write_doc, write_post
from docpipe.core.extract.blocks import BlogBlocks
from docpipe.core.loader import ContentNotFound, read_doc
from docpipe.core.models import BlogPost, DocView, PostView
from docpipe.core.parse import preprocess_markdown
from docpipe.core.utils.slug import join_slug


logger = logging.getLogger(__name__)


def run_doc(
    content_dir: Path,
    catalog: NavigationCatalog,
    slug_parts: list[str],
    ) -> DocView:
    """Load, preprocess, and attach prev/next for one docs page.

    Raises ContentNotFound when neither <slug>.md nor <slug>/index.md has content.
    """
    raw = read_doc(Path(content_dir), slug_parts)
    slug = join_slug(slug_parts)
    if not raw:
        logger.info("No doc content for slug %r", slug)
        raise ContentNotFound(f"No doc content for slug '{slug}'")

    neighbours = catalog.prev_next(slug)
    return DocView(
        slug=slug,
        document=preprocess_markdown(raw),
        prev=neighbours.prev,
        next=neighbours.next,
    )


def run_post(posts: dict[str, BlogPost], slug: str) -> PostView:
    """Segment one post's body into blocks. Raises ContentNotFound for unknown slugs."""
    post = posts.get(slug)
    if post is None:
        logger.info("No blog post for slug %r", slug)
        raise ContentNotFound(f"No blog post for slug '{slug}'")
    return PostView(post=post, blocks=tuple(BlogBlocks(post.content)))


def run_build(
    settings: Settings,
    catalog: NavigationCatalog,
    posts: dict[str, BlogPost],
    ) -> list[tuple[str, Path]]:
    """Render the docs index, every catalog slug, and every post into settings.output_dir.

    Returns (href-like label, html_path) pairs. Docs without content are skipped.
    """
    output_dir = Path(settings.output_dir)
    content_dir = Path(settings.content_dir)
    results = []

    for slug_parts in [[], *catalog.all_slugs()]:
        try:
            view = run_doc(content_dir, catalog, slug_parts)
        except ContentNotFound:
            logger.warning("Skipping docs page %r: no content", join_slug(slug_parts))
            continue
        results.append((f"docs/{view.slug}".rstrip("/"), write_doc(view, output_dir, settings.parser_config, catalog)))

    for slug in posts:
        view = run_post(posts, slug)
        results.append((f"blog/{slug}", write_post(view, output_dir)))

    return results
