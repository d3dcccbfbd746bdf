"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from docpipe.config import Settings, load_config
from docpipe.core.catalog import DEFAULT_CATALOG, NavigationCatalog, load_catalog
from docpipe.core.loader import ContentNotFound, load_posts
from docpipe.core.models import BlogPost
from docpipe.core.pipeline import run_build, run_doc, run_post
from docpipe.core.utils.slug import doc_href, join_slug, split_slug
from docpipe.logging_config import setup_logging


logger = logging.getLogger(__name__)

ContentDirOpt = Annotated[Optional[str], typer.Option("--content-dir", help="Docs content directory")]
CatalogOpt = Annotated[Optional[str], typer.Option("--catalog", help="YAML navigation catalog file")]
PostsOpt = Annotated[Optional[str], typer.Option("--posts-file", help="Blog posts JSON file")]
LogLevelOpt = Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _catalog(settings: Settings) -> NavigationCatalog:
    if not settings.catalog_file:
        return DEFAULT_CATALOG
    try:
        return load_catalog(Path(settings.catalog_file))
    except (OSError, ValueError) as e:
        _fail("Could not load navigation catalog", e)


def _posts(settings: Settings) -> dict[str, BlogPost]:
    try:
        return load_posts(Path(settings.posts_file))
    except (OSError, ValueError) as e:
        _fail("Could not load blog posts", e)


def slugs_cmd(catalog: CatalogOpt = None):
    """List every docs slug that must be generated (the index is served at /docs)."""
    settings = _settings(overrides={"catalog_file": catalog})
    for parts in _catalog(settings).all_slugs():
        typer.echo(join_slug(parts))


def nav_cmd(catalog: CatalogOpt = None):
    """Print the navigation catalog in reading order."""
    settings = _settings(overrides={"catalog_file": catalog})
    for group in _catalog(settings).groups:
        typer.echo(group.group)
        for page in group.pages:
            typer.echo(f"  {page.title} -> {doc_href(page.slug)}")


def doc_cmd(
    slug: Annotated[str, typer.Argument(help="Docs slug, e.g. features/channels; empty for the index")] = "",
    as_json: Annotated[bool, typer.Option("--json", help="Emit frontmatter, body and prev/next as JSON")] = False,
    content_dir: ContentDirOpt = None,
    catalog: CatalogOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Preprocess one docs page and print its markdown body."""
    settings = _settings(overrides={"content_dir": content_dir, "catalog_file": catalog, "log_level": log_level})
    try:
        view = run_doc(Path(settings.content_dir), _catalog(settings), split_slug(slug.strip("/")))
    except ContentNotFound as e:
        _fail("Page not found", e)
    if as_json:
        typer.echo(view.model_dump_json(indent=2))
    else:
        typer.echo(view.document.body)


def post_cmd(
    slug: Annotated[str, typer.Argument(help="Blog post slug")],
    posts_file: PostsOpt = None,
    log_level: LogLevelOpt = None,
    ):
    """Segment one blog post and print its content blocks as JSON."""
    settings = _settings(overrides={"posts_file": posts_file, "log_level": log_level})
    try:
        view = run_post(_posts(settings), slug)
    except ContentNotFound as e:
        _fail("Post not found", e)
    typer.echo(json.dumps([b.model_dump() for b in view.blocks], indent=2, ensure_ascii=False))


def build_cmd(
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    content_dir: ContentDirOpt = None,
    catalog: CatalogOpt = None,
    posts_file: PostsOpt = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    log_level: LogLevelOpt = None,
    ):
    """Render every docs page and blog post to static HTML + JSON sidecars."""
    settings = _settings(overrides={
        "output_dir": out, "content_dir": content_dir, "catalog_file": catalog,
        "posts_file": posts_file, "parser_config": parser, "log_level": log_level,
    })
    nav = _catalog(settings)
    if Path(settings.posts_file).exists():
        posts = _posts(settings)
    else:
        logger.warning("Posts file %s not found; building docs only", settings.posts_file)
        posts = {}

    try:
        results = run_build(settings, nav, posts)
    except OSError as e:
        _fail("Build failed", e)
    for label, html_path in results:
        typer.echo(f"  {label} -> {html_path}")
    typer.echo(f"Built {len(results)} page(s) to {settings.output_dir}/")
