"""Raw content loading: docs from the content directory, posts from the JSON dataset"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from docpipe.core.models import BlogPost


logger = logging.getLogger(__name__)

_POSTS = TypeAdapter(dict[str, BlogPost])


class ContentNotFound(LookupError):
    """No content resolves for the requested slug."""


def _safe_parts(slug_parts: list[str]) -> bool:
    return all(p and p not in (".", "..") and "/" not in p and "\\" not in p for p in slug_parts)


def _read(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Unreadable doc source %s: %s", path, e)
        return None


def read_doc(content_dir: Path, slug_parts: list[str]) -> Optional[str]:
    """Return raw source for slug_parts, or None when nothing resolves.

    Probes <slug>.md, then <slug>/index.md. Empty parts read the docs index.
    """
    content_dir = Path(content_dir)
    if not slug_parts:
        return _read(content_dir / "index.md")
    if not _safe_parts(slug_parts):
        logger.debug("Rejected slug %r", slug_parts)
        return None

    base = content_dir.joinpath(*slug_parts)
    for candidate in (base.with_name(f"{base.name}.md"), base / "index.md"):
        if candidate.is_file():
            raw = _read(candidate)
            if raw is not None:
                return raw
    return None


def load_posts(path: Path) -> dict[str, BlogPost]:
    """Load the posts dataset: a JSON object mapping slug -> post record.

    Each key must equal its record's slug, and slugs must be single path
    segments (they name the post's output directory).
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid posts file {path}: {e}") from e
    posts = _POSTS.validate_python(data)
    for key, post in posts.items():
        if key != post.slug:
            raise ValueError(f"Invalid posts file {path}: key {key!r} does not match slug {post.slug!r}")
        if not _safe_parts([post.slug]):
            raise ValueError(f"Invalid posts file {path}: unsafe slug {post.slug!r}")
    logger.info("Loaded %d post(s) from %s", len(posts), path)
    return posts
