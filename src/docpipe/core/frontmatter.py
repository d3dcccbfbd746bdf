"""Frontmatter extraction: split raw content into metadata and body"""

import re

from docpipe.core.models import Frontmatter


FRONTMATTER_RE = re.compile(r'^---\r?\n(.*?)\r?\n---\r?\n?', re.DOTALL)
TITLE_RE = re.compile(r'title:\s*"(.+?)"')
DESCRIPTION_RE = re.compile(r'description:\s*"(.+?)"')


def _field(pattern: re.Pattern, block: str) -> str:
    m = pattern.search(block)
    return m.group(1) if m else ""


def extract_frontmatter(content: str) -> tuple[Frontmatter, str]:
    """Return (frontmatter, body) with the leading --- block removed.

    Only double-quoted `title` and `description` scalars are read. Missing or
    misshapen fields default to ''. Without a leading block the content is
    returned unchanged with empty frontmatter.
    """
    m = FRONTMATTER_RE.match(content)
    if not m:
        return Frontmatter(), content
    block = m.group(1)
    frontmatter = Frontmatter(
        title=_field(TITLE_RE, block),
        description=_field(DESCRIPTION_RE, block),
    )
    return frontmatter, content[m.end():]
