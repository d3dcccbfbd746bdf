"""Blog body segmentation into typed content blocks.

A post body is split on blank lines and each chunk is classified on its own
by its leading token. A code fence has to open and close inside one chunk;
a fence containing a blank line is split into several degraded blocks.
"""

import re
from typing import Iterator

from docpipe.core.models import CodeBlock, ContentBlock, Heading2, Heading3, ListBlock, Paragraph


PARAGRAPH_DELIMITER = "\n\n"
FENCE = "```"
LIST_MARKER_RE = re.compile(r'^(\d+\.\s|-\s)')


def _list_block(chunk: str) -> ListBlock:
    """Every line is an item; only the first line decides ordered vs unordered."""
    return ListBlock(
        ordered=chunk.startswith("1. "),
        items=tuple(LIST_MARKER_RE.sub("", line, count=1) for line in chunk.split("\n")),
    )


def classify(chunk: str) -> ContentBlock:
    """Classify one blank-line-delimited chunk."""
    if chunk.startswith("## "):
        return Heading2(text=chunk[3:])
    if chunk.startswith("### "):
        return Heading3(text=chunk[4:])
    if chunk.startswith(FENCE):
        lines = chunk.split("\n")
        return CodeBlock(code="\n".join(lines[1:-1]))
    if chunk.startswith("1. ") or chunk.startswith("- "):
        return _list_block(chunk)
    return Paragraph(text=chunk)


def iter_blocks(content: str) -> Iterator[ContentBlock]:
    """Yield blocks in source order."""
    for chunk in content.split(PARAGRAPH_DELIMITER):
        yield classify(chunk)


class BlogBlocks:
    """Restartable view over a post body; each iteration re-segments the content."""

    def __init__(self, content: str):
        self.content = content

    def __iter__(self) -> Iterator[ContentBlock]:
        return iter_blocks(self.content)
