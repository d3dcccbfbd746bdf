"""Docs preprocessing chain: frontmatter -> custom tags -> internal links"""

from docpipe.core.frontmatter import extract_frontmatter
from docpipe.core.models import ContentDocument
from docpipe.core.transform.links import normalize_links
from docpipe.core.transform.tags import transform_custom_tags


def preprocess_markdown(content: str) -> ContentDocument:
    """Turn raw doc source into a ContentDocument ready for the markdown renderer."""
    frontmatter, body = extract_frontmatter(content)
    body = transform_custom_tags(body)
    body = normalize_links(body)
    return ContentDocument(frontmatter=frontmatter, body=body)
