"""HTML rendering of preprocessed docs and segmented blog posts"""

from html import escape
from typing import Iterable, Optional

from markdown_it import MarkdownIt

from docpipe.core.catalog import NavigationCatalog
from docpipe.core.models import (
    CodeBlock,
    ContentBlock,
    DocPage,
    DocView,
    Heading2,
    Heading3,
    ListBlock,
    PostView,
)
from docpipe.core.utils.slug import doc_href, is_active


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_markdown(body: str, preset: str = "gfm-like") -> str:
    return _make_parser(preset).render(body)


def _nav_link(page: Optional[DocPage], rel: str, label: str) -> str:
    if page is None:
        return ""
    return (
        f'<a class="{rel}" rel="{rel}" href="{escape(doc_href(page.slug))}">'
        f'<span>{label}</span> {escape(page.title)}</a>'
    )


def render_sidebar_html(catalog: NavigationCatalog, pathname: str) -> str:
    """Catalog groups in reading order; the page at pathname is marked active."""
    parts = ['<aside class="sidebar">', "<h2>Documentation</h2>"]
    for group in catalog.groups:
        parts.append(f"<h3>{escape(group.group)}</h3>")
        parts.append("<ul>")
        for page in group.pages:
            active = ' class="active" aria-current="page"' if is_active(page.slug, pathname) else ""
            parts.append(f'<li><a href="{escape(doc_href(page.slug))}"{active}>{escape(page.title)}</a></li>')
        parts.append("</ul>")
    parts.append("</aside>")
    return "\n".join(parts)


def render_doc_html(
    view: DocView,
    preset: str = "gfm-like",
    catalog: Optional[NavigationCatalog] = None,
    ) -> str:
    """Docs page: optional catalog sidebar, title and description header, markdown body, prev/next footer."""
    fm = view.document.frontmatter
    parts = []
    if catalog is not None:
        parts.append(render_sidebar_html(catalog, doc_href(view.slug)))
    parts.append("<article>")
    if fm.title:
        parts.append(f"<h1>{escape(fm.title)}</h1>")
    if fm.description:
        parts.append(f'<p class="description">{escape(fm.description)}</p>')
    parts.append(render_markdown(view.document.body, preset))
    if view.prev or view.next:
        parts.append("<nav>")
        parts.append(_nav_link(view.prev, "prev", "Previous"))
        parts.append(_nav_link(view.next, "next", "Next"))
        parts.append("</nav>")
    parts.append("</article>")
    return "\n".join(p for p in parts if p)


def render_block_html(block: ContentBlock) -> str:
    if isinstance(block, Heading2):
        return f"<h2>{escape(block.text)}</h2>"
    if isinstance(block, Heading3):
        return f"<h3>{escape(block.text)}</h3>"
    if isinstance(block, CodeBlock):
        return f"<pre><code>{escape(block.code)}</code></pre>"
    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{escape(item)}</li>" for item in block.items)
        return f"<{tag}>{items}</{tag}>"
    return f"<p>{escape(block.text)}</p>"


def render_blocks_html(blocks: Iterable[ContentBlock]) -> str:
    return "\n".join(render_block_html(b) for b in blocks)


def render_post_html(view: PostView) -> str:
    post = view.post
    header = "\n".join([
        "<header>",
        f'<p class="meta"><span>{escape(post.category)}</span> '
        f'<span>{escape(post.date)}</span> <span>{escape(post.read_time)}</span></p>',
        f"<h1>{escape(post.title)}</h1>",
        f'<p class="excerpt">{escape(post.excerpt)}</p>',
        "</header>",
    ])
    return f"<article>\n{header}\n{render_blocks_html(view.blocks)}\n</article>"
