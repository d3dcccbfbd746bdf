"""Data models for the preprocessing, navigation, and blog rendering pipeline"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Frontmatter(FrozenModel):
    """Page metadata parsed from the leading --- block; fields default to ''."""
    title: str = ""
    description: str = ""


class ContentDocument(FrozenModel):
    """Preprocessed doc: custom tags resolved and internal links normalized."""
    frontmatter: Frontmatter = Frontmatter()
    body: str


class DocPage(FrozenModel):
    slug: str                       # '/'-joined path; '' is the docs index
    title: str


class DocGroup(FrozenModel):
    group: str
    pages: tuple[DocPage, ...] = ()


class PrevNext(FrozenModel):
    prev: Optional[DocPage] = None
    next: Optional[DocPage] = None


class BlogPost(FrozenModel):
    """A single post record from the static posts dataset."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    excerpt: str = ""
    date: str = ""
    read_time: str = Field(default="", alias="readTime")
    category: str = ""
    content: str = ""


# --- blog content blocks ---

class Heading2(FrozenModel):
    kind: Literal["heading2"] = "heading2"
    text: str


class Heading3(FrozenModel):
    kind: Literal["heading3"] = "heading3"
    text: str


class CodeBlock(FrozenModel):
    kind: Literal["code"] = "code"
    code: str


class ListBlock(FrozenModel):
    kind: Literal["list"] = "list"
    ordered: bool
    items: tuple[str, ...]


class Paragraph(FrozenModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str


ContentBlock = Annotated[
    Union[Heading2, Heading3, CodeBlock, ListBlock, Paragraph],
    Field(discriminator="kind"),
]


# --- renderer inputs ---

class DocView(FrozenModel):
    """Everything the renderer needs for one docs page."""
    slug: str
    document: ContentDocument
    prev: Optional[DocPage] = None
    next: Optional[DocPage] = None


class PostView(FrozenModel):
    post: BlogPost
    blocks: tuple[ContentBlock, ...]
