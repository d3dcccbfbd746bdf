"""Rewrite custom block tags (CardGroup, Note, Warning) into plain markdown.

Each rewrite is a single pattern substitution over paired start/end tags.
Tags that do not fit the expected shape are left in place, and once every
recognised tag has been rewritten another pass changes nothing. Tags of the
same kind do not nest: the outer pair matches the first closing tag, so an
inner tag survives the first pass and is only rewritten by a second one.
"""

import re


CARD_GROUP_RE = re.compile(r'<CardGroup[^>]*>(.*?)</CardGroup>', re.DOTALL)
CARD_RE = re.compile(
    r'<Card\s+title="([^"]*)"[^>]*href="([^"]*)"[^>]*>\s*(.*?)\s*</Card>',
    re.DOTALL,
)
NOTE_RE = re.compile(r'<Note>\s*(.*?)\s*</Note>', re.DOTALL)
WARNING_RE = re.compile(r'<Warning>\s*(.*?)\s*</Warning>', re.DOTALL)


def _card_list(m: re.Match) -> str:
    """Flatten one CardGroup into a bullet list; no cards yields ''."""
    return "\n".join(
        f"- [**{title}**]({href}) — {body.strip()}"
        for title, href, body in CARD_RE.findall(m.group(1))
    )


def _callout(label: str):
    def repl(m: re.Match) -> str:
        return f"> **{label}:** {m.group(1).strip()}"
    return repl


def transform_card_groups(body: str) -> str:
    return CARD_GROUP_RE.sub(_card_list, body)


def transform_notes(body: str) -> str:
    return NOTE_RE.sub(_callout("Note"), body)


def transform_warnings(body: str) -> str:
    return WARNING_RE.sub(_callout("Warning"), body)


def transform_custom_tags(body: str) -> str:
    """Apply CardGroup, Note, and Warning rewrites once each, in that order."""
    body = transform_card_groups(body)
    body = transform_notes(body)
    return transform_warnings(body)
