"""Unit tests for core/transform/tags.py"""

import pytest

from docpipe.core.transform.tags import (
    transform_card_groups,
    transform_custom_tags,
    transform_notes,
    transform_warnings,
)


def test_note_to_blockquote():
    assert transform_custom_tags("<Note>\n  Be careful\n</Note>") == "> **Note:** Be careful"


def test_warning_to_blockquote():
    assert transform_warnings("<Warning>Do not\n</Warning>") == "> **Warning:** Do not"


def test_single_card_group():
    text = '<CardGroup>\n<Card title="A" href="/x">desc</Card>\n</CardGroup>'
    assert transform_custom_tags(text) == "- [**A**](/x) — desc"


def test_card_group_with_attributes_keeps_source_order():
    text = (
        'Intro\n\n<CardGroup cols={2}>\n'
        '<Card title="First" icon="rocket" href="/one">\n  One body\n</Card>\n'
        '<Card title="Second" href="/two">Two body</Card>\n'
        '</CardGroup>\n\nOutro'
    )
    assert transform_card_groups(text) == (
        "Intro\n\n"
        "- [**First**](/one) — One body\n"
        "- [**Second**](/two) — Two body"
        "\n\nOutro"
    )


def test_card_group_without_cards_collapses():
    assert transform_card_groups("a<CardGroup>\nnothing here\n</CardGroup>b") == "ab"


def test_card_with_href_before_title_is_dropped():
    """Cards must list title before href; others don't match and the group collapses."""
    text = '<CardGroup><Card href="/x" title="A">d</Card></CardGroup>'
    assert transform_card_groups(text) == ""


@pytest.mark.parametrize("text", [
    "<Note>never closed",
    "</Warning> stray close",
    "<Card title=\"A\" href=\"/x\">outside a group</Card>",
    "<CardGroup> unterminated",
    "plain markdown with <b>html</b>",
])
def test_malformed_tags_left_untouched(text):
    assert transform_custom_tags(text) == text


def test_multiple_notes_rewritten_independently():
    text = "<Note>one</Note>\n\n<Note>two</Note>"
    assert transform_notes(text) == "> **Note:** one\n\n> **Note:** two"


def test_note_inside_card_group_body():
    """CardGroup runs first, so a Note in a card body is rewritten afterwards."""
    text = '<CardGroup><Card title="A" href="/a"><Note>x</Note></Card></CardGroup>'
    assert transform_custom_tags(text) == "- [**A**](/a) — > **Note:** x"


@pytest.mark.parametrize("text", [
    "<Note>\n  Be careful\n</Note>",
    '<CardGroup>\n<Card title="A" href="/x">desc</Card>\n</CardGroup>\n<Warning>w</Warning>',
    "<Note>unclosed\n\n<Warning>ok</Warning>",
    "",
])
def test_transform_is_idempotent(text):
    once = transform_custom_tags(text)
    assert transform_custom_tags(once) == once


def test_nested_same_kind_tags_need_second_pass():
    """Same-kind tags do not nest: the outer Note closes at the inner </Note>."""
    once = transform_custom_tags("<Note><Note>a</Note></Note>")
    assert once == "> **Note:** <Note>a</Note>"
    assert transform_custom_tags(once) == "> **Note:** > **Note:** a"
