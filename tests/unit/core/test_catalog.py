"""Unit tests for core/catalog.py"""

import pytest
from pydantic import ValidationError

from docpipe.core.catalog import DEFAULT_CATALOG, NavigationCatalog, load_catalog
from docpipe.core.models import DocGroup, DocPage


@pytest.fixture(name="catalog")
def catalog_fixture():
    return NavigationCatalog(groups=[
        DocGroup(group="Start", pages=[DocPage(slug="", title="Intro"), DocPage(slug="setup", title="Setup")]),
        DocGroup(group="Empty", pages=[]),
        DocGroup(group="Guides", pages=[DocPage(slug="guides/a", title="A"), DocPage(slug="guides/b", title="B")]),
    ])


def test_all_slugs_excludes_index(catalog):
    assert catalog.all_slugs() == [["setup"], ["guides", "a"], ["guides", "b"]]


def test_all_slugs_resolve_via_lookup():
    for parts in DEFAULT_CATALOG.all_slugs():
        assert parts != [""]
        assert DEFAULT_CATALOG.lookup("/".join(parts)) is not None


def test_lookup(catalog):
    assert catalog.lookup("guides/a") == DocPage(slug="guides/a", title="A")
    assert catalog.lookup("") == DocPage(slug="", title="Intro")
    assert catalog.lookup("missing") is None


def test_prev_next_index(catalog):
    nav = catalog.prev_next("")
    assert nav.prev is None
    assert nav.next == DocPage(slug="setup", title="Setup")


def test_prev_next_crosses_groups_and_skips_empty(catalog):
    nav = catalog.prev_next("setup")
    assert nav.prev.slug == ""
    assert nav.next.slug == "guides/a"


def test_prev_next_last_page(catalog):
    nav = catalog.prev_next("guides/b")
    assert nav.prev.slug == "guides/a"
    assert nav.next is None


def test_prev_next_unknown_slug(catalog):
    nav = catalog.prev_next("nope")
    assert nav.prev is None
    assert nav.next is None


def test_default_catalog_reading_order():
    """The built-in catalog keeps declaration order; no re-sorting."""
    slugs = [p.slug for p in DEFAULT_CATALOG.pages()]
    assert slugs[:4] == ["", "getting-started", "how-it-works", "features"]
    assert slugs[-1] == "help/support"
    assert DEFAULT_CATALOG.prev_next("help/support").next is None
    assert DEFAULT_CATALOG.prev_next("").next.slug == "getting-started"


def test_duplicate_slugs_rejected():
    with pytest.raises(ValueError, match="Duplicate slug"):
        NavigationCatalog(groups=[
            DocGroup(group="A", pages=[DocPage(slug="x", title="X")]),
            DocGroup(group="B", pages=[DocPage(slug="x", title="X again")]),
        ])


def test_catalog_is_immutable(catalog):
    with pytest.raises(ValidationError):
        catalog.groups = ()


def test_load_catalog_yaml(tmp_path):
    path = tmp_path / "nav.yaml"
    path.write_text(
        "- group: Docs\n"
        "  pages:\n"
        "    - {slug: '', title: Home}\n"
        "    - {slug: api/auth, title: Auth}\n"
    )
    catalog = load_catalog(path)
    assert catalog.all_slugs() == [["api", "auth"]]
    assert catalog.prev_next("api/auth").prev.title == "Home"


def test_load_catalog_rejects_mapping(tmp_path):
    path = tmp_path / "nav.yaml"
    path.write_text("group: Docs\n")
    with pytest.raises(ValueError, match="expected a list"):
        load_catalog(path)


def test_load_catalog_invalid_yaml(tmp_path):
    path = tmp_path / "nav.yaml"
    path.write_text("- [unclosed\n")
    with pytest.raises(ValueError, match="Invalid catalog file"):
        load_catalog(path)
