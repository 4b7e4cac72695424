"""
Tests for reference parsing, identifier assignment and root selection.
"""

import pytest
from bs4 import BeautifulSoup

from eds_converter.discovery import find_components
from eds_converter.references import (
    IdentifierIndex, assign_identifiers, is_reference_only, parse_references, select_root,
)


def components_of(html, config):
    return find_components(BeautifulSoup(html, 'html.parser'), config)


def test_parse_references():
    text = "→ inline-price-1, → Inline-Price-2 and →ee-media-10"
    assert parse_references(text) == ["inline-price-1", "inline-price-2", "ee-media-10"]


def test_parse_references_ignores_plain_text():
    assert parse_references("price-1 without arrow") == []
    assert parse_references("") == []


@pytest.mark.parametrize("text, expected", [
    ("→ ee-media-1", True),
    ("→ inline-price-1, → inline-price-2", True),
    ("  →ee-media-1 ,  ", True),
    ("See → ee-media-1", False),
    ("→ ee-media-1 and more", False),
])
def test_is_reference_only(text, expected):
    assert is_reference_only(text) is expected


def test_identifiers_count_per_name(make_block, config):
    html = ''.join([
        make_block([("element-name", "inline-price")]),
        make_block([("element-name", "Paywall-Card")]),
        make_block([("element-name", "inline-price")]),
        make_block([("plan", "unnamed")]),
    ])
    components = components_of(html, config)

    first = assign_identifiers(components)
    second = assign_identifiers(components)

    assert first == ["inline-price-1", "paywall-card-1", "inline-price-2", None]
    assert first == second


def test_index_lookup_is_case_insensitive(make_block, config):
    components = components_of(make_block([("element-name", "ee-media")]), config)
    index = IdentifierIndex(components)

    assert index.get("EE-Media-1") is components[0]
    assert "ee-media-1" in index
    assert index.get("ee-media-2") is None
    assert index.identifier_of(components[0]) == "ee-media-1"
    assert len(index) == 1


def test_single_component_is_root(make_block, config):
    components = components_of(make_block([("element-name", "paywall-card")]), config)
    assert select_root(IdentifierIndex(components)) is components[0]


def test_no_components_has_no_root():
    assert select_root(IdentifierIndex([])) is None


def test_unreferenced_component_is_root(make_block, config):
    html = (
        make_block([("element-name", "paywall-card"), ("media", "→ ee-media-1")])
        + make_block([("element-name", "ee-media")])
    )
    components = components_of(html, config)

    assert select_root(IdentifierIndex(components)).element_name == "paywall-card"


def test_without_references_last_component_is_root(make_block, config):
    html = ''.join(make_block([("element-name", f"card-{n}x")]) for n in "abc")
    components = components_of(html, config)

    assert select_root(IdentifierIndex(components)) is components[-1]


def test_every_component_referenced_falls_back_to_last(make_block, config):
    html = (
        make_block([("element-name", "comp-a"), ("x", "→ comp-b-1")])
        + make_block([("element-name", "comp-b"), ("x", "→ comp-a-1")])
    )
    components = components_of(html, config)

    assert select_root(IdentifierIndex(components)) is components[-1]


def test_unnamed_components_are_never_unreferenced_roots(make_block, config):
    html = (
        make_block([("element-name", "paywall-card")])
        + make_block([("plan", "unnamed")])
    )
    components = components_of(html, config)

    assert select_root(IdentifierIndex(components)) is components[0]
