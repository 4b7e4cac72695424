"""
Tests for component discovery and element name resolution.
"""

from bs4 import BeautifulSoup

from eds_converter.discovery import BLOCK, TABLE, find_components


def soup_root(html):
    return BeautifulSoup(html, 'html.parser')


def test_finds_blocks_in_document_order(make_block, config):
    html = (
        '<main><div class="section">'
        + make_block([("element-name", "ee-media")])
        + '</div>'
        + make_block([("element-name", "paywall-card")])
        + '</main>'
    )

    components = find_components(soup_root(html), config)

    assert [c.element_name for c in components] == ["ee-media", "paywall-card"]
    assert all(c.encoding == BLOCK for c in components)


def test_does_not_recurse_into_components(config):
    html = (
        '<div class="experience-element">'
        '<div><div>element-name</div><div>outer-card</div></div>'
        '<div><div>media</div><div><div class="ee-media"><div><div>src</div><div>a.png</div></div></div></div></div>'
        '</div>'
    )

    components = find_components(soup_root(html), config)

    assert len(components) == 1
    assert components[0].element_name == "outer-card"


def test_element_name_falls_back_to_class(make_block, config):
    html = make_block([("plan-name", "Standard")], classes="experience-element paywall-card dark")

    component = find_components(soup_root(html), config)[0]

    assert component.element_name == "paywall-card"
    assert component.component_class == "experience-element"
    assert component.variant_tokens(config.generic_marker) == ["dark"]


def test_vanilla_and_plain_classes_are_not_components(config):
    html = '<div class="hero"><p class="span">x</p></div><div class="columns"></div>'
    assert find_components(soup_root(html), config) == []


def test_empty_element_name_row_does_not_fall_back_to_class(make_block, config):
    html = make_block([("element-name", " "), ("plan", "x")], classes="experience-element paywall-card")

    component = find_components(soup_root(html), config)[0]

    assert component.element_name is None


def test_unnamed_component_is_still_discovered(make_block, config):
    components = find_components(soup_root(make_block([("plan-name", "x")])), config)
    assert len(components) == 1
    assert components[0].element_name is None


def test_tables_and_blocks_share_one_walk(make_block, make_table, config):
    html = make_table([("element-name", "inline-price")]) + make_block([("element-name", "paywall-card")])

    components = find_components(soup_root(html), config)

    assert [(c.encoding, c.element_name) for c in components] == [
        (TABLE, "inline-price"),
        (BLOCK, "paywall-card"),
    ]


def test_table_without_marker_is_ignored(config):
    html = '<table><tr><td>element-name</td><td>paywall-card</td></tr></table>'
    assert find_components(soup_root(html), config) == []
