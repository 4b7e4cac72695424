"""
Tests for configuration loading.
"""

import pytest

from eds_converter.config import ConfigError, ConverterConfig, load_config
from eds_converter.converter import convert_to_markup
from eds_converter.vanilla_tags import VANILLA_TAGS


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config == ConverterConfig()
    assert config.vanilla_tags == VANILLA_TAGS


def test_none_gives_defaults():
    assert load_config(None) == ConverterConfig()


def test_load_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "extra_vanilla_tags: [text-block]\n"
        "parser: lxml\n"
        "max_depth: 5\n"
        "log_level: debug\n"
        "log_file: logs/eds.log\n"
    )

    config = load_config(path)

    assert "text-block" in config.vanilla_tags
    assert "strong" in config.vanilla_tags
    assert config.parser == "lxml"
    assert config.max_depth == 5
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/eds.log"


def test_vanilla_tags_replace_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("vanilla_tags: [p, span]\n")

    assert load_config(path).vanilla_tags == frozenset({"p", "span"})


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == ConverterConfig()


@pytest.mark.parametrize("content", [
    "parser: html5lib\n",
    "max_depth: 0\n",
    "max_depth: deep\n",
    "vanilla_tags: p\n",
    "- just\n- a list\n",
])
def test_invalid_values_raise(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_extra_vanilla_tag_stops_discovery(tmp_path, make_block):
    path = tmp_path / "config.yaml"
    path.write_text("extra_vanilla_tags: [promo-card]\n")
    html = make_block([("plan", "x")], classes="promo-card")

    # With promo-card allow-listed the block is plain content again
    assert convert_to_markup(html, load_config(path)) == html
    assert convert_to_markup(html) == '<promo-card plan="x"></promo-card>'
