"""
Configuration management for the EDS converter.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

from ..vanilla_tags import GENERIC_MARKER, VANILLA_TAGS

SUPPORTED_PARSERS = ("html.parser", "lxml")


class ConfigError(ValueError):
    """Raised when a configuration file holds invalid values."""


@dataclass(frozen=True)
class ConverterConfig:
    """Read-only converter configuration, shared across conversion calls."""
    vanilla_tags: FrozenSet[str] = field(default_factory=lambda: VANILLA_TAGS)
    generic_marker: str = GENERIC_MARKER
    parser: str = "html.parser"  # BeautifulSoup tree builder
    max_depth: int = 32  # Maximum reference nesting
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _as_tag_list(value, key: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of tag names")
    return [str(v).strip().lower() for v in value if str(v).strip()]


def load_config(config_path: Optional[Path]) -> ConverterConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file (None or missing file gives defaults)

    Returns:
        ConverterConfig instance

    Raises:
        ConfigError: If a value is invalid
    """
    if config_path is None or not Path(config_path).exists():
        return ConverterConfig()

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {config_path}")

    if 'vanilla_tags' in data:
        vanilla = set(_as_tag_list(data['vanilla_tags'], 'vanilla_tags'))
    else:
        vanilla = set(VANILLA_TAGS)
    vanilla.update(_as_tag_list(data.get('extra_vanilla_tags'), 'extra_vanilla_tags'))

    parser = data.get('parser', 'html.parser')
    if parser not in SUPPORTED_PARSERS:
        raise ConfigError(
            f"Unsupported parser '{parser}' (expected one of: {', '.join(SUPPORTED_PARSERS)})"
        )

    max_depth = data.get('max_depth', 32)
    if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 1:
        raise ConfigError("'max_depth' must be a positive integer")

    return ConverterConfig(
        vanilla_tags=frozenset(vanilla),
        generic_marker=str(data.get('generic_marker', GENERIC_MARKER)),
        parser=parser,
        max_depth=max_depth,
        log_level=str(data.get('log_level', 'INFO')).upper(),
        log_file=data.get('log_file')
    )
