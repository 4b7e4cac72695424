"""
EDS converter.

Converts EDS block (div) or table markup describing custom element
instances back into custom element markup.
"""

from .config import ConverterConfig, load_config
from .converter import (
    ConversionResult,
    ConversionStatus,
    EDSBlockDeserializer,
    convert_to_element,
    convert_to_markup,
    from_eds,
)

__all__ = [
    "ConverterConfig",
    "load_config",
    "ConversionResult",
    "ConversionStatus",
    "EDSBlockDeserializer",
    "convert_to_element",
    "convert_to_markup",
    "from_eds",
]
