"""
Row classification.

Every row is classified exactly once into one of the actions below; the
first matching rule wins:

    1. element-name row                 -> SkipRow
    2. "style-*" label                  -> StyleVar
    3. references only ("→ name-N")     -> ReferenceRow
    4. content already carries [slot]   -> PreSlotted
    5. no label (single cell)           -> Unslotted
    6. bolded label                     -> ForcedSlot
    7. markup (not a plain <p> wrapper) -> NestedComponent / SlotContent
    8. plain text                       -> Attribute
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from bs4 import Tag

from .config import ConverterConfig
from .discovery import ELEMENT_NAME_LABEL, ComponentDeclaration, declare
from .references import is_reference_only, parse_references
from .rows import Row, element_children

logger = logging.getLogger(__name__)

STYLE_PREFIX = 'style-'
CHILDREN_LABEL = 'children'  # Reference rows with this label stay unslotted

# 'attr-type' was prefixed to avoid collision with the block type
ATTRIBUTE_ALIASES = {'attr-type': 'type'}

# Tag names starting like a block element (p also covers picture and pre)
BLOCK_LEVEL_TAGS = re.compile(r'^(p|h[1-6]|div|ul|ol|table)', re.IGNORECASE)


@dataclass
class SkipRow:
    reason: str


@dataclass
class StyleVar:
    name: str   # Without the leading "--"
    value: str


@dataclass
class ReferenceRow:
    identifiers: List[str] = field(default_factory=list)
    slot: Optional[str] = None


@dataclass
class PreSlotted:
    content: Tag


@dataclass
class Unslotted:
    container: Tag  # Children of this node are appended as-is


@dataclass
class ForcedSlot:
    slot: str
    content: Tag


@dataclass
class NestedComponent:
    component: ComponentDeclaration
    slot: Optional[str] = None


@dataclass
class SlotContent:
    slot: Optional[str]
    content: Tag
    block_level: bool = False


@dataclass
class Attribute:
    name: str
    value: str


RowAction = Union[
    SkipRow, StyleVar, ReferenceRow, PreSlotted, Unslotted,
    ForcedSlot, NestedComponent, SlotContent, Attribute,
]


def find_nested_component(content: Tag, config: ConverterConfig) -> Optional[ComponentDeclaration]:
    """First direct child of content that is itself a component region."""
    for child in element_children(content):
        component = declare(child, config)
        if component is not None:
            return component
    return None


def classify_row(row: Row, config: ConverterConfig) -> RowAction:
    """
    Decide what a row contributes to its element.

    Args:
        row: Normalized row
        config: Converter configuration (for nested component detection)

    Returns:
        One RowAction
    """
    label = row.label
    text = row.text

    if label == ELEMENT_NAME_LABEL:
        return SkipRow('element-name')

    if label is not None and label.startswith(STYLE_PREFIX):
        return StyleVar(label[len(STYLE_PREFIX):], text)

    refs = parse_references(text)
    if refs and is_reference_only(text):
        slot = label if label and label != CHILDREN_LABEL else None
        return ReferenceRow(refs, slot)

    if row.content.find(attrs={'slot': True}) is not None:
        return PreSlotted(row.content)

    if label is None:
        # DA wraps unlabeled content in a single <p>
        return Unslotted(row.lone_paragraph or row.content)

    if row.is_emphasized:
        return ForcedSlot(label, row.content)

    if row.has_markup and not row.is_plain_wrapper:
        nested = find_nested_component(row.content, config)
        if nested is not None:
            return NestedComponent(nested, label or None)
        block_level = row.content.find(BLOCK_LEVEL_TAGS) is not None
        return SlotContent(label or None, row.content, block_level)

    if label:
        return Attribute(ATTRIBUTE_ALIASES.get(label, label), text)

    return SkipRow('empty label')
