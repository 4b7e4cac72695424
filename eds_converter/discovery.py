"""
Component discovery.

Walks the parsed document in order and collects every declared component
region, block or table. Discovery never descends into a region it has
found: components reference each other with "→ name-N" tokens instead of
nesting structurally.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from bs4 import Tag

from .config import ConverterConfig
from .rows import Row, block_rows, table_rows
from .vanilla_tags import MarkerKind, classify_marker, is_component_marker

logger = logging.getLogger(__name__)

ELEMENT_NAME_LABEL = 'element-name'

BLOCK = 'block'
TABLE = 'table'


@dataclass(eq=False)
class ComponentDeclaration:
    """One discovered component region"""
    node: Tag                     # Original <div> or <table>
    encoding: str                 # BLOCK or TABLE
    marker_tokens: List[str]      # Class tokens, or the table marker
    component_class: Optional[str]  # First token matching the marker predicate
    rows: List[Row] = field(default_factory=list)
    element_name: Optional[str] = None

    def variant_tokens(self, generic_marker: str) -> List[str]:
        """Marker tokens that become boolean attributes on the element."""
        return [
            token for token in self.marker_tokens
            if token not in (self.component_class, self.element_name, generic_marker)
        ]

    @property
    def text(self) -> str:
        return self.node.get_text()


def get_element_name(rows: List[Row], marker_tokens: List[str],
                     config: ConverterConfig) -> Optional[str]:
    """
    Resolve the element name of a component.

    Args:
        rows: Component rows
        marker_tokens: Class tokens of the component
        config: Converter configuration

    Returns:
        Element name, or None when nothing resolves (an element-name row
        with an empty value leaves the component unnamed)
    """
    for row in rows:
        if row.label == ELEMENT_NAME_LABEL:
            return row.text or None

    # Fallback to the class name
    for token in marker_tokens:
        kind = classify_marker(token, config.vanilla_tags, config.generic_marker)
        if kind is MarkerKind.COMPONENT:
            return token
    return None


def is_component_block(node: Tag, config: ConverterConfig) -> bool:
    if node.name != 'div':
        return False
    return any(
        is_component_marker(c, config.vanilla_tags, config.generic_marker)
        for c in node.get('class') or []
    )


def is_component_table(node: Tag, config: ConverterConfig) -> bool:
    if node.name != 'table':
        return False
    first_cell = node.find('td')
    return first_cell is not None and first_cell.get_text().strip() == config.generic_marker


def declare_block(node: Tag, config: ConverterConfig) -> ComponentDeclaration:
    classes = list(node.get('class') or [])
    component_class = next(
        (c for c in classes if is_component_marker(c, config.vanilla_tags, config.generic_marker)),
        None
    )
    rows = block_rows(node)
    return ComponentDeclaration(
        node=node,
        encoding=BLOCK,
        marker_tokens=classes,
        component_class=component_class,
        rows=rows,
        element_name=get_element_name(rows, classes, config),
    )


def declare_table(node: Tag, config: ConverterConfig) -> ComponentDeclaration:
    rows = table_rows(node, config.generic_marker)
    # Tables carry no class tokens; the name must come from an element-name row
    return ComponentDeclaration(
        node=node,
        encoding=TABLE,
        marker_tokens=[config.generic_marker],
        component_class=config.generic_marker,
        rows=rows,
        element_name=get_element_name(rows, [], config),
    )


def declare(node: Tag, config: ConverterConfig) -> Optional[ComponentDeclaration]:
    """Build a declaration for node if it is a component region."""
    if is_component_block(node, config):
        return declare_block(node, config)
    if is_component_table(node, config):
        return declare_table(node, config)
    return None


def find_components(root: Tag, config: ConverterConfig) -> List[ComponentDeclaration]:
    """
    Find all component regions under root, in document order.

    Args:
        root: Conversion root (<main>, <body> or the whole document)
        config: Converter configuration

    Returns:
        List of ComponentDeclaration objects
    """
    components = []

    def walk(node: Tag) -> None:
        component = declare(node, config)
        if component is not None:
            components.append(component)
            if component.element_name is None:
                logger.warning(
                    f"Component with markers {component.marker_tokens} has no element name"
                )
            return  # Don't recurse into components

        for child in node.children:
            if isinstance(child, Tag):
                walk(child)

    for child in root.children:
        if isinstance(child, Tag):
            walk(child)

    logger.debug(f"Discovered {len(components)} component(s)")
    return components
