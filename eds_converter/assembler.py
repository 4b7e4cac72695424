"""
Element assembly.

Turns a component declaration into a custom element: tag name from the
element name, variant classes as boolean attributes, then every row applied
in order through its classified action. Referenced and nested components
are converted recursively.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from .classifier import (
    Attribute, ForcedSlot, NestedComponent, PreSlotted, ReferenceRow,
    RowAction, SkipRow, SlotContent, StyleVar, Unslotted, classify_row,
)
from .config import ConverterConfig
from .discovery import ComponentDeclaration
from .references import IdentifierIndex

logger = logging.getLogger(__name__)


@dataclass
class ConversionContext:
    """
    Mutable state of a single conversion call.

    A fresh context is created for every top-level conversion, so two
    conversions never share counters or an index.
    """
    config: ConverterConfig
    index: IdentifierIndex
    factory: BeautifulSoup = field(default_factory=lambda: BeautifulSoup('', 'html.parser'))
    active_path: List[str] = field(default_factory=list)
    unresolved_references: List[str] = field(default_factory=list)
    dropped_references: List[str] = field(default_factory=list)
    passthrough_components: int = 0


def clone_children(node: Tag) -> list:
    """Copies of node's children with the outer whitespace trimmed."""
    clones = [copy.copy(child) for child in node.contents]

    if clones and type(clones[0]) is NavigableString:
        clones[0] = NavigableString(clones[0].lstrip())
    if clones and type(clones[-1]) is NavigableString:
        clones[-1] = NavigableString(clones[-1].rstrip())

    return [c for c in clones if not (type(c) is NavigableString and c == '')]


class ElementAssembler:
    """Builds output elements for one conversion context."""

    def __init__(self, context: ConversionContext):
        self.context = context
        self.config = context.config

    def convert(self, component: ComponentDeclaration, depth: int = 0) -> Tag:
        """
        Convert a component to its custom element.

        Args:
            component: Component declaration
            depth: Reference nesting depth of this component

        Returns:
            The custom element, or a copy of the source region when the
            component has no element name
        """
        if not component.element_name:
            self.context.passthrough_components += 1
            logger.warning(f"Passing through unnamed component {component.marker_tokens}")
            return copy.copy(component.node)

        identifier = self.context.index.identifier_of(component)
        if identifier:
            self.context.active_path.append(identifier)
        try:
            return self._build(component, depth)
        finally:
            if identifier:
                self.context.active_path.pop()

    def _build(self, component: ComponentDeclaration, depth: int) -> Tag:
        element = self.context.factory.new_tag(component.element_name.lower())

        # Additional classes are variants
        for token in component.variant_tokens(self.config.generic_marker):
            element[token] = ''

        style_vars: Dict[str, str] = {}

        for row in component.rows:
            action = classify_row(row, self.config)
            logger.debug(f"<{element.name}> row {row.label!r}: {type(action).__name__}")
            self._apply(element, action, style_vars, depth)

        if style_vars:
            element['style'] = '; '.join(f"{k}: {v}" for k, v in style_vars.items())

        return element

    def _apply(self, element: Tag, action: RowAction, style_vars: Dict[str, str], depth: int) -> None:
        if isinstance(action, SkipRow):
            return

        if isinstance(action, StyleVar):
            style_vars[f"--{action.name}"] = action.value

        elif isinstance(action, ReferenceRow):
            for identifier in action.identifiers:
                converted = self.resolve(identifier, depth + 1)
                if converted is None:
                    continue
                if action.slot:
                    converted['slot'] = action.slot
                element.append(converted)

        elif isinstance(action, PreSlotted):
            for node in action.content.contents:
                element.append(copy.copy(node))

        elif isinstance(action, Unslotted):
            for node in action.container.contents:
                element.append(copy.copy(node))

        elif isinstance(action, ForcedSlot):
            element.append(self._span(action.content, action.slot))

        elif isinstance(action, NestedComponent):
            converted = self.convert(action.component, depth + 1)
            if action.slot:
                converted['slot'] = action.slot
            element.append(converted)

        elif isinstance(action, SlotContent):
            if action.block_level:
                for node in action.content.contents:
                    cloned = copy.copy(node)
                    if isinstance(cloned, Tag) and action.slot:
                        cloned['slot'] = action.slot
                    element.append(cloned)
            else:
                element.append(self._span(action.content, action.slot))

        elif isinstance(action, Attribute):
            element[action.name] = action.value

    def _span(self, content: Tag, slot: Optional[str]) -> Tag:
        wrapper = self.context.factory.new_tag('span')
        for node in clone_children(content):
            wrapper.append(node)
        if slot:
            wrapper['slot'] = slot
        return wrapper

    def resolve(self, identifier: str, depth: int) -> Optional[Tag]:
        """
        Convert the component behind a reference token.

        Unknown identifiers, references back into the active conversion
        path and references nested deeper than max_depth are dropped.
        """
        component = self.context.index.get(identifier)
        if component is None:
            logger.warning(f"Unresolved reference: → {identifier}")
            self.context.unresolved_references.append(identifier)
            return None

        if identifier in self.context.active_path:
            logger.warning(
                f"Reference cycle: → {identifier} (path: {' → '.join(self.context.active_path)})"
            )
            self.context.dropped_references.append(identifier)
            return None

        if depth > self.config.max_depth:
            logger.warning(f"Reference depth {depth} exceeds {self.config.max_depth}: → {identifier}")
            self.context.dropped_references.append(identifier)
            return None

        return self.convert(component, depth)
