"""
Reference tokens, identifier assignment and root selection.

Components are linked with tokens such as "→ ee-media-1" or
"→ inline-price-1, → inline-price-2". Identifiers are the lower-cased
element name plus a 1-based count per name, in document order.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Set

from .discovery import ComponentDeclaration

logger = logging.getLogger(__name__)

# Match references like "→ div-1", "→ ee-media-1", "→ paywall-card-2"
REFERENCE_PATTERN = re.compile(r'→\s*([a-z][a-z0-9-]*-\d+)', re.IGNORECASE)


def parse_references(text: str) -> List[str]:
    """
    Extract reference identifiers from text.

    Args:
        text: Text content of a row or component

    Returns:
        Lower-cased identifiers in order of appearance
    """
    return [match.group(1).lower() for match in REFERENCE_PATTERN.finditer(text or '')]


def is_reference_only(text: str) -> bool:
    """True if nothing but references, commas and whitespace remain."""
    without_refs = REFERENCE_PATTERN.sub('', text or '').replace(',', '')
    return without_refs.strip() == ''


def assign_identifiers(components: Iterable[ComponentDeclaration]) -> List[Optional[str]]:
    """
    Number components per element name in document order.

    Args:
        components: Discovered components, in document order

    Returns:
        Identifier for each component (None when it has no element name)
    """
    counts: Dict[str, int] = {}
    identifiers = []
    for component in components:
        if not component.element_name:
            identifiers.append(None)
            continue
        name_lower = component.element_name.lower()
        counts[name_lower] = counts.get(name_lower, 0) + 1
        identifiers.append(f"{name_lower}-{counts[name_lower]}")
    return identifiers


class IdentifierIndex:
    """
    Identifier to component lookup for one conversion call.

    Built once from the discovered components and never modified.
    """

    def __init__(self, components: List[ComponentDeclaration]):
        self._components = list(components)
        self._by_id: Dict[str, ComponentDeclaration] = {}
        self._ids: Dict[int, str] = {}

        for component, identifier in zip(self._components, assign_identifiers(self._components)):
            if identifier is None:
                continue
            self._by_id[identifier] = component
            self._ids[id(component)] = identifier
            logger.debug(f"Assigned identifier: {identifier}")

    def get(self, identifier: str) -> Optional[ComponentDeclaration]:
        return self._by_id.get(identifier.lower())

    def identifier_of(self, component: ComponentDeclaration) -> Optional[str]:
        return self._ids.get(id(component))

    @property
    def components(self) -> List[ComponentDeclaration]:
        return list(self._components)

    @property
    def identifiers(self) -> List[str]:
        return list(self._by_id)

    def __contains__(self, identifier: str) -> bool:
        return identifier.lower() in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)


def referenced_identifiers(components: Iterable[ComponentDeclaration]) -> Set[str]:
    """All identifiers referenced anywhere in the components' text."""
    referenced = set()
    for component in components:
        referenced.update(parse_references(component.text))
    return referenced


def select_root(index: IdentifierIndex) -> Optional[ComponentDeclaration]:
    """
    Find the root component (the one not referenced by any other).

    Several unreferenced components resolve to the last one, since wrapper
    output lists referenced components before the top-level one. When every
    component is referenced the last component is used.

    Args:
        index: Identifier index of the discovered components

    Returns:
        Root component, or None when there are no components
    """
    components = index.components
    if not components:
        return None

    referenced = referenced_identifiers(components)

    unreferenced = [
        c for c in components
        if index.identifier_of(c) and index.identifier_of(c) not in referenced
    ]

    if len(components) == 1:
        root = components[0]
    elif len(unreferenced) == 1:
        root = unreferenced[0]
    elif unreferenced:
        root = unreferenced[-1]
        logger.info(
            f"{len(unreferenced)} unreferenced components, using the last one as root"
        )
    else:
        root = components[-1]
        logger.warning("Every component is referenced, falling back to the last component")

    logger.info(f"Selected root component: {index.identifier_of(root) or root.marker_tokens}")
    return root
