"""
Allowlist of text/formatting HTML tags and the marker classification used
to decide whether a class token (or table marker) declares a custom element.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Optional

GENERIC_MARKER = "experience-element"

# Text/formatting tags that are serialized inline, never treated as blocks
VANILLA_TAGS: FrozenSet[str] = frozenset([
    "p",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "span",
    "a",
    "strong",
    "em",
    "b",
    "i",
    "u",
    "br",
])


class MarkerKind(Enum):
    """Classification of a single class token"""
    GENERIC = "generic"
    COMPONENT = "component"
    VANILLA = "vanilla"
    PLAIN = "plain"


def classify_marker(
    name: Optional[str],
    vanilla_tags: Iterable[str] = VANILLA_TAGS,
    generic_marker: str = GENERIC_MARKER
) -> MarkerKind:
    """
    Classify a class token.

    Args:
        name: Class token or table marker text
        vanilla_tags: Tokens that must never be treated as components
        generic_marker: The marker shared by all custom element blocks

    Returns:
        MarkerKind for the token
    """
    if not name:
        return MarkerKind.PLAIN
    if name == generic_marker:
        return MarkerKind.GENERIC
    if name in vanilla_tags:
        return MarkerKind.VANILLA
    if '-' in name:
        return MarkerKind.COMPONENT
    return MarkerKind.PLAIN


def is_component_marker(
    name: Optional[str],
    vanilla_tags: Iterable[str] = VANILLA_TAGS,
    generic_marker: str = GENERIC_MARKER
) -> bool:
    """True for the generic marker or a hyphenated, non-vanilla token."""
    kind = classify_marker(name, vanilla_tags, generic_marker)
    return kind in (MarkerKind.GENERIC, MarkerKind.COMPONENT)
