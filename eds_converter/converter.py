"""
Convert EDS output back to custom element markup.

Supports two formats:
1. Block format (divs) - published pipeline output and stored author content
2. Table format - author documents and local testing

    <div class="experience-element">
      <div><div>element-name</div><div>paywall-card</div></div>
      <div><div><strong>plan-name</strong></div><div>Firefly Standard</div></div>
    </div>

converts to:

    <paywall-card><span slot="plan-name">Firefly Standard</span></paywall-card>
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .assembler import ConversionContext, ElementAssembler
from .config import ConverterConfig
from .discovery import find_components
from .references import IdentifierIndex, select_root

logger = logging.getLogger(__name__)


class ConversionStatus(Enum):
    """Outcome of one conversion"""
    CONVERTED = "converted"
    PASSTHROUGH_NO_COMPONENTS = "passthrough (no components)"
    PASSTHROUGH_UNNAMED = "passthrough (unnamed root)"


@dataclass
class ConversionResult:
    """Result of converting one document"""
    status: ConversionStatus
    markup: str
    element: Optional[Tag] = None
    root_identifier: Optional[str] = None
    component_count: int = 0
    unresolved_references: List[str] = field(default_factory=list)
    dropped_references: List[str] = field(default_factory=list)

    @property
    def converted(self) -> bool:
        return self.status is ConversionStatus.CONVERTED


def conversion_root(soup: BeautifulSoup) -> Tag:
    """Content inside <main>, falling back to <body>, then the document."""
    return soup.find('main') or soup.body or soup


class EDSBlockDeserializer:
    """
    Deserializes EDS block or table markup into a custom element.

    The deserializer only holds read-only configuration; every call to
    convert() builds its own index and context.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.config.parser)

    def convert(self, html: str) -> ConversionResult:
        """
        Convert EDS markup to custom element markup.

        Args:
            html: EDS markup, optionally wrapped in <body><main>...</main></body>

        Returns:
            ConversionResult describing the converted (or passed through) root
        """
        soup = self.parse(html)
        root = conversion_root(soup)

        components = find_components(root, self.config)
        if not components:
            logger.info("No components found, passing content through")
            return ConversionResult(
                status=ConversionStatus.PASSTHROUGH_NO_COMPONENTS,
                markup=html,
                element=root.find(True, recursive=False),
            )

        index = IdentifierIndex(components)
        root_component = select_root(index)

        context = ConversionContext(config=self.config, index=index)
        element = ElementAssembler(context).convert(root_component)

        status = ConversionStatus.CONVERTED
        if not root_component.element_name:
            status = ConversionStatus.PASSTHROUGH_UNNAMED

        result = ConversionResult(
            status=status,
            markup=str(element),
            element=element,
            root_identifier=index.identifier_of(root_component),
            component_count=len(components),
            unresolved_references=list(context.unresolved_references),
            dropped_references=list(context.dropped_references),
        )
        logger.info(
            f"Conversion {status.value}: root={result.root_identifier}, "
            f"components={result.component_count}, "
            f"unresolved={len(result.unresolved_references)}"
        )
        return result


def convert_to_markup(html: str, config: Optional[ConverterConfig] = None) -> str:
    """Convert EDS markup and return the serialized custom element."""
    return EDSBlockDeserializer(config).convert(html).markup


def convert_to_element(html: str, config: Optional[ConverterConfig] = None) -> Optional[Tag]:
    """Convert EDS markup and return the custom element itself."""
    return EDSBlockDeserializer(config).convert(html).element


def from_eds(html: str, as_element: bool = False,
             config: Optional[ConverterConfig] = None) -> Union[str, Tag, None]:
    """
    Convert EDS output to custom element markup.

    Args:
        html: EDS markup
        as_element: Return the element instead of serialized markup
        config: Optional converter configuration

    Returns:
        Markup string, or the element when as_element is set
    """
    if as_element:
        return convert_to_element(html, config)
    return convert_to_markup(html, config)
