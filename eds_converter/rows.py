"""
Row model adapter.

Both surface encodings describe a component as a list of label/content
rows:

    <div class="experience-element">               <table>
      <div>                                          <tr><td colspan="2">experience-element</td></tr>
        <div>element-name</div>                      <tr><td>element-name</td><td>paywall-card</td></tr>
        <div>paywall-card</div>                      <tr><td>plan-name</td><td>Firefly Standard</td></tr>
      </div>                                       </table>
      <div><div>plan-name</div><div>Firefly Standard</div></div>
    </div>

The adapter turns either form into the same sequence of Row objects so that
everything downstream is written once.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from bs4 import Tag

from .vanilla_tags import GENERIC_MARKER

logger = logging.getLogger(__name__)

EMPHASIS_TAGS = ['strong', 'b']


def element_children(node: Tag) -> List[Tag]:
    """Direct element children of a node (text nodes skipped)."""
    return [c for c in node.children if isinstance(c, Tag)]


@dataclass
class Row:
    """One label/content unit of a component declaration"""
    label: Optional[str]      # None for single-cell rows
    content: Tag              # Content cell (div or td)
    is_emphasized: bool = False  # Label was bolded: always a slot

    @property
    def text(self) -> str:
        return self.content.get_text().strip()

    @property
    def inner_html(self) -> str:
        return self.content.decode_contents().strip()

    @property
    def has_markup(self) -> bool:
        """Serialized content differs from its text (tags or escaped entities)."""
        return self.inner_html != self.text

    @property
    def lone_paragraph(self) -> Optional[Tag]:
        """The content's only element child when it is a <p>, else None."""
        children = element_children(self.content)
        if len(children) == 1 and children[0].name == 'p':
            return children[0]
        return None

    @property
    def is_plain_wrapper(self) -> bool:
        """Single <p> around plain text, as authoring tools wrap every value."""
        paragraph = self.lone_paragraph
        return paragraph is not None and paragraph.find(True) is None


def _label_from_cell(cell: Tag):
    emphasis = cell.find(EMPHASIS_TAGS)
    if emphasis is not None:
        return emphasis.get_text().strip(), True
    return cell.get_text().strip(), False


def _row_from_cells(cells: List[Tag], source: str) -> Optional[Row]:
    if not cells:
        return None

    if len(cells) == 1:
        return Row(label=None, content=cells[0])

    if len(cells) > 2:
        logger.debug(f"Ignoring {len(cells) - 2} extra cell(s) in {source} row")

    label, emphasized = _label_from_cell(cells[0])
    return Row(label=label, content=cells[1], is_emphasized=emphasized)


def block_rows(block: Tag) -> List[Row]:
    """
    Rows of a block-encoded component.

    Args:
        block: The component <div>

    Returns:
        Ordered list of Row objects
    """
    rows = []
    for row_div in block.find_all('div', recursive=False):
        row = _row_from_cells(row_div.find_all('div', recursive=False), 'block')
        if row is not None:
            rows.append(row)
    return rows


def table_own_rows(table: Tag) -> List[Tag]:
    """<tr> elements of this table, excluding rows of nested tables."""
    return [tr for tr in table.find_all('tr') if tr.find_parent('table') is table]


def table_rows(table: Tag, marker: str = GENERIC_MARKER) -> List[Row]:
    """
    Rows of a table-encoded component, without the marker row.

    Args:
        table: The component <table>
        marker: Marker text identifying the header row

    Returns:
        Ordered list of Row objects
    """
    rows = []
    for position, tr in enumerate(table_own_rows(table)):
        cells = tr.find_all(['td', 'th'], recursive=False)
        # Only the first row can be the marker row
        if position == 0 and len(cells) == 1 and cells[0].get_text().strip() == marker:
            continue
        row = _row_from_cells(cells, 'table')
        if row is not None:
            rows.append(row)
    return rows
