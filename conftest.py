"""
Shared fixtures: builders for block- and table-encoded components.

Rows are tuples: (label_html, content_html) for two-cell rows and
(content_html,) for single-cell rows.
"""

import pytest
from bs4 import BeautifulSoup

from eds_converter.config import ConverterConfig


def build_block(rows, classes="experience-element"):
    parts = [f'<div class="{classes}">']
    for row in rows:
        cells = ''.join(f'<div>{cell}</div>' for cell in row)
        parts.append(f'<div>{cells}</div>')
    parts.append('</div>')
    return ''.join(parts)


def build_table(rows, marker="experience-element"):
    parts = [f'<table><tr><td colspan="2">{marker}</td></tr>']
    for row in rows:
        if len(row) == 1:
            parts.append(f'<tr><td colspan="2">{row[0]}</td></tr>')
        else:
            cells = ''.join(f'<td>{cell}</td>' for cell in row)
            parts.append(f'<tr>{cells}</tr>')
    parts.append('</table>')
    return ''.join(parts)


def wrap_page(*components):
    return f"<body><header></header><main>{''.join(components)}</main></body>"


@pytest.fixture
def make_block():
    return build_block


@pytest.fixture
def make_table():
    return build_table


@pytest.fixture
def config():
    return ConverterConfig()


@pytest.fixture
def first_div():
    def parse(html):
        return BeautifulSoup(html, 'html.parser').find('div')
    return parse
