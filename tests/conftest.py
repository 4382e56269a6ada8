"""Shared test fixtures."""

from pathlib import Path

import pytest

from pricebook.ingest.tokenizer import format_row

HEADER = (
    "ProductLineDescription,Family,Parent,SKU,Description,UOM,STD,List,"
    "Floor,Give,GSA,Cost,Margin,Weight"
)


def _make_row(
    product_line="Chemicals",
    family="Cleaners",
    parent="Acme Degreaser",
    sku="A1",
    description="Degreaser 1 gal",
    unit="GAL",
    standard="$10.00",
    floor="$8.00",
    give="$7.50",
    gsa="$9.25",
    weight="8.5",
    unused="",
):
    """Build one 14-field export row; columns 7, 11 and 12 hold filler."""
    return format_row([
        product_line, family, parent, sku, description, unit,
        standard, unused, floor, give, gsa, unused, unused, weight,
    ])


def _make_document(*rows, header=HEADER, line_ending="\n"):
    return line_ending.join([header, *rows])


@pytest.fixture
def make_row():
    """Factory for export rows; keyword arguments override single cells."""
    return _make_row


@pytest.fixture
def make_document():
    """Factory joining a header and rows into one export document."""
    return _make_document


@pytest.fixture
def sample_document():
    """A small export with two groups, a duplicate, junk rows and a second section."""
    return _make_document(
        _make_row(parent="Zeta Polish", sku="Z1", family="Floor Care", standard="$1,234.50"),
        _make_row(parent="Alpha Soap", sku="S1", family="Hand Care", standard="$4.00"),
        "",
        "ProductLineDescription,Family,Parent,SKU,Description,UOM,STD",
        _make_row(parent="Zeta Polish", sku="Z2", family="Other Family", standard="n/a"),
        _make_row(parent="Zeta Polish", sku="Z1", standard="$99.00"),
        "too,short,row",
        "SCSClass,Description,Count",
        _make_row(parent="Hidden", sku="H1"),
    )


@pytest.fixture
def layout_yaml(tmp_path) -> Path:
    """Write a layout YAML that moves weight to column 11 and adds a sentinel."""
    path = tmp_path / "layout.yaml"
    path.write_text(
        "layout:\n"
        "  columns:\n"
        "    weight: 11\n"
        "  section_sentinels: ['SCSClass', 'Summary']\n"
        "  default_family: Misc\n",
        encoding="utf-8",
    )
    return path
