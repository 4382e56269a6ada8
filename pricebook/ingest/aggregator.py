"""
Catalog Aggregator

Turns a whole pricing export into a sorted catalog of product groups.

Processing rules:
- Line 0 is the header and is always skipped.
- A line starting with a section sentinel ("scsclass") ends the product
  table; everything after it belongs to another report section.
- Blank lines and repeated header rows are skipped.
- Rows with too few fields are dropped.
- Variants are grouped by parent name; the first row of a group decides
  its family, and the first row with a given SKU wins.
- Groups are returned sorted by parent name, ignoring case.

Bad cells, short rows and duplicates never raise. They are counted in a
ParseReport for callers that want diagnostics.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..models import (
    DEFAULT_LAYOUT,
    Catalog,
    CatalogLayout,
    ProductGroup,
    VariantRecord,
)
from .prices import try_clean_price, try_parse_decimal
from .tokenizer import tokenize_row

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r'\r?\n')


@dataclass
class ParseReport:
    """Counts of everything the parser skipped, dropped or defaulted."""
    lines_total: int = 0
    rows_accepted: int = 0
    blank_lines_skipped: int = 0
    header_rows_skipped: int = 0
    short_rows_dropped: int = 0
    duplicate_skus_dropped: int = 0
    defaulted_cells: int = 0
    section_boundary_line: Optional[int] = None  # 1-based

    @property
    def dropped_rows(self) -> int:
        return self.short_rows_dropped + self.duplicate_skus_dropped


@dataclass(frozen=True)
class ParseResult:
    catalog: Catalog
    report: ParseReport


@dataclass
class _GroupBuilder:
    """Mutable accumulator for one group while the document is scanned."""
    parent_name: str
    family: str
    variants: List[VariantRecord] = field(default_factory=list)
    skus: set = field(default_factory=set)

    def build(self) -> ProductGroup:
        return ProductGroup(
            parent_name=self.parent_name,
            family=self.family,
            variants=tuple(self.variants),
        )


class CatalogAggregator:
    """
    Parses pricing exports into catalogs.

    The aggregator only holds its layout; each parse builds its own state,
    so one instance can be shared between threads.

    Usage:
        aggregator = CatalogAggregator()
        catalog = aggregator.parse(text)
        result = aggregator.parse_with_report(text)
    """

    def __init__(self, layout: CatalogLayout = DEFAULT_LAYOUT):
        """
        Initialize the aggregator.

        Args:
            layout: Column positions and section markers of the export
        """
        self.layout = layout

    def parse(self, document: str) -> Catalog:
        """Parse a document and return only the catalog."""
        return self.parse_with_report(document).catalog

    def parse_with_report(self, document: str) -> ParseResult:
        """
        Parse a document into a catalog plus diagnostics.

        Args:
            document: Full CSV export text

        Returns:
            ParseResult with the sorted catalog and a ParseReport
        """
        report = ParseReport()

        if not document:
            return ParseResult(catalog=(), report=report)

        lines = _LINE_SPLIT_RE.split(document.strip())
        report.lines_total = len(lines)
        if len(lines) < 2:
            return ParseResult(catalog=(), report=report)

        groups: Dict[str, _GroupBuilder] = {}

        for line_number, raw_line in enumerate(lines[1:], start=2):
            line = raw_line.strip()

            if self.layout.is_section_boundary(line):
                report.section_boundary_line = line_number
                logger.debug("Section boundary at line %d, ignoring the rest", line_number)
                break

            if not line:
                report.blank_lines_skipped += 1
                continue

            if self.layout.is_header_row(line):
                report.header_rows_skipped += 1
                continue

            fields = tokenize_row(line)
            if len(fields) < self.layout.min_fields:
                report.short_rows_dropped += 1
                logger.debug(
                    "Line %d: dropped short row (%d fields, need %d)",
                    line_number, len(fields), self.layout.min_fields,
                )
                continue

            self._add_row(fields, line_number, groups, report)

        catalog = tuple(
            builder.build()
            for builder in sorted(groups.values(), key=_group_sort_key)
        )

        if report.dropped_rows or report.defaulted_cells:
            logger.info(
                "Parsed %d variants in %d groups (%d rows dropped, %d cells defaulted to 0)",
                report.rows_accepted, len(catalog), report.dropped_rows, report.defaulted_cells,
            )

        return ParseResult(catalog=catalog, report=report)

    def _add_row(
        self,
        fields: List[str],
        line_number: int,
        groups: Dict[str, _GroupBuilder],
        report: ParseReport,
    ) -> None:
        """Build a variant from a tokenized row and file it under its group."""
        columns = self.layout.columns

        parent_name = _cell(fields, columns.parent) or self.layout.default_parent_name
        family = _cell(fields, columns.family) or self.layout.default_family

        group = groups.get(parent_name)
        if group is None:
            group = _GroupBuilder(parent_name=parent_name, family=family)
            groups[parent_name] = group

        sku = _cell(fields, columns.sku)
        if sku in group.skus:
            report.duplicate_skus_dropped += 1
            logger.debug("Line %d: skipped duplicate SKU %r in %r", line_number, sku, parent_name)
            return

        def number(position: int, parser: Callable[[Optional[str]], Optional[float]]) -> float:
            raw = fields[position] if position < len(fields) else None
            value = parser(raw)
            if value is None:
                # Blank cells are expected; only missing or garbled ones are reported
                if raw is None or raw.strip():
                    report.defaulted_cells += 1
                    logger.debug("Line %d: column %d value %r defaulted to 0", line_number, position, raw)
                return 0.0
            return value

        group.variants.append(VariantRecord(
            product_line=_cell(fields, columns.product_line),
            family=family,
            sku=sku,
            description=_cell(fields, columns.description),
            unit=_cell(fields, columns.unit),
            standard_price=number(columns.standard_price, try_clean_price),
            floor_price=number(columns.floor_price, try_clean_price),
            give_price=number(columns.give_price, try_clean_price),
            gsa_price=number(columns.gsa_price, try_clean_price),
            weight=number(columns.weight, try_parse_decimal),
        ))
        group.skus.add(sku)
        report.rows_accepted += 1


def _group_sort_key(group: _GroupBuilder):
    # Case-insensitive order; the exact name breaks ties
    return (group.parent_name.casefold(), group.parent_name)


def _cell(fields: List[str], position: int) -> str:
    """Return a text cell, or '' when the row is too short to have it."""
    return fields[position] if position < len(fields) else ''


def parse_catalog(document: str, layout: CatalogLayout = DEFAULT_LAYOUT) -> Catalog:
    """
    Parse a CSV export into a catalog.

    Args:
        document: Full CSV export text
        layout: Report layout (default: standard pricing report)

    Returns:
        Tuple of ProductGroup sorted by parent name; empty for empty or
        header-only documents
    """
    return CatalogAggregator(layout).parse(document)
