"""
Catalog ingestion.

Modules:
    tokenizer  - Quote-aware splitting of one CSV line
    prices     - Price and weight cell normalization
    aggregator - Whole-document parsing into grouped, sorted catalogs
"""

from .aggregator import (
    CatalogAggregator,
    ParseReport,
    ParseResult,
    parse_catalog,
)
from .prices import clean_price, parse_decimal
from .tokenizer import format_row, tokenize_row

__all__ = [
    # Aggregation
    'CatalogAggregator',
    'ParseReport',
    'ParseResult',
    'parse_catalog',
    # Cells
    'clean_price',
    'parse_decimal',
    # Rows
    'format_row',
    'tokenize_row',
]
