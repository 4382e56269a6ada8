"""
Catalog Summary CLI

Parses a pricing export and prints the resulting catalog.

Usage:
    pricebook data/pricing_export.csv
    pricebook data/pricing_export.csv --group "Acme Degreaser"
    pricebook data/pricing_export.csv --group "Acme Degreaser" --sku A1
    pricebook data/pricing_export.csv --layout config/catalog_layout.yaml --verbose
"""

import argparse
import logging
import os
from typing import List, Optional

from .common.config_loader import load_catalog_layout
from .common.csv_utils import read_document
from .common.log_config import setup_logging
from .formatting import format_currency, format_weight
from .ingest import CatalogAggregator, ParseReport
from .models import DEFAULT_LAYOUT, Catalog, ProductGroup

logger = logging.getLogger(__name__)


def print_catalog(catalog: Catalog) -> None:
    """Print one line per group with its standard price range."""
    print("\n" + "=" * 80)
    print(f"CATALOG: {len(catalog)} products")
    print("=" * 80)

    for group in catalog:
        prices = [v.standard_price for v in group.variants]
        if prices and min(prices) != max(prices):
            price_range = f"{format_currency(min(prices))} - {format_currency(max(prices))}"
        elif prices:
            price_range = format_currency(prices[0])
        else:
            price_range = ""
        print(f"  {group.parent_name[:40]:40} {group.family[:16]:16} "
              f"{len(group.variants):3} SKUs  {price_range}")


def print_group(group: ProductGroup, sku: Optional[str] = None) -> None:
    """Print the variants of a group (or just one SKU) with all four price tiers."""
    print("\n" + "=" * 80)
    print(f"{group.parent_name} ({group.family})")
    print("=" * 80)

    variants = group.variants
    if sku is not None:
        variant = group.find_variant(sku)
        if variant is None:
            logger.warning("No SKU %r in %r", sku, group.parent_name)
            return
        variants = (variant,)

    for variant in variants:
        print(f"\n  SKU {variant.sku}  {variant.unit}  {variant.description}")
        for tier, price in variant.price_tiers().items():
            print(f"    {tier.value:10} {format_currency(price):>14}")
        print(f"    {'Weight':10} {format_weight(variant.weight):>14}")


def print_report(report: ParseReport) -> None:
    print("\n" + "-" * 80)
    print("DIAGNOSTICS")
    print("-" * 80)
    print(f"  Lines read:             {report.lines_total}")
    print(f"  Variants accepted:      {report.rows_accepted}")
    print(f"  Short rows dropped:     {report.short_rows_dropped}")
    print(f"  Duplicate SKUs dropped: {report.duplicate_skus_dropped}")
    print(f"  Cells defaulted to 0:   {report.defaulted_cells}")
    if report.section_boundary_line is not None:
        print(f"  Product table ends at line {report.section_boundary_line}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Summarize a pricing CSV export as a grouped product catalog"
    )
    parser.add_argument(
        "input_csv",
        help="Pricing export CSV file"
    )
    parser.add_argument(
        "--layout", "-l",
        help="Layout YAML file (name in config/ or a path; default: built-in layout)"
    )
    parser.add_argument(
        "--group", "-g",
        help="Show all variants and price tiers of one parent group"
    )
    parser.add_argument(
        "--sku", "-s",
        help="With --group, show only this SKU"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every dropped row")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings")

    args = parser.parse_args(argv)
    setup_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        source=os.path.basename(args.input_csv),
    )

    if not os.path.exists(args.input_csv):
        print(f"Error: File not found: {args.input_csv}")
        return 1

    layout = load_catalog_layout(args.layout) if args.layout else DEFAULT_LAYOUT
    document = read_document(args.input_csv)
    result = CatalogAggregator(layout).parse_with_report(document)

    if args.group:
        matches = [g for g in result.catalog if g.parent_name == args.group]
        if not matches:
            logger.warning("No group named %r", args.group)
        else:
            print_group(matches[0], sku=args.sku)
    else:
        print_catalog(result.catalog)

    print_report(result.report)
    return 0
