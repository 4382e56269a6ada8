#!/usr/bin/env python3
"""
Catalog Summary

Parses a pricing CSV export and prints its product groups.

Usage:
    python3 summarize_catalog.py data/pricing_export.csv
    python3 summarize_catalog.py data/pricing_export.csv --group "Acme Degreaser"
"""

import sys

from pricebook.cli import main

if __name__ == "__main__":
    sys.exit(main())
