"""
Data models for the pricing catalog.

This module contains pure data classes with no parsing logic.
"""

from .catalog import Catalog, PriceTier, ProductGroup, VariantRecord
from .layout import DEFAULT_LAYOUT, CatalogLayout, ColumnLayout

__all__ = [
    'Catalog',
    'PriceTier',
    'ProductGroup',
    'VariantRecord',
    'CatalogLayout',
    'ColumnLayout',
    'DEFAULT_LAYOUT',
]
