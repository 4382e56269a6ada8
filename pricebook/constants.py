"""
Shared constants for the project.

Defaults for the pricing report layout. Overrides come from
config/catalog_layout.yaml via config_loader.load_catalog_layout().
"""

# Fixed column positions of the standard pricing report.
# Columns 7, 11 and 12 carry data the catalog does not use.
DEFAULT_COLUMNS = {
    'product_line': 0,
    'family': 1,
    'parent': 2,
    'sku': 3,
    'description': 4,
    'unit': 5,
    'standard_price': 6,
    'floor_price': 8,
    'give_price': 9,
    'gsa_price': 10,
    'weight': 13,
}

# Rows with fewer tokenized fields are dropped
MIN_ROW_FIELDS = 11

# A line starting with one of these ends the product table
SECTION_SENTINELS = ('scsclass',)

# Repeated header rows inside the product table
HEADER_MARKERS = ('productlinedescription',)

DEFAULT_PARENT_NAME = 'Uncategorized'
DEFAULT_FAMILY = 'General'
