# Common utilities
from .config_loader import (
    build_catalog_layout,
    build_column_layout,
    load_catalog_layout,
    load_config,
)
from .csv_utils import read_document
from .log_config import setup_logging
