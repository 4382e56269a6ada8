"""
Pricebook Catalog Ingestion

Modules:
    models      - Data models (VariantRecord, ProductGroup, CatalogLayout)
    common      - Shared utilities (config loader, logging, CSV file reading)
    ingest      - Row tokenizer, price cleaning and catalog aggregation
    formatting  - Display helpers for prices and weights
    cli         - Command-line catalog summary
"""
