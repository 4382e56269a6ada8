"""
CSV Utilities

Reads pricing exports from disk. The catalog parser works on one string,
so the whole file is returned at once.
"""

from pathlib import Path


def read_document(file_path: str | Path, encoding: str = 'utf-8-sig') -> str:
    """
    Read a CSV export into a single string.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8-sig, drops an Excel BOM)

    Returns:
        Full file contents with line endings left untouched

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(file_path, 'r', encoding=encoding, newline='') as f:
        return f.read()
