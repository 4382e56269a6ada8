"""
Logging Configuration

Configures logging for the pricebook package.
Output goes to stderr to keep stdout clean for catalog summaries.

Parse diagnostics name line numbers but not the file they came from, so
setup_logging() can stamp every record with the export being parsed.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
SOURCE_LOG_FORMAT = "%(levelname)-8s [%(source)s] %(name)s: %(message)s"


class SourceFilter(logging.Filter):
    """Adds the name of the document being parsed to each record."""

    def __init__(self, source: str):
        super().__init__()
        self.source = source

    def filter(self, record: logging.LogRecord) -> bool:
        record.source = self.source
        return True


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    source: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure logging for the package.

    Args:
        verbose: If True, set level to DEBUG (shows every dropped row
            and defaulted cell)
        quiet: If True, set level to WARNING
        source: Name of the export being parsed, shown in every line
        stream: Output stream (default: stderr at call time)

    Returns:
        The configured "pricebook" logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    if source:
        handler.addFilter(SourceFilter(source))
        handler.setFormatter(logging.Formatter(SOURCE_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("pricebook")
    logger.setLevel(level)

    # Replace rather than stack handlers when called once per file
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
