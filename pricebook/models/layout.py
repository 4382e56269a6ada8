"""
Report layout models.

Describes where each catalog field sits in an export row and which marker
lines structure the file. Keeping the positional contract here means a
change in the report format touches one table, not the aggregator.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from ..constants import (
    DEFAULT_COLUMNS,
    DEFAULT_FAMILY,
    DEFAULT_PARENT_NAME,
    HEADER_MARKERS,
    MIN_ROW_FIELDS,
    SECTION_SENTINELS,
)


@dataclass(frozen=True)
class ColumnLayout:
    """Zero-based field positions in a tokenized export row."""
    product_line: int = DEFAULT_COLUMNS['product_line']
    family: int = DEFAULT_COLUMNS['family']
    parent: int = DEFAULT_COLUMNS['parent']
    sku: int = DEFAULT_COLUMNS['sku']
    description: int = DEFAULT_COLUMNS['description']
    unit: int = DEFAULT_COLUMNS['unit']
    standard_price: int = DEFAULT_COLUMNS['standard_price']
    floor_price: int = DEFAULT_COLUMNS['floor_price']
    give_price: int = DEFAULT_COLUMNS['give_price']
    gsa_price: int = DEFAULT_COLUMNS['gsa_price']
    weight: int = DEFAULT_COLUMNS['weight']

    def __post_init__(self):
        for name, position in self.as_dict().items():
            if position < 0:
                raise ValueError(f"Column position for '{name}' must be >= 0, got {position}")

    def as_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in DEFAULT_COLUMNS}


@dataclass(frozen=True)
class CatalogLayout:
    """
    Everything the aggregator needs to know about an export's structure.

    Markers are matched case-insensitively against the start of a trimmed
    line, so they are stored lowercase.
    """
    columns: ColumnLayout = field(default_factory=ColumnLayout)
    min_fields: int = MIN_ROW_FIELDS
    section_sentinels: Tuple[str, ...] = SECTION_SENTINELS
    header_markers: Tuple[str, ...] = HEADER_MARKERS
    default_parent_name: str = DEFAULT_PARENT_NAME
    default_family: str = DEFAULT_FAMILY

    def __post_init__(self):
        if isinstance(self.min_fields, bool) or not isinstance(self.min_fields, int):
            raise ValueError(f"min_fields must be an integer, got {self.min_fields!r}")
        if self.min_fields < 1:
            raise ValueError(f"min_fields must be >= 1, got {self.min_fields}")
        if not self.default_parent_name:
            raise ValueError("default_parent_name is required")
        object.__setattr__(
            self, 'section_sentinels',
            tuple(m.lower() for m in self.section_sentinels if m),
        )
        object.__setattr__(
            self, 'header_markers',
            tuple(m.lower() for m in self.header_markers if m),
        )

    def is_section_boundary(self, line: str) -> bool:
        """True if a trimmed line starts the next, unrelated section."""
        lowered = line.lower()
        return any(lowered.startswith(marker) for marker in self.section_sentinels)

    def is_header_row(self, line: str) -> bool:
        """True if a trimmed line repeats the table header."""
        lowered = line.lower()
        return any(lowered.startswith(marker) for marker in self.header_markers)


DEFAULT_LAYOUT = CatalogLayout()
