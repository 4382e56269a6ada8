"""
Catalog data models.

Pure data classes for representing a parsed pricing catalog.
No parsing logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class PriceTier(Enum):
    """The four parallel price points every variant carries."""
    STANDARD = 'Standard'
    FLOOR = 'Floor'
    GIVE = 'Give'
    GSA = 'GSA'


@dataclass(frozen=True)
class VariantRecord:
    """
    One SKU's pricing row.

    Prices and weight are always non-negative floats; cells that were blank
    or unparsable in the source are stored as 0.0.
    """
    product_line: str
    family: str
    sku: str
    description: str
    unit: str
    standard_price: float = 0.0
    floor_price: float = 0.0
    give_price: float = 0.0
    gsa_price: float = 0.0
    weight: float = 0.0

    def price_for(self, tier: PriceTier) -> float:
        """Return the price stored for a tier."""
        if tier is PriceTier.STANDARD:
            return self.standard_price
        if tier is PriceTier.FLOOR:
            return self.floor_price
        if tier is PriceTier.GIVE:
            return self.give_price
        return self.gsa_price

    def price_tiers(self) -> Dict[PriceTier, float]:
        """Return all four prices keyed by tier, in tier order."""
        return {tier: self.price_for(tier) for tier in PriceTier}


@dataclass(frozen=True)
class ProductGroup:
    """
    Variants sharing a parent name.

    family is the value seen on the first row of the group; variants keep
    the order they first appeared in the export.
    """
    parent_name: str
    family: str
    variants: Tuple[VariantRecord, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.parent_name:
            raise ValueError("Group parent name is required")

    def find_variant(self, sku: str):
        """Return the variant with this SKU, or None."""
        for variant in self.variants:
            if variant.sku == sku:
                return variant
        return None


# Groups ordered by parent_name, one per distinct name
Catalog = Tuple[ProductGroup, ...]
