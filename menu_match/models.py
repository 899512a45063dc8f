"""
Data models for Menu Match.

All structured data uses dataclasses for type hints, __eq__, and __repr__.
Money values use Decimal for precision.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


@dataclass
class ParsedRecord:
    """
    A single catalog line after parsing.

    One line is one "value meal": every item on it shares the line's price.
    """
    vendor_id: int
    price: Decimal
    items: list[str] = field(default_factory=list)  # Normalized, empties removed
    line_number: Optional[int] = None


@dataclass(frozen=True)
class Vendor:
    """
    A vendor and its menu, as seen by the matcher.

    The menu maps normalized item name -> cheapest known price and is
    exposed read-only.
    """
    vendor_id: int
    menu: Mapping[str, Decimal]
    position: int = 0  # First-seen order during ingestion

    def __post_init__(self):
        if not isinstance(self.menu, MappingProxyType):
            object.__setattr__(self, "menu", MappingProxyType(dict(self.menu)))

    def offers(self, item: str) -> bool:
        return item in self.menu

    def price_of(self, item: str) -> Optional[Decimal]:
        return self.menu.get(item)

    def covers(self, items: Iterable[str]) -> bool:
        """True when every item is on this vendor's menu."""
        return all(item in self.menu for item in items)


@dataclass(frozen=True)
class BestVendor:
    """Matcher result: the vendor that covers a request and its total."""
    vendor_id: int
    total_price: Decimal

    def as_tuple(self) -> tuple[int, Decimal]:
        return (self.vendor_id, self.total_price)


@dataclass
class IngestStats:
    """Counters collected while building a catalog."""
    lines_seen: int = 0
    records_applied: int = 0
    skipped_short: int = 0     # Fewer fields than required
    skipped_invalid: int = 0   # Bad numbers, only under the "skip" policy
    price_updates: int = 0     # Existing item replaced by a cheaper price

    def as_dict(self) -> dict:
        return {
            "lines_seen": self.lines_seen,
            "records_applied": self.records_applied,
            "skipped_short": self.skipped_short,
            "skipped_invalid": self.skipped_invalid,
            "price_updates": self.price_updates,
        }
