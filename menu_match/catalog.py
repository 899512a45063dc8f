"""
Catalog and Catalog Builder.

Ingestion merges every line for a vendor id into one menu, keeping the
cheapest price seen for each item. The builder accumulates state; build()
hands back an immutable Catalog that the matcher scans in first-seen order.
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Sequence

from .config import Config, default_config
from .models import IngestStats, ParsedRecord, Vendor
from .parser import RecordParseError, parse_fields, parse_record

logger = logging.getLogger(__name__)


class Catalog:
    """
    Read-only collection of vendors keyed by vendor id.

    Iteration order is the order vendor ids were first encountered during
    ingestion. That order decides ties in the matcher.
    """

    def __init__(self, vendors: Iterable[Vendor] = ()):
        ordered = sorted(vendors, key=lambda v: v.position)
        self._by_id = MappingProxyType({v.vendor_id: v for v in ordered})
        self._order = tuple(v.vendor_id for v in ordered)

    def __iter__(self) -> Iterator[Vendor]:
        for vendor_id in self._order:
            yield self._by_id[vendor_id]

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, vendor_id: object) -> bool:
        return vendor_id in self._by_id

    def __repr__(self) -> str:
        return f"Catalog(vendors={len(self)}, items={self.item_count})"

    @property
    def vendor_ids(self) -> tuple[int, ...]:
        return self._order

    @property
    def item_count(self) -> int:
        """Total menu entries across all vendors."""
        return sum(len(v.menu) for v in self)

    @property
    def is_empty(self) -> bool:
        return not self._order

    def get_vendor(self, vendor_id: int) -> Optional[Vendor]:
        return self._by_id.get(vendor_id)

    def all_items(self) -> list[str]:
        """Every distinct item name in the catalog, sorted."""
        names = set()
        for vendor in self:
            names.update(vendor.menu.keys())
        return sorted(names)


class CatalogBuilder:
    """
    Accumulates catalog lines into per-vendor menus.

    Lines are processed once, in order. The first line naming a vendor id
    fixes that vendor's position in the catalog.
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config or default_config()
        self._menus: dict[int, dict[str, Decimal]] = {}  # insertion order = first seen
        self.stats = IngestStats()

    @property
    def vendor_count(self) -> int:
        return len(self._menus)

    def add_record(self, record: ParsedRecord) -> None:
        """Merge one parsed line into the vendor's menu, keeping minimum prices."""
        menu = self._menus.get(record.vendor_id)
        if menu is None:
            menu = {}
            self._menus[record.vendor_id] = menu

        for item in record.items:
            current = menu.get(item)
            if current is None:
                menu[item] = record.price
            elif record.price < current:
                menu[item] = record.price
                self.stats.price_updates += 1

        self.stats.records_applied += 1

    def add_line(self, line: str, line_number: Optional[int] = None) -> Optional[ParsedRecord]:
        """
        Parse and merge one raw line.

        Returns:
            The applied record, or None if the line was skipped

        Raises:
            RecordParseError: On a bad number when the policy is "raise"
        """
        self.stats.lines_seen += 1
        try:
            record = parse_record(line, line_number=line_number, config=self._config)
        except RecordParseError as exc:
            return self._handle_invalid(exc)
        return self._apply(record, line_number)

    def add_fields(self, fields: Sequence[str], line_number: Optional[int] = None) -> Optional[ParsedRecord]:
        """Like add_line, for rows that arrive already split (spreadsheets)."""
        self.stats.lines_seen += 1
        try:
            record = parse_fields(fields, line_number=line_number, config=self._config)
        except RecordParseError as exc:
            return self._handle_invalid(exc)
        return self._apply(record, line_number)

    def add_lines(self, lines: Iterable[str]) -> "CatalogBuilder":
        """Merge a sequence of raw lines, numbering them from 1."""
        for line_number, line in enumerate(lines, start=1):
            self.add_line(line, line_number=line_number)
        return self

    def build(self) -> Catalog:
        """Snapshot the accumulated menus as an immutable Catalog."""
        vendors = [
            Vendor(vendor_id=vendor_id, menu=dict(menu), position=position)
            for position, (vendor_id, menu) in enumerate(self._menus.items())
        ]
        catalog = Catalog(vendors)
        logger.info(
            "Built catalog: %d vendors, %d menu items (%d lines, %d skipped)",
            len(catalog), catalog.item_count, self.stats.lines_seen,
            self.stats.skipped_short + self.stats.skipped_invalid,
        )
        return catalog

    def _apply(self, record: Optional[ParsedRecord], line_number: Optional[int]) -> Optional[ParsedRecord]:
        if record is None:
            self.stats.skipped_short += 1
            logger.debug("Skipping line %s: too few fields", line_number)
            return None
        self.add_record(record)
        return record

    def _handle_invalid(self, exc: RecordParseError) -> None:
        if not self._config.skips_invalid_numbers:
            raise exc
        self.stats.skipped_invalid += 1
        logger.warning("Skipping invalid line: %s", exc)
        return None


def build_catalog(lines: Iterable[str], config: Optional[Config] = None) -> Catalog:
    """
    Build a catalog from raw lines in one pass.

    Args:
        lines: Raw catalog lines
        config: Ingestion settings (defaults if omitted)

    Returns:
        Immutable Catalog
    """
    return CatalogBuilder(config).add_lines(lines).build()
