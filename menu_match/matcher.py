"""
Vendor Matcher - Core selection engine.

Given a set of requested items, find the vendor that carries all of them
at the lowest combined price.

Selection rules:
| Step     | Rule |
|----------|------|
| Coverage | Vendor menu must contain every requested item |
| Cost     | Sum of the vendor's price for each distinct item |
| Choice   | Strictly lower total replaces the current best |

Vendors are scanned in catalog order, so a tie goes to the vendor that was
ingested first. An empty request is covered by every vendor at zero cost.
"""

from decimal import Decimal
from typing import Iterable, Optional, Union

from .catalog import Catalog
from .models import BestVendor, Vendor
from .parser import normalize_item_name

ItemRequest = Union[str, Iterable[str]]


def parse_requested_items(items: ItemRequest) -> tuple[str, ...]:
    """
    Normalize a request into distinct item names.

    Args:
        items: Comma-separated string, or an iterable of names

    Returns:
        Names in order of first appearance, trimmed, lowercased, no empties
    """
    raw = items.split(",") if isinstance(items, str) else items
    seen: dict[str, None] = {}
    for name in raw:
        normalized = normalize_item_name(name)
        if normalized:
            seen[normalized] = None
    return tuple(seen)


def _total_for(vendor: Vendor, requested: tuple[str, ...]) -> Optional[Decimal]:
    """Combined price at this vendor, or None if something is missing."""
    if not vendor.covers(requested):
        return None
    return sum((vendor.menu[item] for item in requested), Decimal("0"))


def pick_best_vendor(catalog: Catalog, items: ItemRequest) -> Optional[BestVendor]:
    """
    Pick the cheapest vendor that offers every requested item.

    Args:
        catalog: Built catalog
        items: Comma-separated item names (case and whitespace ignored)

    Returns:
        BestVendor, or None when no vendor covers the request
    """
    requested = parse_requested_items(items)
    best: Optional[BestVendor] = None

    for vendor in catalog:
        total = _total_for(vendor, requested)
        if total is None:
            continue
        if best is None or total < best.total_price:
            best = BestVendor(vendor_id=vendor.vendor_id, total_price=total)

    return best


def rank_vendors(catalog: Catalog, items: ItemRequest) -> list[BestVendor]:
    """
    Every vendor that covers the request, cheapest first.

    Equal totals keep catalog order, so the first entry is always the
    vendor pick_best_vendor returns.
    """
    requested = parse_requested_items(items)
    matches = []
    for vendor in catalog:
        total = _total_for(vendor, requested)
        if total is not None:
            matches.append(BestVendor(vendor_id=vendor.vendor_id, total_price=total))

    # sorted() is stable, catalog order survives for ties
    return sorted(matches, key=lambda m: m.total_price)


def missing_items(vendor: Vendor, items: ItemRequest) -> list[str]:
    """Requested items this vendor does not offer."""
    return [item for item in parse_requested_items(items) if not vendor.offers(item)]


def summarize_coverage(catalog: Catalog, items: ItemRequest) -> dict:
    """Generate summary statistics for a request against the catalog."""
    requested = parse_requested_items(items)
    covering = sum(1 for vendor in catalog if vendor.covers(requested))
    offered = {item for vendor in catalog for item in requested if vendor.offers(item)}

    return {
        "requested": len(requested),
        "vendors": len(catalog),
        "covering_vendors": covering,
        "unknown_items": [item for item in requested if item not in offered],
    }
