"""
Record Parser - Turn one raw catalog line into a ParsedRecord.

Line format:
    vendor_id,price,item_name[,item_name...]

Lines with too few fields are not records and come back as None.
Bad numbers are a different failure and raise RecordParseError.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from .config import Config, default_config
from .models import ParsedRecord


class RecordParseError(ValueError):
    """A catalog line has a vendor id or price that is not a valid number."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 field: Optional[str] = None, value: Optional[str] = None):
        self.line_number = line_number
        self.field = field
        self.value = value
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def normalize_item_name(raw: str) -> str:
    """Canonical item name: surrounding whitespace removed, lowercase."""
    return raw.strip().lower()


def _parse_vendor_id(value: str, line_number: Optional[int]) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise RecordParseError(
            f"vendor id {value!r} is not an integer",
            line_number=line_number, field="vendor_id", value=value,
        ) from None


def _parse_price(value: str, line_number: Optional[int]) -> Decimal:
    try:
        price = Decimal(value.strip())
    except InvalidOperation:
        raise RecordParseError(
            f"price {value!r} is not a decimal number",
            line_number=line_number, field="price", value=value,
        ) from None

    if not price.is_finite() or price < 0:
        raise RecordParseError(
            f"price {value!r} must be a non-negative finite number",
            line_number=line_number, field="price", value=value,
        )
    return price


def parse_fields(
    fields: Sequence[str],
    line_number: Optional[int] = None,
    config: Optional[Config] = None,
) -> Optional[ParsedRecord]:
    """
    Parse an already-split catalog line.

    Args:
        fields: Field values in file order
        line_number: 1-based position in the source, for error messages
        config: Ingestion settings (defaults if omitted)

    Returns:
        ParsedRecord, or None when the line has too few fields

    Raises:
        RecordParseError: If the vendor id or price is not a valid number
    """
    config = config or default_config()
    if len(fields) < config.ingest.min_fields:
        return None

    vendor_id = _parse_vendor_id(fields[0], line_number)
    price = _parse_price(fields[1], line_number)

    items = []
    for raw in fields[2:]:
        name = normalize_item_name(raw)
        if name:
            items.append(name)

    return ParsedRecord(
        vendor_id=vendor_id,
        price=price,
        items=items,
        line_number=line_number,
    )


def parse_record(
    line: str,
    line_number: Optional[int] = None,
    config: Optional[Config] = None,
) -> Optional[ParsedRecord]:
    """Split a raw line on the configured delimiter and parse it."""
    config = config or default_config()
    fields = line.rstrip("\r\n").split(config.ingest.delimiter)
    return parse_fields(fields, line_number=line_number, config=config)
