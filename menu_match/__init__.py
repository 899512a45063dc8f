# Menu Match: cheapest vendor for a full set of menu items
# Siloed module - no imports from the backend

from .models import ParsedRecord, Vendor, BestVendor, IngestStats
from .config import load_config, default_config, Config, IngestSettings
from .parser import parse_record, parse_fields, normalize_item_name, RecordParseError
from .catalog import Catalog, CatalogBuilder, build_catalog
from .sources import (
    CatalogSource,
    TextLineSource,
    XlsxLineSource,
    InMemoryLineSource,
    SourceUnavailableError,
    open_source,
)
from .loader import load_catalog, load_sources, LoadResult
from .matcher import pick_best_vendor, rank_vendors, parse_requested_items, missing_items
from .report import format_console, format_best, export_csv

__version__ = "1.0.0"

__all__ = [
    # Models
    "ParsedRecord",
    "Vendor",
    "BestVendor",
    "IngestStats",
    # Config
    "Config",
    "IngestSettings",
    "load_config",
    "default_config",
    # Parser
    "parse_record",
    "parse_fields",
    "normalize_item_name",
    "RecordParseError",
    # Catalog
    "Catalog",
    "CatalogBuilder",
    "build_catalog",
    # Sources
    "CatalogSource",
    "TextLineSource",
    "XlsxLineSource",
    "InMemoryLineSource",
    "SourceUnavailableError",
    "open_source",
    # Loader
    "load_catalog",
    "load_sources",
    "LoadResult",
    # Matcher
    "pick_best_vendor",
    "rank_vendors",
    "parse_requested_items",
    "missing_items",
    # Report
    "format_console",
    "format_best",
    "export_csv",
]
