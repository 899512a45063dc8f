"""
Catalog Loader - Ingest one or more catalog files into a Catalog.

Multiple files get merged into a single catalog, in the order given.
A file that cannot be opened or fully read is reported and skipped without
contributing any records; whatever was built before it is kept.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .catalog import Catalog, CatalogBuilder
from .config import Config, default_config
from .models import IngestStats
from .sources import CatalogSource, SourceUnavailableError, open_source

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of a load: the catalog plus what was and wasn't read."""
    catalog: Catalog
    stats: IngestStats = field(default_factory=IngestStats)
    loaded_sources: list[str] = field(default_factory=list)
    missing_sources: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when at least one source was read."""
        return bool(self.loaded_sources)


def load_sources(
    sources: Iterable[CatalogSource],
    config: Optional[Config] = None,
    builder: Optional[CatalogBuilder] = None,
) -> LoadResult:
    """
    Feed each source into one builder and build the catalog.

    Args:
        sources: Catalog sources, ingested in order
        config: Ingestion settings (ignored when a builder is passed)
        builder: Existing builder to keep adding to

    Returns:
        LoadResult with the catalog and per-source outcome

    Raises:
        RecordParseError: On a bad number when the policy is "raise"
    """
    builder = builder or CatalogBuilder(config)
    loaded = []
    missing = []

    for source in sources:
        name = source.describe()
        try:
            count = source.feed(builder)
        except SourceUnavailableError as e:
            logger.warning("Catalog source unavailable, continuing without it: %s", e)
            missing.append(name)
            continue
        logger.info("Loaded %d lines from %s", count, name)
        loaded.append(name)

    return LoadResult(
        catalog=builder.build(),
        stats=builder.stats,
        loaded_sources=loaded,
        missing_sources=missing,
    )


def load_catalog(
    file_paths: Iterable[str | Path],
    config: Optional[Config] = None,
    builder: Optional[CatalogBuilder] = None,
) -> LoadResult:
    """
    Load a catalog from one or more text/CSV/XLSX files.

    Args:
        file_paths: Paths to catalog files
        config: Ingestion settings (defaults if omitted)
        builder: Existing builder to keep adding to

    Returns:
        LoadResult; missing files are listed, not raised
    """
    config = config or default_config()
    sources = [open_source(path, encoding=config.ingest.encoding) for path in file_paths]
    return load_sources(sources, config=config, builder=builder)
