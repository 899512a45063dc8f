"""
Configuration for Menu Match.

Holds the ingestion policy: field delimiter, minimum field count, and what
to do with a line whose vendor id or price is not a number.
Config is declarative JSON - edit the file, not the code.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

# Policies for lines whose numeric fields fail to parse
RAISE = "raise"
SKIP = "skip"
NUMBER_POLICIES = (RAISE, SKIP)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "menu_match_config.json"


@dataclass
class IngestSettings:
    """Settings for reading catalog lines."""
    delimiter: str = ","
    min_fields: int = 3          # vendor id, price, at least one item
    on_invalid_number: str = RAISE
    encoding: str = "utf-8-sig"

    def __post_init__(self):
        if self.on_invalid_number not in NUMBER_POLICIES:
            raise ValueError(
                f"on_invalid_number must be one of {NUMBER_POLICIES}, got {self.on_invalid_number!r}"
            )
        if not self.delimiter:
            raise ValueError("delimiter cannot be empty")
        if self.min_fields < 3:
            raise ValueError("min_fields must be at least 3")


@dataclass
class Config:
    """Full configuration for menu match."""
    ingest: IngestSettings = field(default_factory=IngestSettings)

    @property
    def skips_invalid_numbers(self) -> bool:
        return self.ingest.on_invalid_number == SKIP


def default_config() -> Config:
    """Config with built-in defaults (comma delimiter, bad numbers raise)."""
    return Config()


def load_config(config_path: str | Path) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to menu_match_config.json

    Returns:
        Config object with ingestion settings
    """
    path = Path(config_path)
    with open(path, "r") as f:
        data = json.load(f)

    ingest_data = data.get("ingest", {})
    ingest = IngestSettings(
        delimiter=ingest_data.get("delimiter", ","),
        min_fields=int(ingest_data.get("min_fields", 3)),
        on_invalid_number=ingest_data.get("on_invalid_number", RAISE),
        encoding=ingest_data.get("encoding", "utf-8-sig"),
    )

    return Config(ingest=ingest)
