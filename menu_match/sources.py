"""
Catalog Sources - Bridge from files to the catalog builder.

The source pattern lets us swap where catalog lines come from (text file,
spreadsheet, in-memory list for testing) without changing ingestion logic.

Text format expected:
    vendor_id,price,item_name[,item_name...]

XLSX format expected:
    One record per row, same column order, no header row.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator, Optional
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .catalog import CatalogBuilder


class SourceUnavailableError(FileNotFoundError):
    """A catalog source could not be opened or read."""


class CatalogSource(ABC):
    """
    Abstract interface for something that yields catalog records.

    Implementations push their records into a CatalogBuilder.
    The builder doesn't know or care where the data actually lives.
    """

    @abstractmethod
    def feed(self, builder: CatalogBuilder) -> int:
        """
        Push every record of this source into the builder.

        Returns:
            Number of lines/rows read

        Raises:
            SourceUnavailableError: If the source cannot be opened or read
            RecordParseError: On a bad number when the policy is "raise"
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable name for logs and reports."""
        pass


class TextLineSource(CatalogSource):
    """Delimited text file, one record per line."""

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig"):
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return str(self._path)

    def iter_lines(self) -> Iterator[str]:
        """
        Yield raw lines without their line endings.

        The whole file is read and decoded before the first line is yielded,
        so a read error never leaves part of the file in a builder.
        """
        if not self._path.is_file():
            raise SourceUnavailableError(f"Catalog file not found: {self._path}")
        try:
            with open(self._path, "r", encoding=self._encoding, newline="") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(f"Could not read catalog file {self._path}: {e}") from e

        for line in lines:
            yield line.rstrip("\r\n")

    def feed(self, builder: CatalogBuilder) -> int:
        count = 0
        for line_number, line in enumerate(self.iter_lines(), start=1):
            builder.add_line(line, line_number=line_number)
            count += 1
        return count


def _cell_text(value) -> str:
    """Render a spreadsheet cell the way it would appear in a text export."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class XlsxLineSource(CatalogSource):
    """
    Spreadsheet export of the catalog.

    Reads the named sheet (or the active one). Each row is one record;
    trailing empty cells are ignored.
    """

    def __init__(self, path: str | Path, sheet: Optional[str] = None):
        self._path = Path(path)
        self._sheet = sheet

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        if self._sheet:
            return f"{self._path} [{self._sheet}]"
        return str(self._path)

    def iter_rows(self) -> Iterator[list[str]]:
        """Yield each row as a list of cell strings, after the sheet is fully read."""
        if not self._path.is_file():
            raise SourceUnavailableError(f"Catalog file not found: {self._path}")

        try:
            workbook = load_workbook(self._path, read_only=True, data_only=True)
        except (OSError, BadZipFile, InvalidFileException) as e:
            raise SourceUnavailableError(f"Could not open workbook {self._path}: {e}") from e

        rows = []
        try:
            if self._sheet:
                if self._sheet not in workbook.sheetnames:
                    raise SourceUnavailableError(f"Sheet {self._sheet!r} not found in {self._path}")
                sheet = workbook[self._sheet]
            else:
                sheet = workbook.active

            for row in sheet.iter_rows(values_only=True):
                cells = [_cell_text(value) for value in row]
                while cells and cells[-1] == "":
                    cells.pop()
                rows.append(cells)
        except (BadZipFile, KeyError) as e:
            raise SourceUnavailableError(f"Could not read workbook {self._path}: {e}") from e
        finally:
            workbook.close()

        yield from rows

    def feed(self, builder: CatalogBuilder) -> int:
        count = 0
        for row_number, fields in enumerate(self.iter_rows(), start=1):
            builder.add_fields(fields, line_number=row_number)
            count += 1
        return count


class InMemoryLineSource(CatalogSource):
    """
    Test implementation that holds lines in memory.

    Useful for unit tests and for callers that already have the data.
    """

    def __init__(self, lines: Iterable[str], name: str = "<memory>"):
        self._lines = list(lines)
        self._name = name

    def describe(self) -> str:
        return self._name

    def feed(self, builder: CatalogBuilder) -> int:
        builder.add_lines(self._lines)
        return len(self._lines)


def open_source(path: str | Path, encoding: str = "utf-8-sig") -> CatalogSource:
    """Pick a source implementation from the file suffix."""
    path = Path(path)
    if path.suffix.lower() in (".xlsx", ".xlsm"):
        return XlsxLineSource(path)
    return TextLineSource(path, encoding=encoding)
