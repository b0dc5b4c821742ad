# ABOUTME: Table structure protocol and error taxonomy shared by the extraction layer
# ABOUTME: Engine code only reads TableSource rows; the wiki source builds HtmlTable instances

from collections.abc import Sequence
from typing import Protocol

from bs4 import Tag
from pydantic import BaseModel, ConfigDict


class TableSource(Protocol):
    """Read-only table: an ordered sequence of rows, each an ordered sequence of cell texts."""

    @property
    def rows(self) -> Sequence[Sequence[str]]: ...


class HtmlTable(BaseModel):
    """Immutable snapshot of an HTML table's data cells."""

    rows: tuple[tuple[str, ...], ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_element(cls, table: Tag) -> "HtmlTable":
        """Build a table from a parsed ``<table>`` element.

        Every ``<tr>`` is kept in document order, including rows of nested tables.
        Only ``<td>`` cells count as data cells; a header row made of ``<th>`` has none.
        """
        rows = tuple(tuple(cell.get_text() for cell in row.find_all("td")) for row in table.find_all("tr"))
        return cls(rows=rows)


class InspectionError(Exception):
    """Base class for failures surfaced to the caller."""

    pass


class InvalidUrlError(InspectionError):
    """Raised when the article URL is malformed or not a Wikipedia URL."""

    pass


class SourceUnavailableError(InspectionError):
    """Raised when the article could not be fetched or parsed."""

    pass


class NoTablesError(InspectionError):
    """Raised when the article has no structured data tables."""

    def __init__(self, message: str = "No table found"):
        super().__init__(message)


class NoMeasurementsError(InspectionError):
    """Raised when tables exist but none yields a height value."""

    def __init__(self, message: str = "No numeric columns found in the tables"):
        super().__init__(message)


class ChartExportError(InspectionError):
    """Raised when chart data could not be written to disk."""

    pass
