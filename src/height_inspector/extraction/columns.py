# ABOUTME: Row scanning, column building and per-table orchestration for height extraction
# ABOUTME: Pure in-memory pipeline: tables in, ordered Height columns out

from collections.abc import Sequence

from height_inspector.core.models import HEIGHT_HEADER, ColumnData
from height_inspector.extraction.base import NoMeasurementsError, NoTablesError, TableSource
from height_inspector.extraction.units import parse_height
from height_inspector.utils.logging import get_logger, with_operation_context

logger = get_logger(__name__)


def scan_rows(table: TableSource) -> list[float]:
    """Parse the first cell of every data row of a table.

    The first row is treated as the header and skipped. Rows without cells or whose
    first cell holds no recognizable height contribute nothing.
    """
    values: list[float] = []
    skipped = 0

    for row in table.rows[1:]:
        if not row:
            continue
        value = parse_height(row[0].strip())
        if value is None:
            skipped += 1
            continue
        values.append(value)

    logger.debug("Scanned table rows", row_count=len(table.rows), parsed=len(values), skipped=skipped)
    return values


def build_column(values: Sequence[float]) -> ColumnData | None:
    """Wrap parsed heights in a Height column, or return None when there are none."""
    if not values:
        return None
    return ColumnData(header=HEIGHT_HEADER, values=list(values))


@with_operation_context("extract_columns", expected=(NoTablesError, NoMeasurementsError))
def extract_columns(tables: Sequence[TableSource]) -> list[ColumnData]:
    """Extract one Height column per table, in table order.

    Args:
        tables: Tables located in the source document

    Returns:
        Non-empty columns, one for each table that yielded at least one height

    Raises:
        NoTablesError: If no tables were given
        NoMeasurementsError: If no table yielded a height
    """
    if not tables:
        raise NoTablesError()

    columns: list[ColumnData] = []
    for index, table in enumerate(tables):
        column = build_column(scan_rows(table))
        if column is None:
            logger.debug("Table has no height values", table_index=index)
            continue
        columns.append(column)

    if not columns:
        raise NoMeasurementsError()

    return columns
