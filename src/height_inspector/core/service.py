# ABOUTME: High-level service API for inspecting Wikipedia articles for height data
# ABOUTME: Validates the URL, fetches tables, runs the extraction engine and writes chart data

from __future__ import annotations

from pathlib import Path

from height_inspector.core.models import ChartData, ColumnData
from height_inspector.extraction.base import ChartExportError, InspectionError
from height_inspector.extraction.columns import extract_columns
from height_inspector.extraction.wiki.base import WikipediaTableSource, validate_wikipedia_url
from height_inspector.utils.logging import get_logger


class HeightInspectionService:
    """Service turning a Wikipedia article URL into chart-ready Height columns."""

    def __init__(self, source: WikipediaTableSource | None = None):
        self.source = source or WikipediaTableSource()
        self.logger = get_logger(__name__)

    async def get_columns(self, url: str) -> list[ColumnData]:
        """Fetch the article's data tables and extract their Height columns.

        Raises:
            InvalidUrlError: If the URL is not a Wikipedia URL
            SourceUnavailableError: If the article could not be fetched
            NoTablesError: If the article has no data tables
            NoMeasurementsError: If no table holds a height
        """
        validate_wikipedia_url(url)
        tables = await self.source.get_tables(url)
        columns = extract_columns(tables)

        self.logger.info(
            "Extracted height columns",
            url=url,
            table_count=len(tables),
            column_count=len(columns),
            value_counts=[len(column.values) for column in columns],
        )
        return columns

    async def generate_chart(self, url: str, file_name: str | Path | None = None) -> ChartData:
        """Build the chart document for an article and optionally save it as JSON.

        Args:
            url: Wikipedia article URL
            file_name: Where to write the chart data, skipped when None

        Returns:
            The chart data built from the extracted columns

        Raises:
            InspectionError: Same kind as the underlying failure, message prefixed with
                "Failed to generate chart: "
            ChartExportError: If the chart data could not be written to ``file_name``
        """
        try:
            columns = await self.get_columns(url)
        except InspectionError as e:
            self.logger.warning("Chart generation failed", url=url, error=str(e), error_type=type(e).__name__)
            raise type(e)(f"Failed to generate chart: {e}") from e

        chart = ChartData(title=self.source.get_page_title(url), source_url=url, columns=columns)

        if file_name is not None:
            path = Path(file_name)
            try:
                path.write_text(chart.model_dump_json(indent=2), encoding="utf-8")
            except OSError as e:
                self.logger.warning("Saving chart data failed", path=str(path), error=str(e))
                raise ChartExportError(f"Failed to generate chart: {e}") from e
            self.logger.info("Saved chart data", path=str(path), total_values=chart.total_values)

        return chart

    async def close(self) -> None:
        """Release the table source's HTTP resources."""
        await self.source.close()
