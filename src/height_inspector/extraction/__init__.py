# ABOUTME: Measurement extraction from structured data tables
# ABOUTME: Pipeline Stage 1: Wikipedia tables → normalized Height columns

"""
Extraction Layer: Turn loosely formatted table cells into numeric columns

This layer handles:
- Fetching articles and selecting their data tables (wiki/)
- Parsing metric and imperial heights into meters (units)
- Scanning rows and building one Height column per table (columns)

Data Flow: Wikipedia API → HtmlTable → Height columns → core layer
"""

from .base import (
    ChartExportError,
    HtmlTable,
    InspectionError,
    InvalidUrlError,
    NoMeasurementsError,
    NoTablesError,
    SourceUnavailableError,
    TableSource,
)
from .columns import build_column, extract_columns, scan_rows
from .units import parse_height

__all__ = [
    "ChartExportError",
    "HtmlTable",
    "InspectionError",
    "InvalidUrlError",
    "NoMeasurementsError",
    "NoTablesError",
    "SourceUnavailableError",
    "TableSource",
    "build_column",
    "extract_columns",
    "parse_height",
    "scan_rows",
]
