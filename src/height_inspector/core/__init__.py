# ABOUTME: Business logic and orchestration layer
# ABOUTME: Extracted columns → chart-ready documents

"""
Core Layer: Business logic and workflow orchestration

This layer handles:
- Domain models for extracted measurement columns
- The inspection service gluing the table source and extraction engine

Data Flow: extraction/ tables → Height columns → Chart data
"""

from .models import HEIGHT_HEADER, ChartData, ColumnData

# Import service on-demand to avoid circular imports
# Use: from height_inspector.core.service import HeightInspectionService

__all__ = [
    "HEIGHT_HEADER",
    "ChartData",
    "ColumnData",
]
