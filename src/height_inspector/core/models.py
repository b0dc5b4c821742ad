# ABOUTME: Business domain models for core layer - final extraction outputs
# ABOUTME: Normalized measurement columns and the chart document handed to renderers

import math

from pydantic import BaseModel, Field, field_validator

HEIGHT_HEADER = "Height"


class ColumnData(BaseModel):
    """A named numeric series extracted from one source table.

    Values are canonical measurements in meters, kept in source-row order.
    """

    header: str = Field(description="Column label shown on the chart")
    values: list[float] = Field(min_length=1, description="Measurements in meters, in row order")

    @field_validator("values")
    @classmethod
    def _finite_non_negative(cls, values: list[float]) -> list[float]:
        for value in values:
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Measurement must be finite and non-negative, got {value!r}")
        return values


class ChartData(BaseModel):
    """Chart-ready document built from the columns of one article."""

    title: str = Field(description="Article title the columns were extracted from")
    source_url: str = Field(description="Article URL as entered by the user")
    columns: list[ColumnData] = Field(default_factory=list)

    @property
    def total_values(self) -> int:
        return sum(len(column.values) for column in self.columns)
