# ABOUTME: Tests for HtmlTable snapshots built from parsed HTML
# ABOUTME: Validates row/cell selection and the error taxonomy messages

import pytest
from bs4 import BeautifulSoup
from pydantic import ValidationError

from height_inspector.extraction.base import (
    HtmlTable,
    InspectionError,
    InvalidUrlError,
    NoMeasurementsError,
    NoTablesError,
    SourceUnavailableError,
)

TABLE_HTML = """
<table class="wikitable">
  <tr><th>Mark</th><th>Athlete</th></tr>
  <tr><td>2.45 m</td><td>Javier Sotomayor</td></tr>
  <tr><td>
    8 ft 0 in
  </td><td>Someone</td></tr>
  <tr><th>Subtotal</th></tr>
</table>
"""


def _element(html: str):
    return BeautifulSoup(html, "html.parser").find("table")


class TestHtmlTableFromElement:
    """Test conversion of <table> elements into row snapshots."""

    def test_rows_and_cells(self):
        table = HtmlTable.from_element(_element(TABLE_HTML))

        assert len(table.rows) == 4
        assert table.rows[0] == ()  # header made of <th> only
        assert table.rows[1] == ("2.45 m", "Javier Sotomayor")
        assert table.rows[2][0].strip() == "8 ft 0 in"
        assert table.rows[3] == ()

    def test_cell_text_includes_nested_markup(self):
        html = '<table><tr><td>1.85<span>&nbsp;</span>m<sup>[1]</sup></td></tr></table>'
        table = HtmlTable.from_element(_element(html))

        assert table.rows[0] == ("1.85\xa0m[1]",)

    def test_empty_table(self):
        table = HtmlTable.from_element(_element("<table></table>"))
        assert table.rows == ()

    def test_table_is_frozen(self):
        table = HtmlTable(rows=(("a",),))
        with pytest.raises(ValidationError):
            table.rows = ()


class TestErrorTaxonomy:
    """Test the inspection error hierarchy."""

    @pytest.mark.parametrize(
        "error_cls", [InvalidUrlError, SourceUnavailableError, NoTablesError, NoMeasurementsError]
    )
    def test_hierarchy(self, error_cls):
        assert issubclass(error_cls, InspectionError)

    def test_default_messages(self):
        assert str(NoTablesError()) == "No table found"
        assert str(NoMeasurementsError()) == "No numeric columns found in the tables"

    def test_custom_messages(self):
        assert str(NoMeasurementsError("Failed to generate chart: nothing")) == "Failed to generate chart: nothing"
