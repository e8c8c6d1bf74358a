from datetime import date, datetime
from unittest.mock import MagicMock, patch

import pytest
import xlrd
from xlrd.sheet import Cell

from guia_extractor.processor.exceptions import ExtractionError
from guia_extractor.spreadsheet.exceptions import SpreadsheetExtractionError
from guia_extractor.spreadsheet.reader import SpreadsheetExtractor, format_cell, rows_to_csv


class TestXlsxExtraction:
    def test_serializes_first_sheet_as_csv(self, sample_xlsx_bytes: bytes) -> None:
        text = SpreadsheetExtractor().extract(sample_xlsx_bytes)
        assert text == "Producto,Cantidad,Unidad\nCemento,10,bolsas\nFierro,2.5,toneladas\n"

    def test_ignores_other_sheets(self, sample_xlsx_bytes: bytes) -> None:
        text = SpreadsheetExtractor().extract(sample_xlsx_bytes)
        assert "ignored sheet" not in text

    def test_corrupt_zip_raises(self) -> None:
        with pytest.raises(SpreadsheetExtractionError, match="openpyxl"):
            SpreadsheetExtractor().extract(b"PK\x03\x04garbage")

    def test_workbook_without_sheets_raises(self) -> None:
        workbook = MagicMock()
        workbook.sheetnames = []
        with patch(
            "guia_extractor.spreadsheet.reader.openpyxl.load_workbook",
            return_value=workbook,
        ):
            with pytest.raises(SpreadsheetExtractionError, match="no sheets"):
                SpreadsheetExtractor().extract(b"PK\x03\x04whatever")
        workbook.close.assert_called_once()


class TestXlsExtraction:
    @staticmethod
    def _book(rows: list[list[Cell]]) -> MagicMock:
        sheet = MagicMock()
        sheet.nrows = len(rows)
        sheet.row.side_effect = lambda index: rows[index]
        book = MagicMock()
        book.nsheets = 2
        book.datemode = 0
        book.sheet_by_index.return_value = sheet
        return book

    def test_reads_sheet_at_index_zero(self) -> None:
        book = self._book(
            [
                [Cell(xlrd.XL_CELL_TEXT, "RUC"), Cell(xlrd.XL_CELL_NUMBER, 20123456789.0)],
                [Cell(xlrd.XL_CELL_TEXT, "Costo"), Cell(xlrd.XL_CELL_NUMBER, 150.5)],
            ]
        )
        with patch(
            "guia_extractor.spreadsheet.reader.xlrd.open_workbook",
            return_value=book,
        ) as mock_open:
            text = SpreadsheetExtractor().extract(b"\xd0\xcf\x11\xe0legacy")
        mock_open.assert_called_once_with(file_contents=b"\xd0\xcf\x11\xe0legacy")
        book.sheet_by_index.assert_called_once_with(0)
        assert text == "RUC,20123456789\nCosto,150.5\n"

    def test_date_cells_render_as_iso_dates(self) -> None:
        book = self._book(
            [[Cell(xlrd.XL_CELL_TEXT, "Fecha llegada"), Cell(xlrd.XL_CELL_DATE, 45353.0)]]
        )
        with patch(
            "guia_extractor.spreadsheet.reader.xlrd.open_workbook",
            return_value=book,
        ):
            text = SpreadsheetExtractor().extract(b"\xd0\xcf\x11\xe0legacy")
        assert text == "Fecha llegada,2024-03-02\n"

    def test_date_cells_with_time_keep_the_time(self) -> None:
        book = self._book(
            [[Cell(xlrd.XL_CELL_TEXT, "Salida"), Cell(xlrd.XL_CELL_DATE, 45353.5)]]
        )
        with patch(
            "guia_extractor.spreadsheet.reader.xlrd.open_workbook",
            return_value=book,
        ):
            text = SpreadsheetExtractor().extract(b"\xd0\xcf\x11\xe0legacy")
        assert text == "Salida,2024-03-02 12:00:00\n"

    def test_boolean_cells_render_as_words(self) -> None:
        book = self._book(
            [[Cell(xlrd.XL_CELL_TEXT, "Transbordo"), Cell(xlrd.XL_CELL_BOOLEAN, 1)]]
        )
        with patch(
            "guia_extractor.spreadsheet.reader.xlrd.open_workbook",
            return_value=book,
        ):
            text = SpreadsheetExtractor().extract(b"\xd0\xcf\x11\xe0legacy")
        assert text == "Transbordo,TRUE\n"

    def test_workbook_without_sheets_raises(self) -> None:
        book = MagicMock()
        book.nsheets = 0
        with patch(
            "guia_extractor.spreadsheet.reader.xlrd.open_workbook",
            return_value=book,
        ):
            with pytest.raises(SpreadsheetExtractionError, match="no sheets"):
                SpreadsheetExtractor().extract(b"\xd0\xcf\x11\xe0legacy")

    def test_unreadable_bytes_raise(self) -> None:
        with pytest.raises(SpreadsheetExtractionError, match="xlrd"):
            SpreadsheetExtractor().extract(b"definitely not a workbook")

    def test_error_is_an_extraction_error(self) -> None:
        assert issubclass(SpreadsheetExtractionError, ExtractionError)


class TestCsvFormatting:
    def test_quotes_cells_with_commas(self) -> None:
        assert rows_to_csv([["Cemento, tipo I", 1]]) == '"Cemento, tipo I",1\n'

    def test_drops_trailing_blank_rows(self) -> None:
        assert rows_to_csv([["a"], [None, None], ["", None]]) == "a\n"

    def test_keeps_inner_blank_rows(self) -> None:
        assert rows_to_csv([["a", "b"], [None, None], ["c", "d"]]) == "a,b\n,\nc,d\n"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            (True, "TRUE"),
            (False, "FALSE"),
            (10.0, "10"),
            (2.5, "2.5"),
            (7, "7"),
            (datetime(2024, 3, 1), "2024-03-01"),
            (datetime(2024, 3, 1, 8, 30), "2024-03-01 08:30:00"),
            (date(2024, 3, 2), "2024-03-02"),
            ("texto", "texto"),
        ],
    )
    def test_format_cell(self, value: object, expected: str) -> None:
        assert format_cell(value) == expected
