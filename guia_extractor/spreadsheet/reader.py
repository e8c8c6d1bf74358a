"""First-sheet CSV extraction for .xlsx (openpyxl) and legacy .xls (xlrd)."""

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from typing import Any

import openpyxl
import xlrd

from guia_extractor.logging.logger import Log
from guia_extractor.spreadsheet.exceptions import SpreadsheetExtractionError

# .xlsx is a zip container; anything else is handed to xlrd.
_ZIP_SIGNATURE = b"PK\x03\x04"


class SpreadsheetExtractor:
    """Serializes the first sheet of a workbook as comma-delimited text."""

    def extract(self, workbook_bytes: bytes) -> str:
        """Read the sheet at index 0 and return it as CSV.

        Raises:
            SpreadsheetExtractionError: if the workbook cannot be read or
                contains no sheets.
        """
        if workbook_bytes.startswith(_ZIP_SIGNATURE):
            rows = self._read_xlsx(workbook_bytes)
        else:
            rows = self._read_xls(workbook_bytes)
        text = rows_to_csv(rows)
        Log.debug(f"Spreadsheet first sheet serialized to {len(text)} chars")
        return text

    @staticmethod
    def _read_xlsx(workbook_bytes: bytes) -> list[Sequence[Any]]:
        try:
            workbook = openpyxl.load_workbook(
                io.BytesIO(workbook_bytes), read_only=True, data_only=True
            )
            try:
                if not workbook.sheetnames:
                    raise SpreadsheetExtractionError("Workbook has no sheets")
                sheet = workbook[workbook.sheetnames[0]]
                return list(sheet.iter_rows(values_only=True))
            finally:
                workbook.close()
        except SpreadsheetExtractionError:
            raise
        except Exception as exc:
            raise SpreadsheetExtractionError(
                f"openpyxl could not read the workbook: {exc}"
            ) from exc

    @staticmethod
    def _read_xls(workbook_bytes: bytes) -> list[Sequence[Any]]:
        try:
            book = xlrd.open_workbook(file_contents=workbook_bytes)
        except Exception as exc:
            raise SpreadsheetExtractionError(
                f"xlrd could not read the workbook: {exc}"
            ) from exc
        if book.nsheets == 0:
            raise SpreadsheetExtractionError("Workbook has no sheets")
        sheet = book.sheet_by_index(0)
        return [
            [_xls_cell_value(cell, book.datemode) for cell in sheet.row(index)]
            for index in range(sheet.nrows)
        ]


def _xls_cell_value(cell: Any, datemode: int) -> Any:
    """Convert xlrd's raw cell value to what the cell displays."""
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate.xldate_as_datetime(cell.value, datemode)
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value, "")
    return cell.value


def rows_to_csv(rows: Iterable[Sequence[Any]]) -> str:
    """Write rows as CSV, dropping trailing blank rows."""
    formatted = [[format_cell(value) for value in row] for row in rows]
    while formatted and not any(formatted[-1]):
        formatted.pop()
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(formatted)
    return buffer.getvalue()


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == datetime.min.time():
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
