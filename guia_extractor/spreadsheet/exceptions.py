from guia_extractor.processor.exceptions import ExtractionError


class SpreadsheetExtractionError(ExtractionError):
    """Raised when a workbook cannot be read or has no sheets."""
