from guia_extractor.processor.exceptions import ExtractionError


class PdfExtractionError(ExtractionError):
    """Raised when text cannot be extracted from a PDF."""
