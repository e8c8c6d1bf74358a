from guia_extractor.logging.logger import Log
from guia_extractor.pdf.base import BasePdfExtractor
from guia_extractor.processor.models import (
    ExtractedContent,
    Modality,
    PlainText,
    UploadedDocument,
    VisualAttachment,
)
from guia_extractor.spreadsheet.reader import SpreadsheetExtractor


class ContentExtractor:
    """Dispatches an uploaded document to the adapter for its modality."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        spreadsheet_extractor: SpreadsheetExtractor,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._spreadsheet_extractor = spreadsheet_extractor

    def extract(self, document: UploadedDocument) -> ExtractedContent:
        """Return plain text for PDFs and spreadsheets, the raw image otherwise.

        Raises:
            ExtractionError: if a parsing adapter fails.
        """
        modality = document.modality
        if modality is Modality.PDF_TEXT:
            return PlainText(self._pdf_extractor.extract(document.raw_bytes))
        if modality is Modality.SPREADSHEET_TEXT:
            return PlainText(self._spreadsheet_extractor.extract(document.raw_bytes))

        mime_type = modality.mime_type
        if mime_type is None:
            raise ValueError(f"No extraction path for modality {modality}")
        Log.debug(f"Passing {len(document.raw_bytes)} image bytes as {mime_type}")
        return VisualAttachment(data=document.raw_bytes, mime_type=mime_type)
