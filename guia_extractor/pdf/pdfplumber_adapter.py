import io

import pdfplumber

from guia_extractor.logging.logger import Log
from guia_extractor.pdf.base import BasePdfExtractor
from guia_extractor.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Reads the text layer of a PDF with pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                page_texts = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not read the PDF: {exc}") from exc
        Log.debug(f"pdfplumber read {len(page_texts)} pages")
        return "\n".join(page_texts).strip()
