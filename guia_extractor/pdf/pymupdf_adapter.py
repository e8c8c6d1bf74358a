import pymupdf

from guia_extractor.logging.logger import Log
from guia_extractor.pdf.base import BasePdfExtractor
from guia_extractor.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads the text layer of a PDF with PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                page_texts = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"PyMuPDF could not read the PDF: {exc}") from exc
        Log.debug(f"PyMuPDF read {len(page_texts)} pages")
        return "\n".join(page_texts).strip()
