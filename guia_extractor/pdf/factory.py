from guia_extractor.config.settings import Settings
from guia_extractor.pdf.base import BasePdfExtractor
from guia_extractor.pdf.pdfplumber_adapter import PdfPlumberAdapter
from guia_extractor.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the PDF extractor named by the PDF_ENGINE setting."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        try:
            adapter_cls = cls.ADAPTERS[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            ) from None
        return adapter_cls()
