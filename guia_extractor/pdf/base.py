from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the text of every page of a shipment guide PDF.

        Args:
            pdf_bytes: Raw PDF file content as uploaded by the client.

        Returns:
            Page texts joined by newlines, stripped. Empty for scanned PDFs
            with no text layer.

        Raises:
            PdfExtractionError: if the library cannot open or read the file.
        """
