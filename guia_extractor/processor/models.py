from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Modality(Enum):
    """Resolved content category of an uploaded document."""

    PDF_TEXT = "pdf"
    SPREADSHEET_TEXT = "spreadsheet"
    IMAGE_PNG = "image/png"
    IMAGE_JPEG = "image/jpeg"

    @property
    def is_image(self) -> bool:
        return self in (Modality.IMAGE_PNG, Modality.IMAGE_JPEG)

    @property
    def mime_type(self) -> str | None:
        """MIME type sent to the model for image modalities, else None."""
        return self.value if self.is_image else None


@dataclass(frozen=True)
class UploadedDocument:
    """Decoded upload: raw bytes plus the name the client declared."""

    raw_bytes: bytes = field(repr=False)
    declared_name: str
    modality: Modality


@dataclass(frozen=True)
class PlainText:
    """Text extracted from a PDF or spreadsheet."""

    text: str


@dataclass(frozen=True)
class VisualAttachment:
    """Image bytes passed through untouched to the model."""

    data: bytes = field(repr=False)
    mime_type: str


ExtractedContent = PlainText | VisualAttachment


@dataclass(frozen=True)
class Prompt:
    """Instruction text, plus the image part on the image path."""

    instruction: str
    attachment: VisualAttachment | None = None


@dataclass(frozen=True)
class ExtractionRecord:
    """Decoded model reply accepted as shipment data. Not schema-enforced."""

    data: dict[str, Any]

    @property
    def date(self) -> Any:
        return self.data.get("date")

    @property
    def ruc(self) -> Any:
        return self.data.get("ruc")

    @property
    def extracted_data(self) -> Any:
        return self.data.get("extractedData")


@dataclass(frozen=True)
class Rejection:
    """Model verdict that the document is not a valid shipment guide."""

    reason: str


DiscriminationResult = ExtractionRecord | Rejection
