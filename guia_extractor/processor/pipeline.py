from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from guia_extractor.processor.models import (
    DiscriminationResult,
    ExtractedContent,
    Prompt,
    UploadedDocument,
)


class PipelineStage(Enum):
    RECEIVED = "received"
    DECODED = "decoded"
    EXTRACTED = "extracted"
    PROMPTED = "prompted"
    INVOKED = "invoked"
    NORMALIZED = "normalized"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(slots=True)
class PipelineContext:
    file_base64: str | None = field(default=None, repr=False)
    file_name: str | None = None
    stage: PipelineStage = PipelineStage.RECEIVED
    document: UploadedDocument | None = None
    content: ExtractedContent | None = None
    prompt: Prompt | None = None
    raw_output: str = ""
    parsed_output: dict[str, Any] = field(default_factory=dict)
    result: DiscriminationResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
