from pathlib import Path

from guia_extractor.config.settings import Settings
from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.gateway.factory import GatewayFactory
from guia_extractor.logging.logger import Log
from guia_extractor.pdf.factory import PdfExtractorFactory
from guia_extractor.processor.content_extractor import ContentExtractor
from guia_extractor.processor.exceptions import (
    ClientInputError,
    MalformedModelOutputError,
    ProcessorError,
    RejectedDocumentError,
)
from guia_extractor.processor.models import ExtractionRecord, Rejection
from guia_extractor.processor.pipeline import PipelineContext, PipelineStage, PipelineStep
from guia_extractor.processor.steps import (
    BuildPromptStep,
    DecodeStep,
    DiscriminateStep,
    ExtractContentStep,
    InvokeModelStep,
    ParseOutputStep,
)
from guia_extractor.prompting.prompt_builder import PromptBuilder
from guia_extractor.spreadsheet.reader import SpreadsheetExtractor


class Processor:
    """Runs one upload through the extraction pipeline.

    Pipeline: decode -> extract -> prompt -> invoke -> parse -> discriminate.
    Each step runs once; the first failure ends the run.
    """

    def __init__(
        self,
        content_extractor: ContentExtractor,
        prompt_builder: PromptBuilder,
        gateway: BaseModelGateway,
    ) -> None:
        self._steps: list[PipelineStep] = [
            DecodeStep(),
            ExtractContentStep(content_extractor),
            BuildPromptStep(prompt_builder),
            InvokeModelStep(gateway),
            ParseOutputStep(),
            DiscriminateStep(),
        ]

    def process(self, file_base64: str | None, file_name: str | None) -> ExtractionRecord:
        """Return the extracted record for an upload.

        Raises:
            RejectedDocumentError: if the model judged the document invalid.
            ProcessorError: any other typed failure of a stage.
        """
        Log.info(f"Processing upload '{file_name}'")
        context = PipelineContext(file_base64=file_base64, file_name=file_name)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                self._log_failure(context, exc)
                context.stage = PipelineStage.FAILED
                raise

        result = context.result
        if isinstance(result, Rejection):
            Log.warning(f"Upload '{file_name}' rejected by model: {result.reason}")
            raise RejectedDocumentError(result.reason)
        if result is None:
            raise RuntimeError("Pipeline finished without a result")
        Log.info(f"Upload '{file_name}' accepted: ruc={result.ruc!r}, date={result.date!r}")
        if result.extracted_data is None:
            Log.warning(f"Upload '{file_name}' accepted without an extractedData object")
        return result

    @staticmethod
    def _log_failure(context: PipelineContext, exc: Exception) -> None:
        kind = type(exc).__name__
        if not isinstance(exc, ProcessorError):
            Log.error(f"Unexpected failure after stage {context.stage.name}: {kind}: {exc}")
            return
        if isinstance(exc, ClientInputError):
            Log.warning(f"Rejected request at stage {context.stage.name} ({kind}): {exc}")
            return
        Log.error(f"Failed after stage {context.stage.name} ({kind}): {exc}")
        if isinstance(exc, MalformedModelOutputError):
            Log.error(f"Undecodable model output:\n{exc.raw_text}")


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all adapters named by the settings."""
    content_extractor = ContentExtractor(
        pdf_extractor=PdfExtractorFactory.create(settings),
        spreadsheet_extractor=SpreadsheetExtractor(),
    )
    prompt_builder = PromptBuilder(
        text_template_path=_optional_path(settings.text_prompt_path),
        image_template_path=_optional_path(settings.image_prompt_path),
    )
    gateway = GatewayFactory.create(settings)
    return Processor(
        content_extractor=content_extractor,
        prompt_builder=prompt_builder,
        gateway=gateway,
    )


def _optional_path(value: str) -> Path | None:
    return Path(value) if value.strip() else None
