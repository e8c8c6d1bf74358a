from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.logging.logger import Log
from guia_extractor.processor.content_extractor import ContentExtractor
from guia_extractor.processor.decoder import decode_upload
from guia_extractor.processor.discriminator import classify
from guia_extractor.processor.models import PlainText, Rejection
from guia_extractor.processor.pipeline import PipelineContext, PipelineStage, PipelineStep
from guia_extractor.processor.response_parser import parse_model_output
from guia_extractor.prompting.prompt_builder import PromptBuilder


class DecodeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        document = decode_upload(context.file_base64, context.file_name)
        context.document = document
        context.stage = PipelineStage.DECODED
        Log.info(
            f"Decoded {len(document.raw_bytes)} bytes from '{document.declared_name}' "
            f"as {document.modality.name}"
        )
        return context


class ExtractContentStep(PipelineStep):
    def __init__(self, content_extractor: ContentExtractor) -> None:
        self._content_extractor = content_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before extraction")
        content = self._content_extractor.extract(context.document)
        context.content = content
        context.stage = PipelineStage.EXTRACTED
        if isinstance(content, PlainText):
            Log.info(f"Extracted {len(content.text)} chars of text")
        else:
            Log.info(f"Attached image as {content.mime_type}")
        return context


class BuildPromptStep(PipelineStep):
    def __init__(self, prompt_builder: PromptBuilder) -> None:
        self._prompt_builder = prompt_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.content is None:
            raise ValueError("PipelineContext.content must be set before prompting")
        context.prompt = self._prompt_builder.build(context.content)
        context.stage = PipelineStage.PROMPTED
        Log.debug(f"Model prompt:\n{context.prompt.instruction}")
        return context


class InvokeModelStep(PipelineStep):
    def __init__(self, gateway: BaseModelGateway) -> None:
        self._gateway = gateway

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.prompt is None:
            raise ValueError("PipelineContext.prompt must be set before invoking the model")
        context.raw_output = self._gateway.generate(context.prompt)
        context.stage = PipelineStage.INVOKED
        Log.debug(f"Model raw response:\n{context.raw_output}")
        return context


class ParseOutputStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.parsed_output = parse_model_output(context.raw_output)
        context.stage = PipelineStage.NORMALIZED
        return context


class DiscriminateStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        result = classify(context.parsed_output)
        context.result = result
        if isinstance(result, Rejection):
            context.stage = PipelineStage.REJECTED
        else:
            context.stage = PipelineStage.ACCEPTED
        return context
