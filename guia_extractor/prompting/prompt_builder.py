from pathlib import Path

from guia_extractor.processor.models import ExtractedContent, PlainText, Prompt
from guia_extractor.prompting.prompt_loader import (
    TEXT_PLACEHOLDER,
    load_image_template,
    load_text_template,
)


class PromptBuilder:
    """Picks the text or image template and fills it for one document."""

    def __init__(
        self,
        *,
        text_template_path: Path | None = None,
        image_template_path: Path | None = None,
    ) -> None:
        self._text_template = load_text_template(text_template_path)
        self._image_template = load_image_template(image_template_path)

    def build(self, content: ExtractedContent) -> Prompt:
        if isinstance(content, PlainText):
            # str.replace leaves braces in the extracted text alone.
            return Prompt(
                instruction=self._text_template.replace(TEXT_PLACEHOLDER, content.text)
            )
        return Prompt(instruction=self._image_template, attachment=content)
