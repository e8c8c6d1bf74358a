from pathlib import Path

from guia_extractor.processor.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

TEXT_PLACEHOLDER = "{document_text}"


def load_text_template(path: Path | None = None) -> str:
    """Load the template used for text extracted from PDFs and spreadsheets.

    Args:
        path: Path to the template file.
              Defaults to the bundled text_prompt.txt.

    Returns:
        The raw template containing TEXT_PLACEHOLDER exactly once.

    Raises:
        PromptTemplateError: if the file cannot be read or the placeholder
            is missing or repeated.
    """
    template = _read(path or _DEFAULT_PROMPT_DIR / "text_prompt.txt")
    count = template.count(TEXT_PLACEHOLDER)
    if count != 1:
        raise PromptTemplateError(
            f"Text prompt template must contain {TEXT_PLACEHOLDER} once, found {count}"
        )
    return template


def load_image_template(path: Path | None = None) -> str:
    """Load the template sent alongside an attached image.

    Raises:
        PromptTemplateError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "image_prompt.txt")


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt template: {exc}") from exc
