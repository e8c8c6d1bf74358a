"""Sanitizes and decodes the raw model reply."""

import json
import re
from typing import Any

from guia_extractor.processor.exceptions import MalformedModelOutputError

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(raw: str) -> str:
    """Remove every ```json and ``` marker, wherever it appears.

    Text without fences is returned unchanged.
    """
    return _CODE_FENCE.sub("", raw)


def parse_model_output(raw: str) -> dict[str, Any]:
    """Strictly decode the fence-stripped reply as a JSON object.

    Raises:
        MalformedModelOutputError: if the text is not valid JSON or is not an
            object. The original reply is kept on the exception.
    """
    cleaned = strip_code_fences(raw).strip()
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedModelOutputError(f"Invalid JSON response: {exc}", raw_text=raw) from exc

    if not isinstance(parsed, dict):
        raise MalformedModelOutputError("JSON response must be an object", raw_text=raw)
    return parsed
