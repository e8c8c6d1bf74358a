from typing import Any, ClassVar

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.processor.exceptions import GatewayError, GatewayNetworkError
from guia_extractor.processor.models import Prompt


class GeminiGatewayAdapter(BaseModelGateway):
    """Model gateway backed by the Gemini API.

    Safety filters are disabled for every harm category so business documents
    are never blocked up front; the prompt's ``error`` branch decides rejection.
    """

    SAFETY_SETTINGS: ClassVar[list[dict[str, str]]] = [
        {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
        {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"},
        {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_NONE"},
        {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_NONE"},
    ]

    def __init__(
        self,
        *,
        api_key: str,
        model_name: str,
        temperature: float = 0.1,
        timeout_seconds: int = 60,
    ) -> None:
        genai.configure(api_key=api_key)
        self._timeout_seconds = timeout_seconds
        self._model = genai.GenerativeModel(
            model_name=model_name,
            generation_config={"temperature": temperature},
            safety_settings=self.SAFETY_SETTINGS,
        )

    def generate(self, prompt: Prompt) -> str:
        parts: list[Any] = [prompt.instruction]
        if prompt.attachment is not None:
            parts.append(
                {
                    "mime_type": prompt.attachment.mime_type,
                    "data": prompt.attachment.data,
                }
            )
        try:
            response = self._model.generate_content(
                parts, request_options={"timeout": self._timeout_seconds}
            )
            text = response.text
        except google_exceptions.GoogleAPIError as exc:
            raise GatewayNetworkError(f"Gemini API error: {exc}") from exc
        except Exception as exc:
            # Blocked or empty candidates surface as ValueError from .text
            raise GatewayError(f"Gemini request failed: {exc}") from exc

        if not text:
            raise GatewayError("Gemini returned empty response")
        return text
