import base64

import httpx
import openai

from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.processor.exceptions import GatewayError, GatewayNetworkError
from guia_extractor.processor.models import Prompt


class OpenAIGatewayAdapter(BaseModelGateway):
    """Model gateway built on the OpenAI chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        temperature: float = 0.0,
    ) -> None:
        self._client = openai.OpenAI(api_key=api_key, timeout=timeout_seconds)
        self._model = model
        self._temperature = temperature

    def generate(self, prompt: Prompt) -> str:
        content: list[dict[str, object]] = [
            {"type": "text", "text": prompt.instruction}
        ]
        if prompt.attachment is not None:
            encoded = base64.b64encode(prompt.attachment.data).decode("ascii")
            content.append(
                {
                    "type": "image_url",
                    "image_url": {
                        "url": f"data:{prompt.attachment.mime_type};base64,{encoded}"
                    },
                }
            )
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                response_format={"type": "json_object"},
                messages=[{"role": "user", "content": content}],  # type: ignore[misc,list-item]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GatewayNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GatewayNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise GatewayError("AI returned no choices")
        text = response.choices[0].message.content
        if not text:
            raise GatewayError("AI returned empty response")
        return text
