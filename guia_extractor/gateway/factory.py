from typing import ClassVar

from guia_extractor.config.settings import Settings
from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.gateway.example_client_adapter import ExampleGatewayAdapter
from guia_extractor.gateway.gemini_adapter import GeminiGatewayAdapter
from guia_extractor.gateway.openai_client_adapter import OpenAIGatewayAdapter


class GatewayFactory:
    """Creates the configured model gateway adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("gemini", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseModelGateway:
        """Create the gateway named by GATEWAY_PROVIDER.

        Raises:
            ValueError: for an unknown provider or a missing API key. Both are
                startup failures, never per-request errors.
        """
        provider = settings.gateway_provider.strip().lower()
        if provider == "example":
            return ExampleGatewayAdapter()
        if provider == "gemini":
            return GeminiGatewayAdapter(
                api_key=cls._require_key(settings.gemini_api_key, "GEMINI_API_KEY", provider),
                model_name=settings.gemini_model_name,
                temperature=settings.gemini_temperature,
                timeout_seconds=settings.gemini_timeout_seconds,
            )
        if provider == "openai":
            return OpenAIGatewayAdapter(
                api_key=cls._require_key(settings.openai_api_key, "OPENAI_API_KEY", provider),
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
                temperature=settings.openai_temperature,
            )
        raise ValueError(
            f"Unknown gateway provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @staticmethod
    def _require_key(key: str, env_name: str, provider: str) -> str:
        key = key.strip()
        if not key:
            raise ValueError(f"{env_name} is required for gateway_provider={provider}")
        return key
