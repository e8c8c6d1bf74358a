from abc import ABC, abstractmethod

from guia_extractor.processor.models import Prompt


class BaseModelGateway(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
    def generate(self, prompt: Prompt) -> str:
        """Send the prompt (and its image part, if any) in a single call.

        Returns:
            The provider reply as plain text, unparsed.

        Raises:
            GatewayError: on any transport, auth, quota or safety failure,
                or when the provider returns no text.
        """
