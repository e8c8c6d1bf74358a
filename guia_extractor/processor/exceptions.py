class ProcessorError(Exception):
    """Base exception for all extraction pipeline errors."""


class ClientInputError(ProcessorError):
    """Raised when the request itself is unusable. Never retried."""


class MissingFieldError(ClientInputError):
    """Raised when a required request field is absent or empty."""


class InvalidPayloadError(ClientInputError):
    """Raised when the file payload is not valid base64."""


class UnsupportedFormatError(ClientInputError):
    """Raised when the file name suffix maps to no supported modality."""


class ExtractionError(ProcessorError):
    """Raised when a document-parsing adapter fails."""


class GatewayError(ProcessorError):
    """Raised when the model provider call fails or returns nothing."""


class GatewayNetworkError(GatewayError):
    """Raised when the model provider call fails due to network/API issues."""


class MalformedModelOutputError(ProcessorError):
    """Raised when the model reply cannot be decoded as a JSON object."""

    def __init__(self, message: str, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class RejectedDocumentError(ProcessorError):
    """Raised when the model judged the document not to be a shipment guide."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class PromptTemplateError(ProcessorError):
    """Raised when a prompt template cannot be loaded or is unusable."""
