"""Maps pipeline failures to HTTP status codes and ``{"error": ...}`` bodies."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from guia_extractor.logging.logger import Log
from guia_extractor.processor.exceptions import (
    ClientInputError,
    ExtractionError,
    GatewayError,
    MalformedModelOutputError,
    ProcessorError,
    RejectedDocumentError,
)

GENERIC_FAILURE_MESSAGE = "Error al procesar el archivo con IA."


def status_for(exc: ProcessorError) -> int:
    if isinstance(exc, ClientInputError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, RejectedDocumentError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def public_message(exc: ProcessorError) -> str:
    """Message safe to return to the client. Raw model text is never included."""
    if isinstance(exc, ClientInputError):
        return str(exc)
    if isinstance(exc, RejectedDocumentError):
        return exc.reason
    if isinstance(exc, GatewayError):
        return f"{GENERIC_FAILURE_MESSAGE} {exc}"
    if isinstance(exc, MalformedModelOutputError):
        return "La IA devolvió una respuesta que no se pudo interpretar."
    if isinstance(exc, ExtractionError):
        return f"No se pudo leer el contenido del archivo. {exc}"
    return GENERIC_FAILURE_MESSAGE


async def handle_processor_error(request: Request, exc: ProcessorError) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(exc),
        content={"error": public_message(exc)},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client input errors, so 422 stays for rejections."""
    errors = exc.errors()
    first_error = errors[0] if errors else {}
    field = ".".join(str(part) for part in first_error.get("loc", []) if part != "body")
    msg = first_error.get("msg", "Validation failed")
    detail = f"{field}: {msg}" if field else msg
    Log.warning(f"Request validation failed on {request.url.path}: {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Solicitud inválida. {detail}"},
    )


async def handle_unknown_error(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"Unexpected error on {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_FAILURE_MESSAGE},
    )
