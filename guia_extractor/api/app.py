from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from guia_extractor.api.error_handlers import (
    handle_processor_error,
    handle_unknown_error,
    handle_validation_error,
)
from guia_extractor.api.routes import router
from guia_extractor.config.settings import Settings
from guia_extractor.logging.logger import Log
from guia_extractor.processor.exceptions import ProcessorError
from guia_extractor.processor.processor import Processor, build_processor


def create_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Build the API. Fails at startup if the gateway cannot be configured."""
    if settings is None:
        settings = Settings()
    Log.configure(settings.log_level)
    if processor is None:
        processor = build_processor(settings)

    app = FastAPI(
        title="Guía de Remisión Extractor API",
        description="Extracts shipment guide data from PDFs, spreadsheets and images",
    )
    app.state.processor = processor

    origins = [o.strip() for o in settings.cors_allowed_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProcessorError, handle_processor_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unknown_error)

    app.include_router(router)
    Log.info(f"API ready (env={settings.app_env}, provider={settings.gateway_provider})")
    return app
