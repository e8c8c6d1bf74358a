from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from guia_extractor.api.app import create_app
from guia_extractor.config.settings import Settings
from guia_extractor.pdf.pdfplumber_adapter import PdfPlumberAdapter
from guia_extractor.processor.content_extractor import ContentExtractor
from guia_extractor.processor.processor import Processor
from guia_extractor.prompting.prompt_builder import PromptBuilder
from guia_extractor.spreadsheet.reader import SpreadsheetExtractor


@pytest.fixture()
def gateway() -> MagicMock:
    """Substitute model gateway; tests set its reply or side effect."""
    return MagicMock()


@pytest.fixture()
def app(gateway: MagicMock) -> FastAPI:
    processor = Processor(
        content_extractor=ContentExtractor(
            pdf_extractor=PdfPlumberAdapter(),
            spreadsheet_extractor=SpreadsheetExtractor(),
        ),
        prompt_builder=PromptBuilder(),
        gateway=gateway,
    )
    settings = Settings(gateway_provider="example", log_level="DEBUG")
    return create_app(settings=settings, processor=processor)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
