import io

import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 24


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page shipment guide PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "GUIA DE REMISION REMITENTE")
    c.drawString(72, 700, "RUC 20123456789")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    """Two-sheet workbook; only the first sheet holds shipment rows."""
    workbook = openpyxl.Workbook()
    first = workbook.active
    first.title = "Guia"
    first.append(["Producto", "Cantidad", "Unidad"])
    first.append(["Cemento", 10, "bolsas"])
    first.append(["Fierro", 2.5, "toneladas"])
    second = workbook.create_sheet("Notas")
    second.append(["ignored sheet"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def jpeg_bytes() -> bytes:
    return JPEG_BYTES
