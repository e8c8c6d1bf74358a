"""Turns the transport payload into an UploadedDocument."""

import base64
import binascii
import re

from guia_extractor.processor.exceptions import (
    InvalidPayloadError,
    MissingFieldError,
    UnsupportedFormatError,
)
from guia_extractor.processor.models import Modality, UploadedDocument

_DATA_URL_PREFIX = re.compile(r"^data:[^,]*;base64,", re.IGNORECASE)

SUFFIX_MODALITIES: dict[str, Modality] = {
    "pdf": Modality.PDF_TEXT,
    "xls": Modality.SPREADSHEET_TEXT,
    "xlsx": Modality.SPREADSHEET_TEXT,
    "png": Modality.IMAGE_PNG,
    "jpg": Modality.IMAGE_JPEG,
    "jpeg": Modality.IMAGE_JPEG,
}


def resolve_modality(file_name: str) -> Modality:
    """Map a file name to its modality by case-insensitive suffix.

    Raises:
        UnsupportedFormatError: if the suffix is not one of SUFFIX_MODALITIES.
    """
    _, dot, suffix = file_name.rpartition(".")
    modality = SUFFIX_MODALITIES.get(suffix.lower()) if dot else None
    if modality is None:
        raise UnsupportedFormatError("Tipo de archivo no soportado.")
    return modality


def decode_upload(file_base64: str | None, file_name: str | None) -> UploadedDocument:
    """Validate request fields, resolve the modality and decode the payload.

    The suffix is checked before the payload is decoded so that an unsupported
    file is rejected whatever its content.

    Raises:
        MissingFieldError: if either field is absent or empty.
        UnsupportedFormatError: if the file suffix is not supported.
        InvalidPayloadError: if the payload is not valid base64 or decodes to
            nothing. A leading data URL header is ignored.
    """
    if not file_name:
        raise MissingFieldError("El campo 'fileName' es obligatorio.")
    if not file_base64:
        raise MissingFieldError("El campo 'fileBase64' es obligatorio.")

    modality = resolve_modality(file_name)
    # Browser FileReader output carries a data URL header before the payload.
    payload = _DATA_URL_PREFIX.sub("", file_base64.lstrip(), count=1)
    try:
        # Clients may wrap the payload every 76 chars.
        compact = "".join(payload.split())
        raw_bytes = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidPayloadError(
            "El campo 'fileBase64' no contiene base64 válido."
        ) from exc
    if not raw_bytes:
        raise InvalidPayloadError("El campo 'fileBase64' no contiene datos.")
    return UploadedDocument(
        raw_bytes=raw_bytes,
        declared_name=file_name,
        modality=modality,
    )
