from typing import Any

from guia_extractor.processor.models import DiscriminationResult, ExtractionRecord, Rejection

REJECTION_KEY = "error"
DEFAULT_REJECTION_REASON = "El documento no parece ser una guía de remisión válida."


def classify(parsed: dict[str, Any]) -> DiscriminationResult:
    """Tell a model rejection apart from extracted shipment data.

    Any object carrying the ``error`` key is a rejection, whatever else it
    holds. Everything else is accepted as a record without field checks.
    """
    if REJECTION_KEY in parsed:
        reason = parsed[REJECTION_KEY]
        if not isinstance(reason, str) or not reason.strip():
            reason = DEFAULT_REJECTION_REASON
        return Rejection(reason=reason)
    return ExtractionRecord(data=parsed)
