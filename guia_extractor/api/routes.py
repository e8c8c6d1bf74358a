from typing import Any

from fastapi import APIRouter, Depends, Request

from guia_extractor.api.schemas import ErrorResponse, ExtractGuideRequest
from guia_extractor.processor.processor import Processor

router = APIRouter()


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.post(
    "/api/extractGuideData",
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def extract_guide_data(
    payload: ExtractGuideRequest,
    processor: Processor = Depends(get_processor),
) -> dict[str, Any]:
    """Extract shipment data from a base64 PDF, spreadsheet or image."""
    record = processor.process(payload.file_base64, payload.file_name)
    return record.data
