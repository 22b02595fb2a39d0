"""
API Routes - All API endpoints
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from loguru import logger

from api.models import ErrorResponse, ParseRequest, ScanRequest, ScanResponse
from exceptions import InvalidRequestError, ProcessingError, ReceiptScanError
from receipt_processor import ReceiptProcessor

# Create router
router = APIRouter()

# Shared processor; the OCR client is created on first scan
processor = ReceiptProcessor()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_processor() -> ReceiptProcessor:
    return processor


# ==================== UTILITY FUNCTIONS ====================

def error_response(error: ReceiptScanError) -> JSONResponse:
    """Render a scan error as {error, code} with the matching status"""
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(**error.to_dict()).model_dump(),
    )


# ==================== API ENDPOINTS ====================

@router.post("/receipts/scan", response_model=ScanResponse,
             responses=ERROR_RESPONSES, tags=["Receipts"])
async def scan_receipt(
    request: ScanRequest,
    scanner: ReceiptProcessor = Depends(get_processor),
):
    """
    **Scan a receipt image**

    Runs OCR on the image (Italian language hint) and extracts the total,
    the date and the merchant name.

    **Body:**
    - `image`: base64 image content; a `data:image/...;base64,` prefix is accepted

    **Returns:**
    - `amount`, `date`, `merchant` (each may be null)
    - `confidence` 0-100
    - `rawText` as recognized by OCR

    **Example:**
    ```bash
    curl -X POST http://localhost:8000/api/v1/receipts/scan \\
      -H "Content-Type: application/json" \\
      -d '{"image": "data:image/jpeg;base64,/9j/4AAQ..."}'
    ```
    """
    try:
        result = await run_in_threadpool(scanner.process_image, request.image)
        return ScanResponse(**result.to_dict())

    except ReceiptScanError as e:
        logger.error(f"Scan failed [{e.code}]: {e.message}")
        return error_response(e)
    except Exception as e:
        logger.exception("Unexpected error while scanning receipt")
        return error_response(ProcessingError(str(e)))


@router.post("/receipts/parse", response_model=ScanResponse,
             responses=ERROR_RESPONSES, tags=["Receipts"])
async def parse_receipt_text(
    request: ParseRequest,
    scanner: ReceiptProcessor = Depends(get_processor),
):
    """
    **Interpret OCR text without calling OCR**

    Useful for checking extraction on text captured elsewhere.

    **Example:**
    ```bash
    curl -X POST http://localhost:8000/api/v1/receipts/parse \\
      -H "Content-Type: application/json" \\
      -d '{"text": "Bar Centrale\\n15/03/2024\\nTOTALE € 12,50"}'
    ```
    """
    if not request.text or not request.text.strip():
        return error_response(InvalidRequestError("No text provided"))

    result = scanner.process_text(request.text)
    return ScanResponse(**result.to_dict())
