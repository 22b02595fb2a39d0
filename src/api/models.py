"""
API Models: Request and Response schemas
Using Pydantic for automatic validation and documentation

ScanResponse mirrors ScanResult.to_dict(): the raw OCR text is exposed as
`rawText` on the wire for compatibility with the mobile clients.
"""

from pydantic import BaseModel, Field
from typing import Optional


# ─── Request Models ───────────────────────────────────────────────────────────

class ScanRequest(BaseModel):
    """Receipt image to scan."""
    image: Optional[str] = Field(None, description="Base64 image, optionally a data URL")


class ParseRequest(BaseModel):
    """OCR text to interpret (no OCR call is made)."""
    text: Optional[str] = Field(None, description="Raw OCR text of a receipt")


# ─── Scan Models ──────────────────────────────────────────────────────────────

class ScanResponse(BaseModel):
    """Structured data extracted from a receipt."""
    amount: Optional[float] = Field(None, description="Total in euro", gt=0, lt=100000)
    date: Optional[str]     = Field(None, description="Transaction date (YYYY-MM-DD)")
    merchant: Optional[str] = Field(None, description="Merchant name")
    confidence: int         = Field(...,  description="Extraction confidence (0-100)", ge=0, le=100)
    raw_text: str           = Field(...,  alias="rawText", description="Full OCR text")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "amount": 12.5,
                "date": "2024-03-15",
                "merchant": "Bar Centrale",
                "confidence": 100,
                "rawText": "Bar Centrale\nP.IVA 01234567890\n15/03/2024\nTOTALE € 12,50",
            }
        }


# ─── Health & Error Models ────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    """Health check response."""
    status: str  = Field("healthy",          description="Health status")
    service: str = Field("receipt-scanner",  description="Service name")
    version: str = Field("1.0.0",            description="API version")


class ErrorResponse(BaseModel):
    """Error response."""
    error: str = Field(..., description="Error message")
    code: str  = Field(..., description="config_error | invalid_request | processing_error")
