"""
API Package
Contains FastAPI routes and models
"""

from api.routes import router
from api.models import (
    ScanRequest,
    ParseRequest,
    ScanResponse,
    HealthResponse,
    ErrorResponse
)

__all__ = [
    'router',
    'ScanRequest',
    'ParseRequest',
    'ScanResponse',
    'HealthResponse',
    'ErrorResponse'
]
