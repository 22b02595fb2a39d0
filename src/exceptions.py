"""Errors surfaced to API callers when a receipt cannot be scanned.

A scan that finds no amount, date or merchant is NOT an error; that is
reported through ScanResult.confidence.  These exceptions cover the cases
where no ScanResult can be produced at all.
"""


class ReceiptScanError(Exception):
    """Base exception for scan failures."""

    code = "processing_error"
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class ConfigurationError(ReceiptScanError):
    """The OCR call cannot be attempted (e.g. missing API key)."""

    code = "config_error"
    status_code = 500


class InvalidRequestError(ReceiptScanError):
    """The caller sent nothing to process."""

    code = "invalid_request"
    status_code = 400


class ProcessingError(ReceiptScanError):
    """The OCR provider failed or its response was unusable."""

    code = "processing_error"
    status_code = 500

    def to_dict(self) -> dict:
        return {"error": f"Failed to process receipt: {self.message}", "code": self.code}


class NoTextDetectedError(ProcessingError):
    """The OCR provider answered but found no text in the image."""

    def __init__(self, message: str = "No text detected in image"):
        super().__init__(message)
