"""
Shared error handling for the loyalty wallet services.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class AccessLayerException(Exception):
    """Base exception for wallet services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id_var.get(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class AuthenticationError(AccessLayerException):
    """Authentication-related errors."""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_ERROR", message, details)


class ValidationError(AccessLayerException):
    """Validation-related errors."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class ExternalServiceError(AccessLayerException):
    """External service errors.

    ``message`` is kept exactly as reported by the remote service so callers
    can surface it verbatim; ``service`` is recorded in the details.
    """

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details.setdefault("service", service)
        super().__init__("EXTERNAL_SERVICE_ERROR", message, details)
        self.service = service


class CredentialError(AccessLayerException):
    """Service-account credential could not be loaded."""

    def __init__(self, message: str = "Credential unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__("CREDENTIAL_ERROR", message, details)
