"""Exceptions raised by RescuEdge."""

from typing import Any, Dict, Optional


class RescuEdgeError(Exception):
    """Base exception for all RescuEdge errors."""

    status_code = 500

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ConfigurationError(RescuEdgeError):
    """Raised when a setting is invalid or a required credential is missing."""
    pass


class NotFoundError(RescuEdgeError):
    """Raised when a requested record does not exist."""

    status_code = 404


class RequestValidationError(RescuEdgeError):
    """Raised when API input fails validation."""

    status_code = 400


class AlertDeliveryError(RescuEdgeError):
    """Raised when an SMS alert cannot be delivered."""

    status_code = 502
