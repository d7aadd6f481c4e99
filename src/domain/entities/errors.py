"""
Domain Errors

Custom error classes raised by the insights domain.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(DomainError):
    """Raised when a caller hands the domain malformed numeric input."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message, {"errors": list(errors or [])})

    @property
    def errors(self) -> List[str]:
        return self.details["errors"]
