"""
Exceptions raised by the Cloud Print client.

Exception Hierarchy:
    CloudPrintError (base)
    ├── AuthenticationError  - ClientLogin did not return a usable token
    └── InvalidRequestError  - caller passed a malformed request (programmer error)

Only InvalidRequestError escapes the public client methods. Authentication
and transport failures are reported as responses with success=False.
"""

from typing import Optional, Dict, Any


class CloudPrintError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AuthenticationError(CloudPrintError):
    """
    The login endpoint was unreachable or its response had no Auth key.

    Raised by ClientLoginAuthenticator.ensure_token() and converted into a
    success=False response by the client before any operation request is sent.
    """

    def __init__(self, message: str = "Unable to obtain an auth token", username: Optional[str] = None):
        details = {"username": username} if username else None
        super().__init__(message, details)
        self.username = username


class InvalidRequestError(CloudPrintError):
    """
    A request could not be built from the arguments supplied.

    Raised before any network activity, e.g. submit() without content or
    without a content type.
    """
