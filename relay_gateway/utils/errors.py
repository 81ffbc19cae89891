"""
Error types raised by controllers and the cache store.

Each error knows the HTTP status it maps to; the handlers in main.py turn it
into a JSON body of the form {"error": message, **extra}.
"""
from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base exception for the gateway."""

    status_code: int = 500

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.message = message
        self.extra = extra or {}
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        return {**self.extra, "error": self.message}


class ClientInputError(GatewayError):
    """Missing or invalid request parameter."""

    status_code = 400


class RemoteGatewayError(GatewayError):
    """A fetched URL answered with something other than 200."""

    status_code = 502


class StoreNotFoundError(GatewayError):
    """The requested field does not exist in the group."""

    status_code = 404

    def __init__(self, message: str = "key not found", extra: Optional[Dict[str, Any]] = None):
        super().__init__(message, extra)


class OperationError(GatewayError):
    """Network, filesystem or store failure."""

    status_code = 500


class StoreError(OperationError):
    pass
