"""
Exception taxonomy raised across the dispatch boundary.
"""

from __future__ import annotations

import asyncio
from typing import Optional

__all__ = [
    "ContractError",
    "DecodeError",
    "DispatchCancelledError",
    "LiqPayError",
    "SerializationError",
    "TransportError",
]


class LiqPayError(Exception):
    """Base class for failures of a single dispatch."""


class SerializationError(LiqPayError):
    """Raised when a request cannot be turned into its wire form."""


class TransportError(LiqPayError):
    """Raised when the gateway could not be reached (connection, TLS, timeout)."""


class DecodeError(LiqPayError):
    """
    Raised when the HTTP body cannot be parsed into the bound response type.

    ``status_code`` and ``body`` keep the raw exchange so callers can inspect
    what the gateway actually returned.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DispatchCancelledError(asyncio.CancelledError):
    """
    Raised when an awaiting dispatch is cancelled during the network exchange.

    The gateway may or may not have processed the request, so the outcome is
    unknown. It subclasses :class:`asyncio.CancelledError` so the surrounding
    task is still marked as cancelled.
    """

    outcome_unknown = True

    def __init__(self, request_type: type) -> None:
        super().__init__(
            f"Dispatch of {request_type.__name__} was cancelled; gateway outcome is unknown"
        )
        self.request_type = request_type


class ContractError(TypeError):
    """Raised for invalid or missing request/response bindings."""
