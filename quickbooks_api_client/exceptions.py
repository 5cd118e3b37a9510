"""
Custom exception types for the QuickBooks Online API client.

These exceptions let callers tell apart bad input caught before any
network call, transport failures, error responses from the API or the
token endpoint, and response bodies that could not be decoded.
"""

from __future__ import annotations

from typing import Optional


class QuickBooksError(Exception):
    """Base exception for all QuickBooks client errors."""


class PreconditionError(QuickBooksError, ValueError):
    """Raised when caller input is rejected before a request is built."""


class TransportError(QuickBooksError):
    """Raised when the HTTP transport fails (connection, TLS, timeout).

    The underlying :mod:`requests` exception is chained as ``__cause__``.
    """


class QuickBooksAPIError(QuickBooksError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        *,
        url: Optional[str] = None,
        intuit_tid: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.url = url
        self.intuit_tid = intuit_tid
        target = f" for {url}" if url else ""
        super().__init__(f"{status_code} Error{target}: {body}")


class QuickBooksAuthError(QuickBooksAPIError):
    """Raised when the token endpoint rejects a refresh request."""


class DecodeError(QuickBooksError):
    """Raised when a response body is not the JSON shape expected."""
