"""Exceptions raised by workflow transports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .schemas import JsonResponse


class TransportError(Exception):
    """A request could not be completed or the backend rejected it.

    ``response`` holds whatever was decoded before the failure, if anything.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response: Optional["JsonResponse"] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class RequestTimeoutError(TransportError):
    """The request deadline elapsed before the backend answered."""
