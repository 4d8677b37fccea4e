"""Caller-safe failures raised inside the api layer."""

from __future__ import annotations

INTERNAL_ERROR_MESSAGE = "Internal server error."


class ReportedError(Exception):
    """A failure whose status code and message are safe to return verbatim.

    Anything raised that is *not* a ReportedError is collapsed to a
    generic 500 by the handler.
    """

    def __init__(self, status_code: int, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"ReportedError({self.status_code}, {self.message!r})"
