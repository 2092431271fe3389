"""Exception classes for the bounded package."""

from __future__ import annotations

from typing import Any


class BoundedError(Exception):
    """Base exception for all bounded package errors."""


class EncodeError(BoundedError):
    """Raised when a bounded value cannot be rendered as JSON text."""


class DecodeError(BoundedError):
    """Raised when a payload cannot be decoded into a bounded value.

    Parameters
    ----------
    message : str
        Description of the failure.
    field : str | None
        Name of the offending field, when the failure concerns one.
    payload : Any
        The raw input that failed to decode.

    Examples
    --------
    >>> str(DecodeError("missing required field", field="min"))
    "missing required field (field 'min')"
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        payload: Any = None,
    ) -> None:
        self.message = message
        self.field = field
        self.payload = payload
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.field is None:
            return self.message
        return f"{self.message} (field {self.field!r})"
