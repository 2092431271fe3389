"""Decoding configuration for bounded values."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DecoderConfig(BaseModel):
    """Configuration for decoding bounded values from JSON.

    Parameters
    ----------
    strict : bool
        Whether decoded payloads must satisfy ``min <= value <= max``.
        Off by default: a well-shaped payload is accepted as-is even when
        its value lies outside its bounds.

    Examples
    --------
    >>> config = DecoderConfig()
    >>> config.strict
    False
    >>> DecoderConfig(strict=True).strict
    True
    """

    strict: bool = Field(
        default=False, description="Reject payloads violating min <= value <= max"
    )
