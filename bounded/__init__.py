"""bounded - immutable numbers constrained to a closed interval.

Provides ``BoundedValue[T]``, clamping and validated updates over it, and a
JSON serialization pair with a fixed ``{"min", "max", "value"}`` shape.
"""

from __future__ import annotations

from bounded.config import DecoderConfig
from bounded.errors import BoundedError, DecodeError, EncodeError
from bounded.number import BoundedValue, between
from bounded.serialization import (
    decode_float,
    decode_int,
    decode_number,
    decoder,
    encode,
    encode_float,
    encode_int,
    encode_number,
    from_json,
    to_json,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "BoundedValue",
    "between",
    # Serialization
    "encode",
    "decoder",
    "to_json",
    "from_json",
    "encode_number",
    "encode_int",
    "encode_float",
    "decode_number",
    "decode_int",
    "decode_float",
    # Configuration
    "DecoderConfig",
    # Errors
    "BoundedError",
    "DecodeError",
    "EncodeError",
]
