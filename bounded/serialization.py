"""JSON encoding and decoding for bounded values.

The wire shape is a flat object with three numeric fields in fixed order::

    {"min": <number>, "max": <number>, "value": <number>}

Encoding and decoding are parameterized by primitive number codecs so that
callers decide whether numbers travel as integers or floats. Neither
direction re-checks ``min <= value <= max``: an encoded value is written
verbatim, and a decoded payload is trusted unless ``DecoderConfig.strict``
is set.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from bounded.config import DecoderConfig
from bounded.errors import DecodeError, EncodeError
from bounded.number import BoundedValue

logger = logging.getLogger(__name__)

FIELDS: tuple[str, str, str] = ("min", "max", "value")

NumberEncoder = Callable[[Any], Any]
NumberDecoder = Callable[[Any], Any]


def encode_number(n: int | float) -> int | float:
    """Encode a number as-is, keeping ints as ints and floats as floats."""
    return n


def encode_int(n: int | float) -> int:
    """Encode a number as a JSON integer."""
    return int(n)


def encode_float(n: int | float) -> float:
    """Encode a number as a JSON float."""
    return float(n)


def _check_number(raw: Any) -> int | float:
    # bool is a subclass of int but never a JSON number
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DecodeError(f"expected a number, got {type(raw).__name__}")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise DecodeError(f"expected a finite number, got {raw}")
    return raw


def decode_number(raw: Any) -> int | float:
    """Decode an int or a float.

    Raises
    ------
    DecodeError
        If ``raw`` is not a finite number.
    """
    return _check_number(raw)


def decode_int(raw: Any) -> int:
    """Decode an integer.

    Raises
    ------
    DecodeError
        If ``raw`` is not an integer.

    Examples
    --------
    >>> decode_int(42)
    42
    >>> decode_int(4.2)
    Traceback (most recent call last):
    ...
    bounded.errors.DecodeError: expected an integer, got float
    """
    number = _check_number(raw)
    if not isinstance(number, int):
        raise DecodeError(f"expected an integer, got {type(number).__name__}")
    return number


def decode_float(raw: Any) -> float:
    """Decode a float, widening integers.

    Raises
    ------
    DecodeError
        If ``raw`` is not a finite number.
    """
    return float(_check_number(raw))


def encode(
    bounded: BoundedValue[Any],
    number_encoder: NumberEncoder = encode_number,
) -> dict[str, Any]:
    """Encode a bounded value as a JSON-compatible object.

    Values are taken verbatim from the instance; nothing is re-clamped.

    Parameters
    ----------
    bounded : BoundedValue
        The value to encode.
    number_encoder : NumberEncoder
        Primitive encoder applied to ``min``, ``max`` and ``value``.

    Returns
    -------
    dict[str, Any]
        Object with keys ``min``, ``max``, ``value`` in that order.

    Examples
    --------
    >>> from bounded.number import between
    >>> encode(between(-43, 42).set(5))
    {'min': -43, 'max': 42, 'value': 5}
    >>> encode(between(0, 1), encode_float)
    {'min': 0.0, 'max': 1.0, 'value': 0.0}
    """
    return {
        "min": number_encoder(bounded.min),
        "max": number_encoder(bounded.max),
        "value": number_encoder(bounded.value),
    }


def _decode_field(
    payload: Mapping[str, Any], name: str, number_decoder: NumberDecoder
) -> Any:
    if name not in payload:
        raise DecodeError("missing required field", field=name, payload=payload)
    raw = payload[name]
    try:
        return number_decoder(raw)
    except DecodeError as exc:
        raise DecodeError(exc.message, field=name, payload=payload) from exc
    except (TypeError, ValueError) as exc:
        raise DecodeError(str(exc), field=name, payload=payload) from exc


def _check_order(lower: Any, upper: Any, current: Any, payload: Any) -> None:
    if lower > upper:
        raise DecodeError(
            f"min ({lower}) must not exceed max ({upper})",
            field="max",
            payload=payload,
        )
    if not lower <= current <= upper:
        raise DecodeError(
            f"value ({current}) outside bounds [{lower}, {upper}]",
            field="value",
            payload=payload,
        )


def decoder(
    number_decoder: NumberDecoder = decode_number,
    *,
    config: DecoderConfig | None = None,
    model: type[BoundedValue[Any]] = BoundedValue,
) -> Callable[[Any], BoundedValue[Any]]:
    """Build a decoder for the bounded value wire shape.

    Fields are looked up by name, so source order does not matter. Unless
    ``config.strict`` is set, the decoded numbers are used as-is: a payload
    whose value lies outside its bounds decodes successfully.

    Parameters
    ----------
    number_decoder : NumberDecoder
        Primitive decoder applied to each field. It signals failure by
        raising ``DecodeError``, ``TypeError`` or ``ValueError``.
    config : DecoderConfig | None
        Decoding options; defaults to ``DecoderConfig()``.
    model : type[BoundedValue]
        Model the decoded numbers are built into. Pass a parametrized
        model such as ``BoundedValue[int]`` to keep the number type for
        later updates.

    Returns
    -------
    Callable[[Any], BoundedValue]
        Function decoding a parsed JSON value.

    Raises
    ------
    DecodeError
        From the returned function, if the payload is not an object, a
        field is missing, a field fails to decode, or the decoded numbers
        are not valid for ``model``.

    Examples
    --------
    >>> decode = decoder(decode_int)
    >>> decode({"value": 100, "max": 42, "min": -43}).value
    100
    >>> decode = decoder(decode_int, model=BoundedValue[int])
    >>> decode({"min": 0, "max": 10, "value": 1}).inc().value
    2
    """
    config = config or DecoderConfig()

    def decode(payload: Any) -> BoundedValue[Any]:
        try:
            if not isinstance(payload, Mapping):
                raise DecodeError(
                    f"expected a JSON object, got {type(payload).__name__}",
                    payload=payload,
                )
            lower, upper, current = (
                _decode_field(payload, name, number_decoder) for name in FIELDS
            )
            try:
                bounded = model(min=lower, max=upper, value=current)
            except ValidationError as exc:
                raise DecodeError(
                    f"decoded numbers do not fit {model.__name__}: {exc}",
                    payload=payload,
                ) from exc
            if config.strict:
                _check_order(bounded.min, bounded.max, bounded.value, payload)
        except DecodeError as exc:
            logger.debug("Failed to decode bounded value: %s", exc)
            raise
        if not bounded.contains(bounded.value):
            logger.debug(
                "Accepted bounded value outside its bounds: %s not in [%s, %s]",
                bounded.value,
                bounded.min,
                bounded.max,
            )
        return bounded

    return decode


def to_json(
    bounded: BoundedValue[Any],
    number_encoder: NumberEncoder = encode_number,
) -> str:
    """Render a bounded value as JSON text.

    Raises
    ------
    EncodeError
        If a field is not representable in JSON (NaN or infinity).

    Examples
    --------
    >>> from bounded.number import between
    >>> to_json(between(-43, 42).set(5))
    '{"min": -43, "max": 42, "value": 5}'
    """
    try:
        return json.dumps(encode(bounded, number_encoder), allow_nan=False)
    except ValueError as exc:
        raise EncodeError(f"cannot encode {bounded!r} as JSON: {exc}") from exc


def from_json(
    text: str | bytes,
    number_decoder: NumberDecoder = decode_number,
    *,
    config: DecoderConfig | None = None,
    model: type[BoundedValue[Any]] = BoundedValue,
) -> BoundedValue[Any]:
    """Parse JSON text into a bounded value.

    Raises
    ------
    DecodeError
        If the text is not valid JSON or does not have the wire shape.

    Examples
    --------
    >>> from_json('{"min": 0.0, "max": 1.0, "value": 0.25}').value
    0.25
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Failed to parse bounded value JSON: %s", exc)
        raise DecodeError(f"malformed JSON: {exc}", payload=text) from exc
    return decoder(number_decoder, config=config, model=model)(payload)
