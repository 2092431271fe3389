"""Immutable bounded number model.

Provides ``BoundedValue[T]``, a number held inside the closed interval
``[min, max]``. Every update returns a new instance. Updates come in two
tiers: clamping updates saturate out-of-range candidates to the nearest
bound, and validated ("try") updates return None instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", int, float)


class BoundedValue(BaseModel, Generic[T]):  # noqa: UP046 - Pydantic requires Generic[T]
    """A number constrained to an inclusive ``[min, max]`` interval.

    Instances are frozen. Build them with ``between``; the update methods
    derive new instances that keep the bounds and move the value.

    Attributes
    ----------
    min
        Lower bound (inclusive).
    max
        Upper bound (inclusive).
    value
        Current value, ``min <= value <= max``.

    Examples
    --------
    >>> volume = BoundedValue[int].between(10, 0)
    >>> (volume.min, volume.max, volume.value)
    (0, 10, 0)
    >>> volume.set(15).value
    10
    >>> volume.try_set(15) is None
    True
    >>> volume.inc_by(3).dec().value
    2
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    min: T
    max: T
    value: T

    @classmethod
    def between(cls, a: T, b: T) -> BoundedValue[T]:
        """Create a bounded value spanning ``a`` and ``b`` in either order.

        The current value starts at the lower bound. Equal endpoints are
        allowed and give a single admissible value.

        Parameters
        ----------
        a
            One endpoint of the interval.
        b
            The other endpoint of the interval.

        Returns
        -------
        BoundedValue[T]
            New bounded value with ``value == min``.

        Examples
        --------
        >>> b = BoundedValue.between(42, -43)
        >>> (b.min, b.max, b.value)
        (-43, 42, -43)
        """
        lower, upper = (a, b) if a <= b else (b, a)
        return cls(min=lower, max=upper, value=lower)

    def contains(self, candidate: T) -> bool:
        """Check if a candidate lies within the bounds (inclusive).

        Examples
        --------
        >>> b = BoundedValue.between(1, 5)
        >>> b.contains(1), b.contains(5), b.contains(6)
        (True, True, False)
        """
        return self.min <= candidate <= self.max

    def clamp(self, candidate: T) -> T:
        """Saturate a candidate to the nearest bound.

        Parameters
        ----------
        candidate
            The number to clamp.

        Returns
        -------
        T
            ``min`` if candidate is below it, ``max`` if candidate is above
            it, otherwise the candidate unchanged.

        Examples
        --------
        >>> b = BoundedValue.between(1, 5)
        >>> b.clamp(0), b.clamp(3), b.clamp(10)
        (1, 3, 5)
        """
        if candidate < self.min:
            return self.min
        if candidate > self.max:
            return self.max
        return candidate

    def _with_value(self, candidate: T) -> BoundedValue[T]:
        return type(self)(min=self.min, max=self.max, value=candidate)

    def set(self, candidate: T) -> BoundedValue[T]:
        """Replace the value, clamping the candidate into the bounds.

        Parameters
        ----------
        candidate
            The new value.

        Returns
        -------
        BoundedValue[T]
            New instance with the same bounds and the clamped value.
        """
        return self._with_value(self.clamp(candidate))

    def try_set(self, candidate: T) -> BoundedValue[T] | None:
        """Replace the value only if the candidate is within the bounds.

        Parameters
        ----------
        candidate
            The new value.

        Returns
        -------
        BoundedValue[T] | None
            New instance holding ``candidate``, or None if the candidate
            lies outside ``[min, max]``.

        Examples
        --------
        >>> b = BoundedValue.between(-43, 42)
        >>> b.try_set(43) is None
        True
        >>> b.try_set(42).value
        42
        """
        if not self.contains(candidate):
            return None
        return self._with_value(candidate)

    def map(self, func: Callable[[T], T]) -> BoundedValue[T]:
        """Apply ``func`` to the value and clamp the result.

        Examples
        --------
        >>> BoundedValue.between(0, 10).set(4).map(lambda v: v * 3).value
        10
        """
        return self.set(func(self.value))

    def try_map(self, func: Callable[[T], T]) -> BoundedValue[T] | None:
        """Apply ``func`` to the value; None if the result is out of bounds."""
        return self.try_set(func(self.value))

    def inc_by(self, n: T) -> BoundedValue[T]:
        """Add ``n`` to the value, clamping at ``max``."""
        return self.set(self.value + n)

    def dec_by(self, n: T) -> BoundedValue[T]:
        """Subtract ``n`` from the value, clamping at ``min``."""
        return self.set(self.value - n)

    def try_inc_by(self, n: T) -> BoundedValue[T] | None:
        """Add ``n`` to the value; None if the sum leaves the bounds."""
        return self.try_set(self.value + n)

    def try_dec_by(self, n: T) -> BoundedValue[T] | None:
        """Subtract ``n`` from the value; None if the difference leaves the bounds."""
        return self.try_set(self.value - n)

    def inc(self) -> BoundedValue[T]:
        """Add one to the value, clamping at ``max``."""
        return self.inc_by(1)

    def dec(self) -> BoundedValue[T]:
        """Subtract one from the value, clamping at ``min``."""
        return self.dec_by(1)

    def try_inc(self) -> BoundedValue[T] | None:
        """Add one to the value; None if the result exceeds ``max``."""
        return self.try_inc_by(1)

    def try_dec(self) -> BoundedValue[T] | None:
        """Subtract one from the value; None if the result is below ``min``."""
        return self.try_dec_by(1)


def between(a: T, b: T) -> BoundedValue[T]:
    """Create a bounded value spanning ``a`` and ``b``.

    Shorthand for ``BoundedValue.between(a, b)``.

    Examples
    --------
    >>> between(0.0, 1.0).set(1.5).value
    1.0
    """
    return BoundedValue.between(a, b)
