"""Exceptions raised by tallykit."""

from __future__ import annotations

DIVISION_BY_ZERO_MESSAGE = "Cannot divide by zero"


class DivisionByZero(ZeroDivisionError):
    """Raised by :meth:`Calculator.divide` when the divisor equals zero.

    Subclasses :class:`ZeroDivisionError` so callers can catch either one.
    The message is always :data:`DIVISION_BY_ZERO_MESSAGE`.
    """

    def __init__(self) -> None:
        super().__init__(DIVISION_BY_ZERO_MESSAGE)
