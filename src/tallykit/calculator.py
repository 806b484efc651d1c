"""Stateless arithmetic operations.

The :class:`Calculator` holds no state between calls, so a single instance
can be shared freely. Results follow native Python numeric semantics: no
rounding, no overflow checks, and ``divide`` always performs true division.
"""

from __future__ import annotations

import logging
from typing import Union

from .errors import DivisionByZero

logger = logging.getLogger(__name__)

Number = Union[int, float]


class Calculator:
    """The four elementary binary arithmetic operations."""

    def add(self, a: Number, b: Number) -> Number:
        """Return ``a + b``."""

        return a + b

    def subtract(self, a: Number, b: Number) -> Number:
        """Return ``a - b``."""

        return a - b

    def multiply(self, a: Number, b: Number) -> Number:
        """Return ``a * b``."""

        return a * b

    def divide(self, a: Number, b: Number) -> float:
        """Return ``a / b``.

        Args:
            a: The dividend.
            b: The divisor. ``0``, ``0.0`` and ``-0.0`` are all rejected.

        Returns:
            The quotient as a float.

        Raises:
            DivisionByZero: If ``b`` equals zero.
        """

        if b == 0:
            logger.debug("refusing to divide %r by zero", a)
            raise DivisionByZero()
        return a / b
