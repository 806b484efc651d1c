"""tallykit package initialization."""

import logging

from .calculator import Calculator
from .core import greet
from .errors import DivisionByZero

__all__ = ["Calculator", "DivisionByZero", "greet", "VERSION", "__version__"]
VERSION = "1.0.0"
__version__ = VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())
