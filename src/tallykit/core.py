"""Core functionality for tallykit."""

from __future__ import annotations


def greet(name: str) -> str:
    """Return a friendly greeting for the given name."""

    return f"Hello, {name}!"
