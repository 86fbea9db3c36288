# chromalogo/errors.py
"""
Exception taxonomy for chromalogo.

Every error raised on purpose by the library derives from
:class:`ChromaLogoError`, so callers (and the CLI) can catch one type. Each
subclass also inherits from the closest builtin exception so code that already
catches ``ValueError`` / ``LookupError`` keeps working.

Python 3.9+ compatible.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ChromaLogoError",
    "InvalidPaletteError",
    "PaletteNotFoundError",
    "FontNotFoundError",
    "InvalidInputError",
    "InvalidConfigurationError",
]


class ChromaLogoError(Exception):
    """Base class for all chromalogo errors."""


class InvalidPaletteError(ChromaLogoError, ValueError):
    """Raised when a palette is empty or contains a malformed color."""

    def __init__(self, palette: Any, reason: str = "") -> None:
        self.palette = palette
        msg = f"Invalid palette: {palette!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class PaletteNotFoundError(InvalidPaletteError):
    """Raised when a palette name is not present in the palette table."""

    def __init__(self, palette: str) -> None:
        self.palette = palette
        # Skip InvalidPaletteError's message formatting.
        ChromaLogoError.__init__(self, f"Unknown palette: {palette}")


class FontNotFoundError(ChromaLogoError, LookupError):
    """Raised when the glyph generator does not know the requested font."""

    def __init__(self, font: str) -> None:
        self.font = font
        super().__init__(f"Font not found: {font}")


class InvalidInputError(ChromaLogoError, ValueError):
    """Raised for empty or blank text where visible text is required."""

    def __init__(self, message: str, input_value: Any = None) -> None:
        self.input = input_value
        super().__init__(f"Invalid input: {message}")


class InvalidConfigurationError(ChromaLogoError, ValueError):
    """Raised when a numeric or enumerated option is out of its domain."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Invalid configuration for '{option}': {message}")
