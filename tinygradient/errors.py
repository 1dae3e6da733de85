"""
Error taxonomy for gradient command lines.

Every argument problem is a ``GradientArgumentError`` (a ``ValueError``) that
remembers the offending token. The first error aborts the whole command; the
shell reports it together with the usage text.
"""

from __future__ import annotations

from typing import Optional


class GradientArgumentError(ValueError):
    """Base class for everything wrong with a ``tg`` command line."""

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token


class GrammarError(GradientArgumentError):
    """A token that is not allowed in the current parser state."""


class OptionValueError(GradientArgumentError):
    """A malformed or out-of-range option value or stop position."""


class ColorLiteralError(GradientArgumentError):
    """A token that is not a recognized color."""


class PathError(GradientArgumentError):
    """An output filename containing characters the host rejects."""


class RenderError(RuntimeError):
    """The image encoder could not write the output file."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
