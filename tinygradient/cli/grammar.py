"""
Command-line grammar for ``tg``.

    color [position] color [position] [color [position]] ... [options] filename

The parser is a single pass over the tokens driven by ``ParserState``. Each
token is classified, in this order, as the filename (always the last token),
the value of a pending option, an option (``-``/``/`` prefix), a position
(``%`` suffix) or a color. The first bad token aborts the whole command.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .. import config
from ..colors import parse_color
from ..errors import GrammarError, OptionValueError, PathError
from ..gradients.stops import Stop
from ..types.parser_types import (
    COLOR_TRANSITIONS,
    OPTION_STATES,
    POSITION_STATES,
    POSITION_TRANSITIONS,
    GradientOption,
    ParserState,
)
from .options import RenderOptions, has_invalid_path_chars, lookup_option

log = logging.getLogger(__name__)

# Always matched with fullmatch
_UNSIGNED_INT = re.compile(r"[0-9]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


@dataclass(frozen=True)
class ParsedCommand:
    stops: Tuple[Stop, ...]
    options: RenderOptions


class GradientCommandParser:
    """
    Finite-state parser for one ``tg`` command line.

    Use :func:`parse_arguments` unless you need to inspect the parser state.
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens = list(tokens)
        self.state = ParserState.BEFORE_FIRST_COLOR
        self.stops: List[Stop] = []
        self.size = config.DEFAULT_SIZE
        self.is_vertical = False
        self.reverse = False
        self.filename: Optional[str] = None
        self._pending_option: Optional[GradientOption] = None
        self._min_position = 0.0

    def parse(self) -> ParsedCommand:
        if not self.tokens:
            raise GrammarError("The command line should contain at least two stop definitions and a filename.")

        last = len(self.tokens) - 1
        for index, token in enumerate(self.tokens):
            if index == last:
                self._take_filename(token)
            elif self.state is ParserState.BEFORE_OPTION_VALUE:
                self._take_option_value(token)
            elif token[:1] in ("-", "/"):
                self._take_option(token)
            elif token.endswith("%"):
                self._take_position(token, index)
            else:
                self._take_color(token)

        options = RenderOptions(
            filename=self.filename,
            size=self.size,
            is_vertical=self.is_vertical,
            reverse=self.reverse,
        )
        log.debug("Parsed %d stops with %s", len(self.stops), options)
        return ParsedCommand(tuple(self.stops), options)

    def _take_filename(self, token: str) -> None:
        if len(self.stops) < 2:
            raise GrammarError("The command line should contain at least two stop definitions.", token)
        if self.state not in OPTION_STATES:
            previous = self.tokens[-2]
            raise GrammarError(f"The value for option {previous} must be specified before the filename.", previous)
        if not token:
            raise PathError("The output filename must not be empty.", token)
        if has_invalid_path_chars(token):
            raise PathError(f"The specified path contains invalid characters: {token!r}.", token)

        self.filename = token
        self.state = ParserState.END

    def _take_option_value(self, token: str) -> None:
        if self._pending_option is GradientOption.SIZE:
            if not _UNSIGNED_INT.fullmatch(token):
                raise OptionValueError(f"Gradient size must be an integer, got {token}.", token)
            size = int(token)
            if not config.MIN_SIZE <= size <= config.MAX_SIZE:
                raise OptionValueError(
                    f"Gradient size must be comprised between {config.MIN_SIZE} and {config.MAX_SIZE} included.",
                    token,
                )
            self.size = size
        else:
            raise GrammarError(f"Option {self._pending_option} does not take a value: {token}.", token)

        self._pending_option = None
        self.state = ParserState.AFTER_OPTION

    def _take_option(self, token: str) -> None:
        if self.state not in OPTION_STATES:
            raise GrammarError(f"Unexpected option: {token}.", token)
        option = lookup_option(token)
        if option is None:
            raise GrammarError(f"Invalid option: {token}.", token)

        self.state = ParserState.AFTER_OPTION
        if option is GradientOption.SIZE:
            self._pending_option = option
            self.state = ParserState.BEFORE_OPTION_VALUE
        elif option is GradientOption.HORIZONTAL:
            self.is_vertical = False
        elif option is GradientOption.VERTICAL:
            self.is_vertical = True
        elif option is GradientOption.REVERSE:
            self.reverse = not self.reverse

    def _take_position(self, token: str, index: int) -> None:
        if self.state not in POSITION_STATES:
            raise GrammarError(f"A percent value can only follow a color: {token}.", token)

        number = token[:-1]
        if not _UNSIGNED_DECIMAL.fullmatch(number):
            raise OptionValueError(f"Invalid percent value: {token}.", token)
        position = float(number) / 100

        # 100% is only allowed right before the filename
        more_before_filename = index < len(self.tokens) - 2
        if position <= self._min_position or position > 1 or (position == 1 and more_before_filename):
            raise OptionValueError(
                f"Stop positions can only be increasing and contained between 0 and 1: {token}.",
                token,
            )

        self._min_position = position
        self.stops[-1] = self.stops[-1].at(position)
        self.state = POSITION_TRANSITIONS[self.state]

    def _take_color(self, token: str) -> None:
        next_state = COLOR_TRANSITIONS.get(self.state)
        if next_state is None:
            raise GrammarError(f"Unexpected color after options: {token}.", token)
        color, alpha = parse_color(token)
        self.stops.append(Stop(color, alpha=alpha))
        self.state = next_state


def parse_arguments(tokens: Sequence[str]) -> ParsedCommand:
    """
    Parse a ``tg`` command line into stops and render options.

    Args:
        tokens: Process arguments without the program name; the last one is
            the output filename

    Returns:
        ParsedCommand with the stops in command order (positions not yet
        resolved) and the render options

    Raises:
        GrammarError: A token is not allowed where it appears
        OptionValueError: Bad option value or stop position
        ColorLiteralError: Unrecognized color
        PathError: Invalid output filename
    """
    return GradientCommandParser(tokens).parse()


__all__ = [
    "ParsedCommand",
    "GradientCommandParser",
    "parse_arguments",
]
