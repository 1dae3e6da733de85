# No dependencies
from enum import Enum


class ParserState(Enum):
    """Where the command-line parser stands in ``color [position] ... [options] filename``."""
    BEFORE_FIRST_COLOR = 0  # Expect a (first) color value
    AFTER_FIRST_COLOR = 1  # Expect a (second) color or (first) position
    BEFORE_SECOND_COLOR = 2  # Expect a (second) color value (after first position)
    BEFORE_ANY = 3  # Expect anything (there are at least two stops in the list)
    BEFORE_ANY_EXCEPT_POSITION = 4  # Expect a color value, an option or the filename
    AFTER_OPTION = 5  # Expect another option or the filename
    BEFORE_OPTION_VALUE = 6  # Expect an option value
    END = 7  # Expect nothing, the filename has been provided


class GradientOption(str, Enum):
    SIZE = "size"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    REVERSE = "reverse"


# States in which an option or the filename may appear
OPTION_STATES = frozenset({
    ParserState.BEFORE_ANY,
    ParserState.BEFORE_ANY_EXCEPT_POSITION,
    ParserState.AFTER_OPTION,
})

# States in which a percent value may follow
POSITION_STATES = frozenset({
    ParserState.AFTER_FIRST_COLOR,
    ParserState.BEFORE_ANY,
})

COLOR_TRANSITIONS = {
    ParserState.BEFORE_FIRST_COLOR: ParserState.AFTER_FIRST_COLOR,
    ParserState.AFTER_FIRST_COLOR: ParserState.BEFORE_ANY,
    ParserState.BEFORE_SECOND_COLOR: ParserState.BEFORE_ANY,
    ParserState.BEFORE_ANY_EXCEPT_POSITION: ParserState.BEFORE_ANY,
    ParserState.BEFORE_ANY: ParserState.BEFORE_ANY,
}

POSITION_TRANSITIONS = {
    ParserState.AFTER_FIRST_COLOR: ParserState.BEFORE_SECOND_COLOR,
    ParserState.BEFORE_ANY: ParserState.BEFORE_ANY_EXCEPT_POSITION,
}
