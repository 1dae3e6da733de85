"""Entry point of the ``tg`` command."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

from .. import config
from ..errors import GradientArgumentError, RenderError
from ..gradients import normalize_stops, render_gradient, reverse_stops
from ..gradients.stops import Stop
from ..utils.log import configure_logging
from .grammar import ParsedCommand, parse_arguments
from .usage import USAGE

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RENDER_ERROR = 1
EXIT_USAGE_ERROR = 2


def print_usage(file=None) -> None:
    print(USAGE, file=file if file is not None else sys.stdout)


def resolve_stops(command: ParsedCommand) -> List[Stop]:
    """Fill in missing positions, then mirror the stops when reversal was requested."""
    stops = normalize_stops(command.stops)
    if command.options.reverse:
        stops = reverse_stops(stops)
    log.debug("Resolved stops: %s", stops)
    return stops


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging(config.LOG_LEVEL)

    if not args:
        print_usage()
        return EXIT_OK

    try:
        command = parse_arguments(args)
    except GradientArgumentError as e:
        log.error("An error occurred when parsing the command line:\n%s\n", e)
        print_usage(sys.stderr)
        return EXIT_USAGE_ERROR

    options = command.options
    try:
        render_gradient(
            resolve_stops(command),
            options.filename,
            options.size,
            options.is_vertical,
        )
    except RenderError as e:
        log.error("%s", e)
        return EXIT_RENDER_ERROR
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
