from .grammar import GradientCommandParser, ParsedCommand, parse_arguments
from .options import RenderOptions
from .main import main

__all__ = [
    "GradientCommandParser",
    "ParsedCommand",
    "parse_arguments",
    "RenderOptions",
    "main",
]
