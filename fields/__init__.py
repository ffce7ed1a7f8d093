"""
fields - select fields from each line of text

Splits every input line on runs of delimiter characters and prints the requested
ranges of fields, e.g. ``fields 2:3 -d ,`` or ``fields :2 5:``.
"""

from .config import Configuration
from .ranges import FieldRange, parse_field_range
from .selector import LineSelector, select_fields, tokenize

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    "FieldRange",
    "LineSelector",
    "main",
    "parse_field_range",
    "select_fields",
    "tokenize",
]


def main(command_line_args=None):
    """Main entry point for the fields command"""
    from .cli import main as cli_main

    return cli_main(command_line_args)
