"""Command line scanning for fields.

The scan walks the arguments in order and stops at the first usage error. ``-d`` and ``-c`` take the
next argument verbatim, even when it starts with ``-``, so ``-d -`` selects a hyphen as delimiter.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from fields.exceptions import InvalidFormatError, UsageError
from fields.ranges import FieldRange, parse_field_range

HELP_FLAGS = ("-h", "--help")
DELIMITER_FLAGS = ("-d", "--delimiters")
CONFIG_FLAGS = ("-c", "--config")
VERBOSE_FLAGS = ("-v", "--verbose")

# -vv, -vvv, ... count one level per "v"
STACKED_VERBOSE = re.compile(r"-v+")


@dataclass
class ParsedOptions:
    """Everything gathered from the command line, before the configuration file is merged in."""

    help: bool = False
    verbosity: int = 0
    delimiters: Optional[str] = None
    config_path: Optional[Path] = None
    ranges: List[FieldRange] = field(default_factory=list)


def _flag_value(flag: str, arguments: Iterator[str], metavar: str) -> str:
    value = next(arguments, None)
    if value is None:
        raise UsageError(f"option '{flag}' requires argument {metavar}")
    return value


def parse_arguments(command_line_args: List[str]) -> ParsedOptions:
    """Scan command line arguments (without the program name).

    A help flag is only recorded; scanning continues, and any later usage error still wins over it.

    Args:
        command_line_args: Arguments in the order they were given

    Returns:
        The parsed options; ``ranges`` is empty when no range was given

    Raises:
        UsageError: On an unknown option, a missing or empty option value, or an invalid field range
    """
    options = ParsedOptions()
    arguments = iter(command_line_args)

    for argument in arguments:
        if argument in HELP_FLAGS:
            options.help = True
        elif argument in VERBOSE_FLAGS:
            options.verbosity += 1
        elif STACKED_VERBOSE.fullmatch(argument):
            options.verbosity += len(argument) - 1
        elif argument in DELIMITER_FLAGS:
            options.delimiters = _flag_value(argument, arguments, "<delim>")
            if not options.delimiters:
                raise UsageError("<delim> must be 1 character or more")
        elif argument in CONFIG_FLAGS:
            config_path = _flag_value(argument, arguments, "<file>")
            if not config_path:
                raise UsageError("<file> must not be empty")
            options.config_path = Path(config_path)
        elif argument.startswith("-"):
            raise UsageError(f"invalid option '{argument}'")
        else:
            try:
                options.ranges.append(parse_field_range(argument))
            except InvalidFormatError as e:
                raise UsageError(f"invalid field range '{argument}'") from e

    return options
