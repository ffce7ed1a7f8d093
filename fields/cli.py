"""Command-line interface for fields.

Argument scanning, logging configuration, help rendering and the ``main()`` entry point live here. Range parsing is
in the ranges module and line processing in the selector module; errors surface as the exceptions defined in the
exceptions module and are mapped to exit codes here.
"""

import io
import logging
import os
import sys
import traceback
from typing import List, Optional, TextIO

from fields.config import ConfigFile, build_configuration
from fields.exceptions import CliError, ExitCode, UsageError
from fields.options import parse_arguments
from fields.selector import LineSelector

HELP_TEXT = """\
Usage: {prog} [options...] <fields...>
Prints selected fields from standard input to standard output.

Options:
-d --delimiters <delim>   Delimiters to split fields by. Fields are separated by
                          any number of delimiters. By default, fields are split
                          on whitespace (space and tab).
-c --config <file>        YAML file with default 'delimiters' and 'fields'.
-v --verbose              Increase verbosity (-v for INFO, -vv for DEBUG).
-h --help                 Show this help and exit.

Fields to select are given in the following formats:
  N    Picks the N'th field, counting from 1.
  N:   From the N'th field to the end of the line.
  N:M  From the N'th field to and including the M'th field.
  :M   From the start of the line until and including the M'th field.
"""


def setup_logging(verbosity_level: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity_level: 0=WARNING, 1=INFO, 2+=DEBUG
    """
    if verbosity_level == 0:
        level = logging.WARNING
    elif verbosity_level == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _byte_transparent(stream: TextIO) -> TextIO:
    """Make a standard stream split on line feeds only and pass undecodable bytes through unchanged."""
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8", errors="surrogateescape", newline="\n")
    return stream


def main(
    command_line_args: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    prog: str = "fields",
) -> int:
    """Main entry point for command line execution.

    Args:
        command_line_args: Command line arguments (defaults to sys.argv)
        stdin: Input text stream (defaults to the process's standard input)
        stdout: Output text stream (defaults to the process's standard output)
        prog: Program name shown in help and usage hints

    Returns:
        Exit code for the process
    """
    if command_line_args is None:
        command_line_args = sys.argv[1:]

    try:
        options = parse_arguments(command_line_args)
    except UsageError as e:
        setup_logging(0)
        logging.error(e)
        print(f"Try '{prog} --help'", file=sys.stderr)
        return e.exit_code

    setup_logging(options.verbosity)
    output_stream = stdout if stdout is not None else _byte_transparent(sys.stdout)

    if options.help:
        output_stream.write(HELP_TEXT.format(prog=prog))
        output_stream.flush()
        return ExitCode.OK

    try:
        config_file = None
        if options.config_path is not None:
            config_file = ConfigFile()
            config_file.load(options.config_path)
        configuration = build_configuration(options.delimiters, options.ranges, config_file)
        logging.debug(f"Configuration: {configuration.describe()}")

        input_stream = stdin if stdin is not None else _byte_transparent(sys.stdin)
        LineSelector(configuration).run(input_stream, output_stream)
    except CliError as e:
        logging.error(e)
        return e.exit_code
    except BrokenPipeError:
        # Interpreter shutdown flushes stdout again; point it at devnull so that flush cannot fail
        logging.debug("Output closed by reader")
        if stdout is None:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        return ExitCode.IO
    except OSError as e:
        logging.error(f"I/O error: {e}")
        return ExitCode.IO

    return ExitCode.OK


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except Exception:
        logging.error("internal error (use -vv for traceback)")
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL)


if __name__ == "__main__":
    run()
