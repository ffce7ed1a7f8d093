"""Exception classes and exit codes for fields."""


class ExitCode:
    """Standard exit codes for the fields application."""

    OK = 0  # Success, including an early stop on an empty line
    USAGE = 1  # Command line usage error
    CONFIG = 2  # Configuration file error
    IO = 3  # Failure reading input or writing output
    INTERNAL = 99  # Internal/unexpected error


class CliError(Exception):
    """Base class for command line interface errors."""

    exit_code = ExitCode.INTERNAL


class UsageError(CliError):
    """Error in command line usage (bad flag, missing value, bad range)."""

    exit_code = ExitCode.USAGE


class ConfigError(CliError):
    """Error in configuration file format or content."""

    exit_code = ExitCode.CONFIG


class InvalidFormatError(ValueError):
    """A field number or field range expression could not be parsed."""
