"""Run configuration and the optional YAML configuration file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, List, Optional, Sequence, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fields.exceptions import ConfigError, InvalidFormatError
from fields.ranges import WHOLE_LINE, FieldRange, format_field_range, parse_field_range

yaml = YAML(typ="safe")

DEFAULT_DELIMITERS = " \t"

CONFIG_KEYS = {"delimiters", "fields"}


@dataclass(frozen=True)
class Configuration:
    """Delimiter set and ordered field ranges used for a whole run."""

    delimiters: FrozenSet[str]
    ranges: Tuple[FieldRange, ...] = (WHOLE_LINE,)

    def __post_init__(self):
        if not self.delimiters:
            raise ValueError("at least one delimiter character is required")
        if not self.ranges:
            raise ValueError("at least one field range is required")

    @classmethod
    def build(cls, delimiters: str = DEFAULT_DELIMITERS, ranges: Sequence[FieldRange] = ()) -> "Configuration":
        """Create a configuration from a delimiter string, falling back to the whole line when *ranges* is empty."""
        return cls(frozenset(delimiters), tuple(ranges) or (WHOLE_LINE,))

    def describe(self) -> str:
        """One-line summary used in debug logging."""
        delimiters = "".join(sorted(self.delimiters))
        ranges = " ".join(format_field_range(r) for r in self.ranges)
        return f"delimiters={delimiters!r} ranges=[{ranges}]"


class ConfigFile:
    """Defaults loaded from a YAML configuration file.

    Recognized keys are ``delimiters`` (a non-empty string) and ``fields`` (a range expression or a
    list of them). Plain integers are accepted as single field numbers.
    """

    def __init__(self):
        """Initialize an empty ConfigFile, contributing nothing until loaded."""
        self.delimiters: Optional[str] = None
        self.ranges: List[FieldRange] = []

    def load(self, file: Path):
        """Load defaults from a YAML file"""
        if not file.is_file():
            raise ConfigError(f"configuration file not found: {file}")
        try:
            with file.open(encoding="utf-8") as f:
                data = yaml.load(f)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise ConfigError(f"failed to load configuration file {file}: {e}") from e

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigError(f"{file}: expected a mapping at the top level")

        unknown = sorted(str(key) for key in data if key not in CONFIG_KEYS)
        if unknown:
            raise ConfigError(f"{file}: unknown keys: {', '.join(unknown)}")

        if "delimiters" in data:
            self.delimiters = self._read_delimiters(file, data["delimiters"])
        if "fields" in data:
            self.ranges = self._read_ranges(file, data["fields"])

    @staticmethod
    def _read_delimiters(file: Path, value: Any) -> str:
        if not isinstance(value, str):
            raise ConfigError(f"{file}: 'delimiters' must be a string")
        if not value:
            raise ConfigError(f"{file}: 'delimiters' must be 1 character or more")
        return value

    @staticmethod
    def _read_ranges(file: Path, value: Any) -> List[FieldRange]:
        entries = value if isinstance(value, list) else [value]
        ranges = []
        for entry in entries:
            # bool is a subclass of int, but "true" is never a field number
            if isinstance(entry, bool) or not isinstance(entry, (str, int)):
                raise ConfigError(f"{file}: field ranges must be strings or numbers, got {entry!r}")
            try:
                ranges.append(parse_field_range(str(entry)))
            except InvalidFormatError as e:
                raise ConfigError(f"{file}: invalid field range '{entry}'") from e
        return ranges


def build_configuration(
    delimiters: Optional[str],
    ranges: Sequence[FieldRange],
    config_file: Optional[ConfigFile] = None,
) -> Configuration:
    """Merge command line values over configuration file values over the built-in defaults.

    Args:
        delimiters: Delimiters given on the command line, or None
        ranges: Ranges given on the command line; when non-empty they replace the file's ranges
        config_file: Loaded configuration file, if any

    Returns:
        The immutable configuration for the run
    """
    file_delimiters = config_file.delimiters if config_file else None
    file_ranges = config_file.ranges if config_file else []

    return Configuration.build(
        delimiters or file_delimiters or DEFAULT_DELIMITERS,
        ranges or file_ranges,
    )
