"""Line selection: split each input line into fields and write the configured ranges of them."""

import logging
from typing import Iterable, List, Sequence, TextIO, Tuple

from fields.config import Configuration
from fields.ranges import FieldRange


def _separator_table(delimiters: Iterable[str]) -> Tuple[str, dict]:
    """Map every delimiter onto a single one so that ``str.split`` can do the splitting."""
    separator = min(delimiters)
    return separator, str.maketrans({delimiter: separator for delimiter in delimiters})


def _split(line: str, separator: str, table: dict) -> List[str]:
    return [field for field in line.translate(table).split(separator) if field]


def tokenize(line: str, delimiters: Iterable[str]) -> List[str]:
    """Split *line* on runs of delimiter characters.

    Consecutive delimiters count as one separator, and leading or trailing delimiters do not
    produce empty fields.

    Examples:
        >>> tokenize("a  b\\tc", " \\t")  # ["a", "b", "c"]
        >>> tokenize("  ", " \\t")        # []
    """
    separator, table = _separator_table(delimiters)
    return _split(line, separator, table)


def select_fields(fields: Sequence[str], ranges: Iterable[FieldRange]) -> List[str]:
    """Return the fields picked by *ranges*, range by range, ascending within each range.

    Indices past the last field are skipped silently, and overlapping ranges repeat fields.
    """
    selected = []
    for field_range in ranges:
        for index in field_range.indices(len(fields)):
            selected.append(fields[index])
    return selected


def format_output_line(selected: Iterable[str]) -> str:
    """Every field is followed by a single space, and the line by a line feed."""
    return "".join(f"{field} " for field in selected) + "\n"


class LineSelector:
    """Streams lines from an input to an output, applying one configuration."""

    def __init__(self, configuration: Configuration):
        self.configuration = configuration
        self._separator, self._table = _separator_table(configuration.delimiters)
        self.lines_processed = 0

    def tokenize(self, line: str) -> List[str]:
        """Split *line* on the configured delimiters, see :func:`tokenize`."""
        return _split(line, self._separator, self._table)

    def select(self, line: str) -> str:
        """Turn one input line (without its terminator) into one output line (with it)."""
        return format_output_line(select_fields(self.tokenize(line), self.configuration.ranges))

    def run(self, input_stream: TextIO, output_stream: TextIO) -> int:
        """Process *input_stream* until end of input or the first empty line.

        A line made only of delimiters still produces an (empty) output line; a line with no
        characters at all stops processing, and nothing after it is read.

        Args:
            input_stream: Text stream split on line feeds
            output_stream: Text stream receiving one line per processed input line

        Returns:
            Number of lines processed
        """
        for line_number, raw_line in enumerate(input_stream, start=1):
            line = raw_line[:-1] if raw_line.endswith("\n") else raw_line
            if not line:
                logging.debug(f"Empty line at line {line_number}, stopping")
                break
            output_stream.write(self.select(line))
            self.lines_processed += 1
        else:
            logging.debug("End of input reached")

        output_stream.flush()
        logging.info(f"processed {self.lines_processed} lines")
        return self.lines_processed
