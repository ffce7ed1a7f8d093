"""Unit tests for fields.options."""

from pathlib import Path

import pytest

from fields.exceptions import ExitCode, UsageError
from fields.options import parse_arguments
from fields.ranges import FieldRange


class TestParseArguments:
    def test_no_arguments(self):
        options = parse_arguments([])
        assert options.help is False
        assert options.delimiters is None
        assert options.config_path is None
        assert options.ranges == []

    def test_ranges_kept_in_order(self):
        options = parse_arguments(["3:", "1", ":2"])
        assert options.ranges == [FieldRange(2, None), FieldRange(0, 0), FieldRange(0, 1)]

    @pytest.mark.parametrize("flag", ["-d", "--delimiters"])
    def test_delimiters(self, flag):
        assert parse_arguments([flag, ",;"]).delimiters == ",;"

    def test_delimiter_value_may_start_with_dash(self):
        assert parse_arguments(["-d", "-"]).delimiters == "-"

    def test_last_delimiter_flag_wins(self):
        assert parse_arguments(["-d", ",", "-d", ";"]).delimiters == ";"

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_recorded(self, flag):
        assert parse_arguments(["2", flag]).help is True

    def test_verbosity_counts(self):
        assert parse_arguments(["-v", "--verbose", "-v"]).verbosity == 3

    @pytest.mark.parametrize("token, level", [("-vv", 2), ("-vvv", 3)])
    def test_stacked_verbosity(self, token, level):
        assert parse_arguments([token, "1"]).verbosity == level

    def test_stacked_and_separate_verbosity_add_up(self):
        assert parse_arguments(["-vv", "-v"]).verbosity == 3

    @pytest.mark.parametrize("flag", ["-c", "--config"])
    def test_config_path(self, flag):
        assert parse_arguments([flag, "conf.yaml"]).config_path == Path("conf.yaml")


class TestUsageErrors:
    @pytest.mark.parametrize("flag", ["-d", "--delimiters"])
    def test_missing_delimiter_value(self, flag):
        with pytest.raises(UsageError, match=f"option '{flag}' requires argument <delim>"):
            parse_arguments(["1", flag])

    def test_empty_delimiter_value(self):
        with pytest.raises(UsageError, match="<delim> must be 1 character or more"):
            parse_arguments(["-d", ""])

    def test_missing_config_value(self):
        with pytest.raises(UsageError, match="requires argument <file>"):
            parse_arguments(["--config"])

    def test_empty_config_value(self):
        with pytest.raises(UsageError, match="must not be empty"):
            parse_arguments(["-c", ""])

    @pytest.mark.parametrize("token", ["-x", "--fields", "-", "-1", "-vx", "-V"])
    def test_invalid_option(self, token):
        with pytest.raises(UsageError, match=f"invalid option '{token}'"):
            parse_arguments([token])

    @pytest.mark.parametrize("token", ["0", "abc", "3:1", "1:2:3", ""])
    def test_invalid_field_range(self, token):
        with pytest.raises(UsageError, match=f"invalid field range '{token}'"):
            parse_arguments([token])

    def test_error_after_help_still_raised(self):
        with pytest.raises(UsageError):
            parse_arguments(["--help", "0"])

    def test_exit_code(self):
        assert UsageError("x").exit_code == ExitCode.USAGE == 1
