"""
Tests for main CLI module.
"""

import pytest
from unittest.mock import patch

from services.rut.main import (
    EXIT_ERROR,
    EXIT_INVALID,
    EXIT_OK,
    create_parser,
    main,
)


class TestCLIParser:
    """Test command line argument parsing."""

    def test_parser_commands(self):
        """Test parser with each subcommand."""
        parser = create_parser()

        args = parser.parse_args(["dv", "12.345.678"])
        assert args.command == "dv"
        assert args.value == "12.345.678"

        args = parser.parse_args(["validate", "12.345.678-5"])
        assert args.command == "validate"

        args = parser.parse_args(["format", "123456785"])
        assert args.command == "format"
        assert args.form == "grouped-separated"

    def test_parser_optional_arguments(self):
        """Test parser with global options."""
        parser = create_parser()

        args = parser.parse_args([
            "--log-level", "DEBUG",
            "--log-format", "json",
            "format", "123456785",
            "--to", "bare-no-check",
        ])

        assert args.log_level == "DEBUG"
        assert args.log_format == "json"
        assert args.form == "bare-no-check"

    def test_parser_missing_command(self):
        """Test that a command is required."""
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args([])

    def test_parser_invalid_form(self):
        """Test parser with an unknown target format."""
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args(["format", "123456785", "--to", "dotted"])

    def test_parser_version(self):
        """Test version argument."""
        parser = create_parser()

        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])


class TestMainFunction:
    """Test main CLI entry point."""

    def test_dv(self, capsys):
        """Test check character calculation."""
        assert main(["dv", "12.345.678"]) == EXIT_OK
        assert capsys.readouterr().out == "5\n"

    def test_dv_k(self, capsys):
        """Test that K is printed uppercase."""
        assert main(["dv", "20347878"]) == EXIT_OK
        assert capsys.readouterr().out == "K\n"

    def test_validate_valid(self, capsys):
        """Test validation of a correct RUT."""
        assert main(["validate", "20.347.878-K"]) == EXIT_OK
        assert capsys.readouterr().out == "valid\n"

    def test_validate_invalid(self, capsys):
        """Test validation of a RUT with the wrong check character."""
        assert main(["validate", "12.345.678-4"]) == EXIT_INVALID
        assert capsys.readouterr().out == "invalid\n"

    @pytest.mark.parametrize(
        "form,expected",
        [
            ("grouped-separated", "12.345.678-5"),
            ("separated-only", "12345678-5"),
            ("grouped-only", "12345678"),
            ("bare", "12345678-5"),
            ("bare-no-check", "12345678"),
        ],
    )
    def test_format(self, capsys, form, expected):
        """Test conversion to every target format."""
        assert main(["format", "12345678-5", "--to", form]) == EXIT_OK
        assert capsys.readouterr().out == f"{expected}\n"

    def test_format_default(self, capsys):
        """Test that format defaults to dots and dash."""
        assert main(["format", "12345678-0"]) == EXIT_OK
        assert capsys.readouterr().out == "12.345.678-0\n"

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["dv", "012345678"], "RUT cannot start with zero"),
            (["validate", "12.34a.678-9"], "between 1 and 10 digits"),
            (["validate", "1"], "no check character"),
            (["dv", "20.347.878K"], "digits must be numeric"),
            (["format", "0-1"], "RUT cannot start with zero"),
        ],
    )
    def test_malformed_input(self, capsys, argv, message):
        """Test that errors are reported verbatim on stderr."""
        assert main(argv) == EXIT_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert message in captured.err

    @patch("services.rut.main.configure_logging")
    def test_logging_overrides(self, mock_configure, capsys):
        """Test that CLI log options are passed to the logging setup."""
        assert main(["--log-level", "DEBUG", "--log-format", "json", "dv", "1"]) == EXIT_OK

        mock_configure.assert_called_once_with("DEBUG", "json")
        assert capsys.readouterr().out == "9\n"

    @patch("services.rut.main.configure_logging")
    def test_logging_defaults(self, mock_configure):
        """Test that settings are used when no log options are given."""
        main(["dv", "1"])

        mock_configure.assert_called_once_with(None, None)

    @patch("services.rut.main.logger")
    def test_malformed_input_reported_once(self, mock_logger, capsys):
        """Test that rejected input is printed once and logged below warning."""
        assert main(["dv", "012345678"]) == EXIT_ERROR

        captured = capsys.readouterr()
        assert captured.err.count("RUT cannot start with zero") == 1
        mock_logger.error.assert_not_called()
        mock_logger.info.assert_called_once()
