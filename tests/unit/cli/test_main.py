"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import json
import logging
from unittest.mock import MagicMock, Mock, patch

import pytest
from typer.testing import CliRunner

from xml_to_elements import __version__
from xml_to_elements.cli.main import _configure_logging, app
from xml_to_elements.cli.models import ExitCode


runner = CliRunner()

CONFIG = """
converters:
  a:
    type: A
    attributes:
      id: id
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "converters.yaml"
    path.write_text(CONFIG)
    return path


@pytest.fixture
def xml_file(tmp_path):
    path = tmp_path / "input.xml"
    path.write_text('<a id="1">hi<b/></a>', encoding="utf-8")
    return path


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    def test_verbosity_0_sets_warning_level(self):
        """Verbosity 0 sets logging to WARNING level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(0)

            mock_get_logger.assert_called_with("xml_to_elements")
            mock_app_logger.setLevel.assert_called_with(logging.WARNING)

    def test_verbosity_1_sets_info_level(self):
        """Verbosity 1 sets logging to INFO level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(1)

            mock_app_logger.setLevel.assert_called_with(logging.INFO)

    def test_verbosity_2_sets_debug_level(self):
        """Verbosity 2+ sets logging to DEBUG level."""
        with patch('logging.getLogger') as mock_get_logger:
            mock_app_logger = MagicMock()
            mock_get_logger.return_value = mock_app_logger

            _configure_logging(2)

            mock_app_logger.setLevel.assert_called_with(logging.DEBUG)

    def test_logdir_creates_log_file(self, tmp_path):
        """--logdir adds a file handler writing into the directory."""
        log_dir = tmp_path / "logs"

        _configure_logging(1, str(log_dir))

        log_files = list(log_dir.glob("xml-to-elements_*.log"))
        assert len(log_files) == 1


class TestMainCommand:
    """Test cases for the main command."""

    def test_version(self):
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"xml-to-elements version {__version__}" in result.output

    def test_converts_to_stdout(self, tmp_path, config_file):
        """JSON tree is written to stdout by default."""
        xml_file = tmp_path / "plain.xml"
        xml_file.write_text('<a id="1">hi</a>', encoding="utf-8")

        result = runner.invoke(app, [str(xml_file), "--config", str(config_file)])

        assert result.exit_code == ExitCode.SUCCESS
        assert json.loads(result.stdout) == {
            "type": "A",
            "props": {"key": 0, "id": "1"},
            "children": ["hi"],
        }

    def test_converts_to_output_file(self, tmp_path, config_file, xml_file):
        """--output writes JSON to a file."""
        output_file = tmp_path / "out" / "tree.json"

        result = runner.invoke(app, [
            str(xml_file), "-c", str(config_file), "-o", str(output_file), "--indent", "0",
        ])

        assert result.exit_code == ExitCode.SUCCESS
        content = output_file.read_text(encoding="utf-8")
        assert content == '{"type": "A", "props": {"key": 0, "id": "1"}, "children": ["hi", null]}\n'

    def test_invalid_xml_exit_code(self, tmp_path, config_file):
        """Unparseable XML exits with INVALID_INPUT."""
        xml_file = tmp_path / "bad.xml"
        xml_file.write_text("not xml at all <<<")

        result = runner.invoke(app, [str(xml_file), "-c", str(config_file)])

        assert result.exit_code == ExitCode.INVALID_INPUT

    def test_missing_config_exit_code(self, tmp_path, xml_file):
        """Missing configuration exits with GENERAL_ERROR."""
        result = runner.invoke(app, [str(xml_file), "-c", str(tmp_path / "missing.yaml")])

        assert result.exit_code == ExitCode.GENERAL_ERROR

    def test_config_option_is_required(self, xml_file):
        """--config must be given."""
        result = runner.invoke(app, [str(xml_file)])

        assert result.exit_code != 0

    @patch('xml_to_elements.cli.main.ConvertCommand')
    @patch('xml_to_elements.cli.main.OutputHandler')
    def test_passes_options_to_command(self, mock_output, mock_convert_cmd):
        """CLI options are forwarded to ConvertCommand."""
        mock_instance = Mock()
        mock_instance.run.return_value = ExitCode.SUCCESS
        mock_convert_cmd.return_value = mock_instance

        result = runner.invoke(app, [
            "page.xml", "-c", "conf.yaml", "-o", "out.json", "--indent", "4",
            "-v", "2", "--no-color",
        ])

        assert result.exit_code == ExitCode.SUCCESS
        mock_output.assert_called_once_with(verbosity=2, no_color=True)
        mock_convert_cmd.assert_called_once_with(
            config_path="conf.yaml",
            output_handler=mock_output.return_value,
        )
        mock_instance.run.assert_called_once_with(
            xml_path="page.xml",
            output_path="out.json",
            indent=4,
        )

    @patch('xml_to_elements.cli.main.ConvertCommand')
    @patch('xml_to_elements.cli.main.OutputHandler')
    def test_indent_zero_means_compact(self, mock_output, mock_convert_cmd):
        """--indent 0 requests compact JSON."""
        mock_convert_cmd.return_value.run.return_value = ExitCode.SUCCESS

        runner.invoke(app, ["page.xml", "-c", "conf.yaml", "--indent", "0"])

        mock_convert_cmd.return_value.run.assert_called_once_with(
            xml_path="page.xml",
            output_path=None,
            indent=None,
        )
