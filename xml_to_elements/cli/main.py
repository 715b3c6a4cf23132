"""Main CLI entry point for the xml-to-elements command.

This module provides the Typer application that converts an XML file into
a JSON element descriptor tree using converters declared in a YAML file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from xml_to_elements import __version__
from xml_to_elements.cli.convert_command import ConvertCommand
from xml_to_elements.cli.output import OutputHandler

app = typer.Typer(
    name="xml-to-elements",
    help="Convert XML documents into framework-agnostic element descriptor trees.",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'xml_to_elements' namespace logger to avoid
    affecting third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("xml_to_elements")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"xml-to-elements_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"xml-to-elements version {__version__}")
        raise typer.Exit()


@app.command()
def main_command(
    xml_file: str = typer.Argument(
        ...,
        help="XML file to convert",
        metavar="XML_FILE",
    ),
    config: str = typer.Option(
        ...,
        "--config",
        "-c",
        help="YAML file mapping tag names to output elements",
        metavar="CONFIG",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write JSON to this file instead of stdout",
        metavar="FILE",
    ),
    indent: int = typer.Option(
        2,
        "--indent",
        help="JSON indentation; 0 writes compact JSON",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Convert an XML file into a JSON element descriptor tree.

    \b
    EXAMPLE:
      xml-to-elements page.xml --config converters.yaml
      xml-to-elements page.xml -c converters.yaml -o page.json --indent 0
    """
    _configure_logging(verbosity, logdir)

    output_handler = OutputHandler(verbosity=verbosity, no_color=no_color)
    output_handler.info(f"Converting {xml_file} with {config}")

    convert_cmd = ConvertCommand(config_path=config, output_handler=output_handler)
    exit_code = convert_cmd.run(
        xml_path=xml_file,
        output_path=output,
        indent=indent if indent > 0 else None,
    )

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m xml_to_elements.cli.main
if __name__ == "__main__":
    main()
