"""Convert command orchestration for CLI.

This module provides the ConvertCommand class that loads a converter
configuration, converts one XML file, and writes the resulting element
tree as JSON.
"""

import json
import logging
import os
from typing import Optional

from xml_to_elements.config.config_loader import ConfigLoader
from xml_to_elements.config.converter_factory import build_converters
from xml_to_elements.config.errors import ConfigError, FilesystemError
from xml_to_elements.converter.errors import InvalidConverterMapError
from xml_to_elements.converter.models import ElementDescriptor
from xml_to_elements.converter.xml_to_elements import XMLToElements

from .errors import CLIError, InputError, OutputError
from .models import ConversionSummary, ExitCode
from .output import OutputHandler

logger = logging.getLogger(__name__)


class ConvertCommand:
    """Orchestrates a single XML to element tree conversion.

    The workflow:
        1. Load the YAML converter configuration
        2. Build converter functions and the XMLToElements instance
        3. Read the XML file
        4. Convert it and serialize the tree to JSON
        5. Write JSON to stdout or the output file
        6. Warn about nodes that were left out of the tree
        7. Return appropriate exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> cmd = ConvertCommand("converters.yaml", output_handler=output)
        >>> exit_code = cmd.run("page.xml")
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config_path: str,
        output_handler: Optional[OutputHandler] = None,
    ):
        """Initialize convert command.

        Args:
            config_path: Path to converter configuration YAML file
            output_handler: OutputHandler for terminal output (optional)
        """
        self.config_path = config_path
        self.output_handler = output_handler or OutputHandler()

    def run(
        self,
        xml_path: str,
        output_path: Optional[str] = None,
        indent: Optional[int] = 2,
    ) -> ExitCode:
        """Execute the conversion.

        Translates exceptions to exit codes; nothing is raised to the caller.

        Args:
            xml_path: Path to the XML file to convert
            output_path: File to write JSON to (stdout when None)
            indent: JSON indentation (compact output when None)

        Returns:
            ExitCode describing the outcome
        """
        try:
            config = ConfigLoader.load(self.config_path)
            xml_to_elements = XMLToElements(build_converters(config))

            xml = self._read_xml(xml_path)
            self.output_handler.debug(f"Read {len(xml)} characters from {xml_path}")

            result = xml_to_elements.convert(xml)
            if not isinstance(result, ElementDescriptor):
                logger.warning(f"No element tree produced for {xml_path}")
                self.output_handler.error(
                    f"Could not convert {xml_path}: invalid XML or no converter for the root element"
                )
                return ExitCode.INVALID_INPUT

            self._write_output(result, output_path, indent)

            summary = ConversionSummary.from_tree(result)
            if summary.skipped_count > 0:
                self.output_handler.warning(
                    f"{summary.skipped_count} node(s) in {xml_path} had no converter and were left out"
                )
            self.output_handler.print_summary(summary)
            return ExitCode.SUCCESS

        except (ConfigError, InvalidConverterMapError) as e:
            logger.error(f"Configuration error: {e}")
            self.output_handler.error(f"Configuration error: {e}")
            return ExitCode.GENERAL_ERROR

        except FilesystemError as e:
            logger.error(f"Filesystem error: {e}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except CLIError as e:
            logger.error(f"CLI error: {e}")
            self.output_handler.error(f"Error: {e}")
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during conversion")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def _read_xml(self, xml_path: str) -> str:
        try:
            with open(xml_path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            raise InputError(xml_path, 'File not found')
        except UnicodeDecodeError:
            raise InputError(xml_path, 'File is not valid UTF-8')
        except OSError as e:
            raise InputError(xml_path, str(e))

    def _write_output(
        self,
        result: ElementDescriptor,
        output_path: Optional[str],
        indent: Optional[int],
    ) -> None:
        text = json.dumps(result.as_dict(), indent=indent, ensure_ascii=False, default=str)

        if output_path is None:
            self.output_handler.print_data(text)
            return

        output_dir = os.path.dirname(output_path)
        try:
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(text)
                f.write('\n')
        except OSError as e:
            raise OutputError(output_path, str(e))

        logger.info(f"Wrote element tree to {output_path}")
        self.output_handler.success(f"Wrote element tree to {output_path}")
