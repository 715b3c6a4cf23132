"""Command-line interface for converting XML files.

This package provides the `xml-to-elements` CLI tool that loads a YAML
converter configuration, converts an XML file and writes the element
tree as JSON.
"""

from .convert_command import ConvertCommand
from .errors import CLIError, InputError, OutputError
from .models import ConversionSummary, ExitCode
from .output import OutputHandler

__all__ = [
    'ConvertCommand',
    'OutputHandler',
    'ExitCode',
    'ConversionSummary',
    'CLIError',
    'InputError',
    'OutputError',
]
