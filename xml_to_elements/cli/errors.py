"""Typed exception hierarchy for CLI-related errors.

All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from xml_to_elements.converter.errors import XmlToElementsError


class CLIError(XmlToElementsError):
    """Base exception for all CLI-related errors."""
    pass


class InputError(CLIError):
    """Raised when the XML input file cannot be read."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Cannot read XML input {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class OutputError(CLIError):
    """Raised when the converted tree cannot be written."""

    def __init__(self, file_path: str, reason: Optional[str] = None):
        message = f"Cannot write output {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason
