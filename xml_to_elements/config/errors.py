"""Typed exception hierarchy for converter configuration errors.

All exceptions inherit from XmlToElementsError and include descriptive
messages with context to help with debugging.
"""

from typing import Optional

from xml_to_elements.converter.errors import XmlToElementsError


class ConfigError(XmlToElementsError):
    """Raised when converter configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FilesystemError(XmlToElementsError):
    """Raised when filesystem operations fail (read, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
