"""Typed exception hierarchy for XML conversion errors.

This module defines the base exception for the whole package plus the
errors raised by the conversion engine. Malformed XML is a data error and
never reaches callers of XMLToElements.convert(); XmlParseError is only
raised by the strict parser entry point.
"""

from typing import List

from .models import ParseDiagnostic


class XmlToElementsError(Exception):
    """Base exception for all xml-to-elements errors.

    Use this to catch any application-level error from the package.
    """
    pass


class InvalidConverterMapError(XmlToElementsError):
    """Raised when the converter map passed to XMLToElements is invalid."""

    def __init__(self, message: str = (
        "XMLToElements: Invalid value for converter map argument. "
        "Please use a mapping with functions as values."
    )):
        super().__init__(message)


class XmlParseError(XmlToElementsError):
    """Raised when strict XML parsing reports any diagnostic."""

    def __init__(self, diagnostics: List[ParseDiagnostic]):
        if diagnostics:
            first = diagnostics[0]
            message = f"Invalid XML: {first.message} (line {first.line}, column {first.column})"
            if len(diagnostics) > 1:
                message += f" and {len(diagnostics) - 1} more diagnostic(s)"
        else:
            message = "Invalid XML"
        super().__init__(message)
        self.diagnostics = diagnostics
