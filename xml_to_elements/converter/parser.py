"""Strict XML parsing on top of lxml.

Every diagnostic the parser reports, warnings included, is treated as a
hard failure. parse_strict() raises XmlParseError with the collected
diagnostics; parse() turns that into a None result and a fixed warning
log message, which is what XMLToElements relies on.

A new parser is created for each call so concurrent conversions never
share parser state or error logs.
"""

import logging
from typing import Any, Iterable, List, Optional

from lxml import etree

from .errors import XmlParseError
from .models import ParseDiagnostic

logger = logging.getLogger(__name__)

ERR_INVALID_XML = "Unable to parse invalid XML input. Please input valid XML."


def _create_parser() -> etree.XMLParser:
    # Text is always fed as UTF-8, whatever the XML declaration says
    return etree.XMLParser(
        encoding="utf-8",
        recover=False,
        resolve_entities=False,
        no_network=True,
        remove_blank_text=False,
        remove_comments=False,
        huge_tree=True,
    )


def _collect_diagnostics(error_log: Iterable[Any]) -> List[ParseDiagnostic]:
    return [
        ParseDiagnostic(
            severity=entry.level_name.lower(),
            message=entry.message,
            line=entry.line or 0,
            column=entry.column or 0,
        )
        for entry in error_log
    ]


def parse_strict(xml: str) -> etree._ElementTree:
    """Parse an XML string, failing on any parser diagnostic.

    Args:
        xml: XML document text

    Returns:
        Parsed lxml element tree

    Raises:
        XmlParseError: If the parser reports any warning, error or fatal error
    """
    parser = _create_parser()
    try:
        root = etree.fromstring(xml.encode("utf-8"), parser)
    except UnicodeEncodeError as e:
        # Lone surrogates cannot be encoded and are never valid XML characters
        raise XmlParseError([ParseDiagnostic("fatal", str(e))]) from e
    except etree.XMLSyntaxError as e:
        diagnostics = _collect_diagnostics(e.error_log)
        if not diagnostics:
            line, column = e.position if e.position else (0, 0)
            diagnostics = [ParseDiagnostic("fatal", str(e), line or 0, column or 0)]
        raise XmlParseError(diagnostics) from e

    diagnostics = _collect_diagnostics(parser.error_log)
    if diagnostics:
        raise XmlParseError(diagnostics)

    if root is None:
        raise XmlParseError([ParseDiagnostic("fatal", "Document has no root element")])

    return root.getroottree()


def parse(xml: Any) -> Optional[etree._ElementTree]:
    """Parse an XML string, returning None instead of raising.

    Args:
        xml: XML document text; any non-string value yields None without
            a parse attempt

    Returns:
        Parsed lxml element tree, or None if the input is not a string or
        is not well-formed XML
    """
    if not isinstance(xml, str):
        return None

    try:
        return parse_strict(xml)
    except XmlParseError as e:
        logger.warning(ERR_INVALID_XML)
        for diagnostic in e.diagnostics:
            logger.debug(
                f"XML {diagnostic.severity} at line {diagnostic.line}, "
                f"column {diagnostic.column}: {diagnostic.message}"
            )

    return None
