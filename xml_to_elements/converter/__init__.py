"""XML to element descriptor conversion engine.

Key classes and functions:
    XMLToElements: Validates a converter map and converts XML strings
    ElementDescriptor: Generic {type, props, children} output node
    visit_node: Recursive visitor behind XMLToElements.convert()
    parse / parse_strict: lxml parsing with all diagnostics fatal
    validate_converters: Converter map validation predicate
"""

from .errors import InvalidConverterMapError, XmlParseError, XmlToElementsError
from .extractors import get_attributes, get_children, get_tag_name
from .models import ElementDescriptor, ParseDiagnostic, TextNode
from .parser import parse, parse_strict
from .registry import validate_converters
from .visitor import visit_node
from .xml_to_elements import Converter, XMLToElements

__all__ = [
    # Main interface
    "XMLToElements",
    "Converter",
    # Building blocks
    "visit_node",
    "parse",
    "parse_strict",
    "validate_converters",
    "get_attributes",
    "get_children",
    "get_tag_name",
    # Data models
    "ElementDescriptor",
    "TextNode",
    "ParseDiagnostic",
    # Errors
    "XmlToElementsError",
    "InvalidConverterMapError",
    "XmlParseError",
]
