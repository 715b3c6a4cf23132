"""Public entry point for converting XML into element descriptor trees."""

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .errors import InvalidConverterMapError
from .models import ElementDescriptor
from .parser import parse
from .registry import validate_converters
from .visitor import visit_node

logger = logging.getLogger(__name__)

Converter = Callable[[Dict[str, str], Any], Mapping[str, Any]]


class XMLToElements:
    """Converts XML documents into framework-agnostic element trees.

    Each XML tag is mapped to a converter function that receives the
    element's attributes and optional data, and returns the output
    element's ``type`` and ``props``. Unknown tags are skipped together
    with their subtree.

    Example:
        >>> xml_to_elements = XMLToElements({
        ...     "a": lambda attrs, data: {"type": "A", "props": {"id": attrs["id"]}},
        ... })
        >>> xml_to_elements.convert('<a id="1">hi<b/></a>')
        ElementDescriptor(type='A', props={'key': 0, 'id': '1'}, children=['hi', None])
    """

    def __init__(self, converters: Mapping[str, Converter]):
        """Create an XML to element converter.

        Args:
            converters: Mapping of tag names to converter functions

        Raises:
            InvalidConverterMapError: If converters is not a non-empty
                mapping of callables
        """
        if not validate_converters(converters):
            raise InvalidConverterMapError()

        self._converters = MappingProxyType(dict(converters))
        logger.debug(f"Registered converters for tags: {', '.join(map(str, self._converters))}")

    @property
    def converters(self) -> Mapping[str, Converter]:
        """Read-only view of the registered converters."""
        return self._converters

    def convert(self, xml: Any, data: Any = None) -> Optional[Union[ElementDescriptor, str]]:
        """Convert an XML string into an element descriptor tree.

        Args:
            xml: XML document text
            data: Optional data passed to every converter call

        Returns:
            Descriptor tree for the document element, or None if xml is not
            a string, cannot be parsed, or its root tag has no converter
        """
        if not isinstance(xml, str):
            return None

        tree = parse(xml)
        if tree is None:
            return None

        return visit_node(tree.getroot(), 0, self._converters, data)
