"""Convert XML documents into framework-agnostic element descriptor trees.

Each XML tag is mapped to a converter function returning the output
element's type and props; the tree visitor assembles the results into
nested {type, props, children} descriptors.

Example:
    >>> from xml_to_elements import XMLToElements
    >>> xml_to_elements = XMLToElements({
    ...     "p": lambda attrs, data: {"type": "Paragraph", "props": attrs},
    ... })
    >>> xml_to_elements.convert('<p class="lead">Hello</p>')
    ElementDescriptor(type='Paragraph', props={'key': 0, 'class': 'lead'}, children=['Hello'])
"""

__version__ = "0.1.0"

from .converter import (
    ElementDescriptor,
    InvalidConverterMapError,
    XMLToElements,
    XmlParseError,
    XmlToElementsError,
)

__all__ = [
    "XMLToElements",
    "ElementDescriptor",
    "XmlToElementsError",
    "InvalidConverterMapError",
    "XmlParseError",
]
