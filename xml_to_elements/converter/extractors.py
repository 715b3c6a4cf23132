"""Attribute, child and tag-name extraction from parsed XML nodes.

lxml keeps namespaces in Clark notation (``{uri}local``) and stores text on
the neighbouring elements. The helpers here present a DOM-like view
instead: qualified names as written in the markup, namespace declarations
as attributes, and text runs as TextNode children. None of them raise.
"""

from typing import Any, Dict, List, Optional

from lxml import etree

from .models import TextNode

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def _is_element(node: Any) -> bool:
    """Check whether node is an lxml element with a string tag."""
    return isinstance(node, etree._Element) and isinstance(node.tag, str)


def _qualified_name(clark_name: str, prefix: Optional[str]) -> str:
    local_name = etree.QName(clark_name).localname
    return f"{prefix}:{local_name}" if prefix else local_name


def _attribute_prefix(node: etree._Element, namespace: Optional[str]) -> Optional[str]:
    if not namespace:
        return None
    if namespace == XML_NAMESPACE:
        return "xml"
    # Unprefixed attributes are never in the default namespace
    for prefix, uri in node.nsmap.items():
        if prefix and uri == namespace:
            return prefix
    return None


def get_tag_name(node: Any) -> Optional[str]:
    """Get the qualified tag name of a node.

    Args:
        node: Parsed node (lxml node, TextNode or None)

    Returns:
        Tag name as written in the markup (e.g. "svg:rect"), or None for
        text, comments, processing instructions and entity references
    """
    if not _is_element(node):
        return None
    return _qualified_name(node.tag, node.prefix)


def get_attributes(node: Any) -> Dict[str, str]:
    """Get map of attribute names to values for a node.

    Namespace declarations made on the node itself are included as
    ``xmlns`` / ``xmlns:prefix`` entries, ahead of the regular attributes.
    Values are returned as the strings the parser produced.

    Args:
        node: Parsed node (lxml node, TextNode or None)

    Returns:
        Dict of attribute name to value; empty for non-element nodes
    """
    if not _is_element(node):
        return {}

    result: Dict[str, str] = {}

    parent = node.getparent()
    inherited = parent.nsmap if parent is not None else {}
    for prefix, uri in node.nsmap.items():
        if inherited.get(prefix) != uri:
            result[f"xmlns:{prefix}" if prefix else "xmlns"] = uri

    for name, value in node.attrib.items():
        namespace = etree.QName(name).namespace
        result[_qualified_name(name, _attribute_prefix(node, namespace))] = value

    return result


def get_children(node: Any) -> List[Any]:
    """Get the ordered direct children of a node.

    Text runs become TextNode entries: the node's leading text first, then
    each child followed by its tail text. Whitespace-only runs are kept.

    Args:
        node: Parsed node (lxml node, TextNode or None)

    Returns:
        List of child nodes in document order; empty for non-element nodes
    """
    if not _is_element(node):
        return []

    children: List[Any] = []
    if node.text:
        children.append(TextNode(node.text))
    for child in node:
        children.append(child)
        if child.tail:
            children.append(TextNode(child.tail))
    return children
