"""Recursive conversion of parsed XML nodes into element descriptors."""

import logging
from typing import Any, Mapping, Optional, Union

from .extractors import get_attributes, get_children, get_tag_name
from .models import ElementDescriptor, TextNode

logger = logging.getLogger(__name__)


def visit_node(
    node: Any,
    index: int,
    converters: Mapping[str, Any],
    data: Any = None,
) -> Optional[Union[ElementDescriptor, str]]:
    """Visit an XML node recursively and convert it into an element descriptor.

    Text nodes are returned as plain strings. Nodes without a tag name
    (comments, processing instructions, entity references) and elements
    whose tag has no converter become None; in the latter case the whole
    subtree is skipped, registered descendants included, since only a
    converter leads to visiting children.

    Args:
        node: Parsed node (lxml node, TextNode or None)
        index: Position of the node among its siblings, used as props key
        converters: Map of tag names to converter functions
        data: Optional data passed unchanged to every converter

    Returns:
        ElementDescriptor, text, or None
    """
    if node is None:
        return None

    if isinstance(node, TextNode):
        return node.value

    tag_name = get_tag_name(node)
    if not tag_name:
        return None

    converter = converters.get(tag_name)
    if not callable(converter):
        logger.debug(f"No converter for <{tag_name}>, skipping subtree")
        return None

    attributes = get_attributes(node)
    result = converter(attributes, data)
    element_type = result.get("type")
    props = result.get("props")

    new_props = {"key": index}
    new_props.update(props or {})

    children = [
        visit_node(child, child_index, converters, data)
        for child_index, child in enumerate(get_children(node))
    ]

    return ElementDescriptor(type=element_type, props=new_props, children=children)
