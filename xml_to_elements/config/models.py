"""Data models for declarative converter configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class TagMapping:
    """Declarative description of how one XML tag is converted.

    Attributes:
        tag: XML tag name as written in the markup (e.g. "svg:rect")
        type: Output element type
        props: Static props added to every converted element
        attributes: Attribute handling; "all" passes every attribute through,
            "none" drops them, otherwise a dict of attribute name to prop name
        key_attribute: Attribute whose value, when present, replaces the
            sibling-index key

    Example:
        >>> TagMapping(tag="a", type="Link", attributes={"href": "to"})
    """
    tag: str
    type: str
    props: Dict[str, Any] = field(default_factory=dict)
    attributes: Any = "all"
    key_attribute: Optional[str] = None


@dataclass
class ConversionConfig:
    """Complete converter configuration loaded from YAML.

    Attributes:
        mappings: Tag mappings keyed by tag name, in file order
    """
    mappings: Dict[str, TagMapping] = field(default_factory=dict)
