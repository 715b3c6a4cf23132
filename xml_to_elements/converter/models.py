"""Data models for the conversion engine.

All models use dataclasses, following the rest of the package. Element
descriptors compare structurally, so two conversions of the same input
are equal.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class TextNode:
    """A run of character data between element boundaries.

    lxml stores text on the surrounding elements (``.text`` and ``.tail``);
    the child extractor wraps each run in a TextNode so the visitor can
    tell text apart from elements without looking at a tag name.

    Attributes:
        value: The text exactly as parsed, whitespace included
    """
    value: str


@dataclass(frozen=True)
class ParseDiagnostic:
    """A single message reported by the XML parser.

    Attributes:
        severity: "warning", "error" or "fatal"
        message: Parser message text
        line: 1-based line number (0 when unknown)
        column: 1-based column number (0 when unknown)
    """
    severity: str
    message: str
    line: int = 0
    column: int = 0


@dataclass
class ElementDescriptor:
    """Framework-agnostic output element produced for one XML element.

    Attributes:
        type: Output element kind returned by the converter (opaque)
        props: Converter props merged over the synthetic sibling-index key
        children: Converted children; nested descriptors, text, or None

    Example:
        >>> ElementDescriptor("A", {"key": 0, "id": "1"}, ["hi", None])
    """
    type: Any
    props: Dict[str, Any] = field(default_factory=dict)
    children: List[Optional[Union["ElementDescriptor", str]]] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        """Return the tree as nested plain dicts, ready for JSON output."""
        return {
            "type": self.type,
            "props": dict(self.props),
            "children": [
                child.as_dict() if isinstance(child, ElementDescriptor) else child
                for child in self.children
            ],
        }
