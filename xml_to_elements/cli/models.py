"""Data models for CLI operations.

This module defines the exit codes and summary models used by the CLI.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from xml_to_elements.converter.models import ElementDescriptor


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Conversion completed and output was written
    - GENERAL_ERROR (1): Configuration, filesystem or unexpected errors
    - INVALID_INPUT (2): The XML could not be converted (invalid XML, or a
      root tag without converter)

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_INPUT = 2


@dataclass
class ConversionSummary:
    """Counts describing a converted element tree.

    Attributes:
        element_count: Number of element descriptors in the tree
        text_count: Number of text leaves
        skipped_count: Number of None children (unknown tags, comments, etc)
        max_depth: Depth of the deepest descriptor (root is 1)
    """
    element_count: int = 0
    text_count: int = 0
    skipped_count: int = 0
    max_depth: int = 0

    @classmethod
    def from_tree(cls, tree: Optional[Union[ElementDescriptor, str]]) -> "ConversionSummary":
        """Build a summary by walking a converted tree."""
        summary = cls()
        stack = [(tree, 1)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                summary.skipped_count += 1
            elif isinstance(node, str):
                summary.text_count += 1
            else:
                summary.element_count += 1
                summary.max_depth = max(summary.max_depth, depth)
                stack.extend((child, depth + 1) for child in node.children)
        return summary
