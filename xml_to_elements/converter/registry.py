"""Validation of converter maps."""

from collections.abc import Mapping
from typing import Any


def validate_converters(converters: Any) -> bool:
    """Validate a converter map.

    Args:
        converters: Value purported to map tag names to converter functions

    Returns:
        True when converters is a non-empty mapping whose values are all
        callable, False otherwise
    """
    if not isinstance(converters, Mapping):
        return False

    if not converters:
        return False

    return all(callable(converter) for converter in converters.values())
