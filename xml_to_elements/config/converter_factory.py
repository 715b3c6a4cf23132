"""Builds converter functions from declarative tag mappings."""

import logging
from typing import Any, Dict

from xml_to_elements.converter.xml_to_elements import Converter

from .models import ConversionConfig, TagMapping

logger = logging.getLogger(__name__)


def build_converter(mapping: TagMapping) -> Converter:
    """Create a converter function for a single tag mapping.

    The returned function starts from a copy of the static props, then adds
    attribute values according to ``mapping.attributes``. When
    ``mapping.key_attribute`` is present on the element, its value becomes
    the ``key`` prop.

    Args:
        mapping: Tag mapping to build the converter for

    Returns:
        Converter function accepting (attributes, data)
    """
    element_type = mapping.type
    static_props = dict(mapping.props)
    attribute_mode = mapping.attributes
    key_attribute = mapping.key_attribute

    def convert(attributes: Dict[str, str], data: Any = None) -> Dict[str, Any]:
        props = dict(static_props)

        if attribute_mode == 'all':
            props.update(attributes)
        elif isinstance(attribute_mode, dict):
            for name, prop in attribute_mode.items():
                if name in attributes:
                    props[prop] = attributes[name]

        if key_attribute and key_attribute in attributes:
            props['key'] = attributes[key_attribute]

        return {'type': element_type, 'props': props}

    convert.__name__ = f"convert_{mapping.tag.replace(':', '_').replace('-', '_')}"
    return convert


def build_converters(config: ConversionConfig) -> Dict[str, Converter]:
    """Create the converter map for every mapping in a configuration.

    Args:
        config: Loaded converter configuration

    Returns:
        Dict of tag name to converter function, ready for XMLToElements
    """
    converters = {tag: build_converter(mapping) for tag, mapping in config.mappings.items()}
    logger.debug(f"Built {len(converters)} converter(s) from configuration")
    return converters
