"""YAML configuration loading and validation.

This module loads declarative converter maps from YAML files. Each entry
under ``converters`` describes the output type of one XML tag and how its
attributes become props; converter_factory turns the result into the
functions XMLToElements expects.
"""

import logging
from typing import Any, Dict

import yaml

from .errors import ConfigError, FilesystemError
from .models import ConversionConfig, TagMapping

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles converter configuration loading and validation.

    Configuration file structure:
        converters:
          a:
            type: Link
            props:
              className: link
            attributes:
              href: to
            key: id
          p:
            type: Paragraph
            attributes: none
    """

    # Required top-level config fields
    REQUIRED_TOP_LEVEL_FIELDS = {'converters'}

    # Recognised fields for each tag entry
    KNOWN_MAPPING_FIELDS = {'type', 'props', 'attributes', 'key'}

    # Keyword values accepted for the 'attributes' field
    ATTRIBUTE_MODES = {'all', 'none'}

    @classmethod
    def load(cls, config_path: str) -> ConversionConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ConversionConfig object with parsed configuration

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(
                config_path,
                'read',
                'Configuration file not found'
            )
        except PermissionError:
            raise FilesystemError(
                config_path,
                'read',
                'Permission denied'
            )
        except OSError as e:
            raise FilesystemError(
                config_path,
                'read',
                str(e)
            )

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            raise ConfigError("Configuration file is empty")

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        config = cls.parse(config_dict)
        logger.info(f"Loaded {len(config.mappings)} converter mapping(s) from {config_path}")
        return config

    @classmethod
    def parse(cls, config_dict: Dict[str, Any]) -> ConversionConfig:
        """Parse and validate a configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated ConversionConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        missing_fields = cls.REQUIRED_TOP_LEVEL_FIELDS - set(config_dict.keys())
        if missing_fields:
            raise ConfigError(
                f"Missing required fields: {', '.join(sorted(missing_fields))}"
            )

        converters_raw = config_dict.get('converters')
        if not isinstance(converters_raw, dict):
            raise ConfigError(
                "Field 'converters' must be a dictionary of tag names",
                'converters'
            )

        if not converters_raw:
            raise ConfigError(
                "At least one converter mapping is required",
                'converters'
            )

        mappings = {}
        for tag, entry in converters_raw.items():
            mapping = cls._parse_mapping(str(tag), entry)
            mappings[mapping.tag] = mapping

        return ConversionConfig(mappings=mappings)

    @classmethod
    def _parse_mapping(cls, tag: str, entry: Any) -> TagMapping:
        field_path = f'converters.{tag}'

        if not tag.strip():
            raise ConfigError("Tag name cannot be empty", 'converters')

        # Shorthand: "p: Paragraph"
        if isinstance(entry, str):
            entry = {'type': entry}

        if not isinstance(entry, dict):
            raise ConfigError(
                f"Mapping for tag '{tag}' must be a dictionary or a type name",
                field_path
            )

        unknown_fields = set(entry.keys()) - cls.KNOWN_MAPPING_FIELDS
        if unknown_fields:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(map(str, unknown_fields)))}",
                field_path
            )

        element_type = entry.get('type')
        if not isinstance(element_type, str) or not element_type.strip():
            raise ConfigError(
                f"Field 'type' for tag '{tag}' must be a non-empty string",
                f'{field_path}.type'
            )

        props = entry.get('props') or {}
        if not isinstance(props, dict):
            raise ConfigError(
                f"Field 'props' for tag '{tag}' must be a dictionary",
                f'{field_path}.props'
            )

        attributes = cls._parse_attributes(tag, entry.get('attributes', 'all'))

        key_attribute = entry.get('key')
        if key_attribute is not None:
            if not isinstance(key_attribute, str) or not key_attribute.strip():
                raise ConfigError(
                    f"Field 'key' for tag '{tag}' must be a non-empty attribute name",
                    f'{field_path}.key'
                )

        return TagMapping(
            tag=tag,
            type=element_type,
            props={str(name): value for name, value in props.items()},
            attributes=attributes,
            key_attribute=key_attribute
        )

    @classmethod
    def _parse_attributes(cls, tag: str, attributes: Any) -> Any:
        field_path = f'converters.{tag}.attributes'

        if attributes is None:
            return 'none'

        if isinstance(attributes, str):
            if attributes not in cls.ATTRIBUTE_MODES:
                raise ConfigError(
                    f"Field 'attributes' for tag '{tag}' must be one of "
                    f"{', '.join(sorted(cls.ATTRIBUTE_MODES))}, a list or a dictionary",
                    field_path
                )
            return attributes

        if isinstance(attributes, list):
            return {str(name): str(name) for name in attributes}

        if isinstance(attributes, dict):
            renames = {}
            for name, prop in attributes.items():
                if not isinstance(prop, str) or not prop.strip():
                    raise ConfigError(
                        f"Prop name for attribute '{name}' must be a non-empty string",
                        field_path
                    )
                renames[str(name)] = prop
            return renames

        raise ConfigError(
            f"Field 'attributes' for tag '{tag}' must be a string, list or dictionary",
            field_path
        )
