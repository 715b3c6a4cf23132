"""Declarative converter configuration.

Loads tag-to-element mappings from YAML and builds the converter
functions XMLToElements expects from them.
"""

from .config_loader import ConfigLoader
from .converter_factory import build_converter, build_converters
from .errors import ConfigError, FilesystemError
from .models import ConversionConfig, TagMapping

__all__ = [
    'ConfigLoader',
    'build_converter',
    'build_converters',
    'ConfigError',
    'FilesystemError',
    'ConversionConfig',
    'TagMapping',
]
