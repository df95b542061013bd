"""Configuration models for netscape_bookmarks."""

from .pydantic_config import (
    ConfigurationManager,
    ConverterConfig,
    ParserConfig,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "ConverterConfig",
    "ParserConfig",
    "format_config_error",
]
