"""
Pydantic-based configuration for netscape_bookmarks.

Only the parser has tunable behaviour; serializer output is canonical and
therefore not configurable. Configuration can be built in code or loaded
from a TOML or JSON file through ConfigurationManager.
"""

import json
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

import toml
from pydantic import BaseModel, Field, ValidationError

from ..utils.error_handler import ConfigurationError


class ParserConfig(BaseModel):
    """Settings for loading and walking bookmark documents."""

    tree_builder: Literal["html5lib"] = Field(
        default="html5lib",
        description="BeautifulSoup tree builder used to load documents",
        json_schema_extra={
            "error_msg": "Tree builder must be 'html5lib'. Entry resolution relies on "
            "the <DT>/<p> closing rules html5lib applies the way browsers do."
        },
    )
    max_depth: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum folder nesting depth (None for unlimited)",
        json_schema_extra={
            "error_msg": "Max depth must be a positive integer or omitted. "
            "Set a limit when parsing documents from untrusted sources."
        },
    )


class ConverterConfig(BaseModel):
    """Top-level configuration model."""

    parser: ParserConfig = Field(default_factory=ParserConfig)


class ConfigurationManager:
    """Loads and validates configuration from a file or defaults."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)

        Raises:
            ConfigurationError: If the file cannot be loaded or is invalid
        """
        config_data: Dict[str, Any] = {}
        if config_path is not None:
            config_data = self._load_config_file(Path(config_path))

        try:
            self._config = ConverterConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

    @property
    def config(self) -> ConverterConfig:
        """Get the current configuration."""
        return self._config


def format_config_error(error: ValidationError) -> str:
    """
    Convert a Pydantic ValidationError into a readable message.

    Args:
        error: Pydantic ValidationError instance

    Returns:
        One line per invalid field, prefixed with a header
    """
    lines = ["Configuration validation failed:"]
    for detail in error.errors():
        location = " -> ".join(str(part) for part in detail["loc"]) or "configuration"
        lines.append(f"  {location}: {detail['msg']} (got: {detail.get('input')!r})")
    return "\n".join(lines)
