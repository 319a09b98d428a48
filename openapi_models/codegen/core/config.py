"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files into typed
configuration values. The generation pipeline only ever receives a
GeneratorConfig; reading files happens here, at the caller's request.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...logging_config import get_logger
from .naming import NamingConvention

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config.json"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class OutputMode(Enum):
    """How generated declarations are laid out on disk."""

    SINGLE = "single"
    FOLDER = "folder"
    AUTO = "auto"


class DuplicatePolicy(Enum):
    """What to do when two schemas normalize to the same entity name."""

    OVERWRITE = "overwrite"  # later entity replaces the earlier one
    ERROR = "error"


@dataclass
class NamingConfig:
    """Naming convention per identifier class."""

    interface: NamingConvention = NamingConvention.PASCAL_CASE
    enum: NamingConvention = NamingConvention.PASCAL_CASE
    property: NamingConvention = NamingConvention.AS_IS


def _default_types() -> Dict[str, str]:
    return {
        "string": "string",
        "integer": "number",
        "number": "number",
        "boolean": "boolean",
        "object": "Record<string, any>",
        "null": "null",
    }


def _default_formats() -> Dict[str, str]:
    return {
        "date-time": "string",
        "date": "string",
        "uuid": "string",
        "binary": "Blob",
    }


@dataclass
class TypeMappingConfig:
    """Schema type to target type mapping."""

    types: Dict[str, str] = field(default_factory=_default_types)
    array_template: str = "{{type}}[]"
    format_mapping: Dict[str, str] = field(default_factory=_default_formats)
    unknown_type: str = "any"
    nullable_as_union: bool = True

    @property
    def string_type(self) -> str:
        return self.types.get("string", "string")

    @property
    def number_type(self) -> str:
        return self.types.get("number", "number")

    @property
    def null_type(self) -> str:
        return self.types.get("null", "null")


@dataclass
class OutputConfig:
    """Output layout settings."""

    mode: OutputMode = OutputMode.AUTO
    add_warning_header: bool = True
    file_extension: str = ".ts"
    generate_index: bool = True
    index_file_name: str = "index.ts"


@dataclass
class GeneratorConfig:
    """Complete configuration for one generation run."""

    language: str = "typescript"
    naming: NamingConfig = field(default_factory=NamingConfig)
    type_mapping: TypeMappingConfig = field(default_factory=TypeMappingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    duplicates: DuplicatePolicy = DuplicatePolicy.OVERWRITE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConfig":
        """
        Build a configuration from its JSON document form.

        Args:
            data: Parsed configuration document

        Returns:
            GeneratorConfig with defaults for every missing key

        Raises:
            ConfigError: If a section has the wrong shape or an invalid value
        """
        naming = _section(data, "naming")
        type_mapping = dict(_section(data, "typeMapping"))
        output = _section(data, "output")

        naming_config = NamingConfig(
            interface=NamingConvention.parse(naming.get("interface", "PascalCase")),
            enum=NamingConvention.parse(naming.get("enum", "PascalCase")),
            property=NamingConvention.parse(naming.get("property", "asIs")),
        )

        defaults = TypeMappingConfig()
        array_template = type_mapping.pop("array", defaults.array_template)
        if "{{type}}" not in array_template:
            raise ConfigError(
                f"typeMapping.array must contain '{{{{type}}}}': {array_template!r}"
            )
        unknown_type = type_mapping.pop("unknown", defaults.unknown_type)
        types = _default_types()
        types.update(type_mapping)
        formats = _default_formats()
        formats.update(_section(data, "formatMapping"))

        type_config = TypeMappingConfig(
            types=types,
            array_template=array_template,
            format_mapping=formats,
            unknown_type=unknown_type,
            nullable_as_union=bool(data.get("nullableAsUnion", True)),
        )

        output_config = OutputConfig(
            mode=_parse_enum(OutputMode, output.get("mode", "auto"), "output.mode"),
            add_warning_header=bool(output.get("addWarningHeader", True)),
            file_extension=output.get("fileExtension", ".ts"),
            generate_index=bool(output.get("generateIndex", True)),
            index_file_name=output.get("indexFileName", "index.ts"),
        )

        return cls(
            language=data.get("language", "typescript"),
            naming=naming_config,
            type_mapping=type_config,
            output=output_config,
            duplicates=_parse_enum(
                DuplicatePolicy, data.get("duplicates", "overwrite"), "duplicates"
            ),
        )


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Configuration section '{key}' must be a JSON object")
    return value


def _parse_enum(enum_class, value: Any, key: str):
    try:
        return enum_class(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_class)
        raise ConfigError(f"Invalid {key}: {value!r} (expected one of: {valid})")


def merge_config_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self, default_config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            default_config_file: Defaults document, the packaged config.json if omitted
        """
        self.default_config_file = Path(default_config_file or DEFAULT_CONFIG_PATH)

    def get_config(
        self,
        config_file: Optional[Union[str, Path]] = None,
        custom_config: Optional[Dict[str, Any]] = None,
    ) -> GeneratorConfig:
        """
        Get the complete configuration.

        Args:
            config_file: Path to a JSON configuration file merged over the defaults
            custom_config: Overrides applied last, in document form

        Returns:
            Merged configuration
        """
        config_dict = self._load_config_file(self.default_config_file)

        if config_file:
            config_dict = merge_config_dicts(
                config_dict, self._load_config_file(config_file)
            )

        if custom_config:
            config_dict = merge_config_dicts(config_dict, custom_config)

        return GeneratorConfig.from_dict(config_dict)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    custom_config: Optional[Dict[str, Any]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        config_file: Path to JSON configuration file
        custom_config: Custom configuration overrides

    Returns:
        Merged configuration
    """
    return ConfigManager().get_config(config_file, custom_config)
