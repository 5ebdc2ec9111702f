"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
normalizing option keys and building typed generator settings.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from ...logging_config import get_logger
from .naming import to_snake_case

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


def normalize_keys(config: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert camelCase option keys to snake_case (top level only)."""
    return {to_snake_case(str(key)): value for key, value in config.items()}


@dataclass(frozen=True)
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None

    @classmethod
    def known_fields(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "GeneratorConfig":
        """
        Build a configuration from a plain mapping.

        Keys may be camelCase or snake_case. Unknown keys are logged
        and ignored.
        """
        if not isinstance(config, Mapping):
            raise ConfigError(f"Configuration must be a mapping, got {type(config)}")

        known = set(cls.known_fields())
        config_args = {}
        for key, value in normalize_keys(config).items():
            if key in known:
                config_args[key] = value
            else:
                logger.warning("Ignoring unknown configuration option: %s", key)

        try:
            return cls(**config_args)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.known_fields()}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._config_classes: Dict[str, Type[GeneratorConfig]] = {}
        self._aliases: Dict[str, str] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        from ..languages.typescript.config import TypeScriptConfig

        self.register_language(
            "typescript",
            TypeScriptConfig,
            defaults={
                "naming_convention": "pascalCase",
                "declaration_kind": "type",
                "default_scalar_type": "any",
            },
            aliases=["ts"],
        )

    def register_language(
        self,
        language: str,
        config_class: Type[GeneratorConfig],
        defaults: Optional[Dict[str, Any]] = None,
        aliases: Optional[List[str]] = None,
    ):
        """Register the configuration class and defaults for a language."""
        key = language.lower()
        self._config_classes[key] = config_class
        self._configs[key] = dict(defaults or {})
        for alias in aliases or []:
            self._aliases[alias.lower()] = key

    def _resolve(self, language: str) -> str:
        key = language.lower()
        return self._aliases.get(key, key)

    def get_config(
        self,
        language: str,
        custom_config: Optional[Mapping[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        key = self._resolve(language)
        if key not in self._config_classes:
            raise ConfigError(f"No configuration registered for language: {language}")

        # Start with defaults
        base_config = dict(self._configs[key])

        # Load from file if provided
        if config_file:
            base_config.update(normalize_keys(self._load_config_file(config_file)))

        # Apply custom overrides
        if custom_config:
            base_config.update(normalize_keys(custom_config))

        return self._config_classes[key].from_dict(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded %d option(s) from %s", len(config), path)
        return config

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of supported languages."""
        return list(self._configs.keys())


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "typescript",
    custom_config: Optional[Mapping[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
