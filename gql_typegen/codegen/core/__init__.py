"""
Core code generation components.

Provides base classes and utilities shared by language generators.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    OneOfInputError,
    PluginOutput,
    UnknownScalarError,
    generate_code,
)
from .imports import ImportAggregator, ImportRecord, ParsedMapper, parse_mapper
from .naming import NameSanitizer, NamingCase, convert_case
from .schema import iter_named_types, load_schema
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "UnknownScalarError",
    "OneOfInputError",
    "GenerationResult",
    "PluginOutput",
    "generate_code",
    # Schema access
    "load_schema",
    "iter_named_types",
    # Imports
    "ImportAggregator",
    "ImportRecord",
    "ParsedMapper",
    "parse_mapper",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "convert_case",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
