"""
Language-specific code generators.

This module contains the generators for each output language.
"""

from .typescript import (
    TypeScriptGenerator,
    create_generator,
    create_immutable_generator,
    create_strict_generator,
    plugin,
)

__all__ = [
    "TypeScriptGenerator",
    "create_generator",
    "create_immutable_generator",
    "create_strict_generator",
    "plugin",
]
