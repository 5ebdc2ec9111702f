"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from graphql import GraphQLSchema

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import iter_named_types
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)

_BLANK_RUNS = re.compile(r"\n{3,}")


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnknownScalarError(GeneratorError):
    """A schema scalar has no mapping while strict scalars are enabled."""

    def __init__(self, scalar_name: str):
        super().__init__(f"Unknown scalar type {scalar_name}")
        self.scalar_name = scalar_name


class OneOfInputError(GeneratorError):
    """A @oneOf input object declares a non-null field."""

    def __init__(self, type_name: Optional[str] = None, field_name: Optional[str] = None):
        super().__init__(
            "Fields on an input object type can not be non-nullable. "
            "It seems like the schema was not validated."
        )
        self.type_name = type_name
        self.field_name = field_name


@dataclass
class PluginOutput:
    """Generated prelude lines and declaration blocks."""

    prepend: List[str] = field(default_factory=list)
    content: List[str] = field(default_factory=list)

    def merged(self) -> str:
        """Join prelude and declarations into file text."""
        parts = []
        if self.prepend:
            parts.append("\n".join(self.prepend))
        parts.extend(self.content)
        return "\n\n".join(parts) + "\n" if parts else ""


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def create_template_engine(self) -> TemplateEngine:
        """
        Build the template engine for this generator.

        Subclasses override this to register their templates.
        """
        return create_template_engine()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = self.create_template_engine()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: GraphQLSchema) -> PluginOutput:
        """
        Generate declarations for a schema.

        Args:
            schema: Schema to generate code for

        Returns:
            PluginOutput with prelude lines and declaration blocks

        Raises:
            GeneratorError: If the schema cannot be rendered with this configuration
        """
        pass

    def validate_schema(self, schema: GraphQLSchema) -> List[str]:
        """
        Validate a schema for issues worth reporting.

        Language generators should override this to add language-specific validation.

        Args:
            schema: Schema to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        for named_type in iter_named_types(schema):
            type_fields = getattr(named_type, "fields", None)
            if type_fields is not None and not type_fields:
                warnings.append(f"Type '{named_type.name}' has no fields")
        return warnings

    def format_code(self, code: str) -> str:
        """Strip trailing whitespace and collapse runs of blank lines."""
        code = "\n".join(line.rstrip() for line in code.split("\n"))
        return _BLANK_RUNS.sub("\n\n", code)


@dataclass
class GenerationResult:
    """Outcome of a generation run, as reported to the CLI."""

    code: str
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error_message: Optional[str] = None
    exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        return cls(code="", success=False, error_message=message, exception=exception)


def generate_code(generator: CodeGenerator, schema: GraphQLSchema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        output = generator.generate(schema)
        formatted_code = generator.format_code(output.merged())

        named_types = list(iter_named_types(schema))
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "type_count": len(named_types),
            "declaration_count": len(output.content),
            "prelude_lines": len(output.prepend),
        }
        return GenerationResult(formatted_code, warnings, metadata)

    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(str(e), exception=e)
    except Exception as e:
        logger.exception("Unexpected failure during code generation")
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
