"""
Declaration records and their TypeScript rendering.

Every emitted unit is a Declaration tagged with its construct; the
renderer picks a template by tag.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ...core.templates import TemplateEngine, create_template_engine, jsdoc_filter


class ConstructKind(Enum):
    """Schema construct a declaration was produced from."""

    SCALARS = "scalars"
    DIRECTIVE_MAPPINGS = "directive_mappings"
    OBJECT = "object"
    INTERFACE = "interface"
    INPUT = "input"
    ONE_OF_INPUT = "one_of_input"
    ARGUMENTS = "arguments"
    UNION = "union"
    ENUM = "enum"
    ENUM_AS_TYPE = "enum_as_type"
    ENUM_AS_CONST = "enum_as_const"


@dataclass
class Declaration:
    """One emitted declaration."""

    construct: ConstructKind
    name: str
    keyword: str = "type"  # type, interface or class
    members: List[str] = field(default_factory=list)
    bases: List[str] = field(default_factory=list)
    comment: Optional[str] = None
    export: bool = True
    const: bool = False


BLOCK_TEMPLATE = """\
{% if comment %}
{{ comment | jsdoc }}
{% endif %}
{{ export }}{{ keyword }} {{ name }}\
{% if keyword == 'type' %} = {% for base in bases %}{{ base }} & {% endfor %}\
{% elif bases %} {{ 'extends' if keyword == 'interface' else 'implements' }} {{ bases | join(', ') }} \
{% else %} {% endif %}
{% if members %}{
{{ members | map('indent', 2) | join('\\n') }}
}{% else %}{}{% endif %}{{ ';' if keyword == 'type' else '' }}"""

UNION_TEMPLATE = """\
{% if comment %}
{{ comment | jsdoc }}
{% endif %}
{{ export }}type {{ name }} = {{ members | join(' | ') }};"""

ONE_OF_TEMPLATE = """\
{% if comment %}
{{ comment | jsdoc }}
{% endif %}
{{ export }}type {{ name }} =
{{ members | map('indent', 2) | join('\\n') }};"""

ENUM_TEMPLATE = """\
{% if comment %}
{{ comment | jsdoc }}
{% endif %}
{{ export }}{{ 'const ' if const else '' }}enum {{ name }} {
{{ members | map('indent', 2) | join(',\\n') }}
}{{ ';' if const else '' }}"""

ENUM_TYPE_TEMPLATE = """\
{% if comment %}
{{ comment | jsdoc }}
{% endif %}
{{ export }}type {{ name }} =
{{ members | map('indent', 2) | join('\\n') }};"""

ENUM_CONST_TEMPLATE = """\
{% if comment %}
{{ comment | jsdoc }}
{% endif %}
{{ export }}const {{ name }} = {
{{ members | map('indent', 2) | join(',\\n') }}
} as const;

{{ export }}type {{ name }} = typeof {{ name }}[keyof typeof {{ name }}];"""

TEMPLATES: Dict[str, str] = {
    "block": BLOCK_TEMPLATE,
    "union": UNION_TEMPLATE,
    "one_of": ONE_OF_TEMPLATE,
    "enum": ENUM_TEMPLATE,
    "enum_type": ENUM_TYPE_TEMPLATE,
    "enum_const": ENUM_CONST_TEMPLATE,
}

_TEMPLATE_FOR_CONSTRUCT = {
    ConstructKind.SCALARS: "block",
    ConstructKind.DIRECTIVE_MAPPINGS: "block",
    ConstructKind.OBJECT: "block",
    ConstructKind.INTERFACE: "block",
    ConstructKind.INPUT: "block",
    ConstructKind.ARGUMENTS: "block",
    ConstructKind.ONE_OF_INPUT: "one_of",
    ConstructKind.UNION: "union",
    ConstructKind.ENUM: "enum",
    ConstructKind.ENUM_AS_TYPE: "enum_type",
    ConstructKind.ENUM_AS_CONST: "enum_const",
}


def with_comment(text: str, comment: Optional[str]) -> str:
    """Prefix a member with its JSDoc comment, if any."""
    if not comment:
        return text
    return f"{jsdoc_filter(comment)}\n{text}"


def build_comment(
    description: Optional[str],
    deprecation_reason: Optional[str] = None,
    include_description: bool = True,
) -> Optional[str]:
    """
    Combine a description and a deprecation notice into comment text.

    Deprecation notices survive when descriptions are disabled.
    """
    lines = []
    if description and include_description:
        lines.append(description)
    if deprecation_reason:
        lines.append(f"@deprecated {deprecation_reason}")
    return "\n".join(lines) or None


def create_typescript_template_engine() -> TemplateEngine:
    return create_template_engine(TEMPLATES)


class DeclarationRenderer:
    """Renders Declaration records through the template engine."""

    def __init__(self, engine: Optional[TemplateEngine] = None):
        self.engine = engine or create_typescript_template_engine()

    def render(self, declaration: Declaration) -> str:
        template_name = _TEMPLATE_FOR_CONSTRUCT[declaration.construct]
        return self.engine.render_template(
            template_name,
            {
                "export": "export " if declaration.export else "",
                "keyword": declaration.keyword,
                "name": declaration.name,
                "members": declaration.members,
                "bases": declaration.bases,
                "comment": declaration.comment,
                "const": declaration.const,
            },
        )
