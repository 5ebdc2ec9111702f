import pytest

from gql_typegen.codegen.core.templates import (
    TemplateError,
    create_template_engine,
    indent_filter,
    jsdoc_filter,
)
from gql_typegen.codegen.languages.typescript import ConstructKind, Declaration, DeclarationRenderer


def test_indent_skips_blank_lines():
    assert indent_filter("a\n\nb") == "  a\n\n  b"


def test_jsdoc_single_and_multi_line():
    assert jsdoc_filter("Hello") == "/** Hello */"
    assert jsdoc_filter("One\n\nTwo") == "/**\n * One\n *\n * Two\n */"
    assert jsdoc_filter(None) == ""


def test_jsdoc_escapes_comment_terminator():
    assert jsdoc_filter("ends */ here") == "/** ends *\\/ here */"
    assert jsdoc_filter("a */\nb") == "/**\n * a *\\/\n * b\n */"


def test_engine_renders_registered_templates():
    engine = create_template_engine({"greet": "Hi {{ name }}"})
    assert engine.render_template("greet", {"name": "there"}) == "Hi there"
    assert engine.template_exists("greet")

    engine.add_template("doc", "{{ text | jsdoc }}")
    assert engine.render_template("doc", {"text": "x"}) == "/** x */"


def test_engine_errors():
    engine = create_template_engine()
    with pytest.raises(TemplateError, match="Template not found"):
        engine.render_template("missing", {})
    with pytest.raises(TemplateError):
        engine.render_string("{{ undefined_name }}", {})


def test_renderer_empty_block():
    renderer = DeclarationRenderer()
    rendered = renderer.render(Declaration(construct=ConstructKind.OBJECT, name="Empty"))
    assert rendered == "export type Empty = {};"
    rendered = renderer.render(
        Declaration(construct=ConstructKind.INTERFACE, name="Empty", keyword="interface", export=False)
    )
    assert rendered == "interface Empty {}"
