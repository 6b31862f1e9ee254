"""Tests for placeholder resolution"""

from datetime import date

from template_forge.models.template import FieldSpec, TemplateSchema
from template_forge.services.resolver import PlaceholderResolver, find_placeholders, resolve


class TestFindPlaceholders:

    def test_left_to_right_with_repeats(self):
        assert find_placeholders("{{b}} {{a}} {{b}}") == ["b", "a", "b"]

    def test_ignores_non_tokens(self):
        assert find_placeholders("{{ a }} {a} {{}} {{1x}} {{ok_1-x}}") == ["ok_1-x"]


class TestPlaceholderResolver:

    def test_substitutes_supplied_values(self, doc_schema):
        document = resolve(doc_schema.template_body, doc_schema, {
            "title": "Posts API",
            "status": "review",
            "version": "2",
            "public": True,
            "tags": ["rest", "posts"],
            "updated": "2024-05-01",
            "owner": "docs-team",
        })
        assert document == (
            "# Posts API\n"
            "status=review version=2 public=true\n"
            "tags=rest, posts updated=2024-05-01 owner=docs-team\n"
        )

    def test_default_used_when_absent(self, doc_schema):
        document = resolve(doc_schema.template_body, doc_schema, {
            "title": "T", "status": "draft", "version": 1,
        })
        assert "public=false" in document

    def test_unresolved_marker_for_missing_optional(self, doc_schema):
        document = resolve(doc_schema.template_body, doc_schema, {
            "title": "T", "status": "draft", "version": 1,
        })
        assert "tags=[tags] updated=[updated] owner=[owner]" in document

    def test_custom_marker_and_separator(self):
        schema = TemplateSchema(
            name="custom",
            fields=(
                FieldSpec(name="owner", required=False),
                FieldSpec(name="tags", kind="list-of-string"),
            ),
            template_body="{{owner}} / {{tags}}",
        )
        resolver = PlaceholderResolver(unresolved_marker="TODO({name})", list_separator=" + ")
        assert resolver.resolve(schema.template_body, schema, {"tags": ["a", "b"]}) == "TODO(owner) / a + b"

    def test_repeated_placeholder_substituted_everywhere(self):
        schema = TemplateSchema(
            name="repeat",
            fields=(FieldSpec(name="name"),),
            template_body="{{name}} and {{name}}",
        )
        assert resolve(schema.template_body, schema, {"name": "X"}) == "X and X"

    def test_substitution_is_not_recursive(self):
        schema = TemplateSchema(
            name="inject",
            fields=(FieldSpec(name="a"), FieldSpec(name="b")),
            template_body="{{a}}|{{b}}",
        )
        document = resolve(schema.template_body, schema, {"a": "{{b}}", "b": "{{a}}"})
        assert document == "{{b}}|{{a}}"

    def test_non_tokens_pass_through(self):
        schema = TemplateSchema(
            name="plain",
            fields=(FieldSpec(name="a"),),
            template_body="{{ a }} {{a}} {a}",
        )
        assert resolve(schema.template_body, schema, {"a": "1"}) == "{{ a }} 1 {a}"

    def test_formats_typed_values(self):
        schema = TemplateSchema(
            name="typed",
            fields=(
                FieldSpec(name="n", kind="number"),
                FieldSpec(name="f", kind="number"),
                FieldSpec(name="d", kind="date"),
                FieldSpec(name="b", kind="boolean"),
            ),
            template_body="{{n}} {{f}} {{d}} {{b}}",
        )
        document = resolve(schema.template_body, schema, {"n": 7, "f": "2.5", "d": date(2024, 1, 2), "b": "false"})
        assert document == "7 2.5 2024-01-02 false"

    def test_never_raises_on_unvalidated_value(self):
        schema = TemplateSchema(
            name="unchecked",
            fields=(FieldSpec(name="n", kind="number"),),
            template_body="n={{n}}",
        )
        assert resolve(schema.template_body, schema, {"n": "abc"}) == "n=[n]"

    def test_resolves_an_alternate_body(self, status_schema):
        assert resolve("Now {{status}}.", status_schema, {"status": "draft"}) == "Now draft."

    def test_body_without_placeholders_unchanged(self, status_schema):
        assert resolve("Nothing to fill", status_schema, {"status": "draft"}) == "Nothing to fill"

    def test_never_raises_on_oversized_number(self):
        schema = TemplateSchema(
            name="huge",
            fields=(FieldSpec(name="n", kind="number"),),
            template_body="n={{n}}",
        )
        huge = int("9" * 4000) * 10 ** 1000
        assert resolve(schema.template_body, schema, {"n": huge}) == "n=[n]"
