"""Tests for the template schema models"""

from datetime import date

import pytest
from pydantic import ValidationError

from template_forge.models.template import FieldKind, FieldSpec, SchemaError, TemplateSchema


class TestFieldSpec:

    def test_defaults(self):
        spec = FieldSpec(name="title")
        assert spec.kind == FieldKind.STRING
        assert spec.required is True
        assert spec.allowed_values is None
        assert not spec.has_default

    def test_enum_keeps_declared_order(self):
        spec = FieldSpec(name="status", kind="enum", allowed_values=["draft", "review", "published"])
        assert spec.kind == FieldKind.ENUM
        assert spec.allowed_values == ("draft", "review", "published")

    def test_enum_without_values_rejected(self):
        with pytest.raises(SchemaError, match="no allowed values"):
            FieldSpec(name="status", kind="enum", allowed_values=[])

    def test_enum_missing_values_rejected(self):
        with pytest.raises(SchemaError):
            FieldSpec(name="status", kind="enum")

    def test_enum_repeated_value_rejected(self):
        with pytest.raises(SchemaError, match="repeats"):
            FieldSpec(name="status", kind="enum", allowed_values=["draft", "draft"])

    def test_allowed_values_on_non_enum_rejected(self):
        with pytest.raises(SchemaError, match="allowed values"):
            FieldSpec(name="title", kind="string", allowed_values=["a"])

    def test_required_with_default_rejected(self):
        with pytest.raises(SchemaError, match="cannot declare a default"):
            FieldSpec(name="owner", required=True, default_value="docs-team")

    def test_optional_with_default_accepted(self):
        spec = FieldSpec(name="owner", required=False, default_value="docs-team")
        assert spec.has_default
        assert spec.default_value == "docs-team"

    def test_default_is_stored_typed(self):
        spec = FieldSpec(name="updated", kind="date", required=False, default_value="2024-03-01")
        assert spec.default_value == date(2024, 3, 1)

        spec = FieldSpec(name="count", kind="number", required=False, default_value="12")
        assert spec.default_value == 12

    def test_default_must_match_kind(self):
        with pytest.raises(SchemaError, match="Default for field 'count'"):
            FieldSpec(name="count", kind="number", required=False, default_value="many")

    def test_enum_default_must_be_allowed(self):
        with pytest.raises(SchemaError):
            FieldSpec(
                name="status", kind="enum", required=False,
                allowed_values=["draft", "review"], default_value="published",
            )

    @pytest.mark.parametrize("name", ["has space", "1st", "a.b", ""])
    def test_invalid_name_rejected(self, name):
        with pytest.raises(SchemaError, match="Invalid field name"):
            FieldSpec(name=name)

    def test_unknown_kind_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            FieldSpec(name="colour", kind="colour")

    def test_frozen(self):
        spec = FieldSpec(name="title")
        with pytest.raises(ValidationError):
            spec.required = False


class TestTemplateSchema:

    def test_duplicate_field_names_rejected(self):
        with pytest.raises(SchemaError, match="twice"):
            TemplateSchema(
                name="dup",
                fields=(FieldSpec(name="title"), FieldSpec(name="title", required=False)),
            )

    def test_undeclared_placeholder_rejected(self):
        with pytest.raises(SchemaError, match="undeclared field"):
            TemplateSchema(
                name="bad",
                fields=(FieldSpec(name="title"),),
                template_body="{{title}} by {{author}}",
            )

    def test_unused_declared_field_is_legal(self):
        schema = TemplateSchema(
            name="unused",
            fields=(FieldSpec(name="id", kind="number"),),
            template_body="No placeholders here",
        )
        assert schema.placeholders == []
        assert schema.field_names == ["id"]

    def test_placeholders_in_first_occurrence_order(self, doc_schema):
        schema = TemplateSchema(
            name="order",
            fields=(FieldSpec(name="a"), FieldSpec(name="b")),
            template_body="{{b}} {{a}} {{b}}",
        )
        assert schema.placeholders == ["b", "a"]

    def test_spaced_braces_are_not_placeholders(self):
        schema = TemplateSchema(name="plain", template_body="{{ title }} and {{}}")
        assert schema.placeholders == []

    def test_field_lookup(self, doc_schema):
        assert doc_schema.field("version").kind == FieldKind.NUMBER
        assert doc_schema.field("missing") is None

    def test_declaration_order_preserved(self, doc_schema):
        assert doc_schema.field_names == [
            "title", "status", "version", "public", "tags", "updated", "owner",
        ]

    def test_frozen(self, status_schema):
        with pytest.raises(ValidationError):
            status_schema.template_body = "changed"
