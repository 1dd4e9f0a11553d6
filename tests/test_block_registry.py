"""Tests for the block schema registry and default catalog."""

from collections.abc import Mapping

import pytest

from cleaning_booking.blocks.registry import SchemaRegistry, default_registry
from cleaning_booking.blocks.validator import validate_block
from cleaning_booking.schemas.block_schema import BlockSchema, BlockType, FieldKind, FieldRule


def _faq_schema() -> BlockSchema:
    return BlockSchema(
        block_type="faq",
        name="FAQ",
        description="Questions and answers",
        fields={
            "items": FieldRule(
                FieldKind.ARRAY,
                "Questions",
                required=True,
                min_items=1,
                item_schema={
                    "question": FieldRule(FieldKind.TEXT, "Question", required=True),
                    "answer": FieldRule(FieldKind.RICHTEXT, "Answer", required=True),
                },
            )
        },
        default_data={"items": []},
    )


class TestDefaultCatalog:
    def test_ships_six_block_types(self):
        assert default_registry.block_types() == [t.value for t in BlockType]

    def test_lookup_by_type(self):
        schema = default_registry.get("pricing")
        assert schema is not None
        assert schema.fields["subservices"].item_schema["price"].min == 0

    def test_unknown_type_returns_none(self):
        assert default_registry.get("carousel") is None
        assert "carousel" not in default_registry

    def test_process_steps_need_one_item(self):
        steps = default_registry.get("process").fields["steps"]
        assert steps.kind == FieldKind.ARRAY
        assert steps.min_items == 1

    def test_booking_field_type_options(self):
        field_type = default_registry.get("booking").fields["form_schema"].item_schema["field_type"]
        assert field_type.options == ("text", "select", "date", "time")

    def test_default_data_for_every_type(self):
        for schema in default_registry.all():
            assert isinstance(schema.default_data, Mapping)


class TestDescribe:
    def test_describe_uses_authoring_keys(self):
        described = default_registry.describe()["pricing"]
        subservices = described["fields"]["subservices"]
        assert subservices["type"] == "array"
        assert subservices["minItems"] == 1
        assert subservices["itemSchema"]["price"] == {
            "type": "number",
            "label": "Price (VND)",
            "required": True,
            "min": 0,
        }
        assert described["defaultData"] == {"service_title": "Service prices", "subservices": []}

    def test_describe_includes_default(self):
        button = default_registry.describe()["booking"]["fields"]["button_text"]
        assert button["default"] == "Book now"


class TestExtension:
    def test_with_schema_returns_new_registry(self):
        extended = default_registry.with_schema(_faq_schema())
        assert "faq" in extended
        assert "faq" not in default_registry
        assert len(extended) == len(default_registry) + 1

    def test_validator_handles_new_type_unchanged(self):
        extended = default_registry.with_schema(_faq_schema())
        result = validate_block("faq", {"items": [{"question": "Pets?"}]}, extended)
        assert result.errors == ["items[0].answer (Answer) is required"]

    def test_duplicate_type_rejected(self):
        with pytest.raises(ValueError, match="registered twice"):
            SchemaRegistry([_faq_schema(), _faq_schema()])

    def test_registry_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            default_registry._schemas["faq"] = _faq_schema()

    def test_schema_fields_are_read_only(self):
        intro = default_registry.get("intro")
        with pytest.raises(TypeError):
            intro.fields["title"] = FieldRule(FieldKind.TEXT, "Other")
        with pytest.raises(TypeError):
            del intro.fields["title"]
        assert "title" in default_registry.get("intro").fields

    def test_item_schema_is_read_only(self):
        packages = default_registry.get("pricing").fields["subservices"]
        with pytest.raises(TypeError):
            packages.item_schema["price"] = FieldRule(FieldKind.NUMBER, "Price")

    def test_default_data_is_read_only(self):
        with pytest.raises(TypeError):
            default_registry.get("pricing").default_data["service_title"] = "Other"

    def test_described_default_data_is_a_copy(self):
        template = default_registry.describe()["pricing"]["defaultData"]
        template["subservices"].append({"id": "extra"})
        template["service_title"] = "Edited"
        fresh = default_registry.describe()["pricing"]["defaultData"]
        assert fresh == {"service_title": "Service prices", "subservices": []}
        assert default_registry.get("pricing").default_data["subservices"] == []

    def test_schema_does_not_alias_caller_dicts(self):
        fields = {"q": FieldRule(FieldKind.TEXT, "Question")}
        defaults = {"items": []}
        schema = BlockSchema("faq", "FAQ", "", fields, defaults)
        fields["extra"] = FieldRule(FieldKind.TEXT, "Extra")
        defaults["items"].append("x")
        assert list(schema.fields) == ["q"]
        assert schema.default_data["items"] == []

    def test_empty_registry_knows_no_types(self):
        empty = SchemaRegistry()
        assert len(empty) == 0
        result = validate_block("intro", {}, empty)
        assert result.errors == ['block type "intro" is not recognized']
