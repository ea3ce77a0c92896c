"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Tests for the shared node model and structural equality.
"""

import pytest

from openapi_builders.nodes import Reference, deep_equal, is_reference, to_plain
from openapi_builders.v3_0 import models as v3_0_models
from openapi_builders.v3_1 import (
    CallbackBuilder,
    ContactBuilder,
    InfoBuilder,
    OperationBuilder,
    PathItemBuilder,
    ReferenceBuilder,
    SchemaBuilder,
    SecurityRequirementBuilder,
    ServerBuilder,
)
from openapi_builders.v3_1 import models as v3_1_models


@pytest.mark.unit
class TestNodeModel:
    def test_kind_names(self):
        """Test that node kinds are named after their class."""
        assert v3_1_models.Info.kind() == "InfoObject"
        assert Reference.kind() == "ReferenceObject"
        assert v3_0_models.OpenAPI.kind() == "OpenAPIObject"

    def test_wire_names(self):
        """Test that aliased fields report their serialized name."""
        assert v3_1_models.Info.wire_name("terms_of_service") == "termsOfService"
        assert v3_1_models.Parameter.wire_name("in_") == "in"
        assert v3_1_models.Schema.wire_name("id_") == "$id"
        assert Reference.wire_name("ref") == "$ref"
        assert v3_1_models.Info.wire_name("title") == "title"

    def test_absent_fields_are_omitted(self):
        """Test that a node with no optional fields renders only what was set."""
        contact = ContactBuilder().build()

        assert contact.present_fields() == []
        assert contact.to_dict() == {}
        assert not contact.has("name")

    def test_required_fields_are_present(self):
        """Test that constructor fields are present and nothing else is."""
        info = InfoBuilder("Widget API", "1.0.0").build()

        assert info.to_dict() == {"title": "Widget API", "version": "1.0.0"}
        assert "description" not in info.to_dict()
        assert None not in info.to_dict().values()

    def test_extensions_render_inline(self):
        """Test that extensions appear next to the regular fields."""
        info = InfoBuilder("Widget API", "1.0.0").extension("x-logo", {"url": "logo.png"}).build()

        assert info.to_dict() == {"title": "Widget API", "version": "1.0.0", "x-logo": {"url": "logo.png"}}

    def test_reference_renders_only_its_fields(self):
        """Test that a reference renders as $ref plus its own optional fields."""
        ref = ReferenceBuilder("#/components/schemas/Widget").description("A widget").build()

        assert is_reference(ref)
        assert ref.to_dict() == {"$ref": "#/components/schemas/Widget", "description": "A widget"}

    def test_map_shaped_nodes(self):
        """Test nodes whose entries render as the object itself."""
        requirement = SecurityRequirementBuilder().add_requirement("oauth", ["read"]).add_requirement("key").build()
        callback = (
            CallbackBuilder()
            .add_expression("{$request.body#/callbackUrl}", PathItemBuilder().summary("Hook").build())
            .extension("x-internal", True)
            .build()
        )

        assert requirement.to_dict() == {"oauth": ["read"], "key": []}
        assert callback.to_dict() == {
            "{$request.body#/callbackUrl}": {"summary": "Hook"},
            "x-internal": True,
        }

    def test_to_plain_nested(self):
        """Test that nested nodes inside containers are converted."""
        schema = SchemaBuilder("string").build()

        assert to_plain({"a": [schema, 1], "b": (schema,)}) == {
            "a": [{"type": "string"}, 1],
            "b": [{"type": "string"}],
        }


@pytest.mark.unit
class TestDeepEqual:
    def test_scalars(self):
        """Test scalar comparison."""
        assert deep_equal("a", "a")
        assert deep_equal(1, 1.0)
        assert not deep_equal(1, "1")
        assert not deep_equal(True, 1)
        assert not deep_equal(0, False)

    def test_mappings_ignore_key_order(self):
        """Test that mapping comparison is order independent."""
        assert deep_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})
        assert not deep_equal({"a": 1}, {"a": 1, "b": 2})
        assert not deep_equal({"a": 1}, {"b": 1})

    def test_sequences_keep_order(self):
        """Test that sequence comparison is order dependent."""
        assert deep_equal([1, 2], (1, 2))
        assert not deep_equal([1, 2], [2, 1])
        assert not deep_equal([1], [1, 1])
        assert not deep_equal("ab", ["a", "b"])

    def test_equal_nodes(self):
        """Test that separately built but identical nodes are equal."""
        first = ServerBuilder("https://api.example.com").description("Production").build()
        second = ServerBuilder("https://api.example.com").description("Production").build()

        assert first is not second
        assert deep_equal(first, second)

    def test_field_presence_matters(self):
        """Test that a node with an extra field is different."""
        first = ServerBuilder("https://api.example.com").build()
        second = ServerBuilder("https://api.example.com").description("Production").build()

        assert not deep_equal(first, second)

    def test_extensions_matter(self):
        """Test that extensions take part in the comparison."""
        first = ServerBuilder("https://api.example.com").extension("x-region", "eu").build()
        second = ServerBuilder("https://api.example.com").extension("x-region", "us").build()

        assert not deep_equal(first, second)

    def test_different_kinds_are_different(self):
        """Test that equal renderings of different kinds are not equal."""
        assert not deep_equal(OperationBuilder().build(), PathItemBuilder().build())
        assert not deep_equal(ContactBuilder().build(), {})

    def test_map_shaped_nodes_compare_entries(self):
        """Test that internal entry maps are compared."""
        first = SecurityRequirementBuilder().add_requirement("oauth", ["read"]).build()
        second = SecurityRequirementBuilder().add_requirement("oauth", ["write"]).build()
        third = SecurityRequirementBuilder().add_requirement("oauth", ["read"]).build()

        assert not deep_equal(first, second)
        assert deep_equal(first, third)
