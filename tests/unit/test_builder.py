"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Tests for the generic node builder protocol.

The protocol is exercised through a few concrete builders; every other
builder shares the same implementation.
"""

import pytest

from openapi_builders.builder import ListBuilder, MapBuilder
from openapi_builders.core.config import AppConfig, BuilderConfig, init_app_config
from openapi_builders.errors import (
    BuilderStateError,
    DuplicateError,
    ExclusiveError,
    InvalidValueError,
)
from openapi_builders.v3_1 import (
    ComponentsBuilder,
    ExampleBuilder,
    InfoBuilder,
    LinkBuilder,
    MediaTypeBuilder,
    OperationBuilder,
    ParameterBuilder,
    ReferenceBuilder,
    SchemaBuilder,
    ServerVariableBuilder,
    TagBuilder,
)


@pytest.mark.unit
class TestSetOnce:
    def test_chaining_returns_same_builder(self):
        """Test that setters return the builder itself."""
        builder = InfoBuilder("Widget API", "1.0.0")

        assert builder.description("Widgets") is builder

    def test_second_set_fails_and_keeps_first(self):
        """Test that a set-once field keeps its first value."""
        builder = InfoBuilder("Widget API", "1.0.0").description("first")

        with pytest.raises(DuplicateError) as excinfo:
            builder.description("second")

        assert str(excinfo.value) == "InfoObject already has description 'first'"
        assert builder.build().description == "first"

    def test_required_fields_are_set_once(self):
        """Test that constructor fields cannot be set again through the protocol."""
        builder = TagBuilder("widgets")

        with pytest.raises(DuplicateError, match="TagObject already has name 'widgets'"):
            builder._set("name", "gadgets")

    def test_same_value_twice_still_fails(self):
        """Test that set-once does not depend on the new value."""
        builder = SchemaBuilder().title("Widget")

        with pytest.raises(DuplicateError):
            builder.title("Widget")

    def test_none_is_rejected_before_writing(self):
        """Test that None never reaches the draft."""
        builder = InfoBuilder("Widget API", "1.0.0")

        with pytest.raises(InvalidValueError, match="'description' cannot be None"):
            builder.description(None)

        assert not builder.build().has("description")

    def test_value_check_failure_leaves_field_absent(self):
        """Test that no write happens when a value check fails."""
        builder = InfoBuilder("Widget API", "1.0.0")

        with pytest.raises(InvalidValueError):
            builder.terms_of_service("not a URL")

        builder.terms_of_service("https://example.com/terms")
        assert builder.build().terms_of_service == "https://example.com/terms"

    def test_url_is_stored_verbatim(self):
        """Test that accepted URLs are not normalized."""
        info = InfoBuilder("Widget API", "1.0.0").terms_of_service("https://example.com/x").build()

        assert info.terms_of_service == "https://example.com/x"

    def test_empty_enumeration_is_rejected(self):
        """Test that enumerations must not be empty."""
        with pytest.raises(InvalidValueError, match="ServerVariableObject cannot accept an empty 'enum' list"):
            ServerVariableBuilder("v1").enum([])

    def test_choices(self):
        """Test that enumerated fields reject unknown values."""
        with pytest.raises(InvalidValueError, match="'in' must be one of"):
            ParameterBuilder("body", "widget")

        with pytest.raises(InvalidValueError, match="'style' must be one of"):
            ParameterBuilder("query", "widget").style("fancy")


@pytest.mark.unit
class TestExclusive:
    def test_symmetry(self):
        """Test that either order of an exclusive pair fails the same way."""
        first = ExampleBuilder().value({"id": 1})
        with pytest.raises(ExclusiveError) as forward:
            first.external_value("https://example.com/widget.json")

        second = ExampleBuilder().external_value("https://example.com/widget.json")
        with pytest.raises(ExclusiveError) as backward:
            second.value({"id": 1})

        assert type(forward.value) is type(backward.value)
        assert forward.value.subject == backward.value.subject == "ExampleObject"
        assert str(forward.value) == "ExampleObject cannot have both value and externalValue"
        assert str(backward.value) == "ExampleObject cannot have both externalValue and value"

    def test_failed_exclusive_leaves_draft_unchanged(self):
        """Test that the rejected field stays absent."""
        builder = LinkBuilder().operation_id("getWidget")

        with pytest.raises(ExclusiveError):
            builder.operation_ref("#/paths/~1widgets/get")

        link = builder.build()
        assert link.operation_id == "getWidget"
        assert not link.has("operation_ref")

    def test_map_field_against_scalar_field(self):
        """Test exclusivity between a map field and a scalar field."""
        builder = MediaTypeBuilder().example({"id": 1})

        with pytest.raises(ExclusiveError, match="cannot have both example and examples"):
            builder.add_example("one", ExampleBuilder().value({"id": 1}).build())

        builder = MediaTypeBuilder().add_example("one", ExampleBuilder().value({"id": 1}).build())
        with pytest.raises(ExclusiveError, match="cannot have both examples and example"):
            builder.example({"id": 1})

    def test_schema_and_content(self):
        """Test that a parameter takes a schema or content, not both."""
        builder = ParameterBuilder("query", "filter").schema(SchemaBuilder("string").build())

        with pytest.raises(ExclusiveError, match="cannot have both schema and content"):
            builder.add_content("application/json", MediaTypeBuilder().build())


@pytest.mark.unit
class TestMapAndListFields:
    def test_distinct_keys(self):
        """Test that distinct keys are all retrievable."""
        schema = (
            SchemaBuilder("object")
            .add_property("id", SchemaBuilder("integer").build())
            .add_property("name", SchemaBuilder("string").build())
            .build()
        )

        assert list(schema.properties) == ["id", "name"]

    def test_duplicate_key_fails_even_with_different_value(self):
        """Test keyed uniqueness."""
        builder = SchemaBuilder("object").add_property("id", SchemaBuilder("integer").build())

        with pytest.raises(DuplicateError, match="SchemaObject 'properties' map already has key 'id'"):
            builder.add_property("id", SchemaBuilder("string").build())

    def test_map_is_absent_until_first_entry(self):
        """Test that map fields are created lazily."""
        schema = SchemaBuilder("object").build()

        assert not schema.has("properties")
        assert "properties" not in schema.to_dict()

    def test_bulk_add_is_not_transactional(self):
        """Test that entries before a failing one stay added."""
        builder = ComponentsBuilder().add_schema("B", SchemaBuilder("string").build())

        with pytest.raises(DuplicateError):
            builder.add_schemas(
                {
                    "A": SchemaBuilder("integer").build(),
                    "B": SchemaBuilder("number").build(),
                    "C": SchemaBuilder("boolean").build(),
                }
            )

        components = builder.build()
        assert list(components.schemas) == ["B", "A"]
        assert components.schemas["B"].type == "string"

    def test_unique_list(self):
        """Test that unique lists reject equal values."""
        builder = OperationBuilder().add_tags(["widgets", "inventory"])

        with pytest.raises(DuplicateError, match="OperationObject 'tags' list already has value 'widgets'"):
            builder.add_tag("widgets")

        assert builder.build().tags == ["widgets", "inventory"]

    def test_non_unique_list(self):
        """Test that parameter lists accept repeated values."""
        ref = ReferenceBuilder("#/components/parameters/limit").build()
        operation = OperationBuilder().add_parameter(ref).add_parameter(ref).build()

        assert len(operation.parameters) == 2


@pytest.mark.unit
class TestBuild:
    def test_build_returns_draft(self):
        """Test that build returns the accumulated node."""
        builder = TagBuilder("widgets").description("Widget operations")
        tag = builder.build()

        assert tag.name == "widgets"
        assert tag.description == "Widget operations"

    def test_builder_is_retired_after_build(self):
        """Test that a built builder refuses further use."""
        builder = TagBuilder("widgets")
        tag = builder.build()

        with pytest.raises(BuilderStateError, match="already built"):
            builder.description("late")
        with pytest.raises(BuilderStateError):
            builder.extension("x-late", True)
        with pytest.raises(BuilderStateError):
            builder.build()

        assert not tag.has("description")


@pytest.mark.unit
class TestExtensions:
    def test_extension_added(self):
        """Test that extensions are stored on the node."""
        tag = TagBuilder("widgets").extension("x-display-name", "Widgets").build()

        assert tag.extensions == {"x-display-name": "Widgets"}

    def test_prefix_enforced_by_default(self):
        """Test that names without the prefix are rejected."""
        with pytest.raises(InvalidValueError, match="TagObject extension 'display-name' must begin with 'x-'"):
            TagBuilder("widgets").extension("display-name", "Widgets")

    def test_duplicate_extension(self):
        """Test that an extension name can only be used once."""
        builder = TagBuilder("widgets").extension("x-order", 1)

        with pytest.raises(DuplicateError, match="map already has key 'x-order'"):
            builder.extension("x-order", 2)

    def test_bulk_extensions(self):
        """Test the bulk form in insertion order."""
        tag = TagBuilder("widgets").extensions({"x-b": 2, "x-a": 1}).build()

        assert list(tag.to_dict()) == ["name", "x-b", "x-a"]

    def test_prefix_can_be_relaxed(self):
        """Test that enforcement follows the builder configuration."""
        init_app_config(AppConfig(builder=BuilderConfig(enforce_extension_prefix=False)))

        tag = TagBuilder("widgets").extension("display-name", "Widgets").build()

        assert tag.to_dict()["display-name"] == "Widgets"

    def test_relaxed_extension_cannot_shadow_field(self):
        """Test that an extension named like a declared field is rejected."""
        init_app_config(AppConfig(builder=BuilderConfig(enforce_extension_prefix=False)))
        builder = InfoBuilder("Real", "1")

        with pytest.raises(InvalidValueError, match="extension 'title' conflicts with the declared field"):
            builder.extension("title", "Fake")
        with pytest.raises(InvalidValueError, match="declared field 'termsOfService'"):
            builder.extension("termsOfService", "https://example.com/tos")

        assert builder.build().to_dict() == {"title": "Real", "version": "1"}

    def test_custom_prefix(self):
        """Test a configured prefix."""
        init_app_config(AppConfig(builder=BuilderConfig(extension_prefix="x-acme-")))

        TagBuilder("widgets").extension("x-acme-order", 1)
        with pytest.raises(InvalidValueError, match="must begin with 'x-acme-'"):
            TagBuilder("widgets").extension("x-order", 1)


@pytest.mark.unit
class TestCollectionBuilders:
    def test_map_builder(self):
        """Test add, merge, length and membership."""
        builder = MapBuilder().add("a", 1).merge({"b": 2, "c": 3})

        assert len(builder) == 3
        assert "b" in builder
        assert builder.build() == {"a": 1, "b": 2, "c": 3}

    def test_map_builder_duplicate(self):
        """Test that map builders reject repeated keys."""
        with pytest.raises(DuplicateError, match="Map 'entries' map already has key 'a'"):
            MapBuilder().add("a", 1).add("a", 2)

    def test_list_builder(self):
        """Test that plain list builders accept duplicates."""
        assert ListBuilder().add(1).extend([1, 2]).build() == [1, 1, 2]

    def test_collection_builders_retire(self):
        """Test that collection builders refuse use after build."""
        builder = MapBuilder()
        builder.build()

        with pytest.raises(BuilderStateError):
            builder.add("a", 1)

        builder = ListBuilder()
        builder.build()

        with pytest.raises(BuilderStateError):
            builder.add(1)
