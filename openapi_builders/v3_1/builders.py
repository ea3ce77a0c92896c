"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Fluent builders for the OpenAPI 3.1 node catalog.

Builders of kinds unchanged since 3.0 are re-exported from the 3.0 family.
The rest subclass their 3.0 counterparts, swap in the 3.1 node kind and add
the new fields. The invariant protocol is the same for both families.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Self

from openapi_builders.builder import ExtensibleNodeBuilder
from openapi_builders.nodes import Reference
from openapi_builders.v3_0 import builders as v3_0
from openapi_builders.v3_0.builders import (
    CallbackBuilder,
    ContactBuilder,
    EncodingBuilder,
    ExampleBuilder,
    ExternalDocsBuilder,
    HeaderBuilder,
    LinkBuilder,
    MediaTypeBuilder,
    OAuthFlowBuilder,
    OAuthFlowsBuilder,
    ParameterBuilder,
    PathItemBuilder,
    RequestBodyBuilder,
    ResponseBuilder,
    SecurityRequirementBuilder,
    SecuritySchemeBuilder,
    ServerBuilder,
    ServerVariableBuilder,
    TagBuilder,
    XMLBuilder,
)
from openapi_builders.v3_1.models import (
    OPENAPI_VERSION,
    SCHEMA_TYPES,
    Components,
    Discriminator,
    Info,
    License,
    OpenAPI,
    PathItem,
    Schema,
)

__all__ = [
    "CallbackBuilder",
    "ComponentsBuilder",
    "ContactBuilder",
    "DiscriminatorBuilder",
    "EncodingBuilder",
    "ExampleBuilder",
    "ExternalDocsBuilder",
    "HeaderBuilder",
    "InfoBuilder",
    "LicenseBuilder",
    "LinkBuilder",
    "MediaTypeBuilder",
    "OAuthFlowBuilder",
    "OAuthFlowsBuilder",
    "OpenAPIBuilder",
    "OperationBuilder",
    "ParameterBuilder",
    "PathItemBuilder",
    "ReferenceBuilder",
    "RequestBodyBuilder",
    "ResponseBuilder",
    "SchemaBuilder",
    "SecurityRequirementBuilder",
    "SecuritySchemeBuilder",
    "ServerBuilder",
    "ServerVariableBuilder",
    "TagBuilder",
    "XMLBuilder",
]


class LicenseBuilder(v3_0.LicenseBuilder):
    """Builds a License Object; identifier and url are mutually exclusive."""

    node_type = License

    def identifier(self, identifier: str) -> Self:
        return self._set("identifier", identifier, exclusive=("url",))

    def url(self, url: str) -> Self:
        return self._set("url", url, exclusive=("identifier",), url=True)


class InfoBuilder(v3_0.InfoBuilder):
    node_type = Info

    def summary(self, summary: str) -> Self:
        return self._set("summary", summary)


class ReferenceBuilder(v3_0.ReferenceBuilder):
    """In 3.1 a Reference may also carry a summary and a description."""

    def summary(self, summary: str) -> Self:
        return self._set("summary", summary)

    def description(self, description: str) -> Self:
        return self._set("description", description)


class DiscriminatorBuilder(ExtensibleNodeBuilder[Discriminator], v3_0.DiscriminatorBuilder):
    node_type = Discriminator


class SchemaBuilder(v3_0.SchemaBuilder):
    """
    Builds a 3.1 Schema Object.

    type() also accepts a list of type names, including "null".
    """

    node_type = Schema
    type_choices = SCHEMA_TYPES

    def id(self, schema_id: str) -> Self:
        return self._set("id_", schema_id, url=True)

    def schema_uri(self, schema_uri: str) -> Self:
        return self._set("schema_uri", schema_uri, url=True)

    def anchor(self, anchor: str) -> Self:
        return self._set("anchor", anchor)

    def comment(self, comment: str) -> Self:
        return self._set("comment", comment)

    def add_def(self, name: str, schema: Schema | Reference) -> Self:
        return self._put("defs", name, schema)

    def add_defs(self, defs: Mapping[str, Schema | Reference]) -> Self:
        return self._put_all(self.add_def, defs)

    def const(self, const: Any) -> Self:
        return self._set("const", const)

    def if_(self, schema: Schema | Reference) -> Self:
        return self._set("if_", schema)

    def then(self, schema: Schema | Reference) -> Self:
        return self._set("then", schema)

    def else_(self, schema: Schema | Reference) -> Self:
        return self._set("else_", schema)

    def prefix_items(self, schemas: Iterable[Schema | Reference]) -> Self:
        return self._set("prefix_items", list(schemas), non_empty=True)

    def contains(self, schema: Schema | Reference) -> Self:
        return self._set("contains", schema)

    def min_contains(self, min_contains: int) -> Self:
        return self._set("min_contains", min_contains)

    def max_contains(self, max_contains: int) -> Self:
        return self._set("max_contains", max_contains)

    def add_pattern_property(self, pattern: str, schema: Schema | Reference) -> Self:
        return self._put("pattern_properties", pattern, schema)

    def add_pattern_properties(self, properties: Mapping[str, Schema | Reference]) -> Self:
        return self._put_all(self.add_pattern_property, properties)

    def property_names(self, schema: Schema | Reference) -> Self:
        return self._set("property_names", schema)

    def unevaluated_items(self, value: bool | Schema | Reference) -> Self:
        return self._set("unevaluated_items", value)

    def unevaluated_properties(self, value: bool | Schema | Reference) -> Self:
        return self._set("unevaluated_properties", value)

    def add_dependent_required(self, name: str, required: Iterable[str]) -> Self:
        return self._put("dependent_required", name, list(required))

    def add_dependent_schema(self, name: str, schema: Schema | Reference) -> Self:
        return self._put("dependent_schemas", name, schema)

    def content_media_type(self, content_media_type: str) -> Self:
        return self._set("content_media_type", content_media_type)

    def content_encoding(self, content_encoding: str) -> Self:
        return self._set("content_encoding", content_encoding)

    def examples(self, examples: Iterable[Any]) -> Self:
        return self._set("examples", list(examples), non_empty=True)

    def type(self, schema_type: str | list[str]) -> Self:
        if isinstance(schema_type, list | tuple):
            return self._set("type", list(schema_type), non_empty=True, choices=self.type_choices)
        return super().type(schema_type)


class OperationBuilder(v3_0.OperationBuilder):
    """In 3.1 the responses map is optional and only appears once populated."""

    initial_maps = ()


class ComponentsBuilder(v3_0.ComponentsBuilder):
    node_type = Components

    def add_path_item(self, name: str, path_item: PathItem | Reference) -> Self:
        return self._component("path_items", name, path_item)

    def add_path_items(self, path_items: Mapping[str, PathItem | Reference]) -> Self:
        return self._put_all(self.add_path_item, path_items)


class OpenAPIBuilder(v3_0.OpenAPIBuilder):
    """
    Builds the root of an OpenAPI 3.1 document.

    paths is optional in 3.1: a document may describe only webhooks or only
    components.
    """

    node_type = OpenAPI
    openapi_version = OPENAPI_VERSION
    initial_maps = ()

    def json_schema_dialect(self, dialect: str) -> Self:
        return self._set("json_schema_dialect", dialect, url=True)

    def add_webhook(self, name: str, path_item: PathItem | Reference) -> Self:
        return self._put("webhooks", name, path_item)

    def add_webhooks(self, webhooks: Mapping[str, PathItem | Reference]) -> Self:
        return self._put_all(self.add_webhook, webhooks)
