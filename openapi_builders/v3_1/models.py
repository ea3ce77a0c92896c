"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Node catalog for OpenAPI 3.1.

Kinds whose field set is unchanged from 3.0 are re-exported from the 3.0
catalog. The kinds below extend their 3.0 counterparts: Info gains summary,
License gains identifier, Components gains pathItems, the root gains
webhooks and jsonSchemaDialect and no longer requires paths, and Schema
follows JSON Schema 2020-12.
"""

from typing import Any

from pydantic import Field

from openapi_builders.nodes import OpenAPINode, Reference
from openapi_builders.v3_0 import models as v3_0
from openapi_builders.v3_0.models import (
    API_KEY_LOCATIONS,
    HTTP_METHODS,
    PARAMETER_LOCATIONS,
    PARAMETER_STYLES,
    SECURITY_SCHEME_TYPES,
    XML,
    Callback,
    Contact,
    Encoding,
    Example,
    ExternalDocs,
    Header,
    Link,
    MediaType,
    OAuthFlow,
    OAuthFlows,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    SecurityRequirement,
    SecurityScheme,
    Server,
    ServerVariable,
    Tag,
)

OPENAPI_VERSION = "3.1.0"

SCHEMA_TYPES = ("array", "boolean", "integer", "null", "number", "object", "string")

__all__ = [
    "API_KEY_LOCATIONS",
    "HTTP_METHODS",
    "OPENAPI_VERSION",
    "PARAMETER_LOCATIONS",
    "PARAMETER_STYLES",
    "SCHEMA_TYPES",
    "SECURITY_SCHEME_TYPES",
    "XML",
    "Callback",
    "Components",
    "Contact",
    "Discriminator",
    "Encoding",
    "Example",
    "ExternalDocs",
    "Header",
    "Info",
    "License",
    "Link",
    "MediaType",
    "OAuthFlow",
    "OAuthFlows",
    "OpenAPI",
    "Operation",
    "Parameter",
    "PathItem",
    "Reference",
    "RequestBody",
    "Response",
    "Schema",
    "SecurityRequirement",
    "SecurityScheme",
    "Server",
    "ServerVariable",
    "Tag",
]


class License(v3_0.License):
    """License information; identifier (SPDX) and url are mutually exclusive."""

    identifier: str | None = None


class Info(v3_0.Info):
    summary: str | None = None


class Discriminator(OpenAPINode):
    """3.1 discriminators accept specification extensions."""

    property_name: str = Field(alias="propertyName")
    mapping: dict[str, str] | None = None


class Schema(v3_0.Schema):
    """
    Schema Object, a superset of JSON Schema 2020-12.

    exclusiveMaximum and exclusiveMinimum are numbers rather than flags, and
    type may be a list of type names.
    """

    exclusive_maximum: float | None = Field(default=None, alias="exclusiveMaximum")
    exclusive_minimum: float | None = Field(default=None, alias="exclusiveMinimum")
    type: str | list[str] | None = None
    discriminator: Discriminator | None = None

    id_: str | None = Field(default=None, alias="$id")
    schema_uri: str | None = Field(default=None, alias="$schema")
    anchor: str | None = Field(default=None, alias="$anchor")
    comment: str | None = Field(default=None, alias="$comment")
    defs: dict[str, "Schema | Reference"] | None = Field(default=None, alias="$defs")
    const: Any = None
    if_: "Schema | Reference | None" = Field(default=None, alias="if")
    then: "Schema | Reference | None" = None
    else_: "Schema | Reference | None" = Field(default=None, alias="else")
    prefix_items: list["Schema | Reference"] | None = Field(default=None, alias="prefixItems")
    contains: "Schema | Reference | None" = None
    min_contains: int | None = Field(default=None, alias="minContains")
    max_contains: int | None = Field(default=None, alias="maxContains")
    pattern_properties: dict[str, "Schema | Reference"] | None = Field(
        default=None, alias="patternProperties"
    )
    property_names: "Schema | Reference | None" = Field(default=None, alias="propertyNames")
    unevaluated_items: "bool | Schema | Reference | None" = Field(
        default=None, alias="unevaluatedItems"
    )
    unevaluated_properties: "bool | Schema | Reference | None" = Field(
        default=None, alias="unevaluatedProperties"
    )
    dependent_required: dict[str, list[str]] | None = Field(default=None, alias="dependentRequired")
    dependent_schemas: dict[str, "Schema | Reference"] | None = Field(
        default=None, alias="dependentSchemas"
    )
    content_media_type: str | None = Field(default=None, alias="contentMediaType")
    content_encoding: str | None = Field(default=None, alias="contentEncoding")
    examples: list[Any] | None = None


class Components(v3_0.Components):
    path_items: dict[str, PathItem | Reference] | None = Field(default=None, alias="pathItems")


class OpenAPI(v3_0.OpenAPI):
    """The root of an OpenAPI 3.1 document; paths, components and webhooks are all optional."""

    json_schema_dialect: str | None = Field(default=None, alias="jsonSchemaDialect")
    paths: dict[str, PathItem] | None = None
    webhooks: dict[str, PathItem | Reference] | None = None
    components: Components | None = None


Schema.model_rebuild()
