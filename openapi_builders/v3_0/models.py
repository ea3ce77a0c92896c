"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Node catalog for OpenAPI 3.0.

One pydantic model per object kind of the OpenAPI 3.0.3 object model. Python
field names are snake_case; the serialized name is the field alias when it
differs (camelCase names, "$ref", and names that clash with Python keywords
or pydantic attributes such as "in", "not" and "schema").

Drafts are always created through model_construct(), so annotations document
the shape of each kind rather than drive validation.
"""

from typing import Any, ClassVar

from pydantic import Field

from openapi_builders.nodes import BaseNode, OpenAPINode, Reference

OPENAPI_VERSION = "3.0.3"

PARAMETER_LOCATIONS = ("query", "header", "path", "cookie")
PARAMETER_STYLES = (
    "matrix",
    "label",
    "form",
    "simple",
    "spaceDelimited",
    "pipeDelimited",
    "deepObject",
)
SCHEMA_TYPES = ("array", "boolean", "integer", "number", "object", "string")
SECURITY_SCHEME_TYPES = ("apiKey", "http", "oauth2", "openIdConnect")
API_KEY_LOCATIONS = ("query", "header", "cookie")
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class Contact(OpenAPINode):
    """Contact information for the exposed API."""

    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(OpenAPINode):
    """License information for the exposed API."""

    name: str
    url: str | None = None


class Info(OpenAPINode):
    """Metadata about the API."""

    title: str
    description: str | None = None
    terms_of_service: str | None = Field(default=None, alias="termsOfService")
    contact: Contact | None = None
    license: License | None = None
    version: str


class ServerVariable(OpenAPINode):
    enum: list[str] | None = None
    default: str
    description: str | None = None


class Server(OpenAPINode):
    url: str
    description: str | None = None
    variables: dict[str, ServerVariable] | None = None


class ExternalDocs(OpenAPINode):
    """Pointer to additional external documentation."""

    description: str | None = None
    url: str


class XML(OpenAPINode):
    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: bool | None = None
    wrapped: bool | None = None


class Discriminator(BaseNode):
    property_name: str = Field(alias="propertyName")
    mapping: dict[str, str] | None = None


class Schema(OpenAPINode):
    """
    Schema Object, the 3.0 subset of JSON Schema plus OpenAPI keywords.
    """

    title: str | None = None
    multiple_of: float | None = Field(default=None, alias="multipleOf")
    maximum: float | None = None
    exclusive_maximum: bool | None = Field(default=None, alias="exclusiveMaximum")
    minimum: float | None = None
    exclusive_minimum: bool | None = Field(default=None, alias="exclusiveMinimum")
    max_length: int | None = Field(default=None, alias="maxLength")
    min_length: int | None = Field(default=None, alias="minLength")
    pattern: str | None = None
    max_items: int | None = Field(default=None, alias="maxItems")
    min_items: int | None = Field(default=None, alias="minItems")
    unique_items: bool | None = Field(default=None, alias="uniqueItems")
    max_properties: int | None = Field(default=None, alias="maxProperties")
    min_properties: int | None = Field(default=None, alias="minProperties")
    required: list[str] | None = None
    enum: list[Any] | None = None
    type: str | None = None
    all_of: list["Schema | Reference"] | None = Field(default=None, alias="allOf")
    one_of: list["Schema | Reference"] | None = Field(default=None, alias="oneOf")
    any_of: list["Schema | Reference"] | None = Field(default=None, alias="anyOf")
    not_: "Schema | Reference | None" = Field(default=None, alias="not")
    items: "Schema | Reference | None" = None
    properties: dict[str, "Schema | Reference"] | None = None
    additional_properties: "bool | Schema | Reference | None" = Field(
        default=None, alias="additionalProperties"
    )
    description: str | None = None
    format: str | None = None
    default: Any = None
    nullable: bool | None = None
    discriminator: Discriminator | None = None
    read_only: bool | None = Field(default=None, alias="readOnly")
    write_only: bool | None = Field(default=None, alias="writeOnly")
    xml: XML | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    example: Any = None
    deprecated: bool | None = None


class Example(OpenAPINode):
    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = Field(default=None, alias="externalValue")


class Header(OpenAPINode):
    """Header Object: a Parameter without name and location."""

    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = Field(default=None, alias="allowReserved")
    schema_: Schema | Reference | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Example | Reference] | None = None
    content: dict[str, "MediaType"] | None = None


class Encoding(OpenAPINode):
    content_type: str | None = Field(default=None, alias="contentType")
    headers: dict[str, Header | Reference] | None = None
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = Field(default=None, alias="allowReserved")


class MediaType(OpenAPINode):
    schema_: Schema | Reference | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Example | Reference] | None = None
    encoding: dict[str, Encoding] | None = None


class Parameter(OpenAPINode):
    """Parameter Object; name and location are required."""

    name: str
    in_: str = Field(alias="in")
    description: str | None = None
    required: bool | None = None
    deprecated: bool | None = None
    allow_empty_value: bool | None = Field(default=None, alias="allowEmptyValue")
    style: str | None = None
    explode: bool | None = None
    allow_reserved: bool | None = Field(default=None, alias="allowReserved")
    schema_: Schema | Reference | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, Example | Reference] | None = None
    content: dict[str, MediaType] | None = None


class RequestBody(OpenAPINode):
    description: str | None = None
    content: dict[str, MediaType] | None = None
    required: bool | None = None


class Link(OpenAPINode):
    operation_ref: str | None = Field(default=None, alias="operationRef")
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: dict[str, Any] | None = None
    request_body: Any = Field(default=None, alias="requestBody")
    description: str | None = None
    server: Server | None = None


class Response(OpenAPINode):
    description: str
    headers: dict[str, Header | Reference] | None = None
    content: dict[str, MediaType] | None = None
    links: dict[str, Link | Reference] | None = None


class SecurityRequirement(BaseNode):
    """
    Security Requirement Object.

    A map from security scheme name to the scopes it needs. The entries live
    in an internal field and are rendered as the object itself.
    """

    requirements: dict[str, list[str]] = Field(default_factory=dict)

    internal_fields: ClassVar[frozenset[str]] = frozenset({"requirements"})

    def to_dict(self) -> dict[str, Any]:
        return {name: list(scopes) for name, scopes in self.requirements.items()}


class OAuthFlow(OpenAPINode):
    authorization_url: str | None = Field(default=None, alias="authorizationUrl")
    token_url: str | None = Field(default=None, alias="tokenUrl")
    refresh_url: str | None = Field(default=None, alias="refreshUrl")
    scopes: dict[str, str]


class OAuthFlows(OpenAPINode):
    implicit: OAuthFlow | None = None
    password: OAuthFlow | None = None
    client_credentials: OAuthFlow | None = Field(default=None, alias="clientCredentials")
    authorization_code: OAuthFlow | None = Field(default=None, alias="authorizationCode")


class SecurityScheme(OpenAPINode):
    type: str
    description: str | None = None
    name: str | None = None
    in_: str | None = Field(default=None, alias="in")
    scheme: str | None = None
    bearer_format: str | None = Field(default=None, alias="bearerFormat")
    flows: OAuthFlows | None = None
    open_id_connect_url: str | None = Field(default=None, alias="openIdConnectUrl")


class Tag(OpenAPINode):
    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")


class Operation(OpenAPINode):
    """A single API operation on a path."""

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[Parameter | Reference] | None = None
    request_body: RequestBody | Reference | None = Field(default=None, alias="requestBody")
    responses: dict[str, Response | Reference] | None = None
    callbacks: dict[str, "Callback | Reference"] | None = None
    deprecated: bool | None = None
    security: list[SecurityRequirement] | None = None
    servers: list[Server] | None = None


class PathItem(OpenAPINode):
    """The operations available on a single path."""

    ref: str | None = Field(default=None, alias="$ref")
    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] | None = None
    parameters: list[Parameter | Reference] | None = None

    def operations(self) -> dict[str, Operation]:
        """Populated operations keyed by HTTP method, in method order."""
        return {method: getattr(self, method) for method in HTTP_METHODS if self.has(method)}


class Callback(OpenAPINode):
    """
    Callback Object.

    A map from runtime expression to Path Item, rendered as the object itself
    alongside any extensions.
    """

    expressions: dict[str, PathItem] = Field(default_factory=dict)

    internal_fields: ClassVar[frozenset[str]] = frozenset({"extensions", "expressions"})

    def to_dict(self) -> dict[str, Any]:
        data = {expression: item.to_dict() for expression, item in self.expressions.items()}
        data.update(super().to_dict())
        return data


class Components(OpenAPINode):
    """Reusable objects for different aspects of the document."""

    schemas: dict[str, Schema | Reference] | None = None
    responses: dict[str, Response | Reference] | None = None
    parameters: dict[str, Parameter | Reference] | None = None
    examples: dict[str, Example | Reference] | None = None
    request_bodies: dict[str, RequestBody | Reference] | None = Field(
        default=None, alias="requestBodies"
    )
    headers: dict[str, Header | Reference] | None = None
    security_schemes: dict[str, SecurityScheme | Reference] | None = Field(
        default=None, alias="securitySchemes"
    )
    links: dict[str, Link | Reference] | None = None
    callbacks: dict[str, Callback | Reference] | None = None


class OpenAPI(OpenAPINode):
    """The root of an OpenAPI 3.0 document."""

    openapi: str
    info: Info
    servers: list[Server] | None = None
    paths: dict[str, PathItem]
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = Field(default=None, alias="externalDocs")


Schema.model_rebuild()
Header.model_rebuild()
Operation.model_rebuild()
