"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Fluent builders for the OpenAPI 3.0 node catalog.

Every builder declares one method per field of its node kind and delegates
the invariant checks to the NodeBuilder protocol. Required fields are taken
by the constructor. Map fields get an add_<item>(key, value) adder and a bulk
add_<items>(mapping); list fields get add_<item>(value) and add_<items>(values).

Example:
-------
    info = InfoBuilder("Widget API", "1.0.0").description("Widgets").build()
    document = (
        OpenAPIBuilder(info)
        .add_path("/widgets", PathItemBuilder().get(operation).build())
        .build()
    )

"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Self

from openapi_builders import checks, serializer
from openapi_builders.builder import ExtensibleNodeBuilder, NodeBuilder
from openapi_builders.nodes import Reference
from openapi_builders.v3_0.models import (
    API_KEY_LOCATIONS,
    OPENAPI_VERSION,
    PARAMETER_LOCATIONS,
    PARAMETER_STYLES,
    SCHEMA_TYPES,
    SECURITY_SCHEME_TYPES,
    XML,
    Callback,
    Components,
    Contact,
    Discriminator,
    Encoding,
    Example,
    ExternalDocs,
    Header,
    Info,
    License,
    Link,
    MediaType,
    OAuthFlow,
    OAuthFlows,
    OpenAPI,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    Schema,
    SecurityRequirement,
    SecurityScheme,
    Server,
    ServerVariable,
    Tag,
)

logger = logging.getLogger(__name__)


# Leaf nodes -----------------------------------------------------------------


class ContactBuilder(ExtensibleNodeBuilder[Contact]):
    node_type = Contact

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def url(self, url: str) -> Self:
        return self._set("url", url, url=True)

    def email(self, email: str) -> Self:
        return self._set("email", email)


class LicenseBuilder(ExtensibleNodeBuilder[License]):
    node_type = License

    def __init__(self, name: str):
        super().__init__(name=name)

    def url(self, url: str) -> Self:
        return self._set("url", url, url=True)


class InfoBuilder(ExtensibleNodeBuilder[Info]):
    """Builds the Info Object; title and version are required."""

    node_type = Info

    def __init__(self, title: str, version: str):
        super().__init__(title=title, version=version)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def terms_of_service(self, terms_of_service: str) -> Self:
        return self._set("terms_of_service", terms_of_service, url=True)

    def contact(self, contact: Contact) -> Self:
        return self._set("contact", contact)

    def license(self, license: License) -> Self:
        return self._set("license", license)


class ServerVariableBuilder(ExtensibleNodeBuilder[ServerVariable]):
    node_type = ServerVariable

    def __init__(self, default: str):
        super().__init__(default=default)

    def enum(self, values: list[str]) -> Self:
        return self._set("enum", list(values), non_empty=True)

    def description(self, description: str) -> Self:
        return self._set("description", description)


class ServerBuilder(ExtensibleNodeBuilder[Server]):
    """
    Builds a Server Object.

    The url may be relative ("/v1") and may contain {variable} templates.
    """

    node_type = Server

    def __init__(self, url: str):
        super().__init__()
        self._set("url", url, relative_url=True)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def add_variable(self, name: str, variable: ServerVariable) -> Self:
        return self._put("variables", name, variable)

    def add_variables(self, variables: Mapping[str, ServerVariable]) -> Self:
        return self._put_all(self.add_variable, variables)


class ExternalDocsBuilder(ExtensibleNodeBuilder[ExternalDocs]):
    node_type = ExternalDocs

    def __init__(self, url: str):
        super().__init__()
        self._set("url", url, url=True)

    def description(self, description: str) -> Self:
        return self._set("description", description)


class TagBuilder(ExtensibleNodeBuilder[Tag]):
    node_type = Tag

    def __init__(self, name: str):
        super().__init__(name=name)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def external_docs(self, external_docs: ExternalDocs) -> Self:
        return self._set("external_docs", external_docs)


class ReferenceBuilder(NodeBuilder[Reference]):
    """Builds a Reference Object, which substitutes for any other node kind."""

    node_type = Reference

    def __init__(self, ref: str):
        super().__init__(ref=ref)


class XMLBuilder(ExtensibleNodeBuilder[XML]):
    node_type = XML

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def namespace(self, namespace: str) -> Self:
        return self._set("namespace", namespace, url=True)

    def prefix(self, prefix: str) -> Self:
        return self._set("prefix", prefix)

    def attribute(self, attribute: bool) -> Self:
        return self._set("attribute", attribute)

    def wrapped(self, wrapped: bool) -> Self:
        return self._set("wrapped", wrapped)


class DiscriminatorBuilder(NodeBuilder[Discriminator]):
    node_type = Discriminator

    def __init__(self, property_name: str):
        super().__init__(property_name=property_name)

    def add_mapping(self, value: str, ref: str) -> Self:
        return self._put("mapping", value, ref)

    def add_mappings(self, mappings: Mapping[str, str]) -> Self:
        return self._put_all(self.add_mapping, mappings)


# Schema ---------------------------------------------------------------------


class SchemaBuilder(ExtensibleNodeBuilder[Schema]):
    """
    Builds a Schema Object.

    The optional constructor arguments are routed through their setters, so
    SchemaBuilder("string", "Name of the widget") is shorthand for
    SchemaBuilder().type("string").description("Name of the widget").
    """

    node_type = Schema
    type_choices = SCHEMA_TYPES

    def __init__(
        self,
        schema_type: str | None = None,
        description: str | None = None,
        nullable: bool | None = None,
    ):
        super().__init__()
        if schema_type is not None:
            self.type(schema_type)
        if description is not None:
            self.description(description)
        if nullable is not None:
            self.nullable(nullable)

    def title(self, title: str) -> Self:
        return self._set("title", title)

    def multiple_of(self, multiple_of: float) -> Self:
        return self._set("multiple_of", multiple_of)

    def maximum(self, maximum: float) -> Self:
        return self._set("maximum", maximum)

    def exclusive_maximum(self, exclusive_maximum: Any) -> Self:
        return self._set("exclusive_maximum", exclusive_maximum)

    def minimum(self, minimum: float) -> Self:
        return self._set("minimum", minimum)

    def exclusive_minimum(self, exclusive_minimum: Any) -> Self:
        return self._set("exclusive_minimum", exclusive_minimum)

    def max_length(self, max_length: int) -> Self:
        return self._set("max_length", max_length)

    def min_length(self, min_length: int) -> Self:
        return self._set("min_length", min_length)

    def pattern(self, pattern: str) -> Self:
        return self._set("pattern", pattern)

    def max_items(self, max_items: int) -> Self:
        return self._set("max_items", max_items)

    def min_items(self, min_items: int) -> Self:
        return self._set("min_items", min_items)

    def unique_items(self, unique_items: bool) -> Self:
        return self._set("unique_items", unique_items)

    def max_properties(self, max_properties: int) -> Self:
        return self._set("max_properties", max_properties)

    def min_properties(self, min_properties: int) -> Self:
        return self._set("min_properties", min_properties)

    def required(self, names: Iterable[str]) -> Self:
        return self._set("required", list(names), non_empty=True)

    def enum(self, values: Iterable[Any]) -> Self:
        return self._set("enum", list(values), non_empty=True)

    def all_of(self, schemas: Iterable[Schema | Reference]) -> Self:
        return self._set("all_of", list(schemas), non_empty=True)

    def one_of(self, schemas: Iterable[Schema | Reference]) -> Self:
        return self._set("one_of", list(schemas), non_empty=True)

    def any_of(self, schemas: Iterable[Schema | Reference]) -> Self:
        return self._set("any_of", list(schemas), non_empty=True)

    def not_(self, schema: Schema | Reference) -> Self:
        return self._set("not_", schema)

    def items(self, schema: Schema | Reference) -> Self:
        return self._set("items", schema)

    def add_property(self, name: str, schema: Schema | Reference) -> Self:
        return self._put("properties", name, schema)

    def add_properties(self, properties: Mapping[str, Schema | Reference]) -> Self:
        return self._put_all(self.add_property, properties)

    def additional_properties(self, additional_properties: bool | Schema | Reference) -> Self:
        return self._set("additional_properties", additional_properties)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def format(self, value_format: str) -> Self:
        return self._set("format", value_format)

    def default(self, default: Any) -> Self:
        return self._set("default", default)

    def nullable(self, nullable: bool) -> Self:
        return self._set("nullable", nullable)

    def discriminator(self, discriminator: Discriminator) -> Self:
        return self._set("discriminator", discriminator)

    def read_only(self, read_only: bool) -> Self:
        return self._set("read_only", read_only)

    def write_only(self, write_only: bool) -> Self:
        return self._set("write_only", write_only)

    def xml(self, xml: XML) -> Self:
        return self._set("xml", xml)

    def external_docs(self, external_docs: ExternalDocs) -> Self:
        return self._set("external_docs", external_docs)

    def example(self, example: Any) -> Self:
        return self._set("example", example)

    def deprecated(self, deprecated: bool) -> Self:
        return self._set("deprecated", deprecated)

    # Declared last: inside this class body the name shadows the builtin
    def type(self, schema_type: str) -> Self:
        return self._set("type", schema_type, choices=self.type_choices)


# Content --------------------------------------------------------------------


class ExampleBuilder(ExtensibleNodeBuilder[Example]):
    """value and externalValue are mutually exclusive."""

    node_type = Example

    def summary(self, summary: str) -> Self:
        return self._set("summary", summary)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def value(self, value: Any) -> Self:
        return self._set("value", value, exclusive=("external_value",))

    def external_value(self, external_value: str) -> Self:
        return self._set("external_value", external_value, exclusive=("value",), url=True)


class EncodingBuilder(ExtensibleNodeBuilder[Encoding]):
    node_type = Encoding

    def content_type(self, content_type: str) -> Self:
        return self._set("content_type", content_type)

    def add_header(self, name: str, header: Header | Reference) -> Self:
        return self._put("headers", name, header)

    def add_headers(self, headers: Mapping[str, Header | Reference]) -> Self:
        return self._put_all(self.add_header, headers)

    def style(self, style: str) -> Self:
        return self._set("style", style, choices=PARAMETER_STYLES)

    def explode(self, explode: bool) -> Self:
        return self._set("explode", explode)

    def allow_reserved(self, allow_reserved: bool) -> Self:
        return self._set("allow_reserved", allow_reserved)


class MediaTypeBuilder(ExtensibleNodeBuilder[MediaType]):
    """example and examples are mutually exclusive."""

    node_type = MediaType

    def schema(self, schema: Schema | Reference) -> Self:
        return self._set("schema_", schema)

    def example(self, example: Any) -> Self:
        return self._set("example", example, exclusive=("examples",))

    def add_example(self, name: str, example: Example | Reference) -> Self:
        return self._put("examples", name, example, exclusive=("example",))

    def add_examples(self, examples: Mapping[str, Example | Reference]) -> Self:
        return self._put_all(self.add_example, examples)

    def add_encoding(self, name: str, encoding: Encoding) -> Self:
        return self._put("encoding", name, encoding)

    def add_encodings(self, encodings: Mapping[str, Encoding]) -> Self:
        return self._put_all(self.add_encoding, encodings)


class BaseParameterBuilder(ExtensibleNodeBuilder):
    """
    Fields shared by Parameter and Header Objects.

    example and examples are mutually exclusive, as are schema and content.
    """

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def required(self, required: bool) -> Self:
        return self._set("required", required)

    def deprecated(self, deprecated: bool) -> Self:
        return self._set("deprecated", deprecated)

    def allow_empty_value(self, allow_empty_value: bool) -> Self:
        return self._set("allow_empty_value", allow_empty_value)

    def style(self, style: str) -> Self:
        return self._set("style", style, choices=PARAMETER_STYLES)

    def explode(self, explode: bool) -> Self:
        return self._set("explode", explode)

    def allow_reserved(self, allow_reserved: bool) -> Self:
        return self._set("allow_reserved", allow_reserved)

    def schema(self, schema: Schema | Reference) -> Self:
        return self._set("schema_", schema, exclusive=("content",))

    def example(self, example: Any) -> Self:
        return self._set("example", example, exclusive=("examples",))

    def add_example(self, name: str, example: Example | Reference) -> Self:
        return self._put("examples", name, example, exclusive=("example",))

    def add_examples(self, examples: Mapping[str, Example | Reference]) -> Self:
        return self._put_all(self.add_example, examples)

    def add_content(self, media_type: str, content: MediaType) -> Self:
        return self._put("content", media_type, content, exclusive=("schema_",))

    def add_contents(self, contents: Mapping[str, MediaType]) -> Self:
        return self._put_all(self.add_content, contents)


class ParameterBuilder(BaseParameterBuilder):
    """Builds a Parameter Object; name and location ("in") are required."""

    node_type = Parameter

    def __init__(self, location: str, name: str):
        super().__init__()
        self._set("name", name)
        self._set("in_", location, choices=PARAMETER_LOCATIONS)


class HeaderBuilder(BaseParameterBuilder):
    node_type = Header


class RequestBodyBuilder(ExtensibleNodeBuilder[RequestBody]):
    node_type = RequestBody

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def add_content(self, media_type: str, content: MediaType) -> Self:
        return self._put("content", media_type, content)

    def add_contents(self, contents: Mapping[str, MediaType]) -> Self:
        return self._put_all(self.add_content, contents)

    def required(self, required: bool) -> Self:
        return self._set("required", required)


class LinkBuilder(ExtensibleNodeBuilder[Link]):
    """operationRef and operationId are mutually exclusive."""

    node_type = Link

    def operation_ref(self, operation_ref: str) -> Self:
        return self._set("operation_ref", operation_ref, exclusive=("operation_id",))

    def operation_id(self, operation_id: str) -> Self:
        return self._set("operation_id", operation_id, exclusive=("operation_ref",))

    def add_parameter(self, name: str, expression: Any) -> Self:
        return self._put("parameters", name, expression)

    def add_parameters(self, parameters: Mapping[str, Any]) -> Self:
        return self._put_all(self.add_parameter, parameters)

    def request_body(self, request_body: Any) -> Self:
        return self._set("request_body", request_body)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def server(self, server: Server) -> Self:
        return self._set("server", server)


class ResponseBuilder(ExtensibleNodeBuilder[Response]):
    node_type = Response

    def __init__(self, description: str):
        super().__init__(description=description)

    def add_header(self, name: str, header: Header | Reference) -> Self:
        return self._put("headers", name, header)

    def add_headers(self, headers: Mapping[str, Header | Reference]) -> Self:
        return self._put_all(self.add_header, headers)

    def add_content(self, media_type: str, content: MediaType) -> Self:
        return self._put("content", media_type, content)

    def add_contents(self, contents: Mapping[str, MediaType]) -> Self:
        return self._put_all(self.add_content, contents)

    def add_link(self, name: str, link: Link | Reference) -> Self:
        return self._put("links", name, link, key_check=checks.check_component_key)

    def add_links(self, links: Mapping[str, Link | Reference]) -> Self:
        return self._put_all(self.add_link, links)


# Security -------------------------------------------------------------------


class SecurityRequirementBuilder(NodeBuilder[SecurityRequirement]):
    """
    Builds a Security Requirement Object.

    Each entry names a security scheme and lists the scopes required from it
    (an empty list for schemes without scopes).
    """

    node_type = SecurityRequirement

    def add_requirement(self, scheme: str, scopes: Iterable[str] = ()) -> Self:
        return self._put("requirements", scheme, list(scopes))

    def add_requirements(self, requirements: Mapping[str, Iterable[str]]) -> Self:
        return self._put_all(self.add_requirement, requirements)


class OAuthFlowBuilder(ExtensibleNodeBuilder[OAuthFlow]):
    """Builds an OAuth Flow Object; the scopes map is always present."""

    node_type = OAuthFlow
    initial_maps = ("scopes",)

    def __init__(self, scopes: Mapping[str, str] | None = None):
        super().__init__()
        self.add_scopes(scopes or {})

    def authorization_url(self, authorization_url: str) -> Self:
        return self._set("authorization_url", authorization_url, url=True)

    def token_url(self, token_url: str) -> Self:
        return self._set("token_url", token_url, url=True)

    def refresh_url(self, refresh_url: str) -> Self:
        return self._set("refresh_url", refresh_url, url=True)

    def add_scope(self, name: str, description: str) -> Self:
        return self._put("scopes", name, description)

    def add_scopes(self, scopes: Mapping[str, str]) -> Self:
        return self._put_all(self.add_scope, scopes)


class OAuthFlowsBuilder(ExtensibleNodeBuilder[OAuthFlows]):
    node_type = OAuthFlows

    def implicit(self, flow: OAuthFlow) -> Self:
        return self._set("implicit", flow)

    def password(self, flow: OAuthFlow) -> Self:
        return self._set("password", flow)

    def client_credentials(self, flow: OAuthFlow) -> Self:
        return self._set("client_credentials", flow)

    def authorization_code(self, flow: OAuthFlow) -> Self:
        return self._set("authorization_code", flow)


class SecuritySchemeBuilder(ExtensibleNodeBuilder[SecurityScheme]):
    node_type = SecurityScheme

    def __init__(self, scheme_type: str):
        super().__init__()
        self._set("type", scheme_type, choices=SECURITY_SCHEME_TYPES)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def location(self, location: str) -> Self:
        return self._set("in_", location, choices=API_KEY_LOCATIONS)

    def scheme(self, scheme: str) -> Self:
        return self._set("scheme", scheme)

    def bearer_format(self, bearer_format: str) -> Self:
        return self._set("bearer_format", bearer_format)

    def flows(self, flows: OAuthFlows) -> Self:
        return self._set("flows", flows)

    def open_id_connect_url(self, open_id_connect_url: str) -> Self:
        return self._set("open_id_connect_url", open_id_connect_url, url=True)


# Operations and paths -------------------------------------------------------


class OperationBuilder(ExtensibleNodeBuilder[Operation]):
    """
    Builds an Operation Object.

    The 3.0 object model requires a responses map, so it starts out present
    and empty. Response keys must be "default", a status code or an NXX
    range. Parameters are not deduplicated since they may be References.
    """

    node_type = Operation
    initial_maps = ("responses",)

    def add_tag(self, tag: str) -> Self:
        return self._append("tags", tag, unique=True)

    def add_tags(self, tags: Iterable[str]) -> Self:
        return self._append_all(self.add_tag, tags)

    def summary(self, summary: str) -> Self:
        return self._set("summary", summary)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def external_docs(self, external_docs: ExternalDocs) -> Self:
        return self._set("external_docs", external_docs)

    def operation_id(self, operation_id: str) -> Self:
        return self._set("operation_id", operation_id)

    def add_parameter(self, parameter: Parameter | Reference) -> Self:
        return self._append("parameters", parameter)

    def add_parameters(self, parameters: Iterable[Parameter | Reference]) -> Self:
        return self._append_all(self.add_parameter, parameters)

    def request_body(self, request_body: RequestBody | Reference) -> Self:
        return self._set("request_body", request_body)

    def add_response(self, status: str, response: Response | Reference) -> Self:
        return self._put("responses", str(status), response, key_check=checks.check_status_code)

    def add_responses(self, responses: Mapping[str, Response | Reference]) -> Self:
        return self._put_all(self.add_response, responses)

    def add_callback(self, name: str, callback: Callback | Reference) -> Self:
        return self._put("callbacks", name, callback)

    def add_callbacks(self, callbacks: Mapping[str, Callback | Reference]) -> Self:
        return self._put_all(self.add_callback, callbacks)

    def deprecated(self, deprecated: bool) -> Self:
        return self._set("deprecated", deprecated)

    def add_security_requirement(self, requirement: SecurityRequirement) -> Self:
        return self._append("security", requirement, unique=True)

    def add_security_requirements(self, requirements: Iterable[SecurityRequirement]) -> Self:
        return self._append_all(self.add_security_requirement, requirements)

    def add_server(self, server: Server) -> Self:
        return self._append("servers", server, unique=True)

    def add_servers(self, servers: Iterable[Server]) -> Self:
        return self._append_all(self.add_server, servers)


class PathItemBuilder(ExtensibleNodeBuilder[PathItem]):
    """Builds a Path Item Object, one set-once field per HTTP method."""

    node_type = PathItem

    def ref(self, ref: str) -> Self:
        return self._set("ref", ref)

    def summary(self, summary: str) -> Self:
        return self._set("summary", summary)

    def description(self, description: str) -> Self:
        return self._set("description", description)

    def get(self, operation: Operation) -> Self:
        return self._set("get", operation)

    def put(self, operation: Operation) -> Self:
        return self._set("put", operation)

    def post(self, operation: Operation) -> Self:
        return self._set("post", operation)

    def delete(self, operation: Operation) -> Self:
        return self._set("delete", operation)

    def options(self, operation: Operation) -> Self:
        return self._set("options", operation)

    def head(self, operation: Operation) -> Self:
        return self._set("head", operation)

    def patch(self, operation: Operation) -> Self:
        return self._set("patch", operation)

    def trace(self, operation: Operation) -> Self:
        return self._set("trace", operation)

    def add_server(self, server: Server) -> Self:
        return self._append("servers", server, unique=True)

    def add_servers(self, servers: Iterable[Server]) -> Self:
        return self._append_all(self.add_server, servers)

    def add_parameter(self, parameter: Parameter | Reference) -> Self:
        return self._append("parameters", parameter)

    def add_parameters(self, parameters: Iterable[Parameter | Reference]) -> Self:
        return self._append_all(self.add_parameter, parameters)


class CallbackBuilder(ExtensibleNodeBuilder[Callback]):
    """Builds a Callback Object: runtime expressions mapped to Path Items."""

    node_type = Callback

    def add_expression(self, expression: str, path_item: PathItem) -> Self:
        return self._put("expressions", expression, path_item)

    def add_expressions(self, expressions: Mapping[str, PathItem]) -> Self:
        return self._put_all(self.add_expression, expressions)


class ComponentsBuilder(ExtensibleNodeBuilder[Components]):
    """Builds a Components Object; every key must be a valid component name."""

    node_type = Components

    def _component(self, field: str, name: str, value: Any) -> Self:
        return self._put(field, name, value, key_check=checks.check_component_key)

    def add_schema(self, name: str, schema: Schema | Reference) -> Self:
        return self._component("schemas", name, schema)

    def add_schemas(self, schemas: Mapping[str, Schema | Reference]) -> Self:
        return self._put_all(self.add_schema, schemas)

    def add_response(self, name: str, response: Response | Reference) -> Self:
        return self._component("responses", name, response)

    def add_responses(self, responses: Mapping[str, Response | Reference]) -> Self:
        return self._put_all(self.add_response, responses)

    def add_parameter(self, name: str, parameter: Parameter | Reference) -> Self:
        return self._component("parameters", name, parameter)

    def add_parameters(self, parameters: Mapping[str, Parameter | Reference]) -> Self:
        return self._put_all(self.add_parameter, parameters)

    def add_example(self, name: str, example: Example | Reference) -> Self:
        return self._component("examples", name, example)

    def add_examples(self, examples: Mapping[str, Example | Reference]) -> Self:
        return self._put_all(self.add_example, examples)

    def add_request_body(self, name: str, request_body: RequestBody | Reference) -> Self:
        return self._component("request_bodies", name, request_body)

    def add_request_bodies(self, request_bodies: Mapping[str, RequestBody | Reference]) -> Self:
        return self._put_all(self.add_request_body, request_bodies)

    def add_header(self, name: str, header: Header | Reference) -> Self:
        return self._component("headers", name, header)

    def add_headers(self, headers: Mapping[str, Header | Reference]) -> Self:
        return self._put_all(self.add_header, headers)

    def add_security_scheme(self, name: str, scheme: SecurityScheme | Reference) -> Self:
        return self._component("security_schemes", name, scheme)

    def add_security_schemes(self, schemes: Mapping[str, SecurityScheme | Reference]) -> Self:
        return self._put_all(self.add_security_scheme, schemes)

    def add_link(self, name: str, link: Link | Reference) -> Self:
        return self._component("links", name, link)

    def add_links(self, links: Mapping[str, Link | Reference]) -> Self:
        return self._put_all(self.add_link, links)

    def add_callback(self, name: str, callback: Callback | Reference) -> Self:
        return self._component("callbacks", name, callback)

    def add_callbacks(self, callbacks: Mapping[str, Callback | Reference]) -> Self:
        return self._put_all(self.add_callback, callbacks)


# Document root --------------------------------------------------------------


class OpenAPIBuilder(ExtensibleNodeBuilder[OpenAPI]):
    """
    Builds the root OpenAPI Object.

    The openapi version string is fixed per family and the Info Object is
    required. Path keys must begin with "/".
    """

    node_type = OpenAPI
    openapi_version = OPENAPI_VERSION
    initial_maps = ("paths",)

    def __init__(self, info: Info):
        super().__init__(openapi=self.openapi_version, info=info)

    def add_server(self, server: Server) -> Self:
        return self._append("servers", server, unique=True)

    def add_servers(self, servers: Iterable[Server]) -> Self:
        return self._append_all(self.add_server, servers)

    def add_path(self, path: str, path_item: PathItem) -> Self:
        return self._put("paths", path, path_item, key_check=checks.check_path)

    def add_paths(self, paths: Mapping[str, PathItem]) -> Self:
        return self._put_all(self.add_path, paths)

    def components(self, components: Components) -> Self:
        return self._set("components", components)

    def add_security_requirement(self, requirement: SecurityRequirement) -> Self:
        return self._append("security", requirement, unique=True)

    def add_security_requirements(self, requirements: Iterable[SecurityRequirement]) -> Self:
        return self._append_all(self.add_security_requirement, requirements)

    def add_tag(self, tag: Tag) -> Self:
        return self._append("tags", tag, unique=True)

    def add_tags(self, tags: Iterable[Tag]) -> Self:
        return self._append_all(self.add_tag, tags)

    def external_docs(self, external_docs: ExternalDocs) -> Self:
        return self._set("external_docs", external_docs)

    def build(self) -> OpenAPI:
        document = super().build()
        paths = document.paths if document.has("paths") else {}
        logger.debug(
            f"Built {self.subject} {document.openapi}",
            extra={"context_data": {"paths": len(paths), "components": document.has("components")}},
        )
        return document

    def as_json(self) -> str:
        """Build the document and render it as JSON text."""
        return serializer.to_json(self.build())

    def as_yaml(self) -> str:
        """Build the document and render it as YAML text."""
        return serializer.to_yaml(self.build())
