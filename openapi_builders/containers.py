"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Collection builders.

Keyed maps and ordered lists that appear in several places of a document
(named schemas, named responses, paths, servers, tags, ...) are assembled
with these builders and then handed to the node builder that owns them,
typically through one of its bulk adders:

    schemas = SchemasBuilder().add("Widget", widget).add("Widgets", widgets)
    components = ComponentsBuilder().add_schemas(schemas.build()).build()

They work for both OpenAPI families since they hold finalized nodes only.
"""

from openapi_builders import checks
from openapi_builders.builder import ListBuilder, MapBuilder


class ComponentMapBuilder(MapBuilder):
    """A map whose keys must be valid component names."""

    def check_key(self, key: str) -> None:
        checks.check_component_key(self.subject, self.field, key)


class PathsBuilder(MapBuilder):
    """Path Items keyed by path; every path must begin with "/"."""

    subject = "PathsObject"
    field = "paths"

    def check_key(self, key: str) -> None:
        checks.check_path(self.subject, self.field, key)


class ResponsesBuilder(ComponentMapBuilder):
    subject = "ResponsesObject"
    field = "responses"


class StatusResponsesBuilder(MapBuilder):
    """Responses of one operation, keyed by status code, NXX range or "default"."""

    subject = "ResponsesObject"
    field = "responses"

    def check_key(self, key: str) -> None:
        checks.check_status_code(self.subject, self.field, key)


class SchemasBuilder(ComponentMapBuilder):
    subject = "SchemasObject"
    field = "schemas"


class ParametersBuilder(ComponentMapBuilder):
    subject = "ParametersObject"
    field = "parameters"


class ExamplesBuilder(ComponentMapBuilder):
    subject = "ExamplesObject"
    field = "examples"


class RequestBodiesBuilder(ComponentMapBuilder):
    subject = "RequestBodiesObject"
    field = "requestBodies"


class HeadersBuilder(ComponentMapBuilder):
    subject = "HeadersObject"
    field = "headers"


class LinksBuilder(ComponentMapBuilder):
    subject = "LinksObject"
    field = "links"


class SecuritySchemesBuilder(ComponentMapBuilder):
    subject = "SecuritySchemesObject"
    field = "securitySchemes"


class ContentBuilder(MapBuilder):
    """Media Type Objects keyed by media type."""

    subject = "ContentObject"
    field = "content"


class ServersBuilder(ListBuilder):
    subject = "ServersObject"
    field = "servers"
    unique = True


class TagsBuilder(ListBuilder):
    subject = "TagsObject"
    field = "tags"
    unique = True


class SecurityBuilder(ListBuilder):
    """Security Requirement Objects, any of which satisfies the request."""

    subject = "SecurityObject"
    field = "security"
    unique = True


class ParameterListBuilder(ListBuilder):
    """
    Parameters of one operation or path item, in order.

    Members may be References, so no duplicate detection is attempted.
    """

    subject = "ParametersList"
    field = "parameters"
