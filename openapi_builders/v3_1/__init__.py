"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""OpenAPI 3.1 family: node catalog and builders."""

from openapi_builders.v3_1 import models
from openapi_builders.v3_1.builders import (
    CallbackBuilder,
    ComponentsBuilder,
    ContactBuilder,
    DiscriminatorBuilder,
    EncodingBuilder,
    ExampleBuilder,
    ExternalDocsBuilder,
    HeaderBuilder,
    InfoBuilder,
    LicenseBuilder,
    LinkBuilder,
    MediaTypeBuilder,
    OAuthFlowBuilder,
    OAuthFlowsBuilder,
    OpenAPIBuilder,
    OperationBuilder,
    ParameterBuilder,
    PathItemBuilder,
    ReferenceBuilder,
    RequestBodyBuilder,
    ResponseBuilder,
    SchemaBuilder,
    SecurityRequirementBuilder,
    SecuritySchemeBuilder,
    ServerBuilder,
    ServerVariableBuilder,
    TagBuilder,
    XMLBuilder,
)
from openapi_builders.v3_1.models import OPENAPI_VERSION

__all__ = [
    "OPENAPI_VERSION",
    "models",
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
