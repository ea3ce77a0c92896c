"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Shared constants and helpers for generating application documents.

The reference helpers point into the components section of the same
document, so they pair with the names an ApplicationDescriptor registers.
Every node helper takes the builder module of the target family and
defaults to OpenAPI 3.1.
"""

import re
from types import ModuleType

from openapi_builders.nodes import Reference
from openapi_builders.v3_1 import builders
from openapi_builders.v3_1.models import Parameter

# General constants
APPLICATION_JSON = "application/json"
ERROR = "Error"
LIMIT = "limit"
OFFSET = "offset"

# Primitive schema types used by the parameter helpers
INTEGER = "integer"
NUMBER = "number"
STRING = "string"

# HTTP response codes
OK = "200"
CREATED = "201"
BAD_REQUEST = "400"
UNAUTHORIZED = "401"
FORBIDDEN = "403"
NOT_FOUND = "404"
NOT_UNIQUE = "409"
SERVER_ERROR = "500"

_IRREGULAR_PLURALS = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "foot": "feet",
    "tooth": "teeth",
    "ox": "oxen",
}
_UNCOUNTABLE = frozenset(
    {"data", "equipment", "information", "metadata", "news", "series", "sheep", "species", "fish"}
)
_SIBILANT_ENDING = re.compile(r"(s|x|z|ch|sh)$", re.IGNORECASE)
_CONSONANT_Y_ENDING = re.compile(r"[^aeiou]y$", re.IGNORECASE)


def _match_case(word: str, plural: str) -> str:
    if word.isupper() and len(word) > 1:
        return plural.upper()
    if word[:1].isupper():
        return plural[:1].upper() + plural[1:]
    return plural


def pluralize(word: str) -> str:
    """
    Return the English plural of a model name.

    Handles the usual suffix rules plus a short list of irregular and
    uncountable nouns; the capitalization of the input is preserved.

    Examples
    --------
        pluralize("Widget") == "Widgets"
        pluralize("Category") == "Categories"
        pluralize("Child") == "Children"

    """
    lower = word.lower()
    if not word or lower in _UNCOUNTABLE:
        return word
    if lower in _IRREGULAR_PLURALS:
        return _match_case(word, _IRREGULAR_PLURALS[lower])
    if _SIBILANT_ENDING.search(word):
        suffix = "ES" if word.isupper() and len(word) > 1 else "es"
        return word + suffix
    if _CONSONANT_Y_ENDING.search(word):
        suffix = "IES" if word.isupper() and len(word) > 1 else "ies"
        return word[:-1] + suffix
    return word + ("S" if word.isupper() and len(word) > 1 else "s")


# Reference helpers


def parameter_ref(name: str, family: ModuleType = builders) -> Reference:
    """Reference to a parameter in the components section."""
    return family.ReferenceBuilder(f"#/components/parameters/{name}").build()


def request_body_ref(name: str, family: ModuleType = builders) -> Reference:
    """Reference to a request body in the components section."""
    return family.ReferenceBuilder(f"#/components/requestBodies/{name}").build()


def response_ref(name: str, family: ModuleType = builders) -> Reference:
    """Reference to a response in the components section."""
    return family.ReferenceBuilder(f"#/components/responses/{name}").build()


def schema_ref(name: str, family: ModuleType = builders) -> Reference:
    """Reference to a schema in the components section."""
    return family.ReferenceBuilder(f"#/components/schemas/{name}").build()


# Parameter helpers


def parameter_path(
    name: str,
    description: str,
    value_type: str = STRING,
    family: ModuleType = builders,
) -> Parameter:
    """A required path parameter with a primitive schema."""
    return (
        family.ParameterBuilder("path", name)
        .description(description)
        .required(True)
        .schema(family.SchemaBuilder(value_type).build())
        .build()
    )


def parameter_query(
    name: str,
    description: str,
    allow_empty_value: bool = False,
    value_type: str = STRING,
    family: ModuleType = builders,
) -> Parameter:
    """An optional query parameter with a primitive schema."""
    builder = (
        family.ParameterBuilder("query", name)
        .description(description)
        .required(False)
        .schema(family.SchemaBuilder(value_type).build())
    )
    if allow_empty_value:
        builder.allow_empty_value(True)
    return builder.build()


# Response helpers


def response_error(description: str, family: ModuleType = builders):
    """A response builder whose JSON body is the shared Error schema."""
    return family.ResponseBuilder(description).add_content(
        APPLICATION_JSON,
        family.MediaTypeBuilder().schema(schema_ref(ERROR, family)).build(),
    )
