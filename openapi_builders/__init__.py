"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
openapi-builders - fluent, invariant-checked builders for OpenAPI documents

Builders for the two families live in openapi_builders.v3_0 and
openapi_builders.v3_1; serialization is in openapi_builders.serializer.
"""

from openapi_builders.errors import (
    BuilderError,
    BuilderStateError,
    DuplicateError,
    ExclusiveError,
    InvalidValueError,
)

__version__ = "0.1.0"

__all__ = [
    "BuilderError",
    "BuilderStateError",
    "DuplicateError",
    "ExclusiveError",
    "InvalidValueError",
    "__version__",
]
