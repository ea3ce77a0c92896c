"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""Convention scaffolding that assembles documents from model descriptors."""

from openapi_builders.scaffold.application import ApplicationDescriptor
from openapi_builders.scaffold.model import ModelDescriptor

__all__ = ["ApplicationDescriptor", "ModelDescriptor"]
