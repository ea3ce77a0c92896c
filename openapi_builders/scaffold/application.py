"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Conventions for documenting a whole application.

An ApplicationDescriptor supplies the Info Object, the shared parameters and
the list of model descriptors; components, paths and the final document are
assembled from those by default.
"""

import logging
from abc import ABC, abstractmethod
from types import ModuleType
from typing import ClassVar

from openapi_builders.containers import (
    ParametersBuilder,
    PathsBuilder,
    RequestBodiesBuilder,
    ResponsesBuilder,
    SchemasBuilder,
    TagsBuilder,
)
from openapi_builders.scaffold.model import ModelDescriptor
from openapi_builders.v3_1 import builders as v3_1_builders

logger = logging.getLogger(__name__)


class ApplicationDescriptor(ABC):
    """Describes the entire application for which a document is generated."""

    family: ClassVar[ModuleType] = v3_1_builders

    @abstractmethod
    def info(self):
        """InfoBuilder for this application."""

    @abstractmethod
    def models(self) -> list[ModelDescriptor]:
        """The model descriptors of this application."""

    def parameters(self) -> ParametersBuilder:
        """Shared parameters, registered under components; none by default."""
        return ParametersBuilder()

    def request_bodies(self) -> RequestBodiesBuilder:
        """One request body per model, named after the model."""
        builder = RequestBodiesBuilder()
        for model in self.models():
            builder.add(model.name(), model.request_body().build())
        return builder

    def responses(self) -> ResponsesBuilder:
        """
        The single-object and array responses of every model.

        Error responses referenced by the default operations ("401", "403",
        ...) are application specific and are added by overriding this.
        """
        builder = ResponsesBuilder()
        for model in self.models():
            builder.add(model.name(), model.response().build())
            builder.add(model.names(), model.responses().build())
        return builder

    def schemas(self) -> SchemasBuilder:
        """The single-object and array schemas of every model."""
        builder = SchemasBuilder()
        for model in self.models():
            builder.add(model.name(), model.schema().build())
            builder.add(model.names(), model.schemas().build())
        return builder

    def tags(self) -> TagsBuilder:
        """Tag descriptions; none by default."""
        return TagsBuilder()

    def components(self):
        return (
            self.family.ComponentsBuilder()
            .add_parameters(self.parameters().build())
            .add_request_bodies(self.request_bodies().build())
            .add_responses(self.responses().build())
            .add_schemas(self.schemas().build())
        )

    def paths(self) -> PathsBuilder:
        """Every path of every model, in model order."""
        builder = PathsBuilder()
        for model in self.models():
            builder.merge(model.paths().build())
        return builder

    def document(self):
        """OpenAPIBuilder holding the assembled document, ready for build()."""
        info = self.info().build()
        models = self.models()
        logger.debug(f"Assembling document '{info.title}' from {len(models)} models")
        return (
            self.family.OpenAPIBuilder(info)
            .components(self.components().build())
            .add_paths(self.paths().build())
            .add_tags(self.tags().build())
        )
