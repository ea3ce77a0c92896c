"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Conventions for documenting the CRUD endpoints of one application model.

A concrete ModelDescriptor names the model, supplies its schema and picks
which of the default operation builders it uses. Everything else (paths,
request body, responses) follows from the conventions below and can be
overridden per model.
"""

from abc import ABC, abstractmethod
from types import ModuleType
from typing import ClassVar

from openapi_builders.containers import ParameterListBuilder, PathsBuilder
from openapi_builders.scaffold.helpers import (
    APPLICATION_JSON,
    BAD_REQUEST,
    CREATED,
    FORBIDDEN,
    LIMIT,
    NOT_FOUND,
    OFFSET,
    OK,
    UNAUTHORIZED,
    parameter_ref,
    pluralize,
    request_body_ref,
    response_ref,
    schema_ref,
)
from openapi_builders.v3_1 import builders as v3_1_builders


class ModelDescriptor(ABC):
    """
    Describes one application data model.

    Attributes
    ----------
        family: Builder module of the target OpenAPI family
        api_prefix: Prefix (starting with "/") of every API path
        path_id: Name of the identifier parameter in detail paths

    """

    family: ClassVar[ModuleType] = v3_1_builders
    api_prefix: ClassVar[str] = "/api"
    path_id: ClassVar[str] = "id"

    @abstractmethod
    def name(self) -> str:
        """Singular, capitalized name of the model."""

    def names(self) -> str:
        """Plural, capitalized name of the model."""
        return pluralize(self.name())

    # API paths

    def api_collection(self) -> str:
        return f"{self.api_prefix}/{self.names().lower()}"

    def api_detail(self) -> str:
        return f"{self.api_collection()}/{{{self.path_id}}}"

    def api_exact(self, parameter: str = "name") -> str:
        return f"{self.api_collection()}/exact/{{{parameter}}}"

    def api_children(self, child: "ModelDescriptor") -> str:
        return f"{self.api_detail()}/{child.names().lower()}"

    # Operations

    @abstractmethod
    def operation_all(self):
        """Operation returning every model object matching the criteria."""

    @abstractmethod
    def operation_find(self):
        """Operation returning one model object by identifier."""

    @abstractmethod
    def operation_insert(self):
        """Operation inserting a model object and returning it."""

    @abstractmethod
    def operation_remove(self):
        """Operation removing a model object and returning it."""

    @abstractmethod
    def operation_update(self):
        """Operation updating a model object and returning it."""

    def _operation(
        self,
        description: str,
        summary: str,
        responses: dict[str, str],
        tag: str | None = None,
        *parameter_lists: ParameterListBuilder | None,
    ):
        builder = self.family.OperationBuilder().description(description).summary(summary)
        for parameters in parameter_lists:
            if parameters is not None:
                builder.add_parameters(parameters.build())
        for status, response in responses.items():
            builder.add_response(status, response_ref(response, self.family))
        if tag:
            builder.add_tag(tag)
        return builder

    def operation_all_builder(
        self,
        tag: str | None = None,
        includes: ParameterListBuilder | None = None,
        matches: ParameterListBuilder | None = None,
        model: "ModelDescriptor | None" = None,
    ):
        """Default GET on the collection path."""
        model = model or self
        return self._operation(
            f"Return all matching {model.names()}",
            f"The requested {model.names()}",
            {OK: self.names(), UNAUTHORIZED: UNAUTHORIZED, FORBIDDEN: FORBIDDEN},
            tag,
            includes,
            matches,
        )

    def operation_children(self, model: "ModelDescriptor", tag: str | None = None):
        return self.operation_children_builder(
            model, tag, model.parameters_includes(), model.parameters_matches()
        )

    def operation_children_builder(
        self,
        model: "ModelDescriptor",
        tag: str | None = None,
        includes: ParameterListBuilder | None = None,
        matches: ParameterListBuilder | None = None,
    ):
        """Default GET on the path listing the children of one model object."""
        return self._operation(
            f"Return matching {model.names()} for this {self.name()}",
            f"The requested {model.names()}",
            {
                OK: model.names(),
                UNAUTHORIZED: UNAUTHORIZED,
                FORBIDDEN: FORBIDDEN,
                NOT_FOUND: NOT_FOUND,
            },
            tag,
            includes,
            matches,
        )

    def operation_exact_builder(
        self,
        tag: str | None = None,
        includes: ParameterListBuilder | None = None,
        parameter: str = "name",
    ):
        """Default GET on the exact-match path."""
        return self._operation(
            f"Find the specified {self.name()} by {parameter}",
            f"The specified {self.name()}",
            {OK: self.name(), UNAUTHORIZED: UNAUTHORIZED, FORBIDDEN: FORBIDDEN, NOT_FOUND: NOT_FOUND},
            tag,
            includes,
        )

    def operation_find_builder(self, tag: str | None = None, includes: ParameterListBuilder | None = None):
        """Default GET on the detail path."""
        return self._operation(
            f"Find the specified {self.name()} by ID",
            f"The specified {self.name()}",
            {OK: self.name(), UNAUTHORIZED: UNAUTHORIZED, FORBIDDEN: FORBIDDEN, NOT_FOUND: NOT_FOUND},
            tag,
            includes,
        )

    def operation_insert_builder(self, tag: str | None = None):
        """Default POST on the collection path."""
        return self._operation(
            f"Insert and return the specified {self.name()}",
            f"The inserted {self.name()}",
            {
                CREATED: self.name(),
                BAD_REQUEST: BAD_REQUEST,
                UNAUTHORIZED: UNAUTHORIZED,
                FORBIDDEN: FORBIDDEN,
            },
            tag,
        ).request_body(request_body_ref(self.name(), self.family))

    def operation_remove_builder(self, tag: str | None = None):
        """Default DELETE on the detail path."""
        return self._operation(
            f"Remove and return the specified {self.name()}",
            f"The removed {self.name()}",
            {OK: self.name(), UNAUTHORIZED: UNAUTHORIZED, FORBIDDEN: FORBIDDEN, NOT_FOUND: NOT_FOUND},
            tag,
        )

    def operation_update_builder(self, tag: str | None = None):
        """Default PUT on the detail path."""
        return self._operation(
            f"Update and return the specified {self.name()}",
            f"The updated {self.name()}",
            {
                OK: self.name(),
                BAD_REQUEST: BAD_REQUEST,
                UNAUTHORIZED: UNAUTHORIZED,
                FORBIDDEN: FORBIDDEN,
                NOT_FOUND: NOT_FOUND,
            },
            tag,
        ).request_body(request_body_ref(self.name(), self.family))

    # Parameters

    def parameters_includes(self) -> ParameterListBuilder:
        """Query parameters selecting related objects to include; none by default."""
        return ParameterListBuilder()

    def parameters_matches(self) -> ParameterListBuilder:
        """Query parameters selecting which objects match; none by default."""
        return ParameterListBuilder()

    def parameters_pagination(self) -> ParameterListBuilder:
        return ParameterListBuilder().extend(
            [parameter_ref(LIMIT, self.family), parameter_ref(OFFSET, self.family)]
        )

    # Paths

    def path_children(self, model: "ModelDescriptor", tag: str | None = None):
        return (
            self.family.PathItemBuilder()
            .description(f"Collection operations for {model.names()} children of this {self.name()}")
            .get(self.operation_children(model, tag).build())
        )

    def path_collection(self):
        return (
            self.family.PathItemBuilder()
            .description(f"Collection operations for {self.names()}")
            .get(self.operation_all().build())
            .post(self.operation_insert().build())
        )

    def path_detail(self):
        return (
            self.family.PathItemBuilder()
            .description(f"Detail operations for this {self.name()}")
            .get(self.operation_find().build())
            .delete(self.operation_remove().build())
            .put(self.operation_update().build())
        )

    def path_exact(self, tag: str | None = None, parameter: str = "name"):
        operation = self.operation_exact_builder(tag, self.parameters_includes(), parameter)
        operation.add_parameter(parameter_ref(parameter, self.family))
        return (
            self.family.PathItemBuilder()
            .description(f"Exact operation for this {self.name()}")
            .get(operation.build())
        )

    def paths(self) -> PathsBuilder:
        """The collection and detail paths of this model."""
        return (
            PathsBuilder()
            .add(self.api_collection(), self.path_collection().build())
            .add(self.api_detail(), self.path_detail().build())
        )

    # Bodies and schemas

    def request_body(self):
        return (
            self.family.RequestBodyBuilder()
            .add_content(
                APPLICATION_JSON,
                self.family.MediaTypeBuilder().schema(schema_ref(self.name(), self.family)).build(),
            )
            .required(True)
        )

    def response(self):
        """Response carrying a single model object."""
        return self.family.ResponseBuilder(f"The specified {self.name()}").add_content(
            APPLICATION_JSON,
            self.family.MediaTypeBuilder().schema(schema_ref(self.name(), self.family)).build(),
        )

    def responses(self):
        """Response carrying an array of model objects."""
        return self.family.ResponseBuilder(f"The specified {self.names()}").add_content(
            APPLICATION_JSON,
            self.family.MediaTypeBuilder().schema(schema_ref(self.names(), self.family)).build(),
        )

    @abstractmethod
    def schema(self):
        """SchemaBuilder describing one model object."""

    def schemas(self):
        """SchemaBuilder describing an array of model objects."""
        return self.family.SchemaBuilder("array").items(schema_ref(self.name(), self.family))
