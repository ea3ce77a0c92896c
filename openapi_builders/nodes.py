"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Shared node model for both OpenAPI families.

Each node kind is a pydantic model. Drafts are created with model_construct(),
so no validation runs at construction time and the model's fields_set records
exactly which fields were populated. A field that is not in fields_set is
absent: it is neither serialized nor compared.
"""

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class BaseNode(BaseModel):
    """Common behaviour for every node kind, including references."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Fields that never appear on the wire under their own name
    internal_fields: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def kind(cls) -> str:
        """Name of this node kind as used in error messages."""
        return f"{cls.__name__}Object"

    @classmethod
    def wire_name(cls, field: str) -> str:
        """Return the serialized name of a model field."""
        info = cls.model_fields[field]
        return info.alias or field

    @classmethod
    def wire_names(cls) -> frozenset[str]:
        """Serialized names of every declared field."""
        return frozenset(cls.wire_name(name) for name in cls.model_fields if name not in cls.internal_fields)

    def present_fields(self) -> list[str]:
        """Populated fields, in declaration order."""
        return [
            name
            for name in type(self).model_fields
            if name in self.model_fields_set and name not in self.internal_fields
        ]

    def has(self, field: str) -> bool:
        """Whether the field holds a value."""
        return field in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        """Plain-data rendering with absent fields omitted."""
        return {self.wire_name(name): to_plain(getattr(self, name)) for name in self.present_fields()}


class OpenAPINode(BaseNode):
    """A node kind that accepts specification extensions."""

    extensions: dict[str, Any] = Field(default_factory=dict, exclude=True)

    internal_fields: ClassVar[frozenset[str]] = frozenset({"extensions"})

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        for name, value in self.extensions.items():
            data[name] = to_plain(value)
        return data


class Reference(BaseNode):
    """A pointer to another node, usable wherever that node is allowed.

    The description and summary fields are only emitted by the 3.1 family.
    """

    ref: str = Field(..., alias="$ref")
    summary: str | None = None
    description: str | None = None


def is_reference(value: Any) -> bool:
    return isinstance(value, Reference)


def to_plain(value: Any) -> Any:
    """Convert nodes (recursively) into dicts, lists and scalars."""
    if isinstance(value, BaseNode):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_plain(item) for item in value]
    return value


def deep_equal(left: Any, right: Any) -> bool:
    """Structural equality over nodes, mappings, sequences and scalars.

    Two nodes are equal when they are of the same node class and their
    renderings (populated fields plus extensions) are deep-equal. Mapping
    comparison ignores key order; sequence comparison does not.
    """
    if isinstance(left, BaseNode) or isinstance(right, BaseNode):
        if type(left) is not type(right):
            return False
        return deep_equal(left.to_dict(), right.to_dict())
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)
    if _is_sequence(left) and _is_sequence(right):
        if len(left) != len(right):
            return False
        return all(deep_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)
