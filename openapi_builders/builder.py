"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Generic node builder protocol.

Every node kind has a builder derived from NodeBuilder. The concrete builders
only declare one fluent method per field; the invariant enforcement lives
here, so it is identical for every kind:

* setters run set-once, then mutual exclusion, then value checks, and only
  then write into the draft;
* map adders create the map lazily and reject duplicate keys;
* list adders create the list lazily and, for unique lists, reject values
  that are structurally equal to an existing element;
* bulk adders apply the singular adder per entry, in the caller's order,
  without rollback;
* build() hands the draft over and retires the builder.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from openapi_builders import checks
from openapi_builders.core.config import get_app_config
from openapi_builders.errors import BuilderStateError
from openapi_builders.nodes import BaseNode, OpenAPINode

logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT", bound=BaseNode)
B = TypeVar("B", bound="NodeBuilder")

KeyCheck = Callable[[str, str, str], None]


class NodeBuilder(Generic[NodeT]):
    """Accumulates the fields of one node and emits it from build()."""

    node_type: ClassVar[type[BaseNode]]
    # Map fields that start out present and empty
    initial_maps: ClassVar[tuple[str, ...]] = ()

    def __init__(self, **required: Any):
        self._draft: NodeT = self.node_type.model_construct()
        self._built = False
        for field in self.initial_maps:
            setattr(self._draft, field, {})
        for field, value in required.items():
            self._set(field, value)

    @property
    def subject(self) -> str:
        return self.node_type.kind()

    # Internal protocol -----------------------------------------------------

    def _current(self, field: str) -> Any:
        if self._draft.has(field):
            return getattr(self._draft, field)
        return checks.MISSING

    def _ensure_open(self, field: str) -> None:
        if self._built:
            raise BuilderStateError(
                f"{self.subject} builder was already built and cannot change '{field}'",
                self.subject,
                field,
            )

    def _check_exclusive(self, field: str, value: Any, exclusive: Iterable[str]) -> None:
        wire = self.node_type.wire_name(field)
        for other in exclusive:
            checks.check_exclusive(
                self.subject, wire, value, self.node_type.wire_name(other), self._current(other)
            )

    def _set(
        self: B,
        field: str,
        value: Any,
        *,
        exclusive: Iterable[str] = (),
        url: bool = False,
        relative_url: bool = False,
        non_empty: bool = False,
        choices: Iterable[Any] | None = None,
    ) -> B:
        """Assign a set-once field after running its checks."""
        self._ensure_open(field)
        wire = self.node_type.wire_name(field)
        checks.check_not_none(self.subject, wire, value)
        checks.check_duplicate(self.subject, wire, self._current(field))
        self._check_exclusive(field, value, exclusive)
        if url or relative_url:
            checks.check_url(self.subject, wire, value, relative=relative_url)
        if non_empty:
            checks.check_empty(self.subject, wire, value)
        if choices is not None:
            for item in value if isinstance(value, list) else [value]:
                checks.check_choice(self.subject, wire, item, choices)
        setattr(self._draft, field, value)
        return self

    def _put(
        self: B,
        field: str,
        key: str,
        value: Any,
        *,
        exclusive: Iterable[str] = (),
        key_check: KeyCheck | None = None,
    ) -> B:
        """Insert one entry into a map field."""
        self._ensure_open(field)
        wire = self.node_type.wire_name(field)
        checks.check_not_none(self.subject, wire, value)
        self._check_exclusive(field, value, exclusive)
        if key_check is not None:
            key_check(self.subject, wire, key)
        if not self._draft.has(field):
            setattr(self._draft, field, {})
        mapping = getattr(self._draft, field)
        checks.check_map(self.subject, wire, mapping, key)
        mapping[key] = value
        return self

    def _put_all(self: B, adder: Callable[[str, Any], Any], entries: Mapping[str, Any]) -> B:
        for key, value in entries.items():
            adder(key, value)
        return self

    def _append(self: B, field: str, value: Any, *, unique: bool = False) -> B:
        """Append one element to a list field."""
        self._ensure_open(field)
        wire = self.node_type.wire_name(field)
        checks.check_not_none(self.subject, wire, value)
        if not self._draft.has(field):
            setattr(self._draft, field, [])
        items = getattr(self._draft, field)
        if unique:
            checks.check_list(self.subject, wire, items, value)
        items.append(value)
        return self

    def _append_all(self: B, adder: Callable[[Any], Any], values: Iterable[Any]) -> B:
        for value in values:
            adder(value)
        return self

    # Public protocol -------------------------------------------------------

    def build(self) -> NodeT:
        """Hand over the finished node; the builder cannot be used afterwards."""
        self._ensure_open("build")
        self._built = True
        return self._draft


class ExtensibleNodeBuilder(NodeBuilder[NodeT]):
    """Builder for node kinds that accept specification extensions."""

    node_type: ClassVar[type[OpenAPINode]]

    def extension(self: B, name: str, value: Any):
        """Add one specification extension ("x-" prefixed field)."""
        self._ensure_open(name)
        builder_config = get_app_config().builder
        if builder_config.enforce_extension_prefix:
            checks.check_extension(self.subject, name, builder_config.extension_prefix)
        checks.check_extension_field(self.subject, name, self.node_type.wire_names())
        checks.check_map(self.subject, "extensions", self._draft.extensions, name)
        self._draft.extensions[name] = value
        return self

    def extensions(self: B, entries: Mapping[str, Any]):
        return self._put_all(self.extension, entries)


class MapBuilder:
    """
    Builds a keyed collection.

    Keys are unique within one collection; values are checked with the
    optional key check before insertion.
    """

    subject: ClassVar[str] = "Map"
    field: ClassVar[str] = "entries"

    def __init__(self):
        self._entries: dict[str, Any] = {}
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderStateError(
                f"{self.subject} builder was already built", self.subject, self.field
            )

    def check_key(self, key: str) -> None:
        """Hook for subclasses with key syntax rules."""

    def add(self, key: str, value: Any):
        self._ensure_open()
        checks.check_not_none(self.subject, self.field, value)
        self.check_key(key)
        checks.check_map(self.subject, self.field, self._entries, key)
        self._entries[key] = value
        return self

    def merge(self, entries: Mapping[str, Any]):
        """Add every entry in order; entries before a failing one stay added."""
        for key, value in entries.items():
            self.add(key, value)
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def build(self) -> dict[str, Any]:
        self._ensure_open()
        self._built = True
        return self._entries


class ListBuilder:
    """Builds an ordered collection, optionally rejecting structural duplicates."""

    subject: ClassVar[str] = "List"
    field: ClassVar[str] = "items"
    unique: ClassVar[bool] = False

    def __init__(self):
        self._items: list[Any] = []
        self._built = False

    def _ensure_open(self) -> None:
        if self._built:
            raise BuilderStateError(
                f"{self.subject} builder was already built", self.subject, self.field
            )

    def add(self, value: Any):
        self._ensure_open()
        checks.check_not_none(self.subject, self.field, value)
        if self.unique:
            checks.check_list(self.subject, self.field, self._items, value)
        self._items.append(value)
        return self

    def extend(self, values: Iterable[Any]):
        """Add every value in order; values before a failing one stay added."""
        for value in values:
            self.add(value)
        return self

    def __len__(self) -> int:
        return len(self._items)

    def build(self) -> list[Any]:
        self._ensure_open()
        self._built = True
        return self._items
