"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Invariant helpers invoked by every builder before it mutates a draft.

All helpers are side-effect free apart from raising. They take the subject
(node kind name) and the wire name of the field being checked so that every
failure message is reproducible from the inputs alone.
"""

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from openapi_builders.errors import (
    DuplicateError,
    ExclusiveError,
    InvalidValueError,
    describe,
)
from openapi_builders.nodes import deep_equal

logger = logging.getLogger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)
_TEMPLATE_VARIABLE = re.compile(r"\{[^{}/]+\}")
_COMPONENT_KEY = re.compile(r"^[a-zA-Z0-9._-]+$")
_STATUS_CODE = re.compile(r"^[1-5](?:[0-9]{2}|XX)$")

MISSING: Any = object()


def _fail(error: Exception) -> None:
    logger.debug(f"{type(error).__name__}: {error}")
    raise error


def check_duplicate(subject: str, field: str, current: Any = MISSING) -> None:
    """Raise DuplicateError if the field already holds a value."""
    if current is not MISSING and current is not None:
        _fail(DuplicateError(f"{subject} already has {field} '{describe(current)}'", subject, field, current))


def check_exclusive(
    subject: str, field: str, value: Any, other_field: str, other_value: Any = MISSING
) -> None:
    """Raise ExclusiveError if both the proposed and the other field would be populated."""
    if value is None or other_value is MISSING or other_value is None:
        return
    _fail(
        ExclusiveError(
            f"{subject} cannot have both {other_field} and {field}",
            subject,
            field,
            other_field,
            other_value,
        )
    )


def check_empty(subject: str, field: str, values: Sequence[Any]) -> None:
    """Raise InvalidValueError for an empty sequence."""
    if len(values) == 0:
        _fail(InvalidValueError(f"{subject} cannot accept an empty '{field}' list", subject, field, values))


def check_map(subject: str, field: str, mapping: Mapping[str, Any] | None, key: str) -> None:
    """Raise DuplicateError if the mapping already contains the key."""
    if mapping is not None and key in mapping:
        _fail(DuplicateError(f"{subject} '{field}' map already has key '{key}'", subject, field, mapping[key]))


def check_list(subject: str, field: str, items: Iterable[Any] | None, value: Any) -> None:
    """Raise DuplicateError if a structurally equal value is already in the list."""
    for item in items or ():
        if deep_equal(item, value):
            _fail(
                DuplicateError(
                    f"{subject} '{field}' list already has value '{describe(value)}'",
                    subject,
                    field,
                    item,
                )
            )


def check_not_none(subject: str, field: str, value: Any) -> None:
    """Absent values are expressed by not calling the setter at all."""
    if value is None:
        _fail(InvalidValueError(f"{subject} '{field}' cannot be None", subject, field, value))


def check_url(subject: str, field: str, value: str, relative: bool = False) -> None:
    """
    Raise InvalidValueError unless the value parses as a URL.

    Args:
    ----
        subject: Node kind being built
        field: Wire name of the field
        value: Proposed URL
        relative: Also accept relative references ("/v1") and
            {variable} templates, as server URLs may use both

    """
    candidate = value
    if isinstance(candidate, str) and relative:
        candidate = _TEMPLATE_VARIABLE.sub("x", candidate)
        if candidate.startswith("/") or candidate.startswith("."):
            candidate = f"http://relative.invalid{candidate.lstrip('.')}"
    if not isinstance(candidate, str) or " " in candidate.strip():
        _fail(InvalidValueError(f"{subject} '{field}' must be a valid URL", subject, field, value))
    try:
        _URL_ADAPTER.validate_python(candidate)
    except ValidationError:
        _fail(InvalidValueError(f"{subject} '{field}' must be a valid URL", subject, field, value))


def check_choice(subject: str, field: str, value: Any, choices: Iterable[Any]) -> None:
    """Raise InvalidValueError when the value is not one of the allowed choices."""
    allowed = tuple(choices)
    if value not in allowed:
        _fail(
            InvalidValueError(
                f"{subject} '{field}' must be one of {', '.join(map(str, allowed))}, not '{value}'",
                subject,
                field,
                value,
            )
        )


def check_path(subject: str, field: str, path: str) -> None:
    """Path keys must begin with a forward slash."""
    if not isinstance(path, str) or not path.startswith("/"):
        _fail(InvalidValueError(f"{subject} '{field}' key '{path}' must begin with '/'", subject, field, path))


def check_component_key(subject: str, field: str, key: str) -> None:
    """Component names are restricted to letters, digits, '.', '-' and '_'."""
    if not isinstance(key, str) or not _COMPONENT_KEY.match(key):
        _fail(InvalidValueError(f"{subject} '{field}' key '{key}' is not a valid component name", subject, field, key))


def check_status_code(subject: str, field: str, key: str) -> None:
    """Response keys are 'default', a three digit status code, or a range such as '4XX'."""
    if key != "default" and (not isinstance(key, str) or not _STATUS_CODE.match(key)):
        _fail(InvalidValueError(f"{subject} '{field}' key '{key}' is not a valid status code", subject, field, key))


def check_extension(subject: str, name: str, prefix: str = "x-") -> None:
    """Specification extension names must start with the reserved prefix."""
    if not isinstance(name, str) or not name.startswith(prefix) or len(name) == len(prefix):
        _fail(
            InvalidValueError(
                f"{subject} extension '{name}' must begin with '{prefix}'",
                subject,
                name,
                name,
            )
        )


def check_extension_field(subject: str, name: str, fields: Iterable[str]) -> None:
    """An extension must not shadow a declared field of the node."""
    if name in fields:
        _fail(
            InvalidValueError(
                f"{subject} extension '{name}' conflicts with the declared field '{name}'",
                subject,
                name,
                name,
            )
        )
