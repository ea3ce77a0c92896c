"""
Copyright (c) 2025 Eric C. Mumford (@heymumford)
This file is part of openapi-builders, licensed under the MIT License.
See LICENSE file for details.
"""

"""
Error taxonomy for the builder engine.

Every error is raised synchronously by the setter or adder that detected the
problem, before the builder's draft is touched. Each one is attributable to
exactly one node kind, one field and one value.
"""

from typing import Any


def describe(value: Any) -> str:
    """Render a value compactly for use inside an error message."""
    kind = getattr(type(value), "kind", None)
    if callable(kind):
        return kind()
    if isinstance(value, dict):
        return "{" + ", ".join(str(key) for key in value) + "}"
    if isinstance(value, list | tuple):
        return "[" + ", ".join(describe(item) for item in value) + "]"
    return str(value)


class BuilderError(Exception):
    """Base class for all contract violations detected by a builder."""

    def __init__(self, message: str, subject: str, field: str, value: Any = None):
        super().__init__(message)
        self.subject = subject
        self.field = field
        self.value = value


class DuplicateError(BuilderError):
    """A set-once field, map key or unique list value is already present."""


class ExclusiveError(BuilderError):
    """The field conflicts with a mutually exclusive field already present."""

    def __init__(
        self, message: str, subject: str, field: str, other_field: str, value: Any = None
    ):
        super().__init__(message, subject, field, value)
        self.other_field = other_field


class InvalidValueError(BuilderError, ValueError):
    """A proposed value failed a domain check."""


class BuilderStateError(BuilderError):
    """A builder was used after its build() already handed over the draft."""
