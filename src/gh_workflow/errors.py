"""Errors raised while finalizing or loading workflows."""

from __future__ import annotations

from collections.abc import Iterable


class WorkflowError(Exception):
    pass


class MissingMandatoryFieldError(WorkflowError, ValueError):
    """A builder was finalized without one or more mandatory fields."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields: tuple[str, ...] = tuple(fields)
        super().__init__(f"Missing mandatory workflow field(s): {', '.join(self.fields)}")


class InvalidFieldValueError(WorkflowError, ValueError):
    """A field value was rejected by a validating collaborator.

    The model itself accepts any text; this is raised by layers that check
    incoming data, such as the document loader.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for workflow field {field!r}: {reason}")
