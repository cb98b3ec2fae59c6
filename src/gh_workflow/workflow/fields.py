"""Registry of optional workflow fields.

`Workflow` and `WorkflowBuilder` share the same set of optional fields. The
registry below is the single place that lists them, in the order used for
structural comparison.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import total_ordering

from gh_workflow.names import Name, WorkflowName, WorkflowRunName


@dataclass(frozen=True, slots=True)
class FieldSpec:
    attr: str
    key: str
    type: type[Name]
    description: str
    mandatory: bool = False

    def coerce(self, value: Name | str) -> Name:
        return self.type.coerce(value)


WORKFLOW_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(
        attr="name",
        key="name",
        type=WorkflowName,
        description="Name of the workflow",
    ),
    FieldSpec(
        attr="run_name",
        key="run-name",
        type=WorkflowRunName,
        description="Name template for workflow runs",
    ),
)


def field_spec(attr: str) -> FieldSpec:
    for spec in WORKFLOW_FIELDS:
        if spec.attr == attr:
            return spec
    raise KeyError(f"Unknown workflow field: {attr!r}")


def field_spec_by_key(key: str) -> FieldSpec:
    for spec in WORKFLOW_FIELDS:
        if spec.key == key:
            return spec
    raise KeyError(f"Unknown workflow document key: {key!r}")


@total_ordering
class FieldValues:
    """Optional field values with structural equality, ordering and hashing.

    Absent fields sort before present ones. Values of different subclasses
    never compare equal.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Name | str] | None = None) -> None:
        self._values: dict[str, Name] = {}
        for attr, value in (values or {}).items():
            self._values[attr] = field_spec(attr).coerce(value)

    def _get(self, attr: str) -> Name | None:
        return self._values.get(attr)

    def _key(self) -> tuple[tuple[bool, Name | None], ...]:
        key: list[tuple[bool, Name | None]] = []
        for spec in WORKFLOW_FIELDS:
            value = self._values.get(spec.attr)
            key.append((value is not None, value))
        return tuple(key)

    def present_fields(self) -> tuple[str, ...]:
        """Attribute names of the fields that are set, in registry order."""

        return tuple(spec.attr for spec in WORKFLOW_FIELDS if spec.attr in self._values)

    def as_dict(self) -> dict[str, Name]:
        return {attr: self._values[attr] for attr in self.present_fields()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldValues) or type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FieldValues) or type(other) is not type(self):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{spec.attr}={self._values.get(spec.attr)!r}" for spec in WORKFLOW_FIELDS
        )
        return f"{type(self).__name__}({parts})"
