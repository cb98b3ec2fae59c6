"""Fluent builder for workflows.

Each setter returns a new builder and leaves the receiver unchanged, so a
builder handed to another caller cannot be modified underneath it:

    workflow = (
        WorkflowBuilder.new()
        .name("ci")
        .run_name("triggered by push")
        .build()
    )

`build()` checks the mandatory-field policy and either returns a `Workflow`
or raises `MissingMandatoryFieldError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from gh_workflow.errors import MissingMandatoryFieldError
from gh_workflow.names import Name, WorkflowName, WorkflowRunName

from .fields import WORKFLOW_FIELDS, FieldValues, field_spec
from .model import Workflow

logger = logging.getLogger(__name__)


class WorkflowBuilder(FieldValues):
    """Staging area for a `Workflow`: the same fields, not yet validated."""

    __slots__ = ()

    @classmethod
    def new(cls) -> WorkflowBuilder:
        return cls()

    @classmethod
    def from_workflow(cls, workflow: Workflow) -> WorkflowBuilder:
        return cls(workflow.as_dict())

    @property
    def staged(self) -> Mapping[str, Name]:
        """Read-only view of the staged field values."""

        return MappingProxyType(self._values)

    def get(self, attr: str) -> Name | None:
        field_spec(attr)
        return self._get(attr)

    def _with(self, attr: str, value: Name | str) -> WorkflowBuilder:
        values: dict[str, Name | str] = dict(self._values)
        values[attr] = value
        return type(self)(values)

    def name(self, name: WorkflowName | str) -> WorkflowBuilder:
        """Set the name of the workflow."""

        return self._with("name", WorkflowName.coerce(name))

    def run_name(self, run_name: WorkflowRunName | str) -> WorkflowBuilder:
        """Set the name template for runs of the workflow."""

        return self._with("run_name", WorkflowRunName.coerce(run_name))

    def build(self, require: Iterable[str] = ()) -> Workflow:
        """Finalize the builder into a `Workflow`.

        Args:
            require: Additional field names to treat as mandatory on top of
                the fields declared mandatory in `WORKFLOW_FIELDS`.

        Raises:
            TypeError: `require` is a single string rather than a collection.
            KeyError: A name in `require` is not a workflow field.
            MissingMandatoryFieldError: A mandatory field was never set.
        """

        if isinstance(require, str):
            raise TypeError("require must be a collection of field names, not a str")
        required = {field_spec(attr).attr for attr in require}
        missing = [
            spec.attr
            for spec in WORKFLOW_FIELDS
            if (spec.mandatory or spec.attr in required) and spec.attr not in self._values
        ]
        if missing:
            logger.warning("Workflow is missing mandatory fields", extra={"missing": missing})
            raise MissingMandatoryFieldError(missing)

        workflow = Workflow(self._values)
        logger.debug(
            "Built workflow",
            extra={"workflow": str(workflow), "fields": list(workflow.present_fields())},
        )
        return workflow

    def __str__(self) -> str:
        name = self._get("name")
        if name is None:
            return "WorkflowBuilder"
        return f"WorkflowBuilder for {name}"
