"""Structured (de)serialization of workflows.

`WorkflowDocument` mirrors the workflow's fields using the keys of the
workflow file format (`run-name`, not `run_name`). It works on plain mappings;
reading and writing YAML is left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gh_workflow.config import WorkflowSettings
from gh_workflow.errors import InvalidFieldValueError
from gh_workflow.names import Name, WorkflowName, WorkflowRunName
from gh_workflow.workflow import (
    WORKFLOW_FIELDS,
    Workflow,
    WorkflowBuilder,
    field_spec,
    field_spec_by_key,
)

logger = logging.getLogger(__name__)


def _document_field(attr: str) -> Any:
    spec = field_spec(attr)
    return Field(default=None, alias=spec.key, description=spec.description)


class WorkflowDocument(BaseModel):
    """The modelled subset of a workflow file. Other keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: WorkflowName | None = _document_field("name")
    run_name: WorkflowRunName | None = _document_field("run_name")

    @classmethod
    def from_workflow(cls, workflow: Workflow) -> WorkflowDocument:
        return cls.model_validate(
            {field_spec(attr).key: value for attr, value in workflow.as_dict().items()}
        )

    def to_builder(self) -> WorkflowBuilder:
        """Stage every present field on a fresh builder."""

        values: dict[str, Name] = {}
        for spec in WORKFLOW_FIELDS:
            value = getattr(self, spec.attr)
            if value is not None:
                values[spec.attr] = value
        return WorkflowBuilder(values)


def dump_workflow(workflow: Workflow) -> dict[str, str]:
    """Return the workflow as a document mapping. Absent fields are omitted."""

    document = WorkflowDocument.from_workflow(workflow)
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)


def load_workflow(
    data: Mapping[str, object],
    *,
    require: Iterable[str] = (),
    settings: WorkflowSettings | None = None,
) -> Workflow:
    """Validate a document mapping and finalize it into a `Workflow`.

    Raises:
        InvalidFieldValueError: A modelled key holds something other than a string.
        MissingMandatoryFieldError: A field required by `require` or by
            `settings.mandatory_fields` is absent.
    """

    try:
        document = WorkflowDocument.model_validate(dict(data))
    except ValidationError as e:
        error = e.errors()[0]
        key = str(error["loc"][0]) if error["loc"] else "<document>"
        try:
            field = field_spec_by_key(key).attr
        except KeyError:
            field = key
        logger.warning(
            "Rejected workflow document", extra={"field": field, "reason": error["msg"]}
        )
        raise InvalidFieldValueError(field, error["msg"]) from e

    if isinstance(require, str):
        raise TypeError("require must be a collection of field names, not a str")
    required = list(require)
    if settings is not None:
        required.extend(settings.mandatory_field_names)
    return document.to_builder().build(require=required)
