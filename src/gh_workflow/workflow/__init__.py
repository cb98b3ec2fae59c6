"""The workflow model and its builder.

`Workflow` holds optional, nominally typed fields. `WorkflowBuilder` stages
those fields through chained calls and checks mandatory fields in `build()`.
"""

from gh_workflow.workflow.builder import WorkflowBuilder
from gh_workflow.workflow.fields import (
    WORKFLOW_FIELDS,
    FieldSpec,
    field_spec,
    field_spec_by_key,
)
from gh_workflow.workflow.model import UNNAMED_WORKFLOW, Workflow

__all__ = [
    "UNNAMED_WORKFLOW",
    "WORKFLOW_FIELDS",
    "FieldSpec",
    "Workflow",
    "WorkflowBuilder",
    "field_spec",
    "field_spec_by_key",
]
