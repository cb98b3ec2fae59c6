"""Typed model of GitHub Actions workflows.

Provides:
- nominally typed string fields (`WorkflowName`, `WorkflowRunName`)
- the `Workflow` model and a fluent `WorkflowBuilder`
- conversion to and from plain document mappings
"""

__version__ = "0.1.0"

from gh_workflow.errors import InvalidFieldValueError, MissingMandatoryFieldError, WorkflowError
from gh_workflow.names import Name, WorkflowName, WorkflowRunName
from gh_workflow.workflow import Workflow, WorkflowBuilder

__all__ = [
    "__version__",
    "InvalidFieldValueError",
    "MissingMandatoryFieldError",
    "Name",
    "Workflow",
    "WorkflowBuilder",
    "WorkflowError",
    "WorkflowName",
    "WorkflowRunName",
]
