from __future__ import annotations

from typing import cast

from gh_workflow.names import WorkflowName, WorkflowRunName

from .fields import FieldValues

UNNAMED_WORKFLOW = "Unnamed workflow"


class Workflow(FieldValues):
    """A GitHub Actions workflow.

    A workflow is a configurable automated process that runs one or more jobs.
    Workflows are defined by YAML files in `.github/workflows` and run when
    triggered by a repository event, manually, or on a schedule.

    Every field is optional. Whether a combination of fields is acceptable is
    decided when a `WorkflowBuilder` is finalized, not here.
    """

    __slots__ = ()

    @classmethod
    def default(cls) -> Workflow:
        return cls()

    @property
    def name(self) -> WorkflowName | None:
        return cast(WorkflowName | None, self._get("name"))

    @name.setter
    def name(self, name: WorkflowName | str) -> None:
        self._values["name"] = WorkflowName.coerce(name)

    @property
    def run_name(self) -> WorkflowRunName | None:
        return cast(WorkflowRunName | None, self._get("run_name"))

    @run_name.setter
    def run_name(self, run_name: WorkflowRunName | str) -> None:
        self._values["run_name"] = WorkflowRunName.coerce(run_name)

    def __str__(self) -> str:
        name = self.name
        return UNNAMED_WORKFLOW if name is None else name.get()
