"""Settings for gh-workflow.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gh_workflow.workflow.fields import field_spec


def _split_names(value: str) -> tuple[str, ...]:
    parts = [p.strip() for p in value.split(",")]
    return tuple(p for p in parts if p)


class WorkflowSettings(BaseSettings):
    """Settings for loading workflows.

    Environment variables:
    - GH_WORKFLOW_LOG_LEVEL         (optional)
    - GH_WORKFLOW_MANDATORY_FIELDS  (optional, comma separated, e.g. "name,run_name")

    Notes:
        Tests can skip the `.env` file via `WorkflowSettings(_env_file=None)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="GH_WORKFLOW_LOG_LEVEL",
        description="Root logging level",
    )

    mandatory_fields: str = Field(
        default="",
        validation_alias="GH_WORKFLOW_MANDATORY_FIELDS",
        description="Workflow fields that must be present when a workflow is loaded",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("mandatory_fields")
    @classmethod
    def _known_fields(cls, value: str) -> str:
        for name in _split_names(value):
            try:
                field_spec(name)
            except KeyError:
                raise ValueError(
                    f"Unknown workflow field in GH_WORKFLOW_MANDATORY_FIELDS: {name!r}"
                ) from None
        return value

    @property
    def mandatory_field_names(self) -> tuple[str, ...]:
        """Field names promoted to mandatory, in the order given."""

        return _split_names(self.mandatory_fields)
