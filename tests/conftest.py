"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from gh_workflow.workflow import WorkflowBuilder


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no gh-workflow variables set."""
    monkeypatch.delenv("GH_WORKFLOW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GH_WORKFLOW_MANDATORY_FIELDS", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def ci_builder() -> WorkflowBuilder:
    """Provide a builder with both fields staged."""
    return WorkflowBuilder.new().name("ci").run_name("triggered by push")
