"""Unit tests for the workflow field registry."""

from __future__ import annotations

import pytest

from gh_workflow.names import WorkflowName, WorkflowRunName
from gh_workflow.workflow import WORKFLOW_FIELDS, field_spec, field_spec_by_key


def test_registry_order_and_types() -> None:
    assert [(s.attr, s.key, s.type) for s in WORKFLOW_FIELDS] == [
        ("name", "name", WorkflowName),
        ("run_name", "run-name", WorkflowRunName),
    ]


def test_no_field_is_mandatory_yet() -> None:
    assert not any(spec.mandatory for spec in WORKFLOW_FIELDS)


def test_lookups() -> None:
    assert field_spec("run_name") is field_spec_by_key("run-name")
    with pytest.raises(KeyError):
        field_spec("run-name")
    with pytest.raises(KeyError):
        field_spec_by_key("jobs")


def test_spec_coerces_to_its_own_type() -> None:
    spec = field_spec("run_name")

    assert spec.coerce("push") == WorkflowRunName("push")
    with pytest.raises(TypeError):
        spec.coerce(WorkflowName("push"))
