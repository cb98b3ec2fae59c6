"""Unit tests for the workflow model."""

from __future__ import annotations

import pytest

from gh_workflow.names import WorkflowName, WorkflowRunName
from gh_workflow.workflow import UNNAMED_WORKFLOW, Workflow, WorkflowBuilder


def test_default_has_no_fields() -> None:
    workflow = Workflow.default()

    assert workflow.name is None
    assert workflow.run_name is None
    assert workflow.present_fields() == ()
    assert workflow == Workflow()


def test_display_without_name() -> None:
    assert str(Workflow.default()) == UNNAMED_WORKFLOW


def test_display_with_name() -> None:
    workflow = Workflow.default()
    workflow.name = WorkflowName("ci")

    assert str(workflow) == "ci"


def test_display_ignores_run_name() -> None:
    workflow = Workflow.default()
    workflow.run_name = "triggered by push"

    assert str(workflow) == UNNAMED_WORKFLOW


def test_setters_replace_values() -> None:
    workflow = Workflow.default()
    workflow.name = "first"
    workflow.name = "second"

    assert workflow.name == WorkflowName("second")


def test_accessor_returns_stored_value() -> None:
    name = WorkflowName("ci")
    workflow = Workflow.default()
    workflow.name = name

    assert workflow.name is name


def test_setters_reject_other_name_types() -> None:
    workflow = Workflow.default()

    with pytest.raises(TypeError):
        workflow.name = WorkflowRunName("ci")  # type: ignore[assignment]
    with pytest.raises(TypeError):
        workflow.run_name = WorkflowName("ci")  # type: ignore[assignment]
    assert workflow.present_fields() == ()


def test_setting_same_value_twice_is_idempotent() -> None:
    once = Workflow.default()
    once.name = "ci"
    twice = Workflow.default()
    twice.name = "ci"
    twice.name = "ci"

    assert once == twice
    assert hash(once) == hash(twice)


def test_equality_hash_and_ordering_are_consistent() -> None:
    a = WorkflowBuilder.new().name("ci").run_name("push").build()
    b = WorkflowBuilder.new().name("ci").run_name("push").build()

    assert a == b
    assert hash(a) == hash(b)
    assert not a < b
    assert not b < a
    assert a <= b


def test_absent_fields_sort_first() -> None:
    unnamed = Workflow.default()
    named = WorkflowBuilder.new().name("a").build()
    later = WorkflowBuilder.new().name("b").build()

    assert sorted([later, named, unnamed]) == [unnamed, named, later]


def test_workflow_never_equals_builder() -> None:
    assert Workflow.default() != WorkflowBuilder.new()
    with pytest.raises(TypeError):
        _ = Workflow.default() < WorkflowBuilder.new()  # type: ignore[operator]


def test_repr_lists_fields() -> None:
    workflow = WorkflowBuilder.new().name("ci").build()

    assert repr(workflow) == "Workflow(name=WorkflowName(value='ci'), run_name=None)"
