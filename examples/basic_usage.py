#!/usr/bin/env python3
"""Build a workflow programmatically and print it as a document mapping.

This demonstrates using the package directly:

* load settings from `.env`
* stage fields on a `WorkflowBuilder` and finalize it
* convert the result to the mapping a YAML emitter would write
"""

from __future__ import annotations

import argparse
import json
from typing import Sequence

from gh_workflow import MissingMandatoryFieldError, WorkflowBuilder
from gh_workflow.config import WorkflowSettings
from gh_workflow.logging import configure_logging
from gh_workflow.serde import dump_workflow


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a workflow (programmatic example).")
    parser.add_argument("--name", default=None, help='Workflow name, e.g. "ci"')
    parser.add_argument("--run-name", default=None, help="Run name template (optional)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = WorkflowSettings()
    configure_logging(settings.log_level)

    builder = WorkflowBuilder.new()
    if args.name is not None:
        builder = builder.name(args.name)
    if args.run_name is not None:
        builder = builder.run_name(args.run_name)
    print(builder)

    try:
        workflow = builder.build(require=settings.mandatory_field_names)
    except MissingMandatoryFieldError as e:
        print(f"Cannot build workflow: {e}")
        return 1

    print(json.dumps(dump_workflow(workflow), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
