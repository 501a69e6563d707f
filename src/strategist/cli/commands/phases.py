"""Phases command listing the planning phases."""

from __future__ import annotations

import argparse

from rich.table import Table

from strategist.cli.context import console, report_error
from strategist.errors import StrategistError
from strategist.phases.registry import phases


def cmd_phases(args: argparse.Namespace) -> int:
    """List registered phases in step order."""
    try:
        specs = phases()
    except StrategistError as e:
        return report_error(e)

    table = Table(title="Planning phases")
    table.add_column("Step", justify="right")
    table.add_column("Phase")
    table.add_column("Branch")
    table.add_column("Title")
    for spec in specs:
        table.add_row(str(spec.step), spec.id, spec.canonical_key, spec.title)
    console.print(table)
    return 0
