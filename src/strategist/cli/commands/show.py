"""Show command summarizing a document snapshot."""

from __future__ import annotations

import argparse
from dataclasses import fields, is_dataclass
from typing import Any

from rich.table import Table

from strategist.cli.context import console, document_path, report_error
from strategist.errors import StrategistError
from strategist.models.document import BRANCH_KEYS, load_document


def branch_size(value: Any) -> int:
    """Count the items of a branch: list length, or summed sub-list lengths."""
    if isinstance(value, tuple):
        return len(value)
    if is_dataclass(value):
        return sum(
            len(item)
            for item in (getattr(value, f.name) for f in fields(value))
            if isinstance(item, tuple)
        )
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the size of every document branch."""
    path = document_path(args)
    try:
        document = load_document(path)
    except StrategistError as e:
        return report_error(e)

    table = Table(title=f"Document {path}")
    table.add_column("Branch")
    table.add_column("Items", justify="right")
    for key in BRANCH_KEYS:
        table.add_row(key, str(branch_size(document.branch(key))))
    console.print(table)
    return 0
