"""Shared helpers for CLI command modules."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from strategist.config.settings import settings
from strategist.errors import StrategistError

console = Console()


def document_path(args: argparse.Namespace) -> Path:
    """Resolve the document snapshot named by ``--document``."""
    path: Path | None = getattr(args, "document", None)
    return path if path is not None else settings.default_document


def output_path(args: argparse.Namespace) -> Path:
    """Resolve where a command writes its document."""
    path: Path | None = getattr(args, "output", None)
    return path if path is not None else document_path(args)


def report_error(error: StrategistError) -> int:
    """Print a user-facing error and return the failure exit code."""
    print(f"Error: {error}", file=sys.stderr)
    return 1
