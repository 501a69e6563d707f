"""Argument parser construction for Strategist CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path


def _add_document_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--document",
        "-d",
        type=Path,
        help="Document snapshot (default: .strategist/plan.json)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        description="Strategist - bilingual strategic plan authoring"
    )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Working directory for plan artifacts (default: current directory)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Phases command
    subparsers.add_parser(
        "phases",
        help="List the planning phases",
    )

    # Normalize command
    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Fold a raw phase reply into the document",
    )
    normalize_parser.add_argument(
        "phase",
        help="Phase id or step number",
    )
    normalize_parser.add_argument(
        "response",
        type=Path,
        help="JSON file holding the raw reply",
    )
    _add_document_argument(normalize_parser)
    normalize_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Where to write the new document (default: overwrite --document)",
    )
    normalize_parser.add_argument(
        "--seed",
        help="Identity seed for reproducible item ids",
    )

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Summarize the document branch by branch",
    )
    _add_document_argument(show_parser)

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a phase and fold it into the document",
    )
    generate_parser.add_argument(
        "phase",
        help="Phase id or step number",
    )
    _add_document_argument(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Where to write the new document (default: overwrite --document)",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))
