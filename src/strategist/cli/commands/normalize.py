"""Normalize command folding a saved raw reply into a document."""

from __future__ import annotations

import argparse
import json
import sys

from strategist.cli.context import document_path, output_path, report_error
from strategist.errors import StrategistError
from strategist.merge import apply_update
from strategist.models.document import load_document, save_document
from strategist.normalize import IdentityAssigner, normalize


def cmd_normalize(args: argparse.Namespace) -> int:
    """Normalize a raw reply file against a document and save the result."""
    try:
        raw_response = json.loads(args.response.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: Cannot read reply {args.response}: {e}", file=sys.stderr)
        return 1

    ids = IdentityAssigner(args.seed) if args.seed else None
    try:
        document = load_document(document_path(args))
        update = normalize(args.phase, raw_response, document, ids=ids)
        document = apply_update(document, update)
    except StrategistError as e:
        return report_error(e)

    destination = output_path(args)
    save_document(document, destination)
    print(f"Applied phase {update.phase_id} to {update.canonical_key}, saved {destination}")
    return 0
