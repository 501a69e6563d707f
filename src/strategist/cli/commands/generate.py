"""Generate command running one phase through the generation client."""

from __future__ import annotations

import argparse

from strategist.cli.context import document_path, output_path, report_error
from strategist.errors import StrategistError
from strategist.models.document import load_document, save_document
from strategist.orchestration.session import PlanningSession


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate a phase and save the updated document."""
    try:
        session = PlanningSession(document=load_document(document_path(args)))
        session.run_phase(args.phase)
    except StrategistError as e:
        return report_error(e)

    destination = output_path(args)
    save_document(session.document, destination)
    applied = session.history[-1]
    print(f"Generated phase {applied.phase_id} into {applied.canonical_key}, saved {destination}")
    return 0
