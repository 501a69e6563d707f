"""Apply normalized updates to the planning document.

An update replaces one branch wholesale. Every other branch of the new
document is the identical object held by the old one.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, get_args, get_type_hints

from strategist.errors import BranchTypeError, UnknownBranchError
from strategist.models.document import BRANCH_KEYS, Document

if TYPE_CHECKING:
    from strategist.normalize.normalizer import PhaseUpdate

logger = logging.getLogger(__name__)

_BRANCH_HINTS: dict[str, Any] = get_type_hints(Document)


def _check_type(canonical_key: str, current: Any, update: Any) -> None:
    if isinstance(current, tuple):
        expected_item = _item_type(canonical_key)
        if not isinstance(update, tuple):
            raise BranchTypeError(canonical_key, "a tuple", type(update).__name__)
        for item in update:
            if not isinstance(item, expected_item):
                raise BranchTypeError(
                    canonical_key,
                    f"a tuple of {expected_item.__name__}",
                    f"tuple containing {type(item).__name__}",
                )
        return
    if not isinstance(update, type(current)):
        raise BranchTypeError(
            canonical_key, type(current).__name__, type(update).__name__
        )


def _item_type(canonical_key: str) -> type:
    """Element type of a list branch, from the Document annotations."""
    args = get_args(_BRANCH_HINTS[canonical_key])
    return args[0] if args else object


def apply(document: Document, canonical_key: str, update: Any) -> Document:
    """Return a new document with the ``canonical_key`` branch replaced.

    Raises:
        UnknownBranchError: If ``canonical_key`` names no branch.
        BranchTypeError: If ``update`` does not match the branch type.
    """
    if canonical_key not in BRANCH_KEYS:
        raise UnknownBranchError(canonical_key)
    _check_type(canonical_key, document.branch(canonical_key), update)
    logger.debug("Applying update to branch %s", canonical_key)
    return dataclasses.replace(document, **{canonical_key: update})


def apply_update(document: Document, phase_update: PhaseUpdate) -> Document:
    """Apply a normalizer result to ``document``."""
    return apply(document, phase_update.canonical_key, phase_update.update)


def changed_branches(before: Document, after: Document) -> list[str]:
    """Canonical keys whose branch values differ between two documents."""
    return [
        key
        for key in BRANCH_KEYS
        if before.branch(key) != after.branch(key)
    ]
