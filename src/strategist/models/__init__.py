"""Data models for the strategic plan document."""

from .bilingual import BilingualText
from .document import BRANCH_KEYS, Document, load_document, save_document
from .record import Record

__all__ = [
    "BRANCH_KEYS",
    "BilingualText",
    "Document",
    "Record",
    "load_document",
    "save_document",
]
