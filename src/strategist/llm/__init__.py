"""Prompt builders, response schemas and the generation client."""
from __future__ import annotations
