"""Strategist - multi-phase strategic plan authoring."""

__version__ = "0.1.0"
