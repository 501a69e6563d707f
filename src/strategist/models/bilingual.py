"""Bilingual (English/Arabic) text value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class BilingualText:
    """Text carried in English and Arabic; either side may be empty."""

    en: str = ""
    ar: str = ""

    @property
    def is_empty(self) -> bool:
        """True when neither language is populated."""
        return not self.en and not self.ar

    def or_else(self, fallback: BilingualText) -> BilingualText:
        """Fill each empty language from ``fallback``."""
        return BilingualText(en=self.en or fallback.en, ar=self.ar or fallback.ar)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return {"en": self.en, "ar": self.ar}

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Create from a serialized ``{"en", "ar"}`` dictionary."""
        if not isinstance(data, dict):
            return cls(en=str(data) if data is not None else "")
        return cls(en=str(data.get("en") or ""), ar=str(data.get("ar") or ""))
