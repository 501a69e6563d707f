"""Shared serialization for plan records.

Every record in the planning document is a frozen dataclass deriving from
``Record``. In dict form a ``BilingualText`` field ``name`` is flattened to
``name_en`` / ``name_ar``, enums are stored by value and tuples as lists.
"""

from __future__ import annotations

import copy
import types
from dataclasses import fields
from enum import Enum
from typing import Any, Self, Union, get_args, get_origin, get_type_hints

from strategist.models.bilingual import BilingualText

_HINT_CACHE: dict[type, dict[str, Any]] = {}


def _hints_for(cls: type) -> dict[str, Any]:
    hints = _HINT_CACHE.get(cls)
    if hints is None:
        hints = get_type_hints(cls)
        _HINT_CACHE[cls] = hints
    return hints


def _dump(value: Any) -> Any:
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, BilingualText):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return copy.deepcopy(value)
    return value


def _load(hint: Any, value: Any) -> Any:
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        if value is None:
            return None
        inner = [arg for arg in get_args(hint) if arg is not type(None)]
        return _load(inner[0], value)
    if origin is tuple:
        item_hint = get_args(hint)[0]
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(_load(item_hint, item) for item in value)
    if origin is dict:
        return copy.deepcopy(value) if isinstance(value, dict) else {}
    if hint is Any:
        return copy.deepcopy(value)
    if hint is BilingualText:
        return BilingualText.from_dict(value)
    if isinstance(hint, type) and issubclass(hint, Record):
        return hint.from_dict(value if isinstance(value, dict) else {})
    if isinstance(hint, type) and issubclass(hint, Enum):
        return hint(value)
    if hint is float:
        return float(value)
    return value


class Record:
    """Mixin giving frozen dataclasses a dict round-trip."""

    __slots__ = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if isinstance(value, BilingualText):
                data[f"{f.name}_en"] = value.en
                data[f"{f.name}_ar"] = value.ar
            else:
                data[f.name] = _dump(value)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from dictionary.

        Missing keys keep the dataclass default.

        Raises:
            ValueError: If an enum field holds a value outside its set.
        """
        hints = _hints_for(cls)
        kwargs: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            hint = hints[f.name]
            if hint is BilingualText:
                kwargs[f.name] = BilingualText(
                    en=str(data.get(f"{f.name}_en") or ""),
                    ar=str(data.get(f"{f.name}_ar") or ""),
                )
            elif f.name in data:
                kwargs[f.name] = _load(hint, data[f.name])
        return cls(**kwargs)
