"""Field resolution helpers shared by the phase normalizers.

Generated replies drift over time: fields get renamed, single-language
values become bilingual, lists arrive as delimited strings. These helpers
resolve such values to one fixed shape and never raise on bad data; an
unusable value resolves to the caller's default.
"""

from __future__ import annotations

import copy
import logging
import math
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from strategist.models.bilingual import BilingualText

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_DELIMITER_PATTERN = re.compile(r"\n|;")
_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is an object, else an empty mapping."""
    if isinstance(value, Mapping):
        return value
    if value is not None:
        logger.debug("Expected an object, got %s", type(value).__name__)
    return {}


def format_number(value: int | float) -> str:
    """Render a number as text without a trailing ``.0`` for whole floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def text_of(value: Any, *, join: bool = False) -> str:
    """Resolve a scalar to stripped text.

    Numbers are rendered as text. With ``join``, a list of scalars is joined
    with newlines. Anything else resolves to an empty string.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return ""
        return format_number(value)
    if join and isinstance(value, list):
        return "\n".join(filter(None, (text_of(item) for item in value)))
    return ""


def pick_text(
    source: Mapping[str, Any],
    *names: str,
    default: str = "",
    join: bool = False,
) -> str:
    """Return the first non-empty text among ``names``, else ``default``."""
    for name in names:
        text = text_of(source.get(name), join=join)
        if text:
            return text
    return default


def pick_list(source: Mapping[str, Any], *names: str) -> list[Any] | None:
    """Return the first list-valued field among ``names``, else None."""
    for name in names:
        value = source.get(name)
        if isinstance(value, list):
            return value
    return None


def pick_text_list(
    source: Mapping[str, Any],
    *names: str,
    current: tuple[str, ...] = (),
) -> tuple[str, ...]:
    """Resolve the first list (or non-empty delimited string) among ``names``.

    Returns ``current`` when no candidate is present.
    """
    for name in names:
        value = source.get(name)
        if isinstance(value, list) or (isinstance(value, str) and value.strip()):
            return text_list(value)
    return current


def bilingual(
    source: Mapping[str, Any],
    *bases: str,
    fallback: BilingualText | None = None,
    join: bool = False,
) -> BilingualText:
    """Resolve a bilingual field from prioritized base names.

    For each base, ``{base}_en`` then the legacy single-language ``{base}``
    feed English and ``{base}_ar`` feeds Arabic. Languages that stay empty
    are taken from ``fallback``.
    """
    en_names: list[str] = []
    ar_names: list[str] = []
    for base in bases:
        en_names.extend((f"{base}_en", base))
        ar_names.append(f"{base}_ar")
    text = BilingualText(
        en=pick_text(source, *en_names, join=join),
        ar=pick_text(source, *ar_names, join=join),
    )
    return text.or_else(fallback) if fallback is not None else text


def bilingual_item(item: Any, *bases: str) -> BilingualText:
    """Resolve one entry of a polymorphic bilingual list.

    Accepts a bare string (English), a partially populated object or a fully
    bilingual object. Objects may also use plain ``en`` / ``ar`` keys.
    """
    if isinstance(item, Mapping):
        plain = BilingualText(en=text_of(item.get("en")), ar=text_of(item.get("ar")))
        return bilingual(item, *bases, fallback=plain)
    return BilingualText(en=text_of(item))


def split_delimited(text: str) -> list[str]:
    """Split free text on newlines and semicolons, dropping blank parts."""
    return [part.strip() for part in _DELIMITER_PATTERN.split(text) if part.strip()]


def bilingual_list(value: Any, *bases: str) -> tuple[BilingualText, ...]:
    """Resolve a list of strings/objects (or a delimited string) to bilingual texts."""
    if isinstance(value, str):
        return tuple(BilingualText(en=part) for part in split_delimited(value))
    if not isinstance(value, list):
        return ()
    items = (bilingual_item(item, *bases) for item in value)
    return tuple(item for item in items if not item.is_empty)


def text_list(value: Any) -> tuple[str, ...]:
    """Resolve a list of scalars (or a delimited string) to stripped texts.

    Object entries contribute their English name or text.
    """
    if isinstance(value, str):
        return tuple(split_delimited(value))
    if not isinstance(value, list):
        return ()
    texts: list[str] = []
    for item in value:
        if isinstance(item, Mapping):
            text = bilingual_item(item, "name", "text", "title").en
        else:
            text = text_of(item)
        if text:
            texts.append(text)
    return tuple(texts)


def _enum_token(value: str) -> str:
    return re.sub(r"[\s\-]+", "_", value.strip()).lower()


def enum_value(value: Any, enum_cls: type[E], default: E) -> E:
    """Map a raw value onto ``enum_cls`` case-insensitively, else ``default``."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str) and value.strip():
        token = _enum_token(value)
        for member in enum_cls:
            if token in (str(member.value).lower(), member.name.lower()):
                return member
        logger.debug(
            "Unrecognized %s value %r, using %s",
            enum_cls.__name__,
            value,
            default.value,
        )
    return default


def parse_int(value: Any) -> int | None:
    """Parse a whole number from an int, a float or a leading-digit string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT_PATTERN.match(value)
        if match:
            return int(match.group(1))
    return None


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def parse_percentage(value: Any, fallback: float) -> float:
    """Parse a 0-100 value from a number or numeric (optionally ``%``) string.

    Out-of-range values are clamped; unparsable ones resolve to ``fallback``.
    """
    number: float | None = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = value.strip().replace("%", "", 1).strip()
        try:
            number = float(cleaned)
        except ValueError:
            number = None
    if number is None or not math.isfinite(number):
        if value is not None:
            logger.debug("Unparsable percentage %r, using %s", value, fallback)
        return fallback
    return clamp(number, 0, 100)


def parse_flag(value: Any, default: bool = False) -> bool:
    """Resolve a boolean from a bool or a yes/true style string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token in ("true", "yes", "1"):
            return True
        if token in ("false", "no", "0"):
            return False
    return default


def copy_objects(value: Any) -> tuple[dict[str, Any], ...]:
    """Deep-copy the object entries of a list; other entries are dropped."""
    if not isinstance(value, list):
        return ()
    return tuple(copy.deepcopy(dict(item)) for item in value if isinstance(item, Mapping))


def entries(value: Any, promote_to: str | None = None) -> list[Mapping[str, Any]]:
    """Return the entries of a record list as objects.

    With ``promote_to``, bare strings become ``{promote_to: text}`` records
    and a single string is first split on newlines and semicolons. Blank
    strings and other scalars are dropped.
    """
    if isinstance(value, str):
        value = split_delimited(value) if promote_to else None
    if not isinstance(value, list):
        return []
    records: list[Mapping[str, Any]] = []
    for item in value:
        if isinstance(item, Mapping):
            records.append(item)
        elif promote_to and text_of(item):
            records.append({promote_to: text_of(item)})
    return records
