"""Pure helpers for word maps and `DD/MM/YYYY` date strings."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def flatten_words(word_maps: Iterable[Mapping[str, list]]) -> list[dict]:
    """Expand word maps into one single-key dict per word.

    Order follows the input maps and their key order; the same word
    appearing in several maps is kept once per map.
    """
    out = []
    for words in word_maps:
        for key, definitions in (words or {}).items():
            out.append({key: definitions})
    return out


def word_matches(key: str, definitions: Iterable[str], needle: str) -> bool:
    """True if `needle` equals the key or one definition, ignoring case."""
    needle = needle.lower()
    if key.lower() == needle:
        return True
    return any(isinstance(d, str) and d.lower() == needle for d in definitions or [])


def parse_leading_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of `raw` ("07" -> 7, "7th" -> 7, "x" -> None)."""
    if raw is None:
        return None
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    return int(m.group(1))


def month_of(date: Optional[str]) -> Optional[int]:
    """Return the month of a `DD/MM/YYYY` string, or None when absent."""
    if not date:
        return None
    parts = date.split("/")
    if len(parts) < 2:
        return None
    return parse_leading_int(parts[1])
