"""
Quantity extraction: a bound numeral plus an optional unit.

Percent expressions are tried before the generic numeral pattern so that
"speed 45%" is never read as 45 of some other unit.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from constants import (
    PERCENT_MIN,
    PERCENT_MAX,
    UNIT_PERCENT,
    UNIT_SECONDS,
    UNIT_MINUTES,
    UNIT_METERS,
    UNIT_CENTIMETERS,
    UNIT_DEGREES,
)
from nlp.lexicon import number_words, word_to_number


@dataclass(frozen=True)
class Quantity:
    value: float | int | None = None
    unit: str | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not None


NO_QUANTITY = Quantity()

_PERCENT_PATTERN = re.compile(
    r"(?<![\w.])(\d{1,3}(?:\.\d+)?)\s*(?:%|percent\b)",
    re.IGNORECASE,
)

# Unit surface forms, longest first within each family
_UNIT_WORDS = [
    "seconds", "second", "secs", "sec", "s",
    "minutes", "minute", "mins", "min",
    "centimeters", "centimeter", "centimetres", "centimetre", "cm",
    "meters", "meter", "metres", "metre", "m",
    "degrees", "degree", "deg",
    "percent", "%",
    "سینٹی میٹر", "سیکنڈ", "منٹ", "میٹر", "ڈگری", "فیصد",
]

_GENERIC_PATTERN = re.compile(
    r"(?<![\w.])(?P<num>\d+(?:\.\d+)?|{words})"
    r"(?:\s*(?P<unit>{units})(?!\w))?"
    r"(?!\w)".format(
        words="|".join(re.escape(w) for w in number_words()),
        units="|".join(re.escape(u) for u in sorted(_UNIT_WORDS, key=len, reverse=True)),
    ),
    re.IGNORECASE,
)


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def canonical_unit(unit_text: str | None) -> str | None:
    """Map a matched unit word onto one of the canonical unit symbols."""
    if not unit_text:
        return None
    unit = unit_text.strip().lower()
    if unit.startswith("sec") or unit == "s" or unit == "سیکنڈ":
        return UNIT_SECONDS
    if unit.startswith("min") or unit == "منٹ":
        return UNIT_MINUTES
    if unit.startswith("deg") or unit == "ڈگری":
        return UNIT_DEGREES
    if unit == "cm" or unit.startswith("centim") or unit == "سینٹی میٹر":
        return UNIT_CENTIMETERS
    if unit == "m" or unit.startswith("met") or unit == "میٹر":
        return UNIT_METERS
    if unit in ("%", "percent", "فیصد"):
        return UNIT_PERCENT
    return None


def extract_quantity(clause: str) -> Quantity:
    """Return the first quantity in `clause`, or an empty Quantity."""
    if not clause:
        return NO_QUANTITY

    pct = _PERCENT_PATTERN.search(clause)
    if pct:
        value = word_to_number(pct.group(1))
        if value is not None:
            return Quantity(value=clamp(value, PERCENT_MIN, PERCENT_MAX), unit=UNIT_PERCENT)

    m = _GENERIC_PATTERN.search(clause)
    if not m:
        return NO_QUANTITY
    value = word_to_number(m.group("num"))
    unit = canonical_unit(m.group("unit"))
    if unit == UNIT_PERCENT and value is not None:
        value = clamp(value, PERCENT_MIN, PERCENT_MAX)
    return Quantity(value=value, unit=unit)
