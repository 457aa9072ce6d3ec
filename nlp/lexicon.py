"""
Urdu → English lexicon and number-word tables.

Everything here is built once at import time and is read-only afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class LexiconEntry:
    """One Urdu surface form and the canonical English token it becomes."""
    pattern: str
    canonical: str


def _entries(canonical: str, *forms: str) -> list[LexiconEntry]:
    return [LexiconEntry(pattern=form, canonical=canonical) for form in forms]


URDU_LEXICON: tuple[LexiconEntry, ...] = tuple(
    # Directions
    _entries("forward", "آگے بڑھ", "آگے جاؤ", "آگے", "سامنے")
    + _entries("backward", "پیچھے", "الٹا", "ریورس", "واپس")
    + _entries("right", "دائیں", "دایاں")
    + _entries("left", "بائیں", "بایاں")
    # Movement modifiers
    + _entries("sharp", "تیز", "شارپ")
    + _entries("little", "ذرا", "تھوڑا", "تھوڑی")
    # Verbs
    + _entries("emergency", "ہنگامی")
    + _entries("stop", "رک جاؤ", "رکو", "روک", "ٹھہرو")
    + _entries("turn", "مڑو", "مڑیں", "موڑو", "مڑ")
    + _entries("rotate", "گھماؤ", "گھومو", "گھوم")
    + _entries("move", "چلو", "چلاؤ")
    + _entries("speed", "رفتار")
    # Units
    + _entries("cm", "سینٹی میٹر")
    + _entries("m", "میٹر")
    + _entries("s", "سیکنڈ")
    + _entries("min", "منٹ")
    + _entries("deg", "ڈگری")
    + _entries("%", "فیصد")
    + _entries("for", "کے لیے", "تک")
    # Camera and accessories
    + _entries("camera", "کیمرہ")
    + _entries("photo", "تصویر")
    + _entries("video", "ویڈیو")
    + _entries("zoom", "زوم")
    + _entries("tilt", "تیلٹ")
    + _entries("pan", "پین")
    + _entries("lights", "روشنی", "لائٹ")
    + _entries("siren", "سائرن")
    + _entries("spray", "چھڑکاؤ")
    + _entries("taser", "بجلی")
    # Repeat cues and connectors
    + _entries("again", "پھر سے", "دوبارہ")
    + _entries("and", "اور", "پھر")
    + _entries("now", "اب")
)


EN_NUM_WORDS = MappingProxyType({
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14, "fifteen": 15,
    "sixteen": 16, "seventeen": 17, "eighteen": 18, "nineteen": 19,
    "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50, "sixty": 60,
    "seventy": 70, "eighty": 80, "ninety": 90, "hundred": 100,
})

UR_NUM_WORDS = MappingProxyType({
    "صفر": 0, "ایک": 1, "دو": 2, "تین": 3, "چار": 4, "پانچ": 5,
    "چھ": 6, "سات": 7, "آٹھ": 8, "نو": 9, "دس": 10,
    "گیارہ": 11, "بارہ": 12, "پندرہ": 15, "بیس": 20, "تیس": 30,
    "چالیس": 40, "پچاس": 50, "ساٹھ": 60, "ستر": 70, "نوے": 90, "سو": 100,
})


_NUMERAL_RE = re.compile(r"\d+(?:\.\d+)?")


def number_words() -> list[str]:
    """All number words from both tables, longest first (for regex alternation)."""
    return sorted([*EN_NUM_WORDS, *UR_NUM_WORDS], key=len, reverse=True)


def word_to_number(token: str) -> float | int | None:
    """Resolve a digit string or a number word from either language."""
    lowered = token.lower()
    if lowered in EN_NUM_WORDS:
        return EN_NUM_WORDS[lowered]
    if token in UR_NUM_WORDS:
        return UR_NUM_WORDS[token]
    if not _NUMERAL_RE.fullmatch(lowered):
        return None
    return float(lowered) if "." in lowered else int(lowered)
