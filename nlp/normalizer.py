"""Lexical normalization: rewrite Urdu terms into canonical English tokens."""

from __future__ import annotations

import re
from functools import lru_cache

from nlp.lexicon import URDU_LEXICON, LexiconEntry

_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=8)
def _compile(lexicon: tuple[LexiconEntry, ...]) -> tuple[re.Pattern, dict[str, str]]:
    # Longest surface form first so multi-word entries ("سینٹی میٹر") win over
    # the shorter entries they contain ("میٹر").
    table = {entry.pattern.lower(): entry.canonical for entry in lexicon}
    alternation = "|".join(re.escape(p) for p in sorted(table, key=len, reverse=True))
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE), table


def normalize(text: str, lexicon: tuple[LexiconEntry, ...] = URDU_LEXICON) -> str:
    """
    Substitute every lexicon match in `text` and collapse whitespace.

    Text with no matches is returned unchanged apart from whitespace.
    """
    if not text:
        return ""
    if lexicon:
        pattern, table = _compile(lexicon)
        text = pattern.sub(lambda m: table[m.group(0).lower()], text)
    return _WHITESPACE.sub(" ", text).strip()
