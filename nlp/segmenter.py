"""
Clause segmentation.

Pass 1 splits on connector words and punctuation. Pass 2 splits again before
any action verb embedded in a segment, so "forward 2 meters turn right" becomes
two clauses. The split is skipped when the words before the verb carry no
instruction cue of their own ("emergency stop", "set speed 45%"), or when they
only modify the verb in Urdu word order ("right turn", "90 deg rotate").
"""

from __future__ import annotations

import re

from nlp.quantity import extract_quantity

_CONNECTORS = re.compile(
    r"\s*(?:\band then\b|\bafter that\b|\bthen\b|\band\b|\bphir\b|,|;)\s*",
    re.IGNORECASE,
)

ACTION_VERBS = (
    "move", "go", "turn", "rotate", "stop", "speed",
    "camera", "zoom", "lights", "siren", "spray", "taser",
)

# Verbs that take a leading direction or quantity as a modifier
MODIFIED_VERBS = frozenset({"move", "go", "turn", "rotate", "speed", "zoom"})

# "camera zoom" is one cue, not a photo followed by a zoom
_ACTION_VERB = re.compile(
    r"\b(?:camera\s+zoom|{})\b".format("|".join(ACTION_VERBS)),
    re.IGNORECASE,
)

_DIRECTION = re.compile(
    r"\b(?:forward|ahead|straight|backwards|backward|back|reverse|left|right)\b",
    re.IGNORECASE,
)


def _starts_instruction(prefix: str, verb: str, remainder: str) -> bool:
    """Whether `prefix` stands as an instruction apart from the verb after it."""
    if _ACTION_VERB.search(prefix):
        return True
    has_direction = bool(_DIRECTION.search(prefix))
    has_quantity = extract_quantity(prefix).has_value
    if not (has_direction or has_quantity):
        return False
    if verb.lower() not in MODIFIED_VERBS:
        return True
    # A bare modifier belongs to the verb unless the verb brings its own
    return bool(
        (has_direction and _DIRECTION.search(remainder))
        or (has_quantity and extract_quantity(remainder).has_value)
    )


def _split_on_verbs(segment: str) -> list[str]:
    matches = list(_ACTION_VERB.finditer(segment))
    parts = []
    start = 0
    for i, m in enumerate(matches):
        prefix = segment[start:m.start()]
        if not prefix.strip():
            continue
        end = matches[i + 1].start() if i + 1 < len(matches) else len(segment)
        if _starts_instruction(prefix, m.group(0), segment[m.end():end]):
            parts.append(prefix)
            start = m.start()
    parts.append(segment[start:])
    return parts


def split_clauses(text: str) -> list[str]:
    """Split a normalized utterance into ordered, non-empty clauses."""
    if not text:
        return []
    clauses = []
    for segment in _CONNECTORS.split(text):
        for part in _split_on_verbs(segment):
            part = part.strip()
            if part:
                clauses.append(part)
    return clauses
