"""
Utterance parser.
Normalizes, segments and classifies an operator utterance into descriptors.
"""

from __future__ import annotations

import logging
import re

from constants import LOW_CONFIDENCE
from nlp.classifier import classify_clause
from nlp.commands import Command, MoveCommand, Style, UnknownCommand, is_unknown
from nlp.context import ContextMemory
from nlp.lexicon import URDU_LEXICON, LexiconEntry
from nlp.normalizer import normalize
from nlp.segmenter import split_clauses

logger = logging.getLogger(__name__)

_REPEAT = re.compile(r"\bagain\b|\brepeat\b|\bonce more\b", re.IGNORECASE)


class CommandParser:
    """
    Parses operator utterances (English, Urdu, or a mix) into descriptors.

    Usage:
        parser = CommandParser()
        context = ContextMemory()
        commands = parser.parse("move forward 2 meters then turn right", context)
    """

    def __init__(self, lexicon: tuple[LexiconEntry, ...] = URDU_LEXICON):
        self.lexicon = lexicon

    def parse(self, utterance: str, context: ContextMemory) -> list[Command]:
        """
        Parse one utterance. Always returns at least one descriptor; an
        utterance with nothing actionable yields a single UnknownCommand.
        """
        normalized = normalize(utterance or "", self.lexicon)
        if normalized != (utterance or "").strip():
            logger.debug(f"Normalized '{utterance}' -> '{normalized}'")

        commands: list[Command] = []
        for clause in split_clauses(normalized):
            commands.extend(classify_clause(clause, context))

        if all(is_unknown(c) for c in commands):
            repeated = self._resolve_ellipsis(normalized, context)
            if repeated is not None:
                return [repeated]
            return [UnknownCommand(confidence=LOW_CONFIDENCE, raw=(utterance or "").strip())]

        return commands

    def _resolve_ellipsis(self, normalized: str, context: ContextMemory) -> MoveCommand | None:
        """'again' with nothing else recognized repeats the last direction."""
        if context.last_direction is None or not _REPEAT.search(normalized):
            return None
        logger.debug(f"Ellipsis: repeating last direction {context.last_direction.value}")
        return MoveCommand(
            direction=context.last_direction,
            style=Style.NORMAL,
            confidence=LOW_CONFIDENCE,
            raw="again",
        )


_default_parser = CommandParser()


def parse(utterance: str, context: ContextMemory) -> list[Command]:
    """Parse `utterance` with the built-in lexicon, reading and updating `context`."""
    return _default_parser.parse(utterance, context)
