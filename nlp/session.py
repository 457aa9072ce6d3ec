"""
Operator sessions.

A CommandSession owns one ContextMemory. Each submitted transcript is parsed,
applied to the context and lowered under the session lock, so two transcripts
in flight for the same operator never interleave their context reads/writes.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, field

from nlp.command_parser import CommandParser
from nlp.commands import Command, is_unknown
from nlp.config import FEEDBACK_EVENTS, TRANSCRIPT_LOG_SIZE
from nlp.context import ContextMemory
from nlp.lowering import lower

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Outcome of one submitted transcript."""
    text: str
    commands: list[Command]
    tokens: list[str]
    context: dict
    feedback: str | None = None
    timestamp: float = field(default_factory=time.time)

    @property
    def actionable(self) -> bool:
        return not all(is_unknown(c) for c in self.commands)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "commands": [c.to_dict() for c in self.commands],
            "tokens": self.tokens,
            "context": self.context,
            "feedback": self.feedback,
            "actionable": self.actionable,
            "timestamp": self.timestamp,
        }


def feedback_for(commands: list[Command]) -> str | None:
    """Operator-facing summary of the first actionable descriptor."""
    for cmd in commands:
        if is_unknown(cmd):
            continue
        template = FEEDBACK_EVENTS.get(cmd.action)
        if isinstance(template, dict):
            key = getattr(cmd, "type", None) or getattr(cmd, "direction", None)
            return template.get(getattr(key, "value", key))
        return template
    return FEEDBACK_EVENTS["command_unclear"]


class CommandSession:
    """
    One operator's parsing session.

    Usage:
        session = CommandSession("operator-1")
        result = session.submit("move forward 2 meters then stop")
        result.tokens  # ["move.forward", "move.distance:2m", "move.stop"]
    """

    def __init__(
        self,
        session_id: str,
        parser: CommandParser | None = None,
        log_size: int = TRANSCRIPT_LOG_SIZE,
    ):
        self.session_id = session_id
        self.parser = parser or CommandParser()
        self.context = ContextMemory()
        self._lock = threading.Lock()
        self._transcript_log: deque[dict] = deque(maxlen=log_size)

    def submit(self, transcript: str) -> ParseResult:
        """Parse, update context and lower as one atomic step."""
        with self._lock:
            commands = self.parser.parse(transcript, self.context)
            tokens = lower(commands)
            result = ParseResult(
                text=transcript,
                commands=commands,
                tokens=tokens,
                context=self.context.snapshot(),
                feedback=feedback_for(commands),
            )
            self._transcript_log.append({
                "text": transcript,
                "actionable": result.actionable,
                "tokens": tokens,
                "timestamp": result.timestamp,
            })

        if result.actionable:
            logger.info(f"[{self.session_id}] '{transcript}' -> {tokens}")
        else:
            logger.debug(f"[{self.session_id}] Unrecognized transcript: '{transcript}'")
        return result

    def context_snapshot(self) -> dict:
        with self._lock:
            return self.context.snapshot()

    def reset(self) -> None:
        """Forget context and transcript history."""
        with self._lock:
            self.context.reset()
            self._transcript_log.clear()

    def get_transcript_log(self) -> list[dict]:
        with self._lock:
            return list(self._transcript_log)


class SessionRegistry:
    """One CommandSession per session id; contexts are never shared across ids."""

    def __init__(self, parser: CommandParser | None = None):
        self.parser = parser or CommandParser()
        self._sessions: dict[str, CommandSession] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> CommandSession:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = CommandSession(session_id, parser=self.parser)
                self._sessions[session_id] = session
                logger.info(f"Session opened: {session_id}")
            return session

    def drop(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info(f"Session closed: {session_id}")
        return removed

    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
