"""
Command service — wraps the NLP layer for use by the API layer.
Provides a single interface for transcript parsing per operator session.
"""

from __future__ import annotations

import logging

from nlp.command_parser import CommandParser
from nlp.session import ParseResult, SessionRegistry

logger = logging.getLogger(__name__)


class CommandService:
    """
    Central command service used by REST and WebSocket handlers.
    Holds the parser and the per-session registry.
    """

    def __init__(self, parser: CommandParser | None = None):
        self.parser = parser or CommandParser()
        self.sessions = SessionRegistry(self.parser)

    def process_transcript(self, session_id: str, text: str) -> ParseResult:
        """Parse a transcript in the context of `session_id`."""
        return self.sessions.get(session_id).submit(text)

    def get_context(self, session_id: str) -> dict:
        return self.sessions.get(session_id).context_snapshot()

    def get_transcripts(self, session_id: str) -> list[dict]:
        return self.sessions.get(session_id).get_transcript_log()

    def reset_session(self, session_id: str) -> dict:
        session = self.sessions.get(session_id)
        session.reset()
        return session.context_snapshot()

    def close_session(self, session_id: str) -> bool:
        return self.sessions.drop(session_id)


# Singleton
command_service = CommandService()
