"""Per-session context memory used to resolve elliptical follow-ups."""

from __future__ import annotations

from dataclasses import dataclass, replace

from constants import DEFAULT_SPEED_PCT, DEFAULT_HEADING_DEG
from nlp.commands import Direction, Style


@dataclass
class ContextMemory:
    last_direction: Direction | None = None
    last_speed_pct: float = DEFAULT_SPEED_PCT
    last_heading_deg: float = DEFAULT_HEADING_DEG
    last_turn_style: Style = Style.NORMAL

    def copy(self) -> ContextMemory:
        return replace(self)

    def reset(self) -> None:
        """Return every field to its session-start default."""
        self.last_direction = None
        self.last_speed_pct = DEFAULT_SPEED_PCT
        self.last_heading_deg = DEFAULT_HEADING_DEG
        self.last_turn_style = Style.NORMAL

    def snapshot(self) -> dict:
        return {
            "last_direction": self.last_direction.value if self.last_direction else None,
            "last_speed_pct": self.last_speed_pct,
            "last_heading_deg": self.last_heading_deg,
            "last_turn_style": self.last_turn_style.value,
        }
