"""
Structured command descriptors.

Each classified clause becomes one of the frozen dataclasses below. They stay
typed all the way to the lowering pass; `to_dict()` gives the audit/JSON shape.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, Union

from constants import DEFAULT_CONFIDENCE, LOW_CONFIDENCE


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"


class Style(Enum):
    NORMAL = "normal"
    LITTLE = "little"
    SHARP = "sharp"


class Rotation(Enum):
    CLOCKWISE = "cw"
    COUNTERCLOCKWISE = "ccw"


class CameraAction(Enum):
    PHOTO = "photo"
    RECORD = "record"
    ZOOM = "zoom"


@dataclass(frozen=True, kw_only=True)
class Command:
    """Base for every descriptor variant. `action` is the variant tag."""
    action: ClassVar[str] = ""
    raw: str
    confidence: float = DEFAULT_CONFIDENCE

    def to_dict(self) -> dict:
        out = {"action": self.action}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = value.value if isinstance(value, Enum) else value
        return out


@dataclass(frozen=True, kw_only=True)
class SafetyCommand(Command):
    action: ClassVar[str] = "safety"
    type: str = "estop"


@dataclass(frozen=True, kw_only=True)
class MoveCommand(Command):
    action: ClassVar[str] = "move"
    direction: Direction
    style: Style | None = None
    distance_m: float | None = None
    duration_ms: int | None = None
    relative: bool = True

    @property
    def is_stop(self) -> bool:
        return self.direction is Direction.STOP


@dataclass(frozen=True, kw_only=True)
class TurnCommand(Command):
    action: ClassVar[str] = "turn"
    direction: Direction
    style: Style = Style.NORMAL
    relative: bool = True


@dataclass(frozen=True, kw_only=True)
class RotateCommand(Command):
    action: ClassVar[str] = "rotate"
    direction: Rotation
    degrees: float
    relative: bool = True


@dataclass(frozen=True, kw_only=True)
class SpeedCommand(Command):
    action: ClassVar[str] = "speed"
    percent: float


@dataclass(frozen=True, kw_only=True)
class CameraCommand(Command):
    action: ClassVar[str] = "camera"
    type: CameraAction
    value: float | None = None


@dataclass(frozen=True, kw_only=True)
class SirenCommand(Command):
    action: ClassVar[str] = "siren"


@dataclass(frozen=True, kw_only=True)
class LightsCommand(Command):
    action: ClassVar[str] = "lights"


@dataclass(frozen=True, kw_only=True)
class SprayCommand(Command):
    action: ClassVar[str] = "spray"


@dataclass(frozen=True, kw_only=True)
class TaserCommand(Command):
    action: ClassVar[str] = "taser"


@dataclass(frozen=True, kw_only=True)
class WaitCommand(Command):
    action: ClassVar[str] = "wait"
    ms: int


@dataclass(frozen=True, kw_only=True)
class UnknownCommand(Command):
    action: ClassVar[str] = "unknown"
    confidence: float = LOW_CONFIDENCE


CommandDescriptor = Union[
    SafetyCommand,
    MoveCommand,
    TurnCommand,
    RotateCommand,
    SpeedCommand,
    CameraCommand,
    SirenCommand,
    LightsCommand,
    SprayCommand,
    TaserCommand,
    WaitCommand,
    UnknownCommand,
]


def is_unknown(command: Command) -> bool:
    return isinstance(command, UnknownCommand)
