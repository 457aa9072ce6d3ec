"""
Clause classifier — an ordered cascade of matchers.

Each matcher looks at the cues of one clause and either returns None (no
match, try the next rule) or the descriptors for that clause. The first
matcher that answers wins. Matchers that carry direction or speed semantics
update the session's ContextMemory; the unknown fallback never touches it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from constants import (
    HIGH_CONFIDENCE,
    LOW_CONFIDENCE,
    PERCENT_MIN,
    PERCENT_MAX,
    CM_PER_METER,
    SECONDS_PER_MINUTE,
    MS_PER_SECOND,
    DEFAULT_ZOOM_STEP,
    UNIT_PERCENT,
    UNIT_SECONDS,
    UNIT_MINUTES,
    UNIT_METERS,
    UNIT_CENTIMETERS,
    UNIT_DEGREES,
)
from nlp.commands import (
    CameraAction,
    CameraCommand,
    Command,
    Direction,
    LightsCommand,
    MoveCommand,
    RotateCommand,
    Rotation,
    SafetyCommand,
    SirenCommand,
    SpeedCommand,
    SprayCommand,
    Style,
    TaserCommand,
    TurnCommand,
    UnknownCommand,
    WaitCommand,
)
from nlp.context import ContextMemory
from nlp.quantity import Quantity, clamp, extract_quantity

logger = logging.getLogger(__name__)


def _cue(*alternatives: str) -> re.Pattern:
    return re.compile("|".join(rf"\b{a}\b" for a in alternatives), re.IGNORECASE)


# Cue words
_SAFETY = _cue("emergency stop", "panic", "kill switch")
_STOP = _cue("stop", "halt", "freeze")
_SPEED = _cue("speed", "throttle", "velocity", "power")
_DURATION = _cue("for")
_LITTLE = _cue("little", "slightly", "a bit")
_SHARP = _cue("sharp")
_FORWARD = _cue("forward", "ahead", "straight")
_BACKWARD = _cue("back", "backward", "backwards", "reverse")
_LEFT = _cue("left")
_RIGHT = _cue("right")
_ROTATE = _cue("rotate", "spin")
_TURN = _cue("turn")
_ZOOM = _cue("zoom")
_RECORD = _cue("video", "record")
_PHOTO = _cue("camera", "photo", "picture")
_SIREN = _cue("siren", "alarm")
_LIGHTS = _cue("light", "lights", "flash")
_SPRAY = _cue("spray", "gas", "water")
_TASER = _cue("taser", "shock", "stun")


@dataclass(frozen=True)
class ClauseCues:
    """Everything the matchers need to know about one clause, computed once."""
    text: str
    quantity: Quantity
    little: bool
    sharp: bool
    forward: bool
    backward: bool
    left: bool
    right: bool

    @classmethod
    def from_clause(cls, clause: str) -> ClauseCues:
        text = clause.strip()
        return cls(
            text=text,
            quantity=extract_quantity(text),
            little=bool(_LITTLE.search(text)),
            sharp=bool(_SHARP.search(text)),
            forward=bool(_FORWARD.search(text)),
            backward=bool(_BACKWARD.search(text)),
            left=bool(_LEFT.search(text)),
            right=bool(_RIGHT.search(text)),
        )

    def has(self, pattern: re.Pattern) -> bool:
        return bool(pattern.search(self.text))

    @property
    def direction(self) -> Direction | None:
        if self.forward:
            return Direction.FORWARD
        if self.backward:
            return Direction.BACKWARD
        if self.left:
            return Direction.LEFT
        if self.right:
            return Direction.RIGHT
        return None

    @property
    def style(self) -> Style:
        if self.sharp:
            return Style.SHARP
        if self.little:
            return Style.LITTLE
        return Style.NORMAL

    def unit_is(self, *units: str | None) -> bool:
        return self.quantity.has_value and self.quantity.unit in units


Matcher = Callable[[ClauseCues, ContextMemory], "list[Command] | None"]


def _stop(raw: str) -> MoveCommand:
    return MoveCommand(direction=Direction.STOP, confidence=HIGH_CONFIDENCE, raw=raw)


def match_safety(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_SAFETY):
        return None
    return [SafetyCommand(confidence=HIGH_CONFIDENCE, raw=cues.text)]


def match_stop(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_STOP):
        return None
    context.last_direction = None
    return [_stop(cues.text)]


def match_speed(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_SPEED) or not cues.unit_is(UNIT_PERCENT, None):
        return None
    pct = clamp(cues.quantity.value, PERCENT_MIN, PERCENT_MAX)
    context.last_speed_pct = pct
    return [SpeedCommand(percent=pct, raw=cues.text)]


def match_timed_move(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_DURATION) or not cues.unit_is(UNIT_SECONDS, UNIT_MINUTES):
        return None
    direction = cues.direction
    if direction is None:
        return None
    seconds = cues.quantity.value
    if cues.quantity.unit == UNIT_MINUTES:
        seconds *= SECONDS_PER_MINUTE
    duration_ms = round(seconds * MS_PER_SECOND)
    context.last_direction = direction
    return [
        MoveCommand(direction=direction, style=cues.style, duration_ms=duration_ms, raw=cues.text),
        WaitCommand(ms=duration_ms, confidence=HIGH_CONFIDENCE, raw=cues.text),
        _stop(cues.text),
    ]


def match_distance_move(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.unit_is(UNIT_METERS, UNIT_CENTIMETERS):
        return None
    direction = cues.direction
    if direction is None:
        return None
    meters = cues.quantity.value
    if cues.quantity.unit == UNIT_CENTIMETERS:
        meters = meters / CM_PER_METER
    context.last_direction = direction
    return [MoveCommand(direction=direction, style=cues.style, distance_m=meters, raw=cues.text)]


def match_rotate(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_ROTATE) or not cues.unit_is(UNIT_DEGREES):
        return None
    # No left/right cue means clockwise; "rotate 90 degrees" is ambiguous and
    # this default is kept on purpose.
    rotation = Rotation.COUNTERCLOCKWISE if cues.left else Rotation.CLOCKWISE
    degrees = cues.quantity.value
    if rotation is Rotation.CLOCKWISE:
        context.last_heading_deg += degrees
    else:
        context.last_heading_deg -= degrees
    return [RotateCommand(direction=rotation, degrees=degrees, raw=cues.text)]


def match_turn(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not (cues.has(_TURN) or cues.sharp) or not (cues.left or cues.right):
        return None
    direction = Direction.LEFT if cues.left else Direction.RIGHT
    style = Style.SHARP if cues.sharp else Style.NORMAL
    context.last_direction = direction
    context.last_turn_style = style
    return [TurnCommand(direction=direction, style=style, raw=cues.text)]


def match_cardinal_move(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    direction = cues.direction
    if direction is None:
        return None
    context.last_direction = direction
    return [MoveCommand(direction=direction, style=cues.style, raw=cues.text)]


def match_zoom(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_ZOOM):
        return None
    value = cues.quantity.value if cues.quantity.has_value else DEFAULT_ZOOM_STEP
    return [CameraCommand(type=CameraAction.ZOOM, value=value, raw=cues.text)]


def match_record(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_RECORD):
        return None
    return [CameraCommand(type=CameraAction.RECORD, raw=cues.text)]


def match_photo(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
    if not cues.has(_PHOTO):
        return None
    return [CameraCommand(type=CameraAction.PHOTO, raw=cues.text)]


def _trigger(pattern: re.Pattern, command_cls: type[Command]) -> Matcher:
    def match(cues: ClauseCues, context: ContextMemory) -> list[Command] | None:
        if not cues.has(pattern):
            return None
        return [command_cls(raw=cues.text)]
    match.__name__ = f"match_{command_cls.action}"
    return match


# Precedence order — first match wins
RULES: tuple[Matcher, ...] = (
    match_safety,
    match_stop,
    match_speed,
    match_timed_move,
    match_distance_move,
    match_rotate,
    match_turn,
    match_cardinal_move,
    match_zoom,
    match_record,
    match_photo,
    _trigger(_SIREN, SirenCommand),
    _trigger(_LIGHTS, LightsCommand),
    _trigger(_SPRAY, SprayCommand),
    _trigger(_TASER, TaserCommand),
)


def classify_clause(clause: str, context: ContextMemory) -> list[Command]:
    """
    Classify one clause into descriptors.

    Usually returns a single descriptor; timed moves return move, wait and
    stop in that order. Unmatched clauses return one UnknownCommand and leave
    `context` untouched.
    """
    cues = ClauseCues.from_clause(clause)
    for rule in RULES:
        commands = rule(cues, context)
        if commands is not None:
            logger.debug(f"Clause '{cues.text}' -> {rule.__name__} ({len(commands)} descriptor(s))")
            return commands
    logger.debug(f"Clause '{cues.text}' -> unknown")
    return [UnknownCommand(confidence=LOW_CONFIDENCE, raw=cues.text)]
