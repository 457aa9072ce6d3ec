"""
Lowering: structured descriptors → flat instruction tokens.

Token alphabet (consumed verbatim by the dispatcher):
  move.forward | move.backward | move.left | move.right | move.stop
  move.distance:<meters>m | move.duration:<ms> | move.speed:<percent>
  turn.left | turn.right | rotate.cw.deg:<deg> | rotate.ccw.deg:<deg>
  camera.photo | camera.record | camera.zoom:<value>
  siren | flash | spray | taser | wait:<ms> | safety.estop | unknown
"""

from __future__ import annotations

from constants import UNKNOWN_TOKEN
from nlp.commands import (
    CameraAction,
    CameraCommand,
    Command,
    LightsCommand,
    MoveCommand,
    RotateCommand,
    SafetyCommand,
    SirenCommand,
    SpeedCommand,
    SprayCommand,
    TaserCommand,
    TurnCommand,
    UnknownCommand,
    WaitCommand,
)


def format_number(value) -> str:
    """Render 2.0 as "2" and 1.5 as "1.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _lower_move(cmd: MoveCommand) -> list[str]:
    if cmd.is_stop:
        return ["move.stop"]
    tokens = [f"move.{cmd.direction.value}"]
    if cmd.distance_m is not None:
        tokens.append(f"move.distance:{format_number(cmd.distance_m)}m")
    if cmd.duration_ms is not None:
        # Token-only consumers still get the timing even without the
        # separate wait/stop descriptors.
        tokens += [
            f"move.duration:{cmd.duration_ms}",
            f"wait:{cmd.duration_ms}",
            "move.stop",
        ]
    return tokens


def _lower_camera(cmd: CameraCommand) -> list[str]:
    if cmd.type is CameraAction.ZOOM:
        return [f"camera.zoom:{format_number(cmd.value)}"]
    return [f"camera.{cmd.type.value}"]


def lower_command(cmd: Command) -> list[str]:
    """Tokens for a single descriptor; UnknownCommand contributes none."""
    if isinstance(cmd, UnknownCommand):
        return []
    if isinstance(cmd, SafetyCommand):
        return ["safety.estop"]
    if isinstance(cmd, MoveCommand):
        return _lower_move(cmd)
    if isinstance(cmd, TurnCommand):
        return [f"turn.{cmd.direction.value}"]
    if isinstance(cmd, RotateCommand):
        return [f"rotate.{cmd.direction.value}.deg:{format_number(cmd.degrees)}"]
    if isinstance(cmd, SpeedCommand):
        return [f"move.speed:{format_number(cmd.percent)}"]
    if isinstance(cmd, CameraCommand):
        return _lower_camera(cmd)
    if isinstance(cmd, SirenCommand):
        return ["siren"]
    if isinstance(cmd, LightsCommand):
        return ["flash"]
    if isinstance(cmd, SprayCommand):
        return ["spray"]
    if isinstance(cmd, TaserCommand):
        return ["taser"]
    if isinstance(cmd, WaitCommand):
        return [f"wait:{cmd.ms}"]
    raise TypeError(f"No lowering for descriptor {type(cmd).__name__}")


def lower(commands: list[Command]) -> list[str]:
    """
    Flatten descriptors into instruction tokens, in order.
    Returns ["unknown"] when nothing is actionable.
    """
    tokens: list[str] = []
    for cmd in commands:
        tokens.extend(lower_command(cmd))
    return tokens or [UNKNOWN_TOKEN]
