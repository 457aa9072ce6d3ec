"""End-to-end tests for utterance parsing and lowering."""

from __future__ import annotations

from constants import DEFAULT_CONFIDENCE, LOW_CONFIDENCE
from nlp.command_parser import CommandParser, parse
from nlp.commands import (
    Direction,
    MoveCommand,
    RotateCommand,
    Rotation,
    SafetyCommand,
    SpeedCommand,
    Style,
    TurnCommand,
    UnknownCommand,
)
from nlp.context import ContextMemory
from nlp.lowering import lower

SCENARIO = "move forward 2 meters then turn right a little and rotate 90 degrees then stop"
SCENARIO_TOKENS = ["move.forward", "move.distance:2m", "turn.right", "rotate.cw.deg:90", "move.stop"]


class TestScenario:
    def test_descriptors(self, parser: CommandParser, context: ContextMemory) -> None:
        move, turn, rotate, stop = parser.parse(SCENARIO, context)
        assert isinstance(move, MoveCommand)
        assert move.direction is Direction.FORWARD
        assert move.distance_m == 2
        assert move.style is Style.NORMAL
        assert isinstance(turn, TurnCommand)
        assert turn.direction is Direction.RIGHT
        assert turn.style is Style.NORMAL
        assert isinstance(rotate, RotateCommand)
        assert rotate.direction is Rotation.CLOCKWISE
        assert rotate.degrees == 90
        assert stop.is_stop

    def test_tokens(self, context: ContextMemory) -> None:
        assert lower(parse(SCENARIO, context)) == SCENARIO_TOKENS

    def test_context_after_scenario(self, context: ContextMemory) -> None:
        parse(SCENARIO, context)
        assert context.last_direction is None
        assert context.last_heading_deg == 90

    def test_urdu_scenario(self, context: ContextMemory) -> None:
        text = "آگے بڑھو 2 میٹر پھر دائیں مڑو تھوڑا سا اور rotate 90 degrees پھر stop کرو"
        assert lower(parse(text, context)) == SCENARIO_TOKENS

    def test_every_known_descriptor_has_raw_text(self, context: ContextMemory) -> None:
        assert all(cmd.raw for cmd in parse(SCENARIO, context))


class TestTimedMoves:
    def test_duration_math(self, context: ContextMemory) -> None:
        tokens = lower(parse("move forward for 2 minutes", context))
        assert tokens[:4] == ["move.forward", "move.duration:120000", "wait:120000", "move.stop"]
        # followed by the separate wait/stop descriptors of the structured list
        assert tokens[4:] == ["wait:120000", "move.stop"]

    def test_urdu_duration(self, context: ContextMemory) -> None:
        tokens = lower(parse("5 سیکنڈ کے لیے آگے", context))
        assert tokens[:4] == ["move.forward", "move.duration:5000", "wait:5000", "move.stop"]


class TestUrdu:
    def test_emergency_stop(self, context: ContextMemory) -> None:
        [cmd] = parse("ہنگامی روک", context)
        assert isinstance(cmd, SafetyCommand)

    def test_speed_percent(self, context: ContextMemory) -> None:
        [cmd] = parse("رفتار 70 فیصد", context)
        assert isinstance(cmd, SpeedCommand)
        assert cmd.percent == 70
        assert lower([cmd]) == ["move.speed:70"]

    def test_urdu_number_word_distance(self, context: ContextMemory) -> None:
        [cmd] = parse("پیچھے دو میٹر", context)
        assert cmd.direction is Direction.BACKWARD
        assert cmd.distance_m == 2


class TestEllipsis:
    def test_again_repeats_last_direction(self, context: ContextMemory) -> None:
        context.last_direction = Direction.FORWARD
        [cmd] = parse("again", context)
        assert isinstance(cmd, MoveCommand)
        assert cmd.direction is Direction.FORWARD
        assert cmd.confidence == LOW_CONFIDENCE
        assert lower([cmd]) == ["move.forward"]

    def test_again_in_urdu(self, context: ContextMemory) -> None:
        parse("go left", context)
        [cmd] = parse("پھر سے", context)
        assert cmd.direction is Direction.LEFT

    def test_again_without_history(self, context: ContextMemory) -> None:
        [cmd] = parse("do it again", context)
        assert isinstance(cmd, UnknownCommand)

    def test_again_ignored_when_something_classified(self, context: ContextMemory) -> None:
        context.last_direction = Direction.FORWARD
        [cmd] = parse("again turn left", context)
        assert isinstance(cmd, TurnCommand)

    def test_again_after_stop(self, context: ContextMemory) -> None:
        parse("go forward then stop", context)
        [cmd] = parse("again", context)
        assert isinstance(cmd, UnknownCommand)


class TestEmbeddedInstructions:
    def test_direction_opening_keeps_later_turn(self, context: ContextMemory) -> None:
        tokens = lower(parse("forward 2 meters turn right", context))
        assert tokens == ["move.forward", "move.distance:2m", "turn.right"]

    def test_direction_opening_keeps_later_rotate(self, context: ContextMemory) -> None:
        tokens = lower(parse("left 3 meters rotate 90 degrees", context))
        assert tokens == ["move.left", "move.distance:3m", "rotate.cw.deg:90"]

    def test_camera_zoom_is_one_instruction(self, context: ContextMemory) -> None:
        assert lower(parse("camera zoom 2", context)) == ["camera.zoom:2"]


class TestUnknown:
    def test_hello_robot(self, context: ContextMemory) -> None:
        [cmd] = parse("hello robot", context)
        assert isinstance(cmd, UnknownCommand)
        assert cmd.confidence < DEFAULT_CONFIDENCE
        assert context == ContextMemory()
        assert lower([cmd]) == ["unknown"]

    def test_all_unknown_collapses_to_one(self, context: ContextMemory) -> None:
        [cmd] = parse("hello and goodbye", context)
        assert cmd.raw == "hello and goodbye"

    def test_empty(self, context: ContextMemory) -> None:
        [cmd] = parse("", context)
        assert isinstance(cmd, UnknownCommand)

    def test_mixed_keeps_unknown_clause(self, context: ContextMemory) -> None:
        commands = parse("go forward and sing", context)
        assert [c.action for c in commands] == ["move", "unknown"]
        assert lower(commands) == ["move.forward"]

    def test_context_unchanged_by_unknown_only_call(self, context: ContextMemory) -> None:
        parse("go right", context)
        before = context.copy()
        parse("what is the weather", context)
        assert context == before


class TestDeterminism:
    def test_same_input_same_context_same_output(self) -> None:
        start = ContextMemory(last_direction=Direction.BACKWARD, last_speed_pct=30)
        text = "speed 40% then go left for 3 seconds, take a photo and again"
        first = parse(text, start.copy())
        second = parse(text, start.copy())
        assert first == second
