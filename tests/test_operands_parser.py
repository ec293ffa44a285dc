from __future__ import annotations

import pytest

from vim_operand.buffer import RegionStyle, TextUnit
from vim_operand.motions import Motion, MotionRegistry, default_motion_registry
from vim_operand.operands import (
    FAIL,
    PARTIAL,
    CountedMove,
    JustMove,
    JustTextObject,
    TextObject,
    change_text_object_count,
    parse_command,
    parse_text_object,
    set_operand_count,
    split_counted_command,
)
from vim_operand.operands.parser import describe_result


def make_motion(keys: str, motion_id: str | None = None) -> Motion:
    return Motion(
        id=motion_id or f"test.{keys}",
        keys=keys,
        handler=lambda text, point: point,
    )


def make_registry(*motions: Motion) -> MotionRegistry:
    registry = MotionRegistry()
    for motion in motions:
        registry.register_motion(motion)
    return registry


def test_split_counted_command_reads_leading_digits() -> None:
    assert split_counted_command("12w") == (12, "w")
    assert split_counted_command("3Vl") == (3, "Vl")
    assert split_counted_command("w") == (1, "w")
    assert split_counted_command("") == (1, "")
    assert split_counted_command("10") == (10, "")


def test_split_counted_command_leading_zero_is_not_a_count() -> None:
    assert split_counted_command("0") == (1, "0")
    assert split_counted_command("0Q") == (1, "0Q")
    assert split_counted_command("05w") == (1, "05w")


def test_split_counted_command_keeps_later_digits_in_suffix() -> None:
    assert split_counted_command("2d3w") == (2, "d3w")


def test_parse_counted_motion_is_a_move() -> None:
    registry = default_motion_registry()
    for count in (1, 3, 10, 42):
        for keys in ("w", "b", "$", "}"):
            result = parse_text_object(f"{count}{keys}")
            assert result == JustMove(CountedMove(count, registry.resolve(keys)))


def test_parse_motion_without_count_defaults_to_one() -> None:
    result = parse_text_object("w")

    assert isinstance(result, JustMove)
    assert result.move.count == 1
    assert result.move.motion.id == "word_forward"


def test_parse_zero_is_line_start_motion() -> None:
    result = parse_text_object("0")

    assert isinstance(result, JustMove)
    assert result.move.motion.id == "line_start"
    assert result.move.count == 1


def test_parse_literals() -> None:
    assert parse_text_object("") == PARTIAL
    assert parse_text_object("V") == PARTIAL
    assert parse_text_object("4V") == PARTIAL
    assert parse_text_object("7") == PARTIAL
    assert parse_text_object("Vl") == JustTextObject(
        TextObject(1, RegionStyle.LINEWISE, TextUnit.VLINE)
    )
    assert parse_text_object("3Vl") == JustTextObject(
        TextObject(3, RegionStyle.LINEWISE, TextUnit.VLINE)
    )


def test_parse_unknown_input_fails() -> None:
    for raw in ("Q", "0Q", "Vx", "VlV", "3Q", "ww"):
        assert parse_text_object(raw) == FAIL


def test_motion_lookup_takes_precedence_over_literals() -> None:
    shadow = make_motion("V", "test.shadow_v")
    registry = make_registry(shadow)

    result = parse_text_object("2V", resolve_motion=registry.resolve)

    assert result == JustMove(CountedMove(2, shadow))


def test_parse_command_uses_injected_lookup() -> None:
    registry = make_registry(make_motion("x"))

    assert parse_command("w", resolve_motion=registry.resolve) == FAIL
    assert isinstance(parse_command("x", resolve_motion=registry.resolve), JustMove)


def test_change_text_object_count_only_replaces_count() -> None:
    original = TextObject(2, RegionStyle.EXCLUSIVE, TextUnit.WORD)

    changed = change_text_object_count(5, original)

    assert changed == TextObject(5, RegionStyle.EXCLUSIVE, TextUnit.WORD)
    assert original.count == 2


def test_text_object_rejects_non_positive_count() -> None:
    with pytest.raises(ValueError):
        TextObject(0, RegionStyle.LINEWISE, TextUnit.VLINE)
    with pytest.raises(ValueError):
        change_text_object_count(0, TextObject(1, RegionStyle.LINEWISE, TextUnit.VLINE))


def test_set_operand_count_passes_partial_and_fail_through() -> None:
    assert set_operand_count(9, PARTIAL) is PARTIAL
    assert set_operand_count(9, FAIL) is FAIL


def test_set_operand_count_rejects_unknown_results() -> None:
    with pytest.raises(TypeError):
        set_operand_count(2, object())  # type: ignore[arg-type]


def test_describe_result_names_each_variant() -> None:
    assert describe_result(PARTIAL) == "partial"
    assert describe_result(FAIL) == "fail"
    assert describe_result(parse_text_object("Vl")) == "text_object"
    assert describe_result(parse_text_object("w")) == "move"
