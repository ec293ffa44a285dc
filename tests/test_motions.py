from __future__ import annotations

import pytest

from vim_operand.buffer import Buffer, Region, RegionStyle, StyledRegion
from vim_operand.motions import (
    DEFAULT_MOTIONS,
    Motion,
    MotionConflictError,
    MotionRegistry,
    default_motion_registry,
    load_default_motions,
)
from vim_operand.operands import CountedMove, region_of_move

TEXT = "foo bar\n\nbaz qux\n"


def make_motion(
    keys: str = "x", motion_id: str = "test.x", target: int = 0
) -> Motion:
    return Motion(id=motion_id, keys=keys, handler=lambda text, point: target)


def move(keys: str, count: int = 1) -> CountedMove:
    motion = default_motion_registry().resolve(keys)
    assert motion is not None
    return CountedMove(count, motion)


def test_motion_validation() -> None:
    with pytest.raises(ValueError):
        make_motion(keys="")
    with pytest.raises(ValueError):
        make_motion(motion_id="")
    with pytest.raises(ValueError):
        make_motion(keys="3x")
    with pytest.raises(TypeError):
        Motion(id="bad", keys="x", handler="nope")  # type: ignore[arg-type]


def test_motion_accepts_style_by_value() -> None:
    motion = Motion(id="t", keys="t", handler=lambda text, point: point, style="linewise")  # type: ignore[arg-type]

    assert motion.style is RegionStyle.LINEWISE


def test_register_and_resolve() -> None:
    registry = MotionRegistry()
    motion = make_motion()

    registry.register_motion(motion)

    assert registry.resolve("x") is motion
    assert registry.resolve("y") is None
    assert registry.get_motion("test.x") is motion
    assert registry.stats().motion_count == 1


def test_register_conflicting_keys_raises() -> None:
    registry = MotionRegistry()
    registry.register_motion(make_motion())

    with pytest.raises(MotionConflictError) as excinfo:
        registry.register_motion(make_motion(motion_id="test.other"))

    assert excinfo.value.existing.id == "test.x"


def test_register_duplicate_id_raises() -> None:
    registry = MotionRegistry()
    registry.register_motion(make_motion())

    with pytest.raises(ValueError):
        registry.register_motion(make_motion(keys="y"))


def test_register_with_replace_swaps_binding() -> None:
    registry = MotionRegistry()
    registry.register_motion(make_motion())
    replacement = make_motion(motion_id="test.other", target=3)

    registry.register_motion(replacement, replace=True)

    assert registry.resolve("x") is replacement
    assert list(registry.iter_motions()) == [replacement]


def test_replace_same_id_with_new_keys_drops_old_keys() -> None:
    registry = MotionRegistry()
    registry.register_motion(make_motion())

    registry.register_motion(make_motion(keys="z"), replace=True)

    assert registry.resolve("x") is None
    assert registry.resolve("z") is not None
    assert registry.stats().keys == ("z",)


def test_unregister_motion_bumps_revision() -> None:
    registry = MotionRegistry()
    registry.register_motion(make_motion())
    before = registry.revision()

    removed = registry.unregister_motion("x")

    assert removed is not None and removed.id == "test.x"
    assert registry.revision() == before + 1
    assert registry.unregister_motion("x") is None


def test_get_unknown_motion_raises() -> None:
    with pytest.raises(KeyError):
        MotionRegistry().get_motion("missing")


def test_load_default_motions_filters() -> None:
    registry = MotionRegistry()

    load_default_motions(
        registry,
        include=("word_forward", "word_backward", "line_start"),
        exclude=("word_backward",),
        extra_motions=(make_motion(keys="Z", motion_id="test.z"),),
    )

    assert registry.stats().keys == ("0", "Z", "w")


def test_default_registry_covers_every_default() -> None:
    registry = default_motion_registry()

    assert registry is default_motion_registry()
    assert registry.stats().motion_count == len(DEFAULT_MOTIONS)


@pytest.mark.parametrize(
    ("keys", "point", "expected"),
    [
        ("h", 0, 0),
        ("h", 5, 4),
        ("l", 6, 7),
        ("l", 7, 7),
        ("j", 5, 8),
        ("j", 17, 17),
        ("k", 10, 8),
        ("k", 3, 3),
        ("w", 0, 4),
        ("w", 4, 8),
        ("b", 4, 0),
        ("b", 9, 8),
        ("e", 0, 2),
        ("e", 2, 6),
        ("0", 5, 0),
        ("$", 0, 6),
        ("}", 0, 8),
        ("{", 10, 8),
    ],
)
def test_default_motion_targets(keys: str, point: int, expected: int) -> None:
    assert move(keys).motion(TEXT, point) == expected


def test_first_non_blank_motion() -> None:
    assert move("^").motion("   x = 1\n", 7) == 3


@pytest.mark.parametrize(
    ("keys", "count", "point", "expected"),
    [
        ("w", 1, 0, StyledRegion(RegionStyle.EXCLUSIVE, Region(0, 4))),
        ("w", 2, 0, StyledRegion(RegionStyle.INCLUSIVE, Region(0, 7))),
        ("w", 100, 0, StyledRegion(RegionStyle.INCLUSIVE, Region(0, 16))),
        ("b", 1, 4, StyledRegion(RegionStyle.EXCLUSIVE, Region(0, 4))),
        ("e", 1, 0, StyledRegion(RegionStyle.INCLUSIVE, Region(0, 2))),
        ("j", 1, 5, StyledRegion(RegionStyle.LINEWISE, Region(5, 8))),
        ("}", 1, 0, StyledRegion(RegionStyle.INCLUSIVE, Region(0, 7))),
    ],
)
def test_region_of_move(
    keys: str, count: int, point: int, expected: StyledRegion
) -> None:
    buffer = Buffer.from_text(TEXT, point=point)

    assert region_of_move(buffer, move(keys, count)) == expected
    assert buffer.current_position() == point
