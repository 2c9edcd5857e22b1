import math
import random

import pytest

from lavajump.domain.actors import ActorType, HazardKind
from lavajump.domain.cells import CellKind
from lavajump.domain.exceptions import InvalidLevelPlan
from lavajump.domain.glyphs import DEFAULT_GLYPHS, Glyph, lava_factory
from lavajump.domain.levels import LEVELS, SIMPLE_PLAN
from lavajump.domain.plan import parse_plan, plan_from_text
from lavajump.domain.vector import Vector


def test_simple_plan_builds_grid_and_actors():
    level = parse_plan(SIMPLE_PLAN, rng=random.Random(1))

    assert (level.width, level.height) == (28, 9)
    assert level.grid[2][3] is CellKind.WALL
    assert level.grid[6][8] is CellKind.LAVA
    assert level.grid[0][0] is CellKind.EMPTY

    # Row-major scan order.
    assert [a.type for a in level.actors] == [
        ActorType.LAVA,
        ActorType.COIN,
        ActorType.COIN,
        ActorType.PLAYER,
    ]
    assert level.actors[-1] is level.player
    assert level.status is None


def test_actor_glyphs_leave_empty_cells():
    level = parse_plan(SIMPLE_PLAN, rng=random.Random(1))
    for actor_cell in [(22, 2), (13, 3), (16, 3), (5, 4)]:
        x, y = actor_cell
        assert level.grid[y][x] is CellKind.EMPTY


def test_actor_geometry():
    level = parse_plan(SIMPLE_PLAN, rng=random.Random(1))
    lava, coin, _, player = level.actors

    assert player.pos == Vector(5, 3.5)
    assert player.size == Vector(0.8, 1.5)
    assert player.speed == Vector(0, 0)

    assert coin.base_pos == coin.pos
    assert coin.pos.x == pytest.approx(13.2)
    assert coin.pos.y == pytest.approx(3.1)
    assert coin.size == Vector(0.6, 0.6)

    assert lava.hazard is HazardKind.HORIZONTAL
    assert lava.pos == Vector(22, 2)
    assert lava.speed == Vector(2, 0)
    assert lava.repeat_pos is None


def test_vertical_and_dripping_lava():
    level = parse_plan(["|v@"])
    vertical, dripping, _ = level.actors
    assert vertical.hazard is HazardKind.VERTICAL
    assert vertical.speed == Vector(0, 2)
    assert dripping.hazard is HazardKind.DRIPPING
    assert dripping.speed == Vector(0, 3)
    assert dripping.repeat_pos == Vector(1, 0)


def test_coin_phase_comes_from_the_given_random_source():
    a = parse_plan(SIMPLE_PLAN, rng=random.Random(42))
    b = parse_plan(SIMPLE_PLAN, rng=random.Random(42))
    assert [c.wobble for c in a.actors if c.type is ActorType.COIN] == [
        c.wobble for c in b.actors if c.type is ActorType.COIN
    ]

    expected = random.Random(42)
    coins = [c for c in a.actors if c.type is ActorType.COIN]
    for coin in coins:
        assert coin.wobble == pytest.approx(expected.random() * math.pi * 2)
    assert coins[0].wobble != coins[1].wobble


def test_plan_from_text_keeps_blank_rows():
    rows = plan_from_text("\n   \n @ \nxxx\n")
    assert rows == ("   ", " @ ", "xxx")
    assert parse_plan("\n   \n @ \nxxx\n").height == 3


@pytest.mark.parametrize("name", sorted(LEVELS))
def test_bundled_levels_parse(name):
    level = parse_plan(LEVELS[name], rng=random.Random(0))
    assert level.coins_left() > 0


def test_custom_glyph_table():
    glyphs = DEFAULT_GLYPHS.extended({"s": Glyph(actor=lava_factory(HazardKind.STATIC))})
    level = parse_plan([" s@ "], glyphs=glyphs)
    assert level.actors[0].hazard is HazardKind.STATIC
    assert level.actors[0].speed == Vector(0, 0)

    with pytest.raises(InvalidLevelPlan, match="unknown glyph"):
        parse_plan([" s@ "])


@pytest.mark.parametrize(
    "plan, message",
    [
        ([], "no rows"),
        ([""], "non-empty"),
        (["x@x", "xx"], "row 1 has length 2"),
        (["x@x", "x?x"], "row 1, column 1: unknown glyph"),
        (["xxx", "x x"], "no player"),
        (["@ @"], "2 players"),
    ],
)
def test_invalid_plans(plan, message):
    with pytest.raises(InvalidLevelPlan, match=message):
        parse_plan(plan)


def test_invalid_plan_is_a_value_error():
    with pytest.raises(ValueError):
        parse_plan(["@@"])
