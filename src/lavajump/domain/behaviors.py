from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from lavajump.domain.actors import Actor, ActorType
from lavajump.domain.input_state import InputIntent
from lavajump.domain.snapshot import Status
from lavajump.domain.vector import Vector

if TYPE_CHECKING:
    from lavajump.domain.level import Level


ActFn = Callable[[Actor, float, "Level", InputIntent], None]


def lava_act(lava: Actor, step: float, level: Level, _intent: InputIntent) -> None:
    new_pos = lava.pos.plus(lava.speed.times(step))
    if level.obstacle_at(new_pos, lava.size) is None:
        lava.pos = new_pos
    elif lava.repeat_pos is not None:
        lava.pos = lava.repeat_pos
    else:
        lava.speed = lava.speed.times(-1)


def coin_act(coin: Actor, step: float, level: Level, _intent: InputIntent) -> None:
    cfg = level.config
    coin.wobble += cfg.wobble_speed * step
    wobble_pos = math.sin(coin.wobble) * cfg.wobble_dist
    assert coin.base_pos is not None
    coin.pos = coin.base_pos.plus(Vector(0.0, wobble_pos))


def player_act(player: Actor, step: float, level: Level, intent: InputIntent) -> None:
    # Horizontal first, then vertical: a corner hit resolves as a wall bump.
    _move_x(player, step, level, intent)
    _move_y(player, step, level, intent)

    other = level.actor_at(player)
    if other is not None:
        level.player_touched(other.type, other)

    # Losing animation: sink into whatever killed us.
    if level.status is Status.LOST:
        player.pos = player.pos.plus(Vector(0.0, step))
        player.size = Vector(player.size.x, max(0.0, player.size.y - step))


def _move_x(player: Actor, step: float, level: Level, intent: InputIntent) -> None:
    x_speed = level.config.player_x_speed
    speed_x = 0.0
    if intent.left:
        speed_x -= x_speed
    if intent.right:
        speed_x += x_speed
    player.speed = Vector(speed_x, player.speed.y)

    new_pos = player.pos.plus(Vector(speed_x * step, 0.0))
    obstacle = level.obstacle_at(new_pos, player.size)
    if obstacle is not None:
        level.player_touched(obstacle)
    else:
        player.pos = new_pos


def _move_y(player: Actor, step: float, level: Level, intent: InputIntent) -> None:
    cfg = level.config
    speed_y = player.speed.y + step * cfg.gravity

    new_pos = player.pos.plus(Vector(0.0, speed_y * step))
    obstacle = level.obstacle_at(new_pos, player.size)
    if obstacle is not None:
        level.player_touched(obstacle)
        # Blocked while falling means standing on something: allow a jump.
        if intent.jump and speed_y > 0:
            speed_y = -cfg.jump_speed
        else:
            speed_y = 0.0
    else:
        player.pos = new_pos

    player.speed = Vector(player.speed.x, speed_y)


ACT: Mapping[ActorType, ActFn] = MappingProxyType({
    ActorType.PLAYER: player_act,
    ActorType.COIN: coin_act,
    ActorType.LAVA: lava_act,
})
