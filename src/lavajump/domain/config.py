from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """
    Physics constants. Distances are in grid cells, times in seconds.
    """
    max_step: float = 0.05  # longest sub-step animate() will take
    gravity: float = 30.0
    jump_speed: float = 17.0
    player_x_speed: float = 7.0

    wobble_speed: float = 8.0  # radians per second
    wobble_dist: float = 0.07

    finish_delay: float = 1.0  # lingering time after won/lost

    horizontal_lava_speed: float = 2.0
    vertical_lava_speed: float = 2.0
    dripping_lava_speed: float = 3.0

    def __post_init__(self) -> None:
        if self.max_step <= 0:
            raise ValueError("max_step must be > 0")
        if self.finish_delay < 0:
            raise ValueError("finish_delay must be >= 0")


DEFAULT_CONFIG = SimulationConfig()
