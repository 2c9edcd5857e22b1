from dataclasses import dataclass


@dataclass(frozen=True)
class InputIntent:
    left: bool = False
    right: bool = False
    jump: bool = False  # held, not edge-triggered


NO_INPUT = InputIntent()
