"""Enemies that take turns after the player and kill it on contact."""

from __future__ import annotations

import random
from enum import IntEnum

from tilequest.player import Player
from tilequest.scene import Scene


class Behaviour(IntEnum):
    """What an enemy does on its turn; IDLE between turns."""

    IDLE = 0
    WALK = 1
    DEFEND = 2
    STAND = 3


_CHOICES = (Behaviour.WALK, Behaviour.DEFEND, Behaviour.STAND)


class Enemy:
    """A creature on the board, marked on its square by ``unit_code``."""

    unit_code: int = 2
    step: tuple[int, int] = (0, 1)
    walk_sprite: str = "enemy1_rel.png"
    idle_sprite: str = "enemy1_st.png"
    defense_sprite: str = "enemy1_defense.png"

    def __init__(self, scene: Scene, behaviour: Behaviour = Behaviour.IDLE) -> None:
        self.scene = scene
        self.behaviour = Behaviour(behaviour)
        self.frame = 0
        self.x = 0
        self.y = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x}, y={self.y}, "
            f"behaviour={self.behaviour.name}, frame={self.frame})"
        )

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def start_at(self, x: int, y: int) -> None:
        """Put the enemy on ``(x, y)`` and mark that square as occupied."""
        square = self.scene[x, y]
        self.x = x
        self.y = y
        square.unit = self.unit_code

    def move_by(self, dx: int, dy: int) -> None:
        """Step by ``(dx, dy)``, freeing the old square and marking the new one."""
        target = self.scene[self.x + dx, self.y + dy]
        self.scene[self.x, self.y].unit = 0
        self.x += dx
        self.y += dy
        target.unit = self.unit_code

    def choose_behaviour(self, rng: random.Random | None = None) -> Behaviour:
        """Pick walking, defending or standing at random for the coming turn."""
        rng = rng or random.Random()
        self.behaviour = _CHOICES[rng.randrange(len(_CHOICES))]
        return self.behaviour

    def reset_frame(self) -> None:
        self.frame = 0

    def advance_frame(self) -> None:
        self.frame += 1

    def _end_turn(self) -> None:
        self.frame = 0
        self.behaviour = Behaviour.IDLE

    def stop(self) -> None:
        """Finish a standing turn: back to idle, animation rewound."""
        self._end_turn()

    def defend(self) -> None:
        """Finish a defending turn: back to idle, animation rewound."""
        self._end_turn()

    def strike(self, player: Player) -> bool:
        """Kill the player if it shares this enemy's square; return whether it did."""
        if player.position == self.position:
            player.dead = True
            return True
        return False


class Walker(Enemy):
    """Walks downwards one square at a time."""

    unit_code = 2
    step = (0, 1)
    walk_sprite = "enemy1_rel.png"


class LeftRunner(Enemy):
    """Runs to the left one square at a time."""

    unit_code = 3
    step = (-1, 0)
    walk_sprite = "enemy1_right.png"


class RightRunner(Enemy):
    """Runs to the right one square at a time."""

    unit_code = 4
    step = (1, 0)
    walk_sprite = "enemy1_left.png"


class EnemyProxy:
    """Gives any enemy kind a uniform front, deciding its action on request."""

    def __init__(self, kind: Enemy) -> None:
        self.kind = kind

    def __repr__(self) -> str:
        return f"EnemyProxy({self.kind!r})"

    def action(self, rng: random.Random | None = None) -> Behaviour:
        return self.kind.choose_behaviour(rng)

    @property
    def x(self) -> int:
        return self.kind.x

    @property
    def y(self) -> int:
        return self.kind.y

    @property
    def frame(self) -> int:
        return self.kind.frame

    @property
    def behaviour(self) -> Behaviour:
        return self.kind.behaviour

    @behaviour.setter
    def behaviour(self, value: Behaviour) -> None:
        self.kind.behaviour = Behaviour(value)

    def start_at(self, x: int, y: int) -> None:
        self.kind.start_at(x, y)

    def reset_frame(self) -> None:
        self.kind.reset_frame()

    def advance_frame(self) -> None:
        self.kind.advance_frame()