"""The player character and the shared record of the move in progress."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

from tilequest.events import Publisher
from tilequest.scene import Scene
from tilequest.tiles import (
    KIND_ENTRY,
    KIND_EXIT,
    KIND_TELEPORTER1,
    KIND_TELEPORTER2,
    Tile,
)


class Animation(IntEnum):
    """Which walking animation the player is playing; IDLE when standing."""

    IDLE = 0
    DOWN = 1
    RIGHT = 2
    LEFT = 3
    UP = 4


@dataclass
class Modifiers:
    """The step being animated: its offset and the squares it leaves and enters."""

    move_x: int = 0
    move_y: int = 0
    from_x: int = 0
    from_y: int = 0
    to_x: int = 0
    to_y: int = 0


_RESTORED_IMAGES = {
    KIND_ENTRY: Tile.ENTRY,
    KIND_EXIT: Tile.EXIT,
    KIND_TELEPORTER1: Tile.TELEPORTER1,
    KIND_TELEPORTER2: Tile.TELEPORTER2,
}

_PICKUPS = {
    Tile.SCORE_UP: "c",
    Tile.SPEED_UP: "s",
    Tile.MONEY_UP: "m",
}

_COLLECTED_STAT = {
    "c": "score",
    "s": "speed",
    "m": "money",
}


class Player(Publisher):
    """The single hero of a game, standing on a square of ``scene``."""

    def __init__(
        self,
        scene: Scene,
        x: int = 0,
        y: int = 1,
        speed: int = 1,
        image: Tile = Tile.MAIN_PLAYER,
    ) -> None:
        super().__init__()
        self.scene = scene
        self.x = x
        self.y = y
        self.speed = speed
        self.image = image
        self.score = 0
        self.money = 0
        self.animation = Animation.IDLE
        self.dead = False
        if scene.in_bounds(x, y):
            scene[x, y].unit = 1

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def set_location(self, dx: int, dy: int) -> None:
        """Begin a step by ``(dx, dy)``: notify the target square, start the animation."""
        target = self.scene[self.x + dx, self.y + dy]
        target.notify()
        if target.image is not Tile.ROCK:
            here = self.scene[self.x, self.y]
            here.image = _RESTORED_IMAGES.get(here.kind, Tile.STANDARD)
            if dy > 0:
                self.animation = Animation.DOWN
            elif dy < 0:
                self.animation = Animation.UP
            elif dx > 0:
                self.animation = Animation.RIGHT
            elif dx < 0:
                self.animation = Animation.LEFT
        self.notify()

    def finish_move(self, dx: int, dy: int) -> None:
        """Complete a step: pick up any item on the target and stand there."""
        target = self.scene[self.x + dx, self.y + dy]
        code = _PICKUPS.get(target.image)
        if code is not None:
            self.collect(code)
            target.image = Tile.STANDARD
        self.x += dx
        self.y += dy
        self.animation = Animation.IDLE

    def collect(self, code: str) -> None:
        """Raise score (``c``), speed (``s``) or money (``m``) by one; other codes do nothing."""
        stat = _COLLECTED_STAT.get(code)
        if stat is not None:
            setattr(self, stat, getattr(self, stat) + 1)

    def describe_position(self, when: datetime) -> str:
        return f"the player went to the point: [{self.x},{self.y}]. time: {when.ctime()}\n"