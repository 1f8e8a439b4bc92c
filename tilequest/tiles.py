"""Board squares and the images that can be drawn on them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from tilequest.events import Publisher

KIND_FREE = 0
KIND_WALL = 1
KIND_ENTRY = 2
KIND_EXIT = 3
KIND_ITEM = 4
KIND_TELEPORTER1 = 6
KIND_TELEPORTER2 = 7


class Tile(Enum):
    """The picture on a square, named by the image file it is drawn from."""

    STANDARD = "block01.png"
    ROCK = "block02.png"
    ENTRY = "block03.png"
    EXIT = "block04.png"
    MAIN_PLAYER = "block05.png"
    SCORE_UP = "block06.png"
    SPEED_UP = "block07.png"
    TELEPORTER1 = "block08.png"
    TELEPORTER2 = "block09.png"
    MONEY_UP = "block10.png"

    @property
    def filename(self) -> str:
        return self.value


_PICKUP_NAMES = {
    Tile.SCORE_UP: "score",
    Tile.MONEY_UP: "money",
    Tile.SPEED_UP: "speed",
}


@dataclass(eq=False)
class Square(Publisher):
    """One cell of the board; ``unit`` tells which creature stands on it (0 for none)."""

    passable: bool = False
    image: Tile = Tile.ROCK
    kind: int = KIND_WALL
    unit: int = 0

    def __post_init__(self) -> None:
        Publisher.__init__(self)

    def set_square(self, passable: bool, image: Tile, kind: int) -> None:
        self.passable = passable
        self.image = image
        self.kind = kind

    def describe_pickup(self, when: datetime) -> str:
        """Log line for picking up the item shown here, or "" if there is none."""
        name = _PICKUP_NAMES.get(self.image)
        if name is None:
            return ""
        return f"the player picked up the item [{name}]. time: {when.ctime()}\n"