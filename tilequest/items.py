"""Pick-up items that sit on the board and boost the player's stats."""

from __future__ import annotations

from tilequest.scene import Scene
from tilequest.tiles import KIND_ITEM, KIND_WALL, Tile


class Item:
    """An item lying on a square of ``scene``.

    While the item lies on a square, that square shows the item's image and
    is passable.
    """

    default_image: Tile = Tile.STANDARD

    def __init__(
        self,
        scene: Scene,
        x: int = 1,
        y: int = 1,
        k: int = 1,
        image: Tile | None = None,
    ) -> None:
        self.scene = scene
        self.x = x
        self.y = y
        self.k = k
        self.image = image if image is not None else self.default_image
        self._occupy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, k={self.k})"

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def _occupy(self) -> None:
        self.scene[self.x, self.y].set_square(True, self.image, KIND_ITEM)

    def place(self, x: int, y: int, k: int) -> None:
        """Move the item to ``(x, y)`` with strength ``k``.

        The square it leaves becomes an impassable wall drawn with the
        standard image.
        """
        self.scene[x, y]  # fail before touching the board if the target is off it
        self.scene[self.x, self.y].set_square(False, Tile.STANDARD, KIND_WALL)
        self.x = x
        self.y = y
        self.k = k
        self._occupy()


class ScoreAdder(Item):
    """An item that gives the player a point of score."""

    default_image = Tile.SCORE_UP


class SpeedAdder(Item):
    """An item that gives the player a point of speed."""

    default_image = Tile.SPEED_UP


class MoneyAdder(Item):
    """An item that gives the player a coin."""

    default_image = Tile.MONEY_UP