"""The game board and a walking iterator over it."""

from __future__ import annotations

import random
from typing import Iterator

from tilequest.tiles import KIND_ENTRY, KIND_EXIT, KIND_FREE, Square, Tile


class Scene:
    """A grid of squares addressed as ``scene[x, y]``."""

    def __init__(self, width: int = 5, height: int = 5) -> None:
        self.reset(width, height)

    def reset(self, width: int, height: int) -> None:
        """Replace the board with ``width`` by ``height`` rock squares."""
        if width < 1 or height < 1:
            raise ValueError(f"scene size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._grid = [[Square() for _ in range(height)] for _ in range(width)]

    def __getitem__(self, position: tuple[int, int]) -> Square:
        x, y = position
        if not self.in_bounds(x, y):
            raise IndexError(f"square ({x}, {y}) is outside the scene")
        return self._grid[x][y]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[tuple[int, int, Square]]:
        """Yield ``(x, y, square)`` column by column."""
        for x, column in enumerate(self._grid):
            for y, square in enumerate(column):
                yield x, y, square

    def generate_random_landscape(self, rng: random.Random | None = None) -> None:
        """Carve two random paths from the corner, then place entry and exit."""
        rng = rng or random.Random()
        x = y = 0
        for _ in range(2):
            x = y = 0
            while x < self.width - 1 and y < self.height - 1:
                # A step right always carries on into a step down.
                if rng.randrange(2) == 0:
                    self._grid[x][y].set_square(True, Tile.STANDARD, KIND_FREE)
                    x += 1
                self._grid[x][y].set_square(True, Tile.STANDARD, KIND_FREE)
                y += 1
            for px, py in ((2, 1), (0, 1)):
                if self.in_bounds(px, py):
                    self._grid[px][py].set_square(True, Tile.STANDARD, KIND_FREE)
        self._grid[0][0].set_square(True, Tile.ENTRY, KIND_ENTRY)
        self[max(x - 1, 0), max(y - 1, 0)].set_square(True, Tile.EXIT, KIND_EXIT)


class SceneIterator:
    """Walks a scene row by row; it never moves past the start of the last row."""

    def __init__(self, scene: Scene, x: int = 0, y: int = 0) -> None:
        self.scene = scene
        self.x = x
        self.y = y

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def advance(self) -> None:
        if self.y == self.scene.height - 1:
            return
        if self.x == self.scene.width - 1:
            self.x = 0
            self.y += 1
        else:
            self.x += 1

    def retreat(self) -> None:
        if self.y == 0:
            return
        if self.x == 0:
            self.x = self.scene.width - 1
            self.y -= 1
        else:
            self.x -= 1

    def at_end(self) -> bool:
        """True once the iterator has reached the row it cannot leave."""
        return self.y == self.scene.height - 1

    def current(self) -> Square:
        return self.scene[self.x, self.y]

    def search(self, kind: int) -> tuple[int, int]:
        """Advance to the first square of ``kind`` and return its position."""
        while self.current().kind != kind:
            if self.at_end():
                raise LookupError(f"no square of kind {kind} ahead of the iterator")
            self.advance()
        return self.position