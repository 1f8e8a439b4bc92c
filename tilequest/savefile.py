"""Saving and loading a game: the board, the player's stats and who stands where.

A save file is plain text of whitespace-separated tokens: the board width,
the board height, the player's money, speed and score, then one token per
square, column by column.  A square token is a two-letter image code,
optionally followed by a two-letter code for the creature standing there.
"""

from __future__ import annotations

from pathlib import Path

from tilequest.player import Player
from tilequest.scene import Scene
from tilequest.tiles import (
    KIND_ENTRY,
    KIND_EXIT,
    KIND_FREE,
    KIND_ITEM,
    KIND_WALL,
    Tile,
)

DEFAULT_SAVE_PATH = "SceneSave.txt"

_HEADER_FIELDS = 5

_IMAGE_CODES = {
    Tile.STANDARD: "ln",
    Tile.ROCK: "rc",
    Tile.ENTRY: "en",
    Tile.EXIT: "ex",
    Tile.SCORE_UP: "sc",
    Tile.SPEED_UP: "sp",
    Tile.MONEY_UP: "mn",
}
_IMAGES_BY_CODE = {code: tile for tile, code in _IMAGE_CODES.items()}

_UNIT_CODES = {1: "ug", 2: "u1", 3: "u2", 4: "u3"}
_UNITS_BY_CODE = {code: unit for unit, code in _UNIT_CODES.items()}

_KIND_FOR_IMAGE = {
    Tile.STANDARD: KIND_FREE,
    Tile.ROCK: KIND_WALL,
    Tile.ENTRY: KIND_ENTRY,
    Tile.EXIT: KIND_EXIT,
    Tile.SCORE_UP: KIND_ITEM,
    Tile.SPEED_UP: KIND_ITEM,
    Tile.MONEY_UP: KIND_ITEM,
}


class SaveFileError(Exception):
    """A save file could not be written, read, or is damaged."""


def is_valid_int(text: str) -> bool:
    """True if ``text`` holds nothing but the digits 0-9."""
    return all("0" <= char <= "9" for char in text)


def is_valid_token(token: str) -> bool:
    """True for an image code, a unit code, or an image code followed by a unit code."""
    if len(token) == 2:
        return token in _IMAGES_BY_CODE or token in _UNITS_BY_CODE
    if len(token) == 4:
        return token[:2] in _IMAGES_BY_CODE and token[2:] in _UNITS_BY_CODE
    return False


def check_save(text: str) -> bool:
    """True if ``text`` is a well-formed save with nothing after the last square."""
    tokens = text.split()
    if len(tokens) < _HEADER_FIELDS:
        return False
    header = tokens[:_HEADER_FIELDS]
    if not all(is_valid_int(field) for field in header):
        return False
    width, height = int(header[0]), int(header[1])
    squares = tokens[_HEADER_FIELDS:]
    if len(squares) != width * height:
        return False
    return all(is_valid_token(token) for token in squares)


def _encode_square(x: int, y: int, image: Tile, unit: int) -> str:
    code = _IMAGE_CODES.get(image)
    if code is None:
        raise SaveFileError(f"square ({x}, {y}) shows {image.name}, which cannot be saved")
    if unit == 0:
        return code
    unit_code = _UNIT_CODES.get(unit)
    if unit_code is None:
        raise SaveFileError(f"square ({x}, {y}) holds unknown unit {unit}")
    return code + unit_code


def _dump(scene: Scene, player: Player) -> str:
    header = [scene.width, scene.height, player.money, player.speed, player.score]
    lines = [str(value) for value in header]
    lines.extend(
        _encode_square(x, y, square.image, square.unit) for x, y, square in scene.cells()
    )
    return "\n".join(lines) + "\n"


def _split_token(token: str) -> tuple[Tile | None, int]:
    if len(token) == 4:
        return _IMAGES_BY_CODE[token[:2]], _UNITS_BY_CODE[token[2:]]
    if token in _IMAGES_BY_CODE:
        return _IMAGES_BY_CODE[token], 0
    return None, _UNITS_BY_CODE[token]


def _apply(text: str, scene: Scene, player: Player) -> None:
    tokens = text.split()
    width, height, money, speed, score = (int(field) for field in tokens[:_HEADER_FIELDS])
    if width < 1 or height < 1:
        raise SaveFileError(f"saved board size {width}x{height} is not playable")
    scene.reset(width, height)
    player.money = money
    player.speed = speed
    player.score = score
    for (x, y, square), token in zip(scene.cells(), tokens[_HEADER_FIELDS:]):
        image, unit = _split_token(token)
        if image is not None:
            square.set_square(image is not Tile.ROCK, image, _KIND_FOR_IMAGE[image])
        square.unit = unit
        if unit == 1:
            player.x, player.y = x, y


class Caretaker:
    """Keeps a game's snapshot in a save file."""

    def __init__(self, path: str | Path = DEFAULT_SAVE_PATH) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"Caretaker({str(self.path)!r})"

    def save(self, scene: Scene, player: Player) -> None:
        """Write the board and the player's stats to the save file."""
        text = _dump(scene, player)
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as error:
            raise SaveFileError(f"cannot write {self.path}: {error}") from error

    def load(self, scene: Scene, player: Player) -> None:
        """Restore the board and the player from the save file.

        The file is checked in full before anything is changed; a missing or
        damaged file raises :class:`SaveFileError` and leaves the game as it was.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as error:
            raise SaveFileError(f"cannot read {self.path}: {error}") from error
        if not check_save(text):
            raise SaveFileError(f"the save file {self.path} is damaged")
        _apply(text, scene, player)