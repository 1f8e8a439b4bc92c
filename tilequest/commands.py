"""Movement commands bound to the keyboard."""

from __future__ import annotations

from enum import Enum

from tilequest.player import Modifiers, Player
from tilequest.scene import Scene


class Direction(Enum):
    """A direction of travel as a unit step ``(dx, dy)``; y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveCommand:
    """Moves the player one step of its speed in a fixed direction."""

    def __init__(self, direction: Direction) -> None:
        self.direction = direction

    def __repr__(self) -> str:
        return f"MoveCommand({self.direction.name})"

    def execute(self, player: Player, scene: Scene, modifiers: Modifiers) -> bool:
        """Start the move if it stays on the board; return whether it started."""
        modifiers.move_x = self.direction.dx * player.speed
        modifiers.move_y = self.direction.dy * player.speed
        to_x = player.x + modifiers.move_x
        to_y = player.y + modifiers.move_y
        if not scene.in_bounds(to_x, to_y):
            return False
        scene[player.x, player.y].unit = 0
        scene[to_x, to_y].unit = 1
        modifiers.from_x, modifiers.from_y = player.x, player.y
        modifiers.to_x, modifiers.to_y = to_x, to_y
        player.set_location(modifiers.move_x, modifiers.move_y)
        return True


_COMMANDS = {direction: MoveCommand(direction) for direction in Direction}

_KEYS = {
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
}


def command_for_key(key: str) -> MoveCommand | None:
    """The command bound to a W/A/S/D key (either case), or None for any other key."""
    direction = _KEYS.get(key.lower())
    return None if direction is None else _COMMANDS[direction]