"""A whole game: board, hero, items and enemies, advanced one tick at a time."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from tilequest.commands import command_for_key
from tilequest.enemies import Behaviour, Enemy, Walker
from tilequest.events import EventLog, PlayerLogger, SquareLogger
from tilequest.items import Item, ScoreAdder
from tilequest.player import Animation, Modifiers, Player
from tilequest.savefile import DEFAULT_SAVE_PATH, Caretaker, SaveFileError, check_save
from tilequest.scene import Scene
from tilequest.tiles import KIND_EXIT

# The board must hold the item at (2, 2) and the enemy at (2, 1).
MIN_SIZE = 3
MAX_SIZE = 10
DEFAULT_SIZE = 5

IDLE_FRAMES = 60
WALK_FRAMES = 70
ACTION_FRAMES = 60

ITEM_POSITION = (2, 2)
ENEMY_START = (2, 1)

WIN_MESSAGE = "You are win!"
SAVED_MESSAGE = "Game saved."
DAMAGED_MESSAGE = "The save file cannot be loaded because it is damaged."


class TurnPhase(IntEnum):
    """Whose turn it is."""

    PLAYER = 0
    PLAYER_DONE = 1
    ENEMIES = 2


@dataclass(frozen=True)
class GameStatus:
    """The figures shown beside the board."""

    speed: int
    score: int
    money: int
    dead: bool
    phase: TurnPhase


class Game:
    """Runs a turn-based game: the player moves, then every enemy takes its turn."""

    def __init__(self, rng: random.Random | None = None, log: EventLog | None = None) -> None:
        self.rng = rng or random.Random()
        self.log = log if log is not None else EventLog()
        self.width = DEFAULT_SIZE
        self.height = DEFAULT_SIZE
        self.scene = Scene(self.width, self.height)
        self.player = Player(self.scene)
        self.modifiers = Modifiers()
        self.items: list[Item] = []
        self.enemies: list[Enemy] = []
        self.phase = TurnPhase.PLAYER
        self.started = False
        self.player_frame = 1
        self.messages: list[str] = []
        self._square_logger = SquareLogger(self.log)

    def __repr__(self) -> str:
        return (
            f"Game({self.width}x{self.height}, started={self.started}, "
            f"phase={self.phase.name})"
        )

    def _start(self, width: int, height: int, generate: bool) -> None:
        self.width = width
        self.height = height
        self.scene.reset(width, height)
        if generate:
            self.scene.generate_random_landscape(self.rng)
        self.player = Player(self.scene)
        self.player.subscribe(PlayerLogger(self.log))
        self.modifiers = Modifiers()

        item = ScoreAdder(self.scene)
        item.place(*ITEM_POSITION, 1)
        self.items = [item]
        self._watch_items()

        walker = Walker(self.scene)
        walker.start_at(*ENEMY_START)
        self.enemies = [walker]

        self.phase = TurnPhase.PLAYER
        self.player_frame = 1
        self.started = True

    def _watch_items(self) -> None:
        for item in self.items:
            if self.scene.in_bounds(item.x, item.y):
                square = self.scene[item.x, item.y]
                square.unsubscribe(self._square_logger)
                square.subscribe(self._square_logger)

    def new_game(self, width: int, height: int) -> bool:
        """Start a fresh random board; does nothing once a game is running."""
        if self.started:
            return False
        for name, value in (("width", width), ("height", height)):
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ValueError(
                    f"board {name} must be between {MIN_SIZE} and {MAX_SIZE}, got {value}"
                )
        self._start(width, height, generate=True)
        return True

    def load_game(self, path: str | Path = DEFAULT_SAVE_PATH) -> None:
        """Restore a saved game, starting one first if none is running."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as error:
            raise SaveFileError(f"cannot read {path}: {error}") from error
        if not check_save(text):
            raise SaveFileError(DAMAGED_MESSAGE)
        if not self.started:
            self._start(self.width, self.height, generate=False)
        Caretaker(path).load(self.scene, self.player)
        self.width = self.scene.width
        self.height = self.scene.height
        self._watch_items()
        self._place_enemies()

    def _place_enemies(self) -> None:
        for x, y, square in self.scene.cells():
            for enemy in self.enemies:
                if square.unit == enemy.unit_code:
                    if self.scene.in_bounds(enemy.x, enemy.y):
                        self.scene[enemy.x, enemy.y].unit = 0
                    enemy.start_at(x, y)
                    break

    def save_game(self, path: str | Path = DEFAULT_SAVE_PATH) -> bool:
        """Write the running game to ``path``; returns False if no game is running."""
        if not self.started:
            return False
        Caretaker(path).save(self.scene, self.player)
        self.messages.append(SAVED_MESSAGE)
        return True

    def press_key(self, key: str) -> bool:
        """Handle a key press; returns whether it started a move."""
        if not self.started:
            return False
        if (
            self.player.animation != Animation.IDLE
            or self.phase != TurnPhase.PLAYER
            or self.player.dead
        ):
            return False
        self.player_frame = 1
        command = command_for_key(key)
        if command is None:
            return False
        return command.execute(self.player, self.scene, self.modifiers)

    def tick(self) -> None:
        """Advance every animation by one frame and hand turns over when they end."""
        if not self.started:
            return
        if not self.player.dead:
            self._tick_player()
        for enemy in self.enemies:
            self._tick_enemy(enemy)
        if self.phase == TurnPhase.PLAYER_DONE:
            self.phase = TurnPhase.ENEMIES
            for enemy in self.enemies:
                enemy.reset_frame()
                enemy.choose_behaviour(self.rng)
        for enemy in self.enemies:
            enemy.strike(self.player)

    def _tick_player(self) -> None:
        if self.player.animation == Animation.IDLE:
            self.player_frame = self.player_frame + 1 if self.player_frame < IDLE_FRAMES else 0
            return
        if self.player_frame < WALK_FRAMES:
            self.player_frame += 1
            return
        self.player_frame = 0
        self.player.finish_move(self.modifiers.move_x, self.modifiers.move_y)
        self.phase = TurnPhase.PLAYER_DONE
        here = self.scene[self.player.x, self.player.y]
        if here.kind == KIND_EXIT and self.player.score == 1:
            self.messages.append(WIN_MESSAGE)

    def _tick_enemy(self, enemy: Enemy) -> None:
        behaviour = enemy.behaviour
        if behaviour == Behaviour.IDLE:
            if enemy.frame < IDLE_FRAMES:
                enemy.advance_frame()
            else:
                enemy.reset_frame()
            return
        if self.phase != TurnPhase.ENEMIES:
            return
        if behaviour == Behaviour.WALK:
            if enemy.frame < WALK_FRAMES:
                enemy.advance_frame()
                return
            dx, dy = enemy.step
            # A step that would leave the board is spent standing still.
            if self.scene.in_bounds(enemy.x + dx, enemy.y + dy):
                enemy.move_by(dx, dy)
            enemy.reset_frame()
            enemy.behaviour = Behaviour.IDLE
            self.phase = TurnPhase.PLAYER
        elif behaviour in (Behaviour.DEFEND, Behaviour.STAND):
            if enemy.frame < ACTION_FRAMES:
                enemy.advance_frame()
                return
            if behaviour == Behaviour.DEFEND:
                enemy.defend()
            else:
                enemy.stop()
            self.phase = TurnPhase.PLAYER

    def status(self) -> GameStatus:
        return GameStatus(
            speed=self.player.speed,
            score=self.player.score,
            money=self.player.money,
            dead=self.player.dead,
            phase=self.phase,
        )