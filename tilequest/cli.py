"""Play the game in a terminal: type commands, see the board as text."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from tilequest.events import EventLog
from tilequest.game import DEFAULT_SIZE, Game, TurnPhase
from tilequest.player import Animation
from tilequest.savefile import DEFAULT_SAVE_PATH, SaveFileError
from tilequest.tiles import Tile

NO_GAME = "No game in progress."
ALREADY_RUNNING = "A game is already running."
NOTHING_TO_SAVE = "No game to save."
DEAD_MESSAGE = "The player is dead."

PLAYER_CHAR = "@"
ENEMY_CHAR = "E"

_TILE_CHARS = {
    Tile.STANDARD: ".",
    Tile.ROCK: "#",
    Tile.ENTRY: "S",
    Tile.EXIT: "X",
    Tile.MAIN_PLAYER: PLAYER_CHAR,
    Tile.SCORE_UP: "*",
    Tile.SPEED_UP: ">",
    Tile.TELEPORTER1: "T",
    Tile.TELEPORTER2: "T",
    Tile.MONEY_UP: "$",
}

_MOVE_KEYS = frozenset("wasd")

# Enough ticks for the longest player move plus the longest enemy turn.
_SETTLE_LIMIT = 10_000

HELP = (
    "Commands: new [WIDTH HEIGHT], load [PATH], save [PATH], show, help, quit.\n"
    "Move with w, a, s, d (several in one line are played in turn)."
)


def render(game: Game) -> str:
    """The board as rows of characters, followed by the player's figures."""
    if not game.started:
        return NO_GAME
    scene = game.scene
    enemies = {(enemy.x, enemy.y) for enemy in game.enemies}
    player = (game.player.x, game.player.y)
    rows = []
    for y in range(scene.height):
        row = []
        for x in range(scene.width):
            if (x, y) == player:
                row.append(PLAYER_CHAR)
            elif (x, y) in enemies:
                row.append(ENEMY_CHAR)
            else:
                row.append(_TILE_CHARS.get(scene[x, y].image, "?"))
        rows.append("".join(row))
    status = game.status()
    rows.append(f"Speed: {status.speed}  Score: {status.score}  Money: {status.money}")
    if status.dead:
        rows.append(DEAD_MESSAGE)
    return "\n".join(rows)


def _settle(game: Game) -> None:
    """Tick until the player may move again, or nothing more can happen."""
    for _ in range(_SETTLE_LIMIT):
        if game.phase == TurnPhase.PLAYER and (
            game.player.animation == Animation.IDLE or game.player.dead
        ):
            return
        game.tick()


def _size(words: Sequence[str]) -> tuple[int, int]:
    if not words:
        return DEFAULT_SIZE, DEFAULT_SIZE
    if len(words) != 2:
        raise ValueError("new takes a width and a height, or nothing")
    return int(words[0]), int(words[1])


def _run(game: Game, command: str, words: Sequence[str], save_path: str) -> None:
    path = words[0] if words else save_path
    if command == "new":
        width, height = _size(words)
        print(render(game) if game.new_game(width, height) else ALREADY_RUNNING)
    elif command == "load":
        game.load_game(path)
        print(render(game))
    elif command == "save":
        if not game.save_game(path):
            print(NOTHING_TO_SAVE)
    elif command == "show":
        print(render(game))
    elif command == "help":
        print(HELP)
    elif set(command) <= _MOVE_KEYS:
        if not game.started:
            print(NO_GAME)
            return
        for key in command:
            if game.press_key(key):
                _settle(game)
        print(render(game))
    else:
        raise ValueError(f"unknown command: {command}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tilequest", description="A turn-based tile game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random board")
    parser.add_argument("--log", default=None, help="file that the event log is appended to")
    parser.add_argument(
        "--save", default=DEFAULT_SAVE_PATH, help="save file used when none is named"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until it ends or ``quit`` is typed."""
    args = _parser().parse_args(argv)
    log = EventLog(args.log) if args.log else None
    game = Game(rng=random.Random(args.seed), log=log)
    print(HELP)
    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        command, *rest = words
        command = command.lower()
        if command in ("quit", "exit", "q"):
            break
        try:
            _run(game, command, rest, args.save)
        except (ValueError, SaveFileError) as error:
            print(f"error: {error}", file=sys.stderr)
        for message in game.messages:
            print(message)
        game.messages.clear()
    return 0