# tilequest

A small turn-based game played on a rectangular grid of tiles, in the
terminal.

A new board is carved at random out of rock: open paths run from the
entry in the top-left corner towards an exit. One score item lies at
tile (2, 2) and one enemy starts at tile (2, 1). You move one step per
turn, and after each of your moves the enemy takes its turn: it walks
one tile down, defends, or stands still. If the enemy and you share a
tile, you die. Pick up the score item and then finish a move on the exit
to win ("You are win!").

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
tilequest
```

The game reads commands from standard input, one per line:

| command | what it does |
|---------|--------------|
| `new [WIDTH HEIGHT]` | start a game; each side from 3 to 10, default 5 by 5 |
| `w`, `a`, `s`, `d` | move up, left, down, right; several in one line (`ddss`) are played in turn |
| `save [PATH]` | save the running game |
| `load [PATH]` | load a saved game, starting one first if none is running |
| `show` | draw the board again |
| `help` | list the commands |
| `quit` | leave (also `exit`, `q`, or end of input) |

The board is drawn as text: `@` you, `E` an enemy, `.` open ground,
`#` rock, `S` entry, `X` exit, `*` score item, `>` speed item, `$` money
item, `T` teleporter. Below it a line shows your speed, score and money.

Your speed sets how many tiles one step covers. A move that would leave
the board is ignored, and rock blocks a step.

Options:

- `--seed N` seeds the random board, so the same seed gives the same game.
- `--log FILE` appends the event log to `FILE`. Each move of the player
  and each pick-up of the item is written there with a timestamp.
  Without this option the log is kept in memory only.
- `--save PATH` sets the save file used when `save` or `load` names none
  (default `SceneSave.txt`).

## Saving and loading

A saved game is a plain text file. Its first five lines hold the board
width, board height, money, speed and score. Then comes one line per
tile, column by column. Each line holds a two-letter tile code,
optionally followed by a two-letter code for whoever stands on that tile:

| code | meaning       |
|------|---------------|
| `ln` | open ground   |
| `rc` | rock (wall)   |
| `en` | entry         |
| `ex` | exit          |
| `sc` | score item    |
| `sp` | speed item    |
| `mn` | money item    |
| `ug` | the player    |
| `u1` | enemy, kind 1 |
| `u2` | enemy, kind 2 |
| `u3` | enemy, kind 3 |

A file that does not follow this layout, or has anything after the last
tile, is rejected with `tilequest.savefile.SaveFileError`, and the game
in progress is left unchanged. `tilequest.savefile.check_save(text)`
tells whether a text is a well-formed save.

## Using it as a library

```python
from tilequest.game import Game, TurnPhase

game = Game()
game.new_game(6, 6)
if game.press_key("d"):
    while game.phase != TurnPhase.PLAYER or game.player.animation:
        game.tick()
print(game.status())
game.save_game("SceneSave.txt")
```

- `tilequest.game.Game` runs a game. `press_key` starts a move,
  `tick` advances every animation by one frame and hands the turn over
  when a move or an enemy's action ends, `status()` returns the speed,
  score, money, whether you are dead and whose turn it is. Messages such
  as the win message collect in `game.messages`.
- `tilequest.scene.Scene` is the board, indexed as `scene[x, y]`;
  `tilequest.scene.SceneIterator` walks it row by row.
- `tilequest.player.Player`, `tilequest.items` (`ScoreAdder`,
  `SpeedAdder`, `MoneyAdder`) and `tilequest.enemies` (`Walker`,
  `LeftRunner`, `RightRunner`) are the pieces on the board.
- `tilequest.commands.command_for_key` maps W/A/S/D to move commands.
- `tilequest.events` holds the publisher/listener classes and `EventLog`.
- `tilequest.cli.render(game)` gives the text picture of the board.

## What it does not do

There is no graphical window: the board is shown only as text, and the
sprite and image file names the pieces carry are not drawn. A game
always places one score item and one walking enemy; the speed and money
items and the other two enemy kinds exist as classes but a new game does
not put them on the board. Teleporter tiles have no effect.