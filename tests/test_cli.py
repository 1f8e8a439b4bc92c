import io
import random

import pytest

from tilequest import cli
from tilequest.game import DAMAGED_MESSAGE, SAVED_MESSAGE, Game
from tilequest.savefile import check_save


def _run(monkeypatch, capsys, text, argv=None):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = cli.main(argv if argv is not None else ["--seed", "7"])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _started_game(size=5):
    game = Game(rng=random.Random(3))
    game.new_game(size, size)
    return game


def test_render_without_game():
    assert cli.render(Game()) == cli.NO_GAME


def test_render_board_shape():
    game = _started_game()
    lines = cli.render(game).splitlines()
    board = lines[: game.height]
    assert len(board) == 5
    assert all(len(row) == 5 for row in board)
    assert sum(row.count(cli.PLAYER_CHAR) for row in board) == 1


def test_render_places_player_enemy_item_entry():
    game = _started_game()
    lines = cli.render(game).splitlines()
    assert lines[1][0] == cli.PLAYER_CHAR
    assert lines[1][2] == cli.ENEMY_CHAR
    assert lines[2][2] == "*"
    assert lines[0][0] == "S"


def test_render_status_line():
    game = _started_game()
    status = cli.render(game).splitlines()[game.height]
    assert "Speed: 1" in status
    assert "Score: 0" in status
    assert "Money: 0" in status


def test_render_dead_player():
    game = _started_game()
    game.player.dead = True
    assert cli.render(game).splitlines()[-1] == cli.DEAD_MESSAGE


def test_main_new_and_show(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, "new 5 5\nshow\nquit\n")
    assert code == 0
    assert err == ""
    assert out.count("Speed: 1") == 2


def test_main_second_new_refused(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, "new\nnew 4 4\n")
    assert cli.ALREADY_RUNNING in out


def test_main_moves_before_start(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, "d\n")
    assert cli.NO_GAME in out


def test_main_save_without_game(monkeypatch, capsys, tmp_path):
    _, out, _ = _run(monkeypatch, capsys, f"save {tmp_path / 'x.txt'}\n")
    assert cli.NOTHING_TO_SAVE in out
    assert not (tmp_path / "x.txt").exists()


def test_main_save_and_load_round_trip(monkeypatch, capsys, tmp_path):
    path = tmp_path / "save.txt"
    _, out, _ = _run(monkeypatch, capsys, f"new 5 5\nsave {path}\nquit\n")
    assert SAVED_MESSAGE in out
    assert check_save(path.read_text(encoding="utf-8"))

    _, out, err = _run(monkeypatch, capsys, f"load {path}\n")
    assert err == ""
    board = [line for line in out.splitlines() if len(line) == 5 and "Speed" not in line]
    assert len(board) == 5
    assert "Speed: 1" in out


def test_main_default_save_path(monkeypatch, capsys, tmp_path):
    path = tmp_path / "default.txt"
    _, out, _ = _run(
        monkeypatch, capsys, "new\nsave\n", argv=["--seed", "1", "--save", str(path)]
    )
    assert SAVED_MESSAGE in out
    assert check_save(path.read_text(encoding="utf-8"))


def test_main_damaged_save(monkeypatch, capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("garbage", encoding="utf-8")
    code, _, err = _run(monkeypatch, capsys, f"load {path}\n")
    assert code == 0
    assert DAMAGED_MESSAGE in err


def test_main_bad_size(monkeypatch, capsys):
    _, out, err = _run(monkeypatch, capsys, "new 99 5\nshow\n")
    assert err.startswith("error:")
    assert cli.NO_GAME in out


def test_main_unknown_command(monkeypatch, capsys):
    _, _, err = _run(monkeypatch, capsys, "jump\n")
    assert "unknown command: jump" in err


def test_main_move_writes_log(monkeypatch, capsys, tmp_path):
    log = tmp_path / "log.txt"
    _, out, _ = _run(
        monkeypatch, capsys, "new 5 5\nd\n", argv=["--seed", "2", "--log", str(log)]
    )
    assert "the player went to the point" in log.read_text(encoding="utf-8")
    last_board = out.strip().splitlines()
    rows = [line for line in last_board[-7:] if len(line) == 5]
    assert sum(row.count(cli.PLAYER_CHAR) for row in rows[-5:]) == 1


def test_main_rejects_bad_seed(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        cli.main(["--seed", "abc"])