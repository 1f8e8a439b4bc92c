import random

import pytest

from tilequest.enemies import (
    Behaviour,
    Enemy,
    EnemyProxy,
    LeftRunner,
    RightRunner,
    Walker,
)
from tilequest.player import Player
from tilequest.scene import Scene


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


@pytest.fixture
def scene():
    return Scene(5, 5)


@pytest.mark.parametrize("cls, code", [(Walker, 2), (LeftRunner, 3), (RightRunner, 4)])
def test_start_at_marks_square(scene, cls, code):
    enemy = cls(scene)
    enemy.start_at(2, 1)
    assert enemy.position == (2, 1)
    assert scene[2, 1].unit == code


def test_move_by_frees_old_square(scene):
    enemy = Walker(scene)
    enemy.start_at(2, 1)
    enemy.move_by(*enemy.step)
    assert enemy.position == (2, 2)
    assert scene[2, 1].unit == 0
    assert scene[2, 2].unit == Walker.unit_code


@pytest.mark.parametrize(
    "cls, target",
    [(Walker, (2, 3)), (LeftRunner, (1, 2)), (RightRunner, (3, 2))],
)
def test_steps_point_in_named_directions(scene, cls, target):
    enemy = cls(scene)
    enemy.start_at(2, 2)
    enemy.move_by(*enemy.step)
    assert enemy.position == target
    assert scene[target].unit == cls.unit_code


def test_move_off_board_raises_and_keeps_position(scene):
    enemy = LeftRunner(scene)
    enemy.start_at(0, 2)
    with pytest.raises(IndexError):
        enemy.move_by(-1, 0)
    assert enemy.position == (0, 2)
    assert scene[0, 2].unit == LeftRunner.unit_code


@pytest.mark.parametrize(
    "value, expected",
    [(0, Behaviour.WALK), (1, Behaviour.DEFEND), (2, Behaviour.STAND)],
)
def test_choose_behaviour_maps_random_value(scene, value, expected):
    enemy = Walker(scene)
    assert enemy.choose_behaviour(FixedRng(value)) is expected
    assert enemy.behaviour is expected


def test_choose_behaviour_never_idle(scene):
    enemy = Walker(scene)
    rng = random.Random(7)
    seen = {enemy.choose_behaviour(rng) for _ in range(50)}
    assert Behaviour.IDLE not in seen
    assert seen <= {Behaviour.WALK, Behaviour.DEFEND, Behaviour.STAND}


def test_frames_advance_and_reset(scene):
    enemy = Enemy(scene)
    assert enemy.frame == 0
    for _ in range(3):
        enemy.advance_frame()
    assert enemy.frame == 3
    enemy.reset_frame()
    assert enemy.frame == 0


@pytest.mark.parametrize("finish", ["stop", "defend"])
def test_finishing_turn_returns_to_idle(scene, finish):
    enemy = Walker(scene, Behaviour.DEFEND)
    enemy.advance_frame()
    getattr(enemy, finish)()
    assert enemy.behaviour is Behaviour.IDLE
    assert enemy.frame == 0


def test_strike_kills_player_on_same_square(scene):
    player = Player(scene)
    enemy = Walker(scene)
    enemy.start_at(0, 1)
    assert enemy.strike(player) is True
    assert player.dead is True


def test_strike_misses_player_elsewhere(scene):
    player = Player(scene)
    enemy = Walker(scene)
    enemy.start_at(2, 1)
    assert enemy.strike(player) is False
    assert player.dead is False


def test_proxy_delegates_to_kind(scene):
    kind = RightRunner(scene)
    proxy = EnemyProxy(kind)
    proxy.start_at(1, 3)
    assert (proxy.x, proxy.y) == (1, 3)
    assert scene[1, 3].unit == RightRunner.unit_code
    proxy.advance_frame()
    assert proxy.frame == kind.frame == 1
    proxy.reset_frame()
    assert kind.frame == 0
    assert proxy.action(FixedRng(1)) is Behaviour.DEFEND
    assert kind.behaviour is Behaviour.DEFEND
    proxy.behaviour = Behaviour.IDLE
    assert kind.behaviour is Behaviour.IDLE