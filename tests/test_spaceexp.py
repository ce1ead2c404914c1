import itertools
import math

import pytest

from tynbox.geometry import Vec2
from tynbox.spaceexp import (
    BOTS_COUNT,
    BULLETS_COUNT,
    FONT_TEXT,
    PLAYER_CONFIG,
    Bullet,
    ControlMode,
    FrameInput,
    Game,
    Pawn,
    PawnConfig,
    pointer_controls,
    remove_duplicate_codepoints,
    step_pawn_look,
    wasd_controls,
)


class ScriptedRandom:
    """randint returns queued values, then the upper bound once the queue runs out."""

    def __init__(self, values=()):
        self.values = list(values)

    def randint(self, a, b):
        if self.values:
            value = self.values.pop(0)
            assert a <= value <= b
            return value
        return b


def make_game(values=()):
    return Game(rng=ScriptedRandom([0] * BOTS_COUNT + list(values)))


def test_remove_duplicates_keeps_first_occurrence_order():
    assert remove_duplicate_codepoints("abcab") == [ord("a"), ord("b"), ord("c")]


def test_font_text_codepoints_are_unique():
    codepoints = remove_duplicate_codepoints(FONT_TEXT)
    assert len(codepoints) == len(set(codepoints))
    assert set(codepoints) == {ord(ch) for ch in FONT_TEXT}


def test_initial_state():
    game = make_game()
    assert len(game.bots) == BOTS_COUNT
    assert len(game.bullets) == BULLETS_COUNT
    assert game.alive_bots() == []
    assert game.alive_bullets() == []
    assert game.pawn.position == Vec2(256, 256)
    assert game.camera_target == Vec2(256, 256)
    assert game.camera_offset == Vec2(256, 256)
    assert game.pawn.control_mode == ControlMode.POINTER


def test_pointer_controls_stays_when_at_target():
    pawn = Pawn(position=Vec2(5, 5), target_position=Vec2(5, 5))
    pointer_controls(pawn, PLAYER_CONFIG)
    assert pawn.position == Vec2(5, 5)
    assert pawn.direction == Vec2(0, 0)


def test_pointer_controls_approaches_target():
    pawn = Pawn(position=Vec2(0, 0), target_position=Vec2(100, 0))
    before = pawn.position.distance(pawn.target_position)
    for _ in range(10):
        pointer_controls(pawn, PLAYER_CONFIG)
    assert pawn.position.distance(pawn.target_position) < before
    assert pawn.direction.x > 0


def test_wasd_controls_idle_does_not_move():
    pawn = Pawn(position=Vec2(1, 2))
    wasd_controls(pawn, PLAYER_CONFIG, Vec2(0, 0))
    assert pawn.position == Vec2(1, 2)
    assert pawn.speed == 0


def test_wasd_controls_accelerates_right():
    pawn = Pawn(position=Vec2(0, 0))
    for _ in range(5):
        wasd_controls(pawn, PLAYER_CONFIG, Vec2(1, 0))
    assert 0 < pawn.speed < PLAYER_CONFIG.speed
    assert pawn.position.x > 0
    assert pawn.position.y == 0


def test_step_pawn_look_straight_up():
    pawn = Pawn(position=Vec2(0, 0), look_at=Vec2(0, 10), look_direction=Vec2(0, 1))
    step_pawn_look(pawn, PLAYER_CONFIG)
    assert pawn.look_direction == Vec2(0, 1)
    assert pawn.rotation == pytest.approx(-180)


def test_step_pawn_look_yields_unit_vector():
    config = PawnConfig(1, 1, 1, 0.5, 1)
    pawn = Pawn(position=Vec2(0, 0), look_at=Vec2(3, -4), look_direction=Vec2(0, 1))
    step_pawn_look(pawn, config)
    assert pawn.look_direction.length() == pytest.approx(1.0)


def test_spawn_bot_places_bot_around_player():
    game = make_game([0, 100, 0, 550, 2])
    bot = game.spawn_bots()
    assert bot is game.bots[0]
    assert game.alive_bots() == [bot]
    assert bot.position.distance(game.pawn.position) == pytest.approx(550)
    assert bot.hitpoints == 2
    assert bot.scale == 1.0


def test_spawn_bot_skipped_on_failed_roll():
    game = make_game([3])
    assert game.spawn_bots() is None
    assert game.alive_bots() == []


def test_spawn_bullet_fires_when_facing_target():
    game = make_game([0, 0])
    start = game.pawn.position
    assert game.spawn_bullet(start, start + Vec2(0, 200), now=5.0)
    bullet = game.bullets[0]
    assert bullet.alive
    assert bullet.timestamp == 5.0
    assert bullet.direction.length() == pytest.approx(game.bullet_config.speed)
    expected = start - bullet.direction * 0.1
    assert game.pawn.position.x == pytest.approx(expected.x)
    assert game.pawn.position.y == pytest.approx(expected.y)


def test_spawn_bullet_refuses_target_behind():
    game = make_game([0, 0] * BULLETS_COUNT)
    start = game.pawn.position
    assert not game.spawn_bullet(start, start - Vec2(0, 200), now=1.0)
    assert game.alive_bullets() == []
    assert game.pawn.position == start


def test_pawn_action_respects_cooldown():
    game = make_game()
    game.pawn.action_timestamp = 10.0
    assert not game.pawn_action(10.0)
    assert game.pawn.action_timestamp == 10.0


def test_pawn_action_shoots_bot_in_range():
    game = make_game([0, 0])
    bot = game.bots[0]
    bot.alive = True
    bot.position = game.pawn.position + Vec2(0, 100)
    assert game.pawn_action(1.0)
    assert game.pawn.action_timestamp == 1.0
    assert len(game.alive_bullets()) == 1


def test_step_bullets_moves_and_expires():
    game = make_game()
    moving = game.bullets[0]
    moving.alive, moving.timestamp = True, 0.0
    moving.position, moving.direction = Vec2(0, 0), Vec2(0, 12)
    old = game.bullets[1]
    old.alive, old.timestamp = True, -5.0
    game.step_bullets(0.5)
    assert moving.alive
    assert moving.position == Vec2(0, 12)
    assert moving.rotation == pytest.approx(-180)
    assert not old.alive


def test_step_bots_bullet_hit_kills_bot():
    game = make_game([64])
    bot = game.bots[0]
    bot.alive, bot.hitpoints = True, 1
    bot.position = Vec2(300, 300)
    bullet = game.bullets[0]
    bullet.alive, bullet.position = True, Vec2(300, 300)
    game.step_bots()
    assert not bullet.alive
    assert not bot.alive
    assert bot.hitpoints == 0


def test_step_bots_bullet_hit_wounds_tough_bot():
    game = make_game([64])
    bot = game.bots[0]
    bot.alive, bot.hitpoints = True, 2
    bot.position = Vec2(300, 300)
    game.bullets[0] = Bullet(alive=True, position=Vec2(300, 300))
    game.step_bots()
    assert bot.alive
    assert bot.hitpoints == 1
    assert bot.target_position == game.pawn.position


def test_world_tiles_grid_around_origin_tile():
    game = make_game()
    tiles = game.world_tiles()
    coords = [-2048, -1024, 0, 1024]
    assert len(tiles) == 16
    assert set(tiles) == {(x, y) for y, x in itertools.product(coords, coords)}
    assert tiles[0] == (-2048, -2048)


def test_step_switches_to_wasd_and_hides_mark():
    game = make_game()
    for frame_no in range(30):
        game.step(FrameInput(mouse=Vec2(10, 10), now=frame_no / 60, key_pressed=True))
    assert game.pawn.control_mode == ControlMode.WASD
    assert game.mark_scale < 0.1
    assert game.mark_rotation == 30
    assert game.crosshair == Vec2(10, 10)


def test_step_click_returns_to_pointer_and_sets_target():
    game = make_game()
    game.pawn.control_mode = ControlMode.WASD
    game.step(FrameInput(mouse=Vec2(300, 256), now=0.0, left_button_down=True))
    assert game.pawn.control_mode == ControlMode.POINTER
    assert game.pawn.target_position == Vec2(300, 256)
    assert game.mark_position == Vec2(300, 256)
    assert game.camera_target.x > 256
    assert not math.isnan(game.pawn.position.x)