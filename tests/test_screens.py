import logging
import random

import pygame
import pytest

from eightball.core import SCREEN_HEIGHT, SCREEN_WIDTH, TEXTURE_TABLE, Rect, SceneType, Vec2
from eightball.objects import Ball, HoleTrigger, Wall
from eightball.ranking import Ranking
from eightball.screens import InGameScreen, MainMenu
from eightball.widgets import UITextButton


class FakeGame:
    def __init__(self):
        self.changes = []
        self.restarts = []
        self.is_running = True

    def request_change_scene(self, scene_type):
        self.changes.append(scene_type)

    def request_restart_scene(self, scene_type):
        self.restarts.append(scene_type)


class FakeMouse:
    def __init__(self):
        self.pos = Vec2(-100.0, -100.0)
        self.down = False

    def __call__(self):
        return Vec2(self.pos.x, self.pos.y), self.down


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args, **kwargs):
            self.calls.append((name, args))

        return record

    def texts(self):
        return [args[0] for name, args in self.calls if name == "draw_text"]


@pytest.fixture
def ranking_path(tmp_path):
    return tmp_path / "ranking.txt"


@pytest.fixture
def mouse():
    return FakeMouse()


@pytest.fixture
def menu(ranking_path, mouse):
    scene = MainMenu(FakeGame(), ranking_path, mouse)
    scene.enter()
    return scene


@pytest.fixture
def screen(ranking_path, mouse):
    scene = InGameScreen(FakeGame(), mouse, ranking_path, random.Random(1))
    scene.enter()
    return scene


def _button(scene, caption):
    return next(
        obj for obj in scene.game_objects if isinstance(obj, UITextButton) and obj.text == caption
    )


def _click(scene, mouse, button):
    position, scale = button.transform.position, button.transform.scale
    mouse.pos = Vec2(position.x + scale.x * 0.5, position.y + scale.y * 0.5)
    mouse.down = False
    scene.update(0.016)
    mouse.down = True
    scene.update(0.016)


def test_menu_creates_three_buttons(menu):
    captions = [obj.text for obj in menu.game_objects if isinstance(obj, UITextButton)]
    assert captions == ["Start Game", "Quit", "Reset"]


def test_start_button_requests_game(menu, mouse):
    _click(menu, mouse, _button(menu, "Start Game"))
    assert menu.game.changes == [SceneType.GAME]


def test_quit_button_stops_game(menu, mouse):
    _click(menu, mouse, _button(menu, "Quit"))
    assert menu.game.is_running is False


def test_menu_loads_ranking_on_enter(ranking_path, mouse):
    Ranking(ranking_path).add_entry("alice", 120)
    scene = MainMenu(FakeGame(), ranking_path, mouse)
    scene.enter()
    assert [(e.player_name, e.score) for e in scene.ranking_entries] == [("alice", 120)]


def test_reset_ranking_empties_file(ranking_path, mouse):
    Ranking(ranking_path).add_entry("alice", 120)
    scene = MainMenu(FakeGame(), ranking_path, mouse)
    scene.enter()
    scene.reset_ranking()
    assert scene.ranking_entries == []
    assert list(Ranking(ranking_path).entries) == []


def test_menu_render_shows_top_five(ranking_path, mouse):
    ranking = Ranking(ranking_path)
    for name, score in [("a", 10), ("b", 60), ("c", 30), ("d", 50), ("e", 20), ("f", 40)]:
        ranking.add_entry(name, score)
    scene = MainMenu(FakeGame(), ranking_path, mouse)
    scene.enter()
    renderer = RecordingRenderer()
    scene.render(renderer)
    rows = [text for text in renderer.texts() if "->" in text]
    assert len(rows) == 5
    assert rows[0] == "1->b____60"
    assert "8all" in renderer.texts()
    assert "*-* RANKING *-*" in renderer.texts()


def test_menu_escape_is_logged(menu, caplog):
    with caplog.at_level(logging.INFO):
        menu.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert "Escape key pressed. Exiting..." in caplog.text


def test_table_has_walls_holes_and_balls(screen):
    walls = [obj for obj in screen.game_objects if isinstance(obj, Wall)]
    holes = [obj for obj in screen.game_objects if isinstance(obj, HoleTrigger)]
    balls = [obj for obj in screen.game_objects if isinstance(obj, Ball)]
    assert len(walls) == 6
    assert len(holes) == 6
    assert len(balls) == 16
    assert len(screen.physics_system.bodies) == len(screen.game_objects)


def test_rack_ball_ids_and_white_ball(screen):
    assert sorted(ball.id for ball in screen.balls) == list(range(15))
    assert screen.white_ball.id == 15
    assert screen.white_ball not in screen.balls


def test_rack_apex_position(screen):
    apex = next(ball for ball in screen.balls if ball.id == 0)
    assert (apex.transform.position.x, apex.transform.position.y) == (740.0, 340.0)
    assert apex.transform.position.y == screen.white_ball.transform.position.y


def test_turn_ends_when_balls_stop(screen):
    screen.game_rules.turn_in_progress = True
    screen.logic_update(0.016)
    assert screen.game_rules.turn_in_progress is False
    assert screen.game_rules.current_player == 1
    assert screen.ui_manager.current_player == 1


def test_pause_freezes_physics(screen):
    ball = screen.white_ball
    screen.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert screen.ui_manager.pause_canvas.is_active
    ball.rigidbody.velocity = Vec2(100.0, 0.0)
    start_x = ball.transform.position.x
    screen.physics_update(0.1)
    assert ball.transform.position.x == start_x
    screen.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    screen.physics_update(0.1)
    assert ball.transform.position.x > start_x


def test_mouse_drag_shoots_white_ball(screen):
    position = screen.white_ball.transform.position
    start = (position.x, position.y)
    pulled = (position.x - 100.0, position.y)
    screen.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=start, button=1))
    screen.handle_input(pygame.event.Event(pygame.MOUSEMOTION, pos=pulled))
    screen.handle_input(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pulled, button=1))
    assert screen.white_ball.rigidbody.velocity.x > 0
    assert screen.game_rules.turn_in_progress is True
    assert screen.game_rules.player_info(0).turns == 2


def test_hole_action_pockets_ball(screen):
    hole = next(obj for obj in screen.game_objects if isinstance(obj, HoleTrigger))
    ball = next(ball for ball in screen.balls if ball.id == 3)
    hole.on_trigger_action(ball)
    assert ball.rigidbody.is_static is True


def test_black_ball_ends_game(screen):
    eight = next(ball for ball in screen.balls if ball.id == 7)
    screen.game_rules.on_hole_trigger(eight)
    assert screen.game_rules.game_over is True
    assert screen.game_rules.winner == 1
    assert screen.ui_manager.results.is_active is True
    white = screen.white_ball
    white.rigidbody.velocity = Vec2(100.0, 0.0)
    start_x = white.transform.position.x
    screen.update(0.1)
    assert white.transform.position.x == start_x


def test_render_draws_table_first(screen):
    renderer = RecordingRenderer()
    screen.render(renderer)
    name, args = renderer.calls[0]
    assert name == "draw_texture"
    assert args[0] == TEXTURE_TABLE
    assert args[1] == Rect(0.0, 0.0, SCREEN_WIDTH, SCREEN_HEIGHT)
    assert "PLAYER 01" in renderer.texts()