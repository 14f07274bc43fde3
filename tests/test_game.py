import pygame
import pytest

from eightball.core import SCREEN_HEIGHT, SCREEN_WIDTH, SceneType
from eightball.game import Game, main
from eightball.screens import InGameScreen, MainMenu


@pytest.fixture
def ranking_path(tmp_path):
    return tmp_path / "ranking.txt"


@pytest.fixture
def started_game(monkeypatch, ranking_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    game = Game(ranking_path=ranking_path)
    game.start("test")
    yield game
    game.cleanup()


def _run_one_frame(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()


def test_new_game_opens_main_menu(ranking_path):
    game = Game(ranking_path=ranking_path)
    assert isinstance(game.current_scene, MainMenu)
    assert game.active_scene_type == SceneType.MAIN_MENU
    assert game.is_running is False


def test_start_opens_window(started_game):
    assert started_game.is_running is True
    assert started_game.window.get_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_cleanup_releases_window(started_game):
    started_game.cleanup()
    assert started_game.window is None


def test_quit_event_stops_loop(started_game):
    _run_one_frame(started_game)
    assert started_game.is_running is False


def test_change_scene_to_game(started_game):
    started_game.request_change_scene(SceneType.GAME)
    _run_one_frame(started_game)
    assert isinstance(started_game.current_scene, InGameScreen)
    assert started_game.active_scene_type == SceneType.GAME
    assert started_game.is_scene_change_requested is False


def test_change_to_active_scene_is_ignored(started_game):
    before = started_game.current_scene
    started_game.request_change_scene(SceneType.MAIN_MENU)
    assert started_game.is_scene_change_requested is False
    _run_one_frame(started_game)
    assert started_game.current_scene is before


def test_restart_reloads_active_scene(started_game):
    before = started_game.current_scene
    started_game.request_restart_scene(SceneType.MAIN_MENU)
    _run_one_frame(started_game)
    assert isinstance(started_game.current_scene, MainMenu)
    assert started_game.current_scene is not before


def test_first_change_request_wins(started_game):
    started_game.request_change_scene(SceneType.GAME)
    started_game.request_change_scene(SceneType.RESULT)
    assert started_game.requested_scene_type == SceneType.GAME
    _run_one_frame(started_game)
    assert started_game.active_scene_type == SceneType.GAME


def test_result_scene_is_a_menu(started_game):
    started_game.request_change_scene(SceneType.RESULT)
    _run_one_frame(started_game)
    assert isinstance(started_game.current_scene, MainMenu)
    assert started_game.active_scene_type == SceneType.RESULT


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0