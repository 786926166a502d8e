import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from snakeplay.app import Assets, SnakeApp
from snakeplay.board import Corner, Direction
from snakeplay.controller import GameController
from snakeplay.layout import CELL_SIZE, TOP_BAR_HEIGHT, Screen
from snakeplay.skins import Skin

SKIN_FILES = [
    "snake_head_up.png",
    "snake_head_down.png",
    "snake_head_left.png",
    "snake_head_right.png",
    "snake_body_horizontal.png",
    "snake_body_vertical.png",
    "snake_corner_up_left.png",
    "snake_corner_up_right.png",
    "snake_corner_down_left.png",
    "snake_corner_down_right.png",
]


def _write_skin(root, skin_id):
    folder = root / "textures" / "skins" / f"skin{skin_id}"
    folder.mkdir(parents=True)
    image = pygame.Surface((40, 40))
    image.fill((10, 200, 30))
    for name in SKIN_FILES:
        pygame.image.save(image, str(folder / name))


@pytest.fixture
def make_app(tmp_path):
    created = []

    def factory(high_score=0, root=None):
        controller = GameController(high_score=high_score, rng=random.Random(7))
        app = SnakeApp(root if root is not None else tmp_path, controller=controller)
        created.append(app)
        return app

    yield factory
    pygame.quit()


def _click(app, button):
    cx, cy = button.center()
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(int(cx), int(cy)))
    app.handle_event(event)


def _find(app, action):
    return next(b for b in app.controller.buttons() if b.action == action)


def _start_small_board(app):
    _click(app, _find(app, "start"))
    _click(app, _find(app, "small"))


def test_assets_without_files_have_no_textures(tmp_path):
    pygame.init()
    try:
        assets = Assets(tmp_path)
        assert assets.grid_cell is None
        assert assets.food is None
        assert assets.load_skin(Skin.CLASSIC) is False
        assert assets.heads == {}
        assert assets.skin is Skin.CLASSIC
    finally:
        pygame.quit()


def test_assets_load_skin_scales_textures(tmp_path):
    pygame.init()
    try:
        _write_skin(tmp_path, 1)
        assets = Assets(tmp_path)
        assert assets.load_skin(Skin.GOLDEN) is True
        assert set(assets.heads) == set(Direction)
        assert set(assets.corners) == set(Corner)
        assert assets.heads[Direction.UP].get_size() == (CELL_SIZE - 2, CELL_SIZE - 2)
        assert assets.skin is Skin.GOLDEN
    finally:
        pygame.quit()


def test_assets_reject_unknown_skin(tmp_path):
    pygame.init()
    try:
        assets = Assets(tmp_path)
        with pytest.raises(ValueError):
            assets.load_skin(9)
    finally:
        pygame.quit()


def test_window_matches_controller_size(make_app):
    app = make_app()
    assert app.window.get_size() == (app.controller.width, app.controller.height)


def test_start_then_small_board_resizes_window(make_app):
    app = make_app()
    _start_small_board(app)
    assert app.controller.screen is Screen.PLAYING
    assert (app.controller.board.cols, app.controller.board.rows) == (20, 15)
    assert app.window.get_size() == (app.controller.width, app.controller.height)


def test_click_sounds_are_consumed(make_app):
    app = make_app()
    _click(app, _find(app, "settings"))
    assert app.controller.screen is Screen.SETTINGS
    assert app.controller.sounds == []


def test_quit_event_stops_game(make_app):
    app = make_app()
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert app.controller.running is False


def test_arrow_key_turns_snake_while_playing(make_app):
    app = make_app()
    _start_small_board(app)
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert app.controller.board.direction is Direction.UP


def test_arrow_key_ignored_in_menu(make_app):
    app = make_app()
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert app.controller.board.direction is Direction.RIGHT


def test_menu_buttons_drawn_blue_without_texture(make_app):
    app = make_app()
    surface = app.draw()
    button = _find(app, "start")
    colour = surface.get_at((int(button.x) + 3, int(button.y) + 3))
    assert tuple(colour)[:3] == (0, 0, 255)


def test_playing_draws_food_red_and_head_green(make_app):
    app = make_app()
    _start_small_board(app)
    surface = app.draw()
    board = app.controller.board
    food = surface.get_at(
        (board.food.x * CELL_SIZE + 3, board.food.y * CELL_SIZE + TOP_BAR_HEIGHT + 3)
    )
    head = surface.get_at(
        (board.head.x * CELL_SIZE + 3, board.head.y * CELL_SIZE + TOP_BAR_HEIGHT + 3)
    )
    assert tuple(food)[:3] == (255, 0, 0)
    assert tuple(head)[:3] == (0, 255, 0)


def test_skin_buttons_show_locked_and_unlocked(make_app):
    app = make_app(high_score=50)
    _click(app, _find(app, "skins"))
    surface = app.draw()
    golden = _find(app, "skin1")
    rainbow = _find(app, "skin2")
    assert tuple(surface.get_at((int(golden.x) + 3, int(golden.y) + 3)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((int(rainbow.x) + 3, int(rainbow.y) + 3)))[:3] == (255, 0, 0)


def test_choosing_skin_loads_its_textures(tmp_path, make_app):
    _write_skin(tmp_path, 1)
    app = make_app(high_score=50, root=tmp_path)
    _click(app, _find(app, "skins"))
    _click(app, _find(app, "skin1"))
    assert app.controller.current_skin is Skin.GOLDEN
    assert app.assets.skin is Skin.GOLDEN
    assert set(app.assets.bodies) == {"horizontal", "vertical"}


def test_locked_skin_click_keeps_classic(make_app):
    app = make_app(high_score=0)
    _click(app, _find(app, "skins"))
    _click(app, _find(app, "skin3"))
    assert app.controller.current_skin is Skin.CLASSIC
    assert app.assets.skin is Skin.CLASSIC


def test_run_returns_after_quit_event(make_app):
    app = make_app()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    app.run()
    assert app.controller.running is False