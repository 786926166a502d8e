"""Window, drawing, sound and the main loop of the snake game."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from snakeplay.board import Corner, Direction
from snakeplay.controller import GameController, Sound
from snakeplay.layout import CELL_SIZE, TOP_BAR_HEIGHT, Button, Screen
from snakeplay.skins import Skin, is_skin_unlocked

log = logging.getLogger(__name__)

FPS = 60
_FRAME_TIME = 1.0 / FPS

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
_CELL_FILL = (30, 30, 30)
_CELL_OUTLINE = (50, 50, 50)
_TOP_BAR_FILL = (50, 50, 50)

_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
}

_HEAD_FILES = {
    Direction.UP: "snake_head_up.png",
    Direction.DOWN: "snake_head_down.png",
    Direction.LEFT: "snake_head_left.png",
    Direction.RIGHT: "snake_head_right.png",
}
_BODY_FILES = {
    "horizontal": "snake_body_horizontal.png",
    "vertical": "snake_body_vertical.png",
}
_CORNER_FILES = {
    Corner.UP_LEFT: "snake_corner_up_left.png",
    Corner.UP_RIGHT: "snake_corner_up_right.png",
    Corner.DOWN_LEFT: "snake_corner_down_left.png",
    Corner.DOWN_RIGHT: "snake_corner_down_right.png",
}
_SOUND_FILES = {
    Sound.EAT: "sounds/eat.wav",
    Sound.DEATH: "sounds/death.wav",
    Sound.CLICK: "sounds/click.wav",
}


class Assets:
    """Textures, fonts and sounds found under a data directory.

    Anything missing is left out and drawn with plain shapes instead.
    """

    def __init__(self, root: str | Path = ".", cell_size: int = CELL_SIZE):
        self.root = Path(root)
        self.cell_size = cell_size
        self.grid_cell = self._image("textures/grid_cell.png", (cell_size, cell_size))
        self.top_bar = self._image("textures/topbar.png")
        self.button = self._image("textures/button.png")
        self.food = self._image("textures/food.png", (cell_size - 2, cell_size - 2))
        self.heads: dict[Direction, pygame.Surface] = {}
        self.bodies: dict[str, pygame.Surface] = {}
        self.corners: dict[Corner, pygame.Surface] = {}
        self.skin: Skin | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        self._font_path = self.root / "arial.ttf"
        if not self._font_path.is_file():
            log.warning("cannot load font %s, using the default font", self._font_path)
        self.sounds: dict[Sound, pygame.mixer.Sound] = self._load_sounds()
        self.load_skin(Skin.CLASSIC)

    def _image(self, relative: str, size: tuple[int, int] | None = None) -> pygame.Surface | None:
        try:
            image = pygame.image.load(str(self.root / relative))
        except (pygame.error, OSError):
            return None
        return pygame.transform.scale(image, size) if size is not None else image

    def _snake_image(self, path: Path) -> pygame.Surface | None:
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError):
            return None
        width, height = image.get_size()
        factor = (self.cell_size - 2) / width
        return pygame.transform.scale(
            image, (max(1, round(width * factor)), max(1, round(height * factor)))
        )

    def _group(self, folder: Path, files: dict) -> dict:
        loaded = {}
        for key, name in files.items():
            image = self._snake_image(folder / name)
            if image is None:
                return {}
            loaded[key] = image
        return loaded

    def load_skin(self, skin_id: int) -> bool:
        """Load the snake textures of a skin; True when every one was found."""
        skin = Skin(skin_id)
        folder = self.root / "textures" / "skins" / f"skin{int(skin)}"
        self.heads = self._group(folder, _HEAD_FILES)
        self.bodies = self._group(folder, _BODY_FILES)
        self.corners = self._group(folder, _CORNER_FILES)
        self.skin = skin
        return bool(self.heads and self.bodies and self.corners)

    def _load_sounds(self) -> dict[Sound, pygame.mixer.Sound]:
        if not pygame.mixer.get_init():
            return {}
        sounds = {}
        for sound, relative in _SOUND_FILES.items():
            try:
                sounds[sound] = pygame.mixer.Sound(str(self.root / relative))
            except (pygame.error, OSError, FileNotFoundError):
                log.warning("cannot load sound %s", relative)
        return sounds

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = str(self._font_path) if self._font_path.is_file() else None
            self._fonts[size] = pygame.font.Font(path, size)
        return self._fonts[size]

    def music_path(self, track: str) -> Path | None:
        path = self.root / "sounds" / f"{track}_music.ogg"
        return path if path.is_file() else None


class SnakeApp:
    """Opens the window and connects the game controller to pygame."""

    def __init__(
        self,
        root: str | Path = ".",
        controller: GameController | None = None,
        assets: Assets | None = None,
    ):
        pygame.init()
        self.root = Path(root)
        self.controller = controller if controller is not None else GameController(
            high_score_path=self.root / "highscore.txt",
            skin_path=self.root / "skin.txt",
        )
        self.window = self._open_window()
        self.assets = assets if assets is not None else Assets(self.root)
        if self.assets.skin != self.controller.current_skin:
            self.assets.load_skin(self.controller.current_skin)
        self._music_ok = bool(
            pygame.mixer.get_init()
            and self.assets.music_path("menu") is not None
            and self.assets.music_path("game") is not None
        )
        self._music_track: str | None = None
        self._sync()

    def _open_window(self) -> pygame.Surface:
        window = pygame.display.set_mode((self.controller.width, self.controller.height))
        pygame.display.set_caption("Snake")
        return window

    def _sync(self) -> None:
        if self.window.get_size() != (self.controller.width, self.controller.height):
            self.window = self._open_window()
        if self.assets.skin != self.controller.current_skin:
            self.assets.load_skin(self.controller.current_skin)
        self._sync_music()
        self._play_sounds()

    def _sync_music(self) -> None:
        if not self._music_ok:
            return
        track = self.controller.music
        try:
            if track != self._music_track:
                pygame.mixer.music.load(str(self.assets.music_path(track)))
                pygame.mixer.music.play(-1)
                self._music_track = track
            volume = (
                self.controller.menu_music_volume
                if track == "menu"
                else self.controller.game_music_volume
            )
            pygame.mixer.music.set_volume(volume / 100)
        except pygame.error as exc:
            log.warning("cannot play music: %s", exc)
            self._music_ok = False

    def _play_sounds(self) -> None:
        for sound in self.controller.sounds:
            effect = self.assets.sounds.get(sound)
            if effect is not None:
                effect.set_volume(self.controller.effect_volume / 100)
                effect.play()
        self.controller.sounds.clear()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.controller.running = False
        elif event.type == pygame.KEYDOWN and event.key in _KEYS:
            self.controller.press_key(_KEYS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            self.controller.click(float(x), float(y))
        self._sync()

    def run(self) -> None:
        """Process events, advance the game at a fixed rate and redraw until closed."""
        clock = pygame.time.Clock()
        accumulated = 0.0
        while self.controller.running:
            accumulated += clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.controller.running:
                break
            while accumulated >= _FRAME_TIME:
                accumulated -= _FRAME_TIME
                self.controller.tick(_FRAME_TIME)
            self._sync()
            self.draw()
            pygame.display.flip()

    def draw(self) -> pygame.Surface:
        """Render the current screen into the window surface and return it."""
        surface = self.window
        controller = self.controller
        playing = controller.screen is Screen.PLAYING
        surface.fill(BLACK)
        self._draw_grid(surface)
        self._draw_top_bar(surface)
        if not playing:
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 150))
            surface.blit(overlay, (0, 0))
        else:
            text_bg = pygame.Surface((400, TOP_BAR_HEIGHT - 10), pygame.SRCALPHA)
            text_bg.fill((0, 0, 0, 120))
            surface.blit(text_bg, (5, 5))
            self._draw_snake(surface)
            self._draw_food(surface)
        for button in controller.buttons():
            self._draw_button(surface, button)
        font = self.assets.font(24)
        surface.blit(font.render(controller.score_text, True, WHITE), (10, 10))
        surface.blit(font.render(controller.high_score_text, True, YELLOW), (200, 10))
        return surface

    def _cell_position(self, x: int, y: int) -> tuple[int, int]:
        return (x * CELL_SIZE, y * CELL_SIZE + TOP_BAR_HEIGHT)

    def _draw_grid(self, surface: pygame.Surface) -> None:
        board = self.controller.board
        for x in range(board.cols):
            for y in range(board.rows):
                position = self._cell_position(x, y)
                if self.assets.grid_cell is not None:
                    surface.blit(self.assets.grid_cell, position)
                else:
                    rect = pygame.Rect(position, (CELL_SIZE, CELL_SIZE))
                    surface.fill(_CELL_FILL, rect)
                    pygame.draw.rect(surface, _CELL_OUTLINE, rect, 1)

    def _draw_top_bar(self, surface: pygame.Surface) -> None:
        width = surface.get_width()
        if self.assets.top_bar is not None:
            bar = pygame.transform.scale(self.assets.top_bar, (width, TOP_BAR_HEIGHT))
            surface.blit(bar, (0, 0))
        else:
            surface.fill(_TOP_BAR_FILL, pygame.Rect(0, 0, width, TOP_BAR_HEIGHT))

    def _plain_cell(self, surface: pygame.Surface, position, colour) -> None:
        surface.fill(colour, pygame.Rect(position, (CELL_SIZE - 2, CELL_SIZE - 2)))

    def _draw_snake(self, surface: pygame.Surface) -> None:
        board = self.controller.board
        assets = self.assets
        for index, segment in enumerate(board.snake):
            position = self._cell_position(segment.x, segment.y)
            if index == 0:
                if assets.heads:
                    surface.blit(assets.heads[board.direction], position)
                else:
                    self._plain_cell(surface, position, GREEN)
                continue
            corner = board.corner_at(index)
            if corner is not None and assets.corners:
                surface.blit(assets.corners[corner], position)
            elif assets.bodies:
                heading = board.segment_direction(index)
                key = (
                    "horizontal"
                    if heading in (Direction.RIGHT, Direction.LEFT)
                    else "vertical"
                )
                surface.blit(assets.bodies[key], position)
            else:
                self._plain_cell(surface, position, GREEN)

    def _draw_food(self, surface: pygame.Surface) -> None:
        food = self.controller.board.food
        position = self._cell_position(food.x, food.y)
        if self.assets.food is not None:
            surface.blit(self.assets.food, position)
        else:
            self._plain_cell(surface, position, RED)

    def _draw_button(self, surface: pygame.Surface, button: Button) -> None:
        rect = pygame.Rect(
            round(button.x), round(button.y), round(button.width), round(button.height)
        )
        tint = None
        if isinstance(button.value, Skin):
            tint = GREEN if is_skin_unlocked(button.value, self.controller.high_score) else RED
        if self.assets.button is not None:
            image = pygame.transform.scale(self.assets.button, rect.size)
            if tint is not None:
                image = image.copy()
                image.fill(tint, special_flags=pygame.BLEND_RGB_MULT)
            surface.blit(image, rect)
        else:
            surface.fill(tint if tint is not None else BLUE, rect)
        label = self.assets.font(button.font_size).render(button.label, True, WHITE)
        cx, cy = button.center()
        surface.blit(label, label.get_rect(center=(round(cx), round(cy))))


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="snakeplay", description="Play snake.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory with textures, sounds, the font and saved scores",
    )
    args = parser.parse_args(argv)
    try:
        SnakeApp(args.data_dir).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())