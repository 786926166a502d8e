"""Game logic behind the window: screens, input, timing, score and sound cues."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path

from snakeplay.board import Board, Direction
from snakeplay.layout import (
    CELL_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    TOP_BAR_HEIGHT,
    Button,
    Screen,
    board_size_buttons,
    button_at,
    game_over_buttons,
    menu_buttons,
    settings_buttons,
    skins_buttons,
)
from snakeplay.persistence import (
    load_high_score,
    load_skin_selection,
    save_high_score,
    save_skin_selection,
)
from snakeplay.skins import Skin, is_skin_unlocked

MOVE_INTERVAL = 0.1

_EFFECT_VOLUME = 100.0
_MENU_MUSIC_VOLUME = 30.0
_GAME_MUSIC_VOLUME = 35.0
_UNMUTED_MUSIC_VOLUME = 30.0


class Sound(Enum):
    """Sound effects the game asks to be played."""

    EAT = "eat"
    DEATH = "death"
    CLICK = "click"


class GameController:
    """Holds the whole game state and reacts to keys, clicks and elapsed time.

    Sound effects are appended to ``sounds`` for the front end to play and clear;
    ``music`` names the track that should be playing, ``"menu"`` or ``"game"``.
    """

    def __init__(
        self,
        high_score: int = 0,
        *,
        rng: random.Random | None = None,
        high_score_path: str | Path | None = None,
        skin_path: str | Path | None = None,
        move_interval: float = MOVE_INTERVAL,
    ):
        self.board = Board(rng=rng)
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self.screen = Screen.MENU
        self.high_score_path = high_score_path
        self.skin_path = skin_path
        self.high_score = (
            load_high_score(high_score_path) if high_score_path is not None else high_score
        )
        self.current_skin = Skin.CLASSIC
        if skin_path is not None:
            saved = load_skin_selection(skin_path, self.high_score)
            if saved is not None:
                self.current_skin = saved
        self.move_interval = move_interval
        self.muted = False
        self.effect_volume = _EFFECT_VOLUME
        self.menu_music_volume = _MENU_MUSIC_VOLUME
        self.game_music_volume = _GAME_MUSIC_VOLUME
        self.music = "menu"
        self.sounds: list[Sound] = []
        self.running = True
        self._since_move = 0.0

    @property
    def score(self) -> int:
        return self.board.score

    @property
    def score_text(self) -> str:
        return f"Score: {self.board.score}"

    @property
    def high_score_text(self) -> str:
        return f"High Score: {self.high_score}"

    def buttons(self) -> list[Button]:
        """Buttons shown on the current screen."""
        if self.screen is Screen.MENU:
            return menu_buttons(self.width, self.height)
        if self.screen is Screen.SETTINGS:
            return settings_buttons(self.width, self.height, self.muted)
        if self.screen is Screen.GAME_OVER:
            return game_over_buttons(self.width, self.height)
        if self.screen is Screen.BOARD_SIZE_SELECTION:
            return board_size_buttons(self.width, self.height)
        if self.screen is Screen.SKINS_SELECTION:
            return skins_buttons(self.width, self.height)
        return []

    def press_key(self, direction: Direction) -> bool:
        """Steer the snake; only while playing and once per move."""
        if self.screen is not Screen.PLAYING:
            return False
        return self.board.turn(direction)

    def click(self, x: float, y: float) -> Button | None:
        """Handle a left click; returns the button acted upon, if any."""
        button = button_at(self.buttons(), x, y)
        if button is None:
            return None
        handled = self._dispatch(button)
        return button if handled else None

    def _dispatch(self, button: Button) -> bool:
        action = button.action
        if self.screen is Screen.MENU:
            if action == "exit":
                self.running = False
                return True
            self.sounds.append(Sound.CLICK)
            if action == "start":
                self.music = "game"
                self.screen = Screen.BOARD_SIZE_SELECTION
            elif action == "settings":
                self.screen = Screen.SETTINGS
            elif action == "skins":
                self.screen = Screen.SKINS_SELECTION
            return True
        if self.screen is Screen.GAME_OVER:
            self.sounds.append(Sound.CLICK)
            if action == "restart":
                self.board.reset()
                self.screen = Screen.PLAYING
            elif action == "menu":
                self.music = "menu"
                self.screen = Screen.MENU
            return True
        if self.screen is Screen.BOARD_SIZE_SELECTION:
            self.sounds.append(Sound.CLICK)
            cols, rows = button.value
            self.choose_board(cols, rows)
            return True
        if self.screen is Screen.SETTINGS:
            self.sounds.append(Sound.CLICK)
            if action == "mute":
                self.toggle_mute()
            elif action == "back":
                self.screen = Screen.MENU
            return True
        if self.screen is Screen.SKINS_SELECTION:
            if action == "back":
                self.sounds.append(Sound.CLICK)
                self.screen = Screen.MENU
                return True
            if is_skin_unlocked(button.value, self.high_score):
                self.sounds.append(Sound.CLICK)
                self.select_skin(button.value)
                return True
        return False

    def tick(self, elapsed: float) -> bool:
        """Advance play by ``elapsed`` seconds; returns True when the snake moved.

        A collision is checked before any move, so a fatal move ends the game
        on the following tick. At most one move happens per call.
        """
        if self.screen is not Screen.PLAYING:
            return False
        if self.board.check_collision():
            self._game_over()
            return False
        self._since_move += elapsed
        if self._since_move < self.move_interval:
            return False
        self._since_move = 0.0
        if self.board.step():
            self.sounds.append(Sound.EAT)
        return True

    def _game_over(self) -> None:
        self.sounds.append(Sound.DEATH)
        if self.board.score > self.high_score:
            self.high_score = self.board.score
            if self.high_score_path is not None:
                save_high_score(self.high_score_path, self.high_score)
        self.screen = Screen.GAME_OVER

    def toggle_mute(self) -> bool:
        """Switch all sound off or back on; returns the new muted state."""
        self.muted = not self.muted
        self.effect_volume = 0.0 if self.muted else _EFFECT_VOLUME
        music_volume = 0.0 if self.muted else _UNMUTED_MUSIC_VOLUME
        self.menu_music_volume = music_volume
        self.game_music_volume = music_volume
        return self.muted

    def select_skin(self, skin_id: int) -> Skin:
        """Make an unlocked skin current; a locked or unknown one raises ValueError."""
        if not is_skin_unlocked(skin_id, self.high_score):
            raise ValueError(f"skin {skin_id} is not unlocked")
        self.current_skin = Skin(skin_id)
        if self.skin_path is not None:
            save_skin_selection(self.skin_path, int(self.current_skin))
        return self.current_skin

    def choose_board(self, cols: int, rows: int) -> None:
        """Resize the board and window to the given grid and start playing."""
        self.board.resize(cols, rows)
        self.width = cols * CELL_SIZE
        self.height = rows * CELL_SIZE + TOP_BAR_HEIGHT
        self.screen = Screen.PLAYING