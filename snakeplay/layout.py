"""Screens of the game and the buttons shown on each of them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from snakeplay.skins import Skin

CELL_SIZE = 20
TOP_BAR_HEIGHT = 50
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 650

_BUTTON_WIDTH = 200
_SKIN_BUTTON_WIDTH = 180
_BUTTON_HEIGHT = 50
_MENU_SPACING = 65.0


class Screen(Enum):
    """The states the game can be in."""

    MENU = auto()
    SETTINGS = auto()
    BOARD_SIZE_SELECTION = auto()
    PLAYING = auto()
    SKINS_SELECTION = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Button:
    """A labelled rectangle; ``value`` carries what the button selects, if anything."""

    action: str
    label: str
    x: float
    y: float
    width: float = _BUTTON_WIDTH
    height: float = _BUTTON_HEIGHT
    font_size: int = 24
    value: Any = None

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; right and bottom edges are outside."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


def _wide(action: str, label: str, width: float, y: float, value: Any = None) -> Button:
    return Button(action, label, width / 2 - _BUTTON_WIDTH / 2, y, value=value)


def menu_buttons(width: float, height: float) -> list[Button]:
    """Start, settings, skins and exit, stacked around the window centre."""
    start_y = height / 2 - (3 * _MENU_SPACING) / 2
    entries = [
        ("start", "Zacznij gre"),
        ("settings", "Ustawienia"),
        ("skins", "Skorki"),
        ("exit", "Wyjdz"),
    ]
    return [
        _wide(action, label, width, start_y + i * _MENU_SPACING)
        for i, (action, label) in enumerate(entries)
    ]


def settings_buttons(width: float, height: float, muted: bool) -> list[Button]:
    """Sound toggle and the way back to the menu."""
    start_y = height / 2 - _MENU_SPACING
    return [
        _wide("mute", "Dzwiek: OFF" if muted else "Dzwiek: ON", width, start_y),
        _wide("back", "Powrot", width, start_y + _MENU_SPACING),
    ]


def game_over_buttons(width: float, height: float) -> list[Button]:
    """Restart and return to the menu after losing."""
    center_y = height / 2
    return [
        _wide("restart", "Restart", width, center_y - 50),
        _wide("menu", "Menu", width, center_y + 20),
    ]


def board_size_buttons(width: float, height: float) -> list[Button]:
    """Board size choices; each button's value is ``(cols, rows)``."""
    center_y = height / 2
    return [
        _wide("small", "Small", width, center_y - 100, value=(20, 15)),
        _wide("medium", "Medium", width, center_y - 25, value=(30, 20)),
        _wide("large", "Large", width, center_y + 50, value=(40, 30)),
    ]


def skins_buttons(width: float, height: float) -> list[Button]:
    """One button per skin, valued with the skin, then the way back."""
    center_x = width / 2
    center_y = height / 2
    entries = [
        (Skin.CLASSIC, "Classic", -100),
        (Skin.GOLDEN, "Golden (50)", -40),
        (Skin.RAINBOW, "Rainbow (100)", 20),
        (Skin.LEGENDARY, "Legendary (200)", 80),
    ]
    buttons = [
        Button(
            f"skin{int(skin)}",
            label,
            center_x - _SKIN_BUTTON_WIDTH / 2,
            center_y + dy,
            width=_SKIN_BUTTON_WIDTH,
            font_size=20,
            value=skin,
        )
        for skin, label, dy in entries
    ]
    buttons.append(_wide("back", "Powrot", width, center_y + 140))
    return buttons


def button_at(buttons: Iterable[Button], x: float, y: float) -> Button | None:
    """First button containing the point, or None."""
    return next((button for button in buttons if button.contains(x, y)), None)