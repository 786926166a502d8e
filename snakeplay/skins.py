"""Snake skins and the high scores that unlock them."""

from __future__ import annotations

from enum import IntEnum


class Skin(IntEnum):
    """The skins a player can choose, by identifier."""

    CLASSIC = 0
    GOLDEN = 1
    RAINBOW = 2
    LEGENDARY = 3

    @property
    def display_name(self) -> str:
        return _NAMES[self]

    @property
    def required_score(self) -> int:
        return _REQUIRED[self]

    def unlocked_by(self, high_score: int) -> bool:
        """Whether a high score of ``high_score`` unlocks this skin."""
        return high_score >= self.required_score


_NAMES = {
    Skin.CLASSIC: "Classic",
    Skin.GOLDEN: "Golden",
    Skin.RAINBOW: "Rainbow",
    Skin.LEGENDARY: "Legendary",
}

_REQUIRED = {
    Skin.CLASSIC: 0,
    Skin.GOLDEN: 50,
    Skin.RAINBOW: 100,
    Skin.LEGENDARY: 200,
}


def _lookup(skin_id: int) -> Skin | None:
    try:
        return Skin(skin_id)
    except ValueError:
        return None


def is_classic_unlocked(high_score: int) -> bool:
    return Skin.CLASSIC.unlocked_by(high_score)


def is_golden_unlocked(high_score: int) -> bool:
    return Skin.GOLDEN.unlocked_by(high_score)


def is_rainbow_unlocked(high_score: int) -> bool:
    return Skin.RAINBOW.unlocked_by(high_score)


def is_legendary_unlocked(high_score: int) -> bool:
    return Skin.LEGENDARY.unlocked_by(high_score)


def skin_name(skin_id: int) -> str:
    """Name of the skin, or ``"Unknown"`` for an identifier out of range."""
    skin = _lookup(skin_id)
    return skin.display_name if skin is not None else "Unknown"


def required_score(skin_id: int) -> int:
    """High score needed for the skin; 0 for an identifier out of range."""
    skin = _lookup(skin_id)
    return skin.required_score if skin is not None else 0


def is_skin_unlocked(skin_id: int, high_score: int) -> bool:
    """Whether the skin is available; unknown identifiers are never unlocked."""
    skin = _lookup(skin_id)
    return skin is not None and skin.unlocked_by(high_score)