"""A pygame snake game with selectable board sizes, unlockable skins and a saved high score."""

__version__ = "1.0.0"