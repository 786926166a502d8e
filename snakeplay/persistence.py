"""Reading and writing the high score and the chosen skin."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from snakeplay.skins import Skin, is_skin_unlocked

log = logging.getLogger(__name__)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = str | os.PathLike


def _parse_leading_int(text: str) -> int:
    """Read an integer from the start of ``text`` the way a stream extraction does."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("no integer at the start of the file")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {value}")
    return value


def load_high_score(path: PathLike) -> int:
    """High score stored at ``path``; 0 when the file is missing or malformed."""
    try:
        text = Path(path).read_text()
    except OSError:
        return 0
    try:
        return _parse_leading_int(text)
    except ValueError as exc:
        log.warning("bad high score file %s: %s", path, exc)
        return 0


def save_high_score(path: PathLike, score: int) -> None:
    """Store ``score`` at ``path``; a file that cannot be written is ignored."""
    try:
        Path(path).write_text(str(int(score)))
    except OSError as exc:
        log.warning("cannot save high score to %s: %s", path, exc)


def load_skin_selection(path: PathLike, high_score: int) -> Skin | None:
    """Skin saved at ``path``, falling back to the classic skin when it is locked.

    Returns None when there is no saved selection at all.
    """
    try:
        text = Path(path).read_text()
    except OSError:
        return None
    try:
        skin_id = _parse_leading_int(text)
    except ValueError:
        skin_id = 0
    if is_skin_unlocked(skin_id, high_score):
        return Skin(skin_id)
    return Skin.CLASSIC


def save_skin_selection(path: PathLike, skin_id: int) -> None:
    """Store the chosen skin identifier at ``path``."""
    try:
        Path(path).write_text(str(int(skin_id)))
    except OSError as exc:
        log.warning("cannot save skin selection to %s: %s", path, exc)