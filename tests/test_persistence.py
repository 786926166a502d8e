from snakeplay.persistence import (
    load_high_score,
    load_skin_selection,
    save_high_score,
    save_skin_selection,
)
from snakeplay.skins import Skin


def test_high_score_round_trip(tmp_path):
    path = tmp_path / "highscore.txt"
    save_high_score(path, 137)
    assert load_high_score(path) == 137


def test_high_score_file_holds_only_the_number(tmp_path):
    path = tmp_path / "highscore.txt"
    save_high_score(path, 42)
    assert path.read_text() == "42"


def test_missing_high_score_is_zero(tmp_path):
    assert load_high_score(tmp_path / "absent.txt") == 0


def test_malformed_high_score_is_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("not a number")
    assert load_high_score(path) == 0


def test_empty_high_score_is_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("")
    assert load_high_score(path) == 0


def test_high_score_reads_leading_integer(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("  \n12abc")
    assert load_high_score(path) == 12


def test_high_score_out_of_range_is_zero(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("99999999999999")
    assert load_high_score(path) == 0


def test_high_score_accepts_str_path(tmp_path):
    path = str(tmp_path / "hs.txt")
    save_high_score(path, 5)
    assert load_high_score(path) == 5


def test_skin_selection_round_trip_when_unlocked(tmp_path):
    path = tmp_path / "skin.txt"
    save_skin_selection(path, Skin.RAINBOW)
    assert load_skin_selection(path, 100) is Skin.RAINBOW


def test_locked_skin_falls_back_to_classic(tmp_path):
    path = tmp_path / "skin.txt"
    save_skin_selection(path, Skin.LEGENDARY)
    assert load_skin_selection(path, 199) is Skin.CLASSIC


def test_missing_skin_selection_is_none(tmp_path):
    assert load_skin_selection(tmp_path / "absent.txt", 500) is None


def test_malformed_skin_selection_is_classic(tmp_path):
    path = tmp_path / "skin.txt"
    path.write_text("golden")
    assert load_skin_selection(path, 500) is Skin.CLASSIC


def test_unknown_skin_id_is_classic(tmp_path):
    path = tmp_path / "skin.txt"
    save_skin_selection(path, 7)
    assert load_skin_selection(path, 500) is Skin.CLASSIC


def test_skin_selection_file_holds_only_the_number(tmp_path):
    path = tmp_path / "skin.txt"
    save_skin_selection(path, Skin.GOLDEN)
    assert path.read_text() == "1"