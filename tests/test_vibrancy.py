import pytest

from contrast_palette.vibrancy import find_vibrant_color, vibrancy_score


def test_scores():
    assert vibrancy_score("#ff0000") == pytest.approx(1.2)
    # Blue gets no bonus
    assert vibrancy_score("#0000ff") == pytest.approx(1.0)
    # Near-black is penalised
    assert vibrancy_score("#330000") == pytest.approx(0.6)
    assert vibrancy_score("#808080") == 0
    assert vibrancy_score("garbage") == 0


def test_prefers_saturated_over_gray():
    assert find_vibrant_color(["#808080", "#ff0000", "#eeeeee"]) == "#ff0000"


def test_non_blue_wins_at_equal_saturation():
    assert find_vibrant_color(["#0000ff", "#ff0000"]) == "#ff0000"


def test_all_gray_returns_none():
    assert find_vibrant_color(["#000000", "#808080", "#ffffff", "#7a7f80"]) is None
    assert find_vibrant_color([]) is None


def test_skips_malformed():
    assert find_vibrant_color(["#zzzzzz", "#00ff00"]) == "#00ff00"
