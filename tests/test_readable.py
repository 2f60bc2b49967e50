from contrast_palette.color import contrast_ratio, hex_to_hsl, hex_to_rgb
from contrast_palette.readable import ensure_contrast, get_vibrant_readable_color


def _is_gray(hex_color):
    r, g, b = hex_to_rgb(hex_color)
    return r == g == b


def test_reaches_target_on_light_background():
    result = get_vibrant_readable_color("#3366cc", "#ffffff", 7.0)
    assert contrast_ratio(result, "#ffffff") >= 7.0
    # Hue is preserved
    assert abs(hex_to_hsl(result)[0] - 220) < 3


def test_reaches_target_on_dark_background():
    result = get_vibrant_readable_color("#8b5cf6", "#1e1e2e", 7.0)
    assert contrast_ratio(result, "#1e1e2e") >= 7.0
    h, s, l = hex_to_hsl(result)
    assert l > 0.5
    assert abs(h - hex_to_hsl("#8b5cf6")[0]) < 5


def test_saturation_floor_applied():
    # A pastel source is pushed to at least the light-background floor
    result = get_vibrant_readable_color("#c9a0a0", "#ffffff", 4.5)
    assert hex_to_hsl(result)[1] >= 0.75


def test_gray_source_stays_gray():
    result = get_vibrant_readable_color("#808080", "#000000", 7.0)
    assert _is_gray(result)
    assert contrast_ratio(result, "#000000") >= 7.0


def test_source_already_readable_is_kept():
    assert get_vibrant_readable_color("#000000", "#ffffff", 4.5) == "#000000"


def test_best_effort_when_target_unreachable():
    result = get_vibrant_readable_color("#ff0000", "#777777", 7.0)
    ratio = contrast_ratio(result, "#777777")
    assert 3.0 <= ratio < 7.0
    assert result not in ("#ffffff", "#000000")
    r, g, b = hex_to_rgb(result)
    assert r > g and r > b


def test_last_resort_pure_white_on_dark():
    # Nothing in range reaches even 3:1 against mid gray
    assert get_vibrant_readable_color("#ff0000", "#999999", 7.0) == "#ffffff"


def test_malformed_source_treated_as_gray():
    result = get_vibrant_readable_color("nope", "#ffffff", 4.5)
    assert _is_gray(result)
    assert contrast_ratio(result, "#ffffff") >= 4.5


def test_ensure_contrast_lower_floor():
    result = ensure_contrast("#0a0e27", "#1e1e2e", 3.0)
    assert contrast_ratio(result, "#1e1e2e") >= 3.0
    assert not _is_gray(result)
