from ..color import contrast_ratio
from ..config import MIN_ACCENT_CONTRAST, MIN_BUTTON_CONTRAST, MIN_TEXT_CONTRAST
from ..palette.generator import card_base_for


def contrast_checks(
    palette,
    text_ratio=MIN_TEXT_CONTRAST,
    button_ratio=MIN_BUTTON_CONTRAST,
    accent_ratio=MIN_ACCENT_CONTRAST,
):
    """List (name, foreground, background, achieved, required) for each pairing."""
    card_base = card_base_for(palette.is_dark)
    pairs = [
        ("text_primary", palette.text_primary, card_base, text_ratio),
        ("accent", palette.accent, card_base, accent_ratio),
        ("button_text", palette.button_text, palette.button_background, button_ratio),
    ]
    return [
        (name, fg, bg, contrast_ratio(fg, bg), required)
        for name, fg, bg, required in pairs
    ]


def generate_readability_report(palette, **ratios):
    """Generate a readability report for inspection

    Returns:
        tuple: (report text, list of failing checks)
    """
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {'DARK' if palette.is_dark else 'LIGHT'}")
    report.append(f"Card base:  {card_base_for(palette.is_dark)}")
    report.append(f"Card solid: {palette.card_background_solid}")
    report.append("")

    issues = []
    for name, fg, bg, achieved, required in contrast_checks(palette, **ratios):
        status = "✓" if achieved >= required else "✗ FAIL"
        if achieved < required:
            issues.append((name, fg, achieved, required))
        report.append(
            f"  {name:14} {fg}  vs {bg}: {achieved:4.1f}:1  (min {required}:1)  {status}"
        )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for name, hex_val, achieved, required in issues:
            report.append(f"  - {name}: {hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(palette, dominant_colors=()):
    """Print palette info"""
    card_base = card_base_for(palette.is_dark)

    print("\n" + "=" * 60)
    print(f"CONTRAST PALETTE ({'DARK' if palette.is_dark else 'LIGHT'} THEME)")
    print("=" * 60)

    if dominant_colors:
        print("\nDOMINANT COLORS:")
        for color in dominant_colors:
            print(f"  {color}")

    print("\nPALETTE:")
    for key, value in palette._asdict().items():
        if isinstance(value, str) and value.startswith("#"):
            contrast = contrast_ratio(value, card_base)
            print(f"  {key:22} {value}  (contrast: {contrast:.1f}:1)")
        else:
            print(f"  {key:22} {value}")
