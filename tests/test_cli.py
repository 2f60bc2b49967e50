import json

import pytest

from contrast_palette.cli import main
from contrast_palette.palette import DEFAULT_PALETTE


def test_image_to_json(navy_image, tmp_path, capsys):
    out = tmp_path / "out" / "navy.json"
    assert main([str(navy_image), "--report", "-o", str(out)]) == 0

    printed = capsys.readouterr().out
    assert "Analyzing:" in printed
    assert "DARK THEME" in printed
    assert "READABILITY REPORT" in printed

    data = json.loads(out.read_text())
    assert data["is_dark"] is True
    assert data["_source"] == "navy.png"
    assert data["_from_image"] is True
    assert data["_dominant_colors"]


def test_from_palette(navy_image, tmp_path, capsys):
    saved = tmp_path / "navy.json"
    main([str(navy_image), "-o", str(saved)])
    capsys.readouterr()

    assert main(["--from-palette", str(saved), "--report"]) == 0
    printed = capsys.readouterr().out
    assert "Loading palette" in printed
    assert "READABILITY REPORT" in printed


def test_requires_a_source():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_rejects_image_and_palette_together(tmp_path):
    with pytest.raises(SystemExit):
        main(["image.png", "--from-palette", str(tmp_path / "p.json")])


def test_missing_image_exports_default_palette(tmp_path, capsys):
    out = tmp_path / "missing.json"
    assert main([str(tmp_path / "missing.png"), "-o", str(out)]) == 0

    assert "could not be loaded" in capsys.readouterr().out
    data = json.loads(out.read_text())
    assert data["accent"] == DEFAULT_PALETTE.accent
    assert data["text_primary"] == DEFAULT_PALETTE.text_primary
    assert data["_from_image"] is False
    assert "_dominant_colors" not in data
