import json

from ..errors import PaletteError
from .generator import ColorPalette


def load_palette_from_json(json_path):
    """Load a palette written by export_json.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (ColorPalette, metadata dict with the leading "_" stripped from keys)
    """
    with open(json_path) as f:
        data = json.load(f)

    fields = {}
    metadata = {}

    for key, value in data.items():
        # Metadata keys
        if key.startswith("_"):
            metadata[key[1:]] = value
            continue
        if key in ColorPalette._fields:
            fields[key] = value

    missing = [name for name in ColorPalette._fields if name not in fields]
    if missing:
        raise PaletteError(f"{json_path}: missing palette fields {', '.join(missing)}")

    fields["is_dark"] = bool(fields["is_dark"])
    return ColorPalette(**fields), metadata
