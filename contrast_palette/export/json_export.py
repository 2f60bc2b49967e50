import json


def export_json(palette, filepath, source_file=None, dominant_colors=None, from_image=None):
    """Export a palette as JSON with optional metadata.

    Args:
        palette: The ColorPalette
        filepath: Output file path
        source_file: Source image filename for metadata
        dominant_colors: Quantized colors the palette was built from
        from_image: False when the default palette stood in for an unloadable image
    """
    data = dict(palette._asdict())

    if source_file:
        data["_source"] = source_file

    if dominant_colors:
        data["_dominant_colors"] = list(dominant_colors)

    if from_image is not None:
        data["_from_image"] = bool(from_image)

    data["_theme"] = "dark" if palette.is_dark else "light"

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
