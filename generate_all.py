#!/usr/bin/env python3
"""
Generate palettes for every image in images/.
Writes one palette JSON and one readability report per image into out/.
"""

import argparse
import logging
from pathlib import Path

from contrast_palette.export import export_json, generate_readability_report
from contrast_palette.extract import analyze_image


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate contrast palettes for all images in a directory"
    )
    parser.add_argument(
        "--images",
        default=None,
        help="Image directory (default: images/ next to this script)",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output directory (default: out/ next to this script)",
    )
    parser.add_argument(
        "--colors", "-n",
        type=int,
        default=5,
        help="Number of dominant colors to extract",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING)

    root = Path(__file__).parent
    images_dir = Path(args.images) if args.images else root / "images"
    out_dir = Path(args.out) if args.out else root / "out"

    out_dir.mkdir(parents=True, exist_ok=True)

    # Supported image extensions
    image_extensions = {".png", ".jpg", ".jpeg", ".webp", ".gif"}

    images = []
    if images_dir.exists():
        images = [f for f in images_dir.iterdir() if f.suffix.lower() in image_extensions]

    if not images:
        print(f"No images in {images_dir}")
        return 0

    print(f"Found {len(images)} images to process\n")

    failures = 0
    for image_path in sorted(images):
        name = image_path.stem
        print(f"{'=' * 60}")
        print(f"Generating from image: {name}")
        print(f"{'=' * 60}")

        colors, result = analyze_image(image_path, args.colors)
        palette = result.palette
        if not result.from_image:
            print(f"Could not load {image_path.name}; using the default palette")
        report, issues = generate_readability_report(palette)

        export_json(
            palette,
            out_dir / f"{name}.json",
            source_file=image_path.name,
            dominant_colors=colors,
            from_image=result.from_image,
        )
        (out_dir / f"{name}-report.txt").write_text(report)

        if issues:
            failures += 1
            print(f"{len(issues)} contrast issue(s) in {name}")
        print()

    print(f"{'=' * 60}")
    print(f"Done! {len(images)} palettes written to:")
    print(f"  {out_dir}")
    if failures:
        print(f"  ({failures} with contrast issues)")
    print(f"{'=' * 60}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
