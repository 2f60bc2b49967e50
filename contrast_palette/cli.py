import argparse
import logging
import os

from .export import export_json, generate_readability_report, print_palette
from .extract import analyze_image
from .palette import load_palette_from_json


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a readable contrast palette from an image"
    )
    parser.add_argument(
        "image",
        nargs="?",
        default=None,
        help="Path or http(s) URL of the source image",
    )
    parser.add_argument(
        "--colors", "-n",
        type=int,
        default=5,
        help="Number of dominant colors to extract (default: 5)",
    )
    parser.add_argument(
        "--method",
        choices=["bucket", "kmeans"],
        default="bucket",
        help="Quantization method (default: bucket)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="JSON",
        default=None,
        help="Write the palette to this JSON file",
    )
    parser.add_argument(
        "--from-palette",
        metavar="JSON",
        help="Load a saved palette instead of analyzing an image",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a readability report",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.from_palette:
        if args.image:
            parser.error("Cannot use both image and --from-palette")
        _run_from_palette(args)
    elif args.image:
        _run_from_image(args)
    else:
        parser.error("Either image or --from-palette is required")
    return 0


def _run_from_palette(args):
    """Reprint (and optionally re-export) a saved palette."""
    print(f"Loading palette: {args.from_palette}")
    palette, metadata = load_palette_from_json(args.from_palette)
    dominant = metadata.get("dominant_colors", [])

    print_palette(palette, dominant)
    if args.report:
        report, _ = generate_readability_report(palette)
        print("\n" + report)

    if args.output:
        export_json(
            palette,
            args.output,
            source_file=metadata.get("source"),
            dominant_colors=dominant,
            from_image=metadata.get("from_image"),
        )
        print(f"\nExported: {args.output}")


def _run_from_image(args):
    """Analyze an image and print the palette."""
    print(f"Analyzing: {args.image}")

    colors, result = analyze_image(args.image, args.colors, method=args.method)
    palette = result.palette
    if not result.from_image:
        print("Image could not be loaded; using the default palette")

    print_palette(palette, colors)
    if args.report:
        report, _ = generate_readability_report(palette)
        print("\n" + report)

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        export_json(
            palette,
            args.output,
            source_file=os.path.basename(args.image),
            dominant_colors=colors,
            from_image=result.from_image,
        )
        print(f"\nExported: {args.output}")


if __name__ == "__main__":
    raise SystemExit(main())
