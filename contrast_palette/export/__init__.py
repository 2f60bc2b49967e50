from .json_export import export_json
from .report import contrast_checks, generate_readability_report, print_palette

__all__ = [
    "contrast_checks",
    "export_json",
    "generate_readability_report",
    "print_palette",
]
