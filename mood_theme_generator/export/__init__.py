from .json_export import export_json
from .preview import create_html_preview
from .report import generate_readability_report, print_palette

__all__ = ["export_json", "create_html_preview", "generate_readability_report", "print_palette"]
