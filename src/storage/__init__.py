"""Storage providers for text input and analysis reports."""

from .report_store import parse_report, read_report, render_report, write_report
from .text_store import TEXT_SUFFIX, load_text_file, resolve_save_path

__all__ = [
	"load_text_file",
	"resolve_save_path",
	"TEXT_SUFFIX",
	"render_report",
	"write_report",
	"parse_report",
	"read_report",
]
