"""Rendering of classification results."""

from .json_report import build_payload, render_json
from .stdout import ResultReporter, format_score

__all__ = ["ResultReporter", "build_payload", "format_score", "render_json"]
