"""Weekly digest classification and rendering."""

from .classifier import DigestBuckets, classify
from .pipeline import DigestReport, generate_digest
from .renderer import render_plain, render_rich, strip_emphasis
from .window import ReportingWindow, compute_reporting_window, format_date_range

__all__ = [
    "DigestBuckets",
    "DigestReport",
    "ReportingWindow",
    "classify",
    "compute_reporting_window",
    "format_date_range",
    "generate_digest",
    "render_plain",
    "render_rich",
    "strip_emphasis",
]
