"""Scan report rendering."""

from .html_report import render_html_report, write_html_report
from .models import ReportSummary, build_report_summary

__all__ = [
    "ReportSummary",
    "build_report_summary",
    "render_html_report",
    "write_html_report",
]
