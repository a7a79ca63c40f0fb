"""Reporting helpers: result line rendering and timing exports."""

from .export_csv import export_timings_csv, render_line, timings_frame

__all__ = [
    "render_line",
    "timings_frame",
    "export_timings_csv",
]
