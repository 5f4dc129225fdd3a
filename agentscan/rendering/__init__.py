"""Markdown renderers for analysis profiles."""

from .context import render_context, stack_line
from .report import render_report

__all__ = ["render_context", "render_report", "stack_line"]
