"""Presentation of analysis results."""

from diff_focus.render.report import (
    RENDERERS,
    RISK_COLORS,
    render_html,
    render_json,
    render_text,
)

__all__ = [
    "RENDERERS",
    "RISK_COLORS",
    "render_html",
    "render_json",
    "render_text",
]
