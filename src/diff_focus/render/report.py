"""Renderers for AnalysisResult: terminal text, JSON, and a standalone HTML report."""

import html

from diff_focus.models.analysis_models import AnalysisResult, RiskLevel

RISK_COLORS: dict[RiskLevel, str] = {
    RiskLevel.HIGH: "red",
    RiskLevel.MEDIUM: "orange",
    RiskLevel.LOW: "green",
}

# (badge background, badge foreground) per risk color
_BADGE_STYLES: dict[str, tuple[str, str]] = {
    "red": ("#fee", "#c00"),
    "orange": ("#ffe", "#c60"),
    "green": ("#efe", "#060"),
}

REPORT_TITLE = "Diff-Focus Analysis"

_HTML_STYLE = """\
    body { font-family: var(--vscode-font-family, sans-serif); padding: 20px; }
    .risk-badge { display: inline-block; padding: 8px 16px; border-radius: 4px;
                  background: %(badge_bg)s; color: %(badge_fg)s;
                  font-weight: bold; margin-bottom: 20px; }
    .section { margin: 20px 0; }
    .file-type { display: inline-block; padding: 4px 8px; background: #e3f2fd;
                 border-radius: 4px; margin: 4px; }
    .flag { padding: 8px; margin: 8px 0; border-left: 3px solid #ccc; }
    .flag.danger { border-color: #c00; background: #fee; }
    .flag.warning { border-color: #c60; background: #ffe; }
    .flag.info { border-color: #06c; background: #eef; }
"""


def render_json(result: AnalysisResult) -> str:
    return result.model_dump_json(indent=2)


def render_text(result: AnalysisResult) -> str:
    """Plain-text report for terminals and logs."""
    lines = [
        "=" * 60,
        REPORT_TITLE,
        "=" * 60,
        "",
        f"Risk Level: {result.risk_level.value}",
    ]

    if result.file_types:
        lines.append("")
        lines.append("File Types:")
        lines.extend(f"  - {category.value}" for category in result.file_types)

    if result.summary:
        lines.append("")
        lines.append("Summary:")
        lines.extend(f"  - {note}" for note in result.summary)

    if result.flags:
        lines.append("")
        lines.append("Flags:")
        lines.extend(
            f"  [{flag.severity.value.upper()}] {flag.message}" for flag in result.flags
        )

    lines.append("")
    lines.append("=" * 60)
    return "\n".join(lines) + "\n"


def render_html(result: AnalysisResult) -> str:
    """Standalone HTML page. Every inserted string is escaped."""
    color = RISK_COLORS[result.risk_level]
    badge_bg, badge_fg = _BADGE_STYLES[color]
    esc = html.escape

    sections = []
    if result.file_types:
        chips = "".join(
            f'<span class="file-type">{esc(category.value)}</span>'
            for category in result.file_types
        )
        sections.append(
            '  <div class="section">\n'
            "    <h2>File Types</h2>\n"
            f"    {chips}\n"
            "  </div>\n"
        )

    if result.summary:
        items = "".join(f"<li>{esc(note)}</li>" for note in result.summary)
        sections.append(
            '  <div class="section">\n'
            "    <h2>Summary</h2>\n"
            f"    <ul>{items}</ul>\n"
            "  </div>\n"
        )

    if result.flags:
        flag_divs = "".join(
            f'    <div class="flag {esc(flag.severity.value)}">'
            f"<strong>{esc(flag.severity.value.upper())}:</strong> {esc(flag.message)}"
            "</div>\n"
            for flag in result.flags
        )
        sections.append(
            '  <div class="section">\n'
            "    <h2>Flags</h2>\n"
            f"{flag_divs}"
            "  </div>\n"
        )

    style = _HTML_STYLE % {"badge_bg": badge_bg, "badge_fg": badge_fg}
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{REPORT_TITLE}</title>\n"
        f"  <style>\n{style}  </style>\n"
        "</head>\n"
        "<body>\n"
        f"  <h1>{REPORT_TITLE}</h1>\n"
        f'  <div class="risk-badge">Risk Level: {esc(result.risk_level.value)}</div>\n'
        f"{''.join(sections)}"
        "</body>\n"
        "</html>\n"
    )


RENDERERS = {
    "text": render_text,
    "json": render_json,
    "html": render_html,
}
