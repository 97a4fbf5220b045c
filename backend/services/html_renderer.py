"""
HTML Renderer - Side-by-side diff view as a standalone HTML document

Each panel is its own scrollable table of numbered rows; an inline script
mirrors the scroll ratio between the two panels.
"""

from __future__ import annotations

import html

from models.diff import Highlight, Row

THEME_COLORS = {
    "light": {
        "page_bg": "#ffffff",
        "panel_bg": "#f9fafb",
        "text": "#111827",
        "muted": "#6b7280",
        "border": "#d1d5db",
        "added_bg": "#dcfce7",
        "removed_bg": "#fee2e2",
        "modified_bg": "#fef9c3",
    },
    "dark": {
        "page_bg": "#030712",
        "panel_bg": "#111827",
        "text": "#f3f4f6",
        "muted": "#9ca3af",
        "border": "#374151",
        "added_bg": "rgba(20, 83, 45, 0.3)",
        "removed_bg": "rgba(127, 29, 29, 0.3)",
        "modified_bg": "rgba(113, 63, 18, 0.3)",
    },
}

_ROW_CLASS = {
    Highlight.NONE: "",
    Highlight.ADDED: "row-added",
    Highlight.REMOVED: "row-removed",
}

_CSS_TEMPLATE = """
<style>
* {{ box-sizing: border-box; margin: 0; padding: 0; }}
body {{
    font-family: ui-sans-serif, system-ui, sans-serif;
    background: {page_bg};
    color: {text};
    padding: 16px;
}}
h1 {{ font-size: 20px; margin-bottom: 12px; }}
.stats {{ font-size: 13px; color: {muted}; margin-bottom: 12px; }}
.panels {{ display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }}
.panel {{
    border: 1px solid {border};
    border-radius: 6px;
    background: {panel_bg};
    overflow: auto;
    max-height: 70vh;
    font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
    font-size: 13px;
}}
.panel h2 {{ font-size: 14px; padding: 6px 12px; border-bottom: 1px solid {border}; }}
table {{ width: 100%; border-collapse: collapse; }}
.line-num {{
    width: 48px;
    padding-right: 12px;
    text-align: right;
    color: {muted};
    border-right: 1px solid {border};
    user-select: none;
    vertical-align: top;
}}
.line-text {{ padding-left: 12px; white-space: pre-wrap; word-break: break-all; }}
.row-added {{ background: {added_bg}; }}
.row-removed {{ background: {removed_bg}; }}
.legend {{ display: flex; gap: 16px; margin-top: 16px; font-size: 13px; color: {muted}; }}
.swatch {{ display: inline-block; width: 14px; height: 14px; margin-right: 6px; vertical-align: middle; }}
.empty {{ padding: 12px; color: {muted}; }}
</style>
"""

_SCROLL_SYNC_SCRIPT = """
<script>
(function () {
    var panels = document.querySelectorAll(".panel");
    if (panels.length !== 2) return;
    var syncing = false;
    function mirror(source, target) {
        if (syncing) return;
        var range = source.scrollHeight - source.clientHeight;
        var ratio = range > 0 ? source.scrollTop / range : 0;
        syncing = true;
        target.scrollTop = ratio * Math.max(target.scrollHeight - target.clientHeight, 0);
        syncing = false;
    }
    panels[0].addEventListener("scroll", function () { mirror(panels[0], panels[1]); });
    panels[1].addEventListener("scroll", function () { mirror(panels[1], panels[0]); });
})();
</script>
"""


def render_side_by_side(
    old_rows: list[Row],
    new_rows: list[Row],
    theme: str = "light",
    title: str = "Diff Result",
) -> str:
    """
    Render both panels as a complete HTML document.

    Args:
        old_rows: Rows projected onto the old side
        new_rows: Rows projected onto the new side
        theme: "light" or "dark"
        title: Heading shown above the panels

    Returns:
        HTML document string

    Raises:
        ValueError: If the theme is unknown
    """
    if theme not in THEME_COLORS:
        raise ValueError(f"Unknown theme: {theme!r} (expected one of {', '.join(THEME_COLORS)})")
    colors = THEME_COLORS[theme]

    added = sum(1 for row in new_rows if row.highlight == Highlight.ADDED)
    removed = sum(1 for row in old_rows if row.highlight == Highlight.REMOVED)

    body = f"""
    <h1>{html.escape(title)}</h1>
    <div class="stats">+{added} &nbsp; -{removed}</div>
    <div class="panels">
        {_render_panel("Original Code", old_rows)}
        {_render_panel("Modified Code", new_rows)}
    </div>
    {_render_legend(colors)}
    """

    return f"""<!DOCTYPE html>
<html class="{theme}">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    {_CSS_TEMPLATE.format(**colors)}
</head>
<body>
    {body}
    {_SCROLL_SYNC_SCRIPT}
</body>
</html>"""


def _render_panel(heading: str, rows: list[Row]) -> str:
    if not rows:
        content = '<div class="empty">No lines</div>'
    else:
        content = f"<table><tbody>{''.join(_render_row(row) for row in rows)}</tbody></table>"
    return f"""<div class="panel">
            <h2>{html.escape(heading)}</h2>
            {content}
        </div>"""


def _render_row(row: Row) -> str:
    row_class = _ROW_CLASS[row.highlight]
    class_attr = f' class="{row_class}"' if row_class else ""
    return (
        f"<tr{class_attr}>"
        f'<td class="line-num">{row.line_number}</td>'
        f'<td class="line-text">{html.escape(row.text)}</td>'
        "</tr>"
    )


def _render_legend(colors: dict[str, str]) -> str:
    # "Modified" is a visual convention for a removed row followed by an added one
    items = [
        ("Added", colors["added_bg"]),
        ("Removed", colors["removed_bg"]),
        ("Modified", colors["modified_bg"]),
    ]
    entries = "".join(
        f'<span><span class="swatch" style="background: {bg};"></span>{label}</span>'
        for label, bg in items
    )
    return f'<div class="legend">{entries}</div>'
