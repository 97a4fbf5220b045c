"""
Scroll Synchronizer - Mirror one panel's scroll position onto the other
"""

from __future__ import annotations

from models.compare import ScrollMetrics


def scroll_ratio(scroll_top: float, scroll_height: float, client_height: float) -> float:
    """Offset as a fraction of the scrollable range, clamped to [0, 1]"""
    scrollable = scroll_height - client_height
    if scrollable <= 0:
        return 0.0
    return min(max(scroll_top / scrollable, 0.0), 1.0)


def mirror_scroll(source: ScrollMetrics, target: ScrollMetrics) -> float:
    """Target scroll_top matching the source panel's fractional offset"""
    ratio = scroll_ratio(source.scroll_top, source.scroll_height, source.client_height)
    return ratio * max(target.scroll_height - target.client_height, 0.0)


def mirror_row(row_index: int, source_rows: int, target_rows: int) -> int:
    """
    Same mirroring expressed in rows: map a 0-based top row of the source
    panel to the target panel using only the two row counts.
    """
    if source_rows <= 1 or target_rows <= 1:
        return 0
    ratio = min(max(row_index / (source_rows - 1), 0.0), 1.0)
    return round(ratio * (target_rows - 1))
