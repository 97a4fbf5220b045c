"""Unit tests for the side-by-side HTML renderer."""

import pytest

from services.diff_engine import compute_diff
from services.html_renderer import THEME_COLORS, render_side_by_side
from services.line_projector import project_both


def _render(old_text, new_text, **kwargs):
    old_rows, new_rows = project_both(compute_diff(old_text, new_text))
    return render_side_by_side(old_rows, new_rows, **kwargs)


class TestRenderSideBySide:
    def test_complete_document(self):
        document = _render("a\nb\nc", "a\nx\nc")

        assert document.startswith("<!DOCTYPE html>")
        assert "Original Code" in document
        assert "Modified Code" in document
        assert "+1 &nbsp; -1" in document

    def test_highlight_classes(self):
        document = _render("a\nb\nc", "a\nx\nc")

        assert '<tr class="row-removed"><td class="line-num">2</td><td class="line-text">b</td></tr>' in document
        assert '<tr class="row-added"><td class="line-num">2</td><td class="line-text">x</td></tr>' in document
        assert '<tr><td class="line-num">1</td><td class="line-text">a</td></tr>' in document

    def test_text_is_escaped(self):
        document = _render("<script>alert(1)</script>", "a & b")

        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in document
        assert "a &amp; b" in document
        assert "<script>alert(1)" not in document

    def test_legend_lists_modified(self):
        document = _render("a", "b")
        for label in ("Added", "Removed", "Modified"):
            assert f"</span>{label}</span>" in document

    def test_dark_theme_colors(self):
        document = _render("a", "b", theme="dark")

        assert '<html class="dark">' in document
        assert THEME_COLORS["dark"]["page_bg"] in document
        assert THEME_COLORS["light"]["page_bg"] not in document

    def test_title_is_escaped(self):
        document = _render("a", "a", title="A <b> title")
        assert "<h1>A &lt;b&gt; title</h1>" in document

    def test_empty_panels(self):
        document = render_side_by_side([], [])
        assert document.count("No lines") == 2

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            _render("a", "b", theme="sepia")
