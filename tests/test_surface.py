"""Tests for drawing surfaces."""

import json
import re

import pytest

from flowreceipt.config import RenderConfig
from flowreceipt.surface import FONT_BOLD, Line, Rect, Text, create_surface
from flowreceipt.surface.recording import RecordingSurface


class TestBufferedPages:
    def test_starts_with_one_page(self):
        surface = RecordingSurface(400, 700)
        assert surface.page_count == 1
        assert surface.current_page == 0

    def test_add_page_becomes_current(self):
        surface = RecordingSurface(400, 700)
        assert surface.add_page() == 1
        assert surface.page_count == 2
        assert surface.current_page == 1

    def test_switch_to_page_draws_on_that_page(self):
        """Earlier pages can be revisited and appended to."""
        surface = RecordingSurface(400, 700)
        surface.text("first", 30, 30)
        surface.add_page()
        surface.switch_to_page(0)
        surface.text("overlay", 30, 630)
        assert [t.content for t in surface.pages[0].texts()] == ["first", "overlay"]
        assert surface.pages[1].primitives == []

    def test_switch_to_page_out_of_range(self):
        surface = RecordingSurface(400, 700)
        with pytest.raises(IndexError, match="out of bounds"):
            surface.switch_to_page(1)
        with pytest.raises(IndexError):
            surface.switch_to_page(-1)

    def test_primitives_recorded(self):
        surface = RecordingSurface(400, 700)
        surface.line(30, 40, 370, 40, color="#eaeaea", width=0.5)
        surface.rect(30, 50, 340, 30, fill="#f9f9f9")
        surface.text("X", 35, 55, font=FONT_BOLD, size=8)
        line, rect, text = surface.pages[0].primitives
        assert line == Line(30, 40, 370, 40, color="#eaeaea", width=0.5)
        assert rect == Rect(30, 50, 340, 30, fill="#f9f9f9")
        assert isinstance(text, Text)
        assert text.font == FONT_BOLD


class TestTextValidation:
    def test_unknown_alignment(self):
        surface = RecordingSurface(400, 700)
        with pytest.raises(ValueError, match="alignment"):
            surface.text("x", 0, 0, align="justify")

    def test_center_needs_width(self):
        surface = RecordingSurface(400, 700)
        with pytest.raises(ValueError, match="needs a width"):
            surface.text("x", 0, 0, align="center")

    def test_string_width(self):
        surface = RecordingSurface(400, 700)
        narrow = surface.string_width("ab", "Helvetica", 8)
        wide = surface.string_width("abcdef", "Helvetica", 8)
        assert 0 < narrow < wide


class TestFinish:
    def test_recording_output_is_json(self):
        surface = RecordingSurface(400, 700)
        surface.text("hello", 30, 30)
        surface.add_page()
        doc = json.loads(surface.finish())
        assert doc["width"] == 400
        assert len(doc["pages"]) == 2
        assert doc["pages"][0][0]["kind"] == "text"
        assert doc["pages"][0][0]["content"] == "hello"

    def test_finish_twice(self):
        surface = RecordingSurface(400, 700)
        surface.finish()
        with pytest.raises(RuntimeError, match="already finished"):
            surface.finish()

    def test_draw_after_finish(self):
        surface = RecordingSurface(400, 700)
        surface.finish()
        with pytest.raises(RuntimeError):
            surface.text("late", 0, 0)
        with pytest.raises(RuntimeError):
            surface.add_page()

    def test_pdf_output(self):
        """ReportLab surface emits one PDF page per buffered page."""
        pytest.importorskip("reportlab")
        from flowreceipt.surface.pdf import ReportLabSurface

        surface = ReportLabSurface(400, 700, title="T", author="A")
        surface.text("page one", 30, 30)
        surface.rect(30, 60, 340, 30, fill="#f9f9f9")
        surface.line(30, 100, 370, 100, color="#eaeaea", width=0.5)
        surface.add_page()
        surface.text("right", 200, 30, align="right", width=170)
        surface.text("center", 30, 60, align="center", width=340)

        content = surface.finish()
        assert content[:4] == b"%PDF"
        assert re.search(rb"/Count\s+2\b", content)
        assert b"/Author (A)" in content
        assert b"/Title (T)" in content


class TestCreateSurface:
    def test_pdf(self):
        from flowreceipt.surface.pdf import ReportLabSurface

        surface = create_surface(RenderConfig())
        assert isinstance(surface, ReportLabSurface)
        assert (surface.width, surface.height) == (400, 700)

    def test_json(self):
        surface = create_surface(RenderConfig(), output_format="json")
        assert isinstance(surface, RecordingSurface)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            create_surface(RenderConfig(), output_format="svg")
