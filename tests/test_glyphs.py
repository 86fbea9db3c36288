"""Tests for `chromalogo/glyphs.py` (real pyfiglet)."""

from __future__ import annotations

import pyfiglet
import pytest

from chromalogo.errors import FontNotFoundError, InvalidConfigurationError
from chromalogo.glyphs import FILLED_FONTS, GlyphGenerator, fill_letter_interiors


@pytest.fixture
def generator() -> GlyphGenerator:
    return GlyphGenerator()


def test_generate_matches_pyfiglet_without_trailing_newline(generator):
    expected = str(pyfiglet.Figlet(font="standard", width=80).renderText("Hi"))
    if expected.endswith("\n"):
        expected = expected[:-1]
    art = generator.generate("Hi", "standard")
    assert art == expected
    assert any(line.strip() for line in art.split("\n"))


def test_generate_unknown_font_raises_font_not_found(generator):
    with pytest.raises(FontNotFoundError) as info:
        generator.generate("Hi", "definitely-not-a-font")
    assert info.value.font == "definitely-not-a-font"


def test_layout_override_is_applied():
    narrow = GlyphGenerator(layout={"width": 20})
    assert narrow.layout["width"] == 20
    assert narrow.layout["justify"] == "auto"


def test_available_fonts_include_standard():
    assert "standard" in GlyphGenerator.available_fonts()


def test_filled_font_table_maps_to_real_fonts():
    fonts = set(GlyphGenerator.available_fonts())
    for name, (figlet_font, _) in FILLED_FONTS.items():
        assert figlet_font in fonts, name


def test_fill_letter_interiors_closes_gaps():
    assert fill_letter_interiors(["| |", "|_|"]) == ["███", "███"]


def test_fill_letter_interiors_keeps_outside_space():
    assert fill_letter_interiors(["  |", "   "]) == ["  █", ""]


def test_fill_letter_interiors_empty():
    assert fill_letter_interiors([]) == []


def test_generate_filled_uses_block_characters(generator):
    art = generator.generate_filled("HI", "simple")
    visible = {ch for ch in art if not ch.isspace()}
    assert visible == {"█"}


def test_generate_filled_letter_spacing_widens_output(generator):
    tight = generator.generate_filled("II", "simple", letter_spacing=0)
    wide = generator.generate_filled("II", "simple", letter_spacing=4)
    assert max(map(len, wide.split("\n"))) == max(map(len, tight.split("\n"))) + 4


def test_generate_filled_negative_spacing_rejected(generator):
    with pytest.raises(InvalidConfigurationError):
        generator.generate_filled("HI", "block", letter_spacing=-1)


def test_generate_filled_unknown_font_rejected(generator):
    with pytest.raises(FontNotFoundError):
        generator.generate_filled("HI", "comic-sans")


def test_generate_filled_multiline_text_stacks_rows(generator):
    one = generator.generate_filled("A", "block").split("\n")
    two = generator.generate_filled("A\nA", "block").split("\n")
    assert len(two) == 2 * len(one)
