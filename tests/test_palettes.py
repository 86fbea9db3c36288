"""Tests for `chromalogo/palettes.py`."""

from __future__ import annotations

import pytest
from rich.color_triplet import ColorTriplet

from chromalogo import palettes
from chromalogo.errors import InvalidPaletteError


def test_default_palette_is_in_table():
    assert palettes.DEFAULT_PALETTE in palettes.PALETTES
    assert palettes.get_default_palette() == ["#4ea8ff", "#7f88ff"]


def test_resolve_twice_gives_equal_independent_copies():
    first = palettes.resolve_palette("sunset")
    second = palettes.resolve_palette("sunset")
    assert first == second
    assert first is not second
    first.append("#000000")
    assert palettes.resolve_palette("sunset") == ["#ff9966", "#ff5e62", "#ffa34e"]


def test_resolve_unknown_returns_none():
    assert palettes.resolve_palette("does-not-exist") is None


def test_palette_names_keep_declaration_order():
    names = palettes.get_palette_names()
    assert names[0] == "grad-blue"
    assert names[-1] == "matrix"
    assert len(names) == 13


def test_preview_joins_with_arrow():
    assert palettes.get_palette_preview("dawn") == "#00c6ff → #0072ff"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#ff0000", (255, 0, 0)),
        ("  #00FF00 ", (0, 255, 0)),
        ("rgb(1,2,3)", (1, 2, 3)),
        ((10, 20, 30), (10, 20, 30)),
        (ColorTriplet(4, 5, 6), (4, 5, 6)),
    ],
)
def test_parse_color_accepts_common_forms(value, expected):
    assert palettes.parse_color(value) == expected


def test_parse_color_accepts_named_colors():
    assert isinstance(palettes.parse_color("magenta"), ColorTriplet)


@pytest.mark.parametrize("bad", ["not-a-color", "#12", "default", (1, 2), (0, 0, 300), 42, None])
def test_parse_color_rejects_malformed(bad):
    with pytest.raises(InvalidPaletteError):
        palettes.parse_color(bad)


def test_parse_color_stops_rejects_empty_and_bare_strings():
    with pytest.raises(InvalidPaletteError):
        palettes.parse_color_stops([])
    with pytest.raises(InvalidPaletteError):
        palettes.parse_color_stops("#ff0000")


def test_every_named_palette_parses():
    for name, stops in palettes.PALETTES.items():
        assert len(palettes.parse_color_stops(stops)) == len(stops), name
