"""CLI tests driven through click's CliRunner."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from chromalogo import cli as cli_module
from chromalogo.cli import _choose_palette, cli
from chromalogo.palettes import DEFAULT_PALETTE, get_palette_names
from chromalogo.renderer import Renderer
from chromalogo.terminal import strip_ansi_codes


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def quiet_renderer(monkeypatch):
    """Skip the post-print settle delay of filled rendering."""
    monkeypatch.setattr(cli_module, "_build_renderer", lambda path: Renderer(sleep=lambda s: None))


def test_list_palettes(runner):
    result = runner.invoke(cli, ["--list-palettes"])
    assert result.exit_code == 0
    assert result.output.startswith("Available palettes:")
    for name in get_palette_names():
        assert f"  - {name}" in result.output


def test_list_fonts(runner):
    result = runner.invoke(cli, ["--list-fonts"])
    assert result.exit_code == 0
    assert "Filled fonts (--filled):" in result.output
    assert "  - standard" in result.output


def test_no_color_prints_plain_art(runner):
    result = runner.invoke(cli, ["HI", "--no-color"])
    assert result.exit_code == 0
    assert "\x1b[" not in result.output
    assert result.output == strip_ansi_codes(Renderer().render("HI")) + "\n"


def test_color_flag_forces_ansi(runner):
    result = runner.invoke(cli, ["HI", "sunset", "--color", "-d", "diagonal"])
    assert result.exit_code == 0
    assert "\x1b[1;38;2;" in result.output


def test_comma_separated_palette(runner):
    result = runner.invoke(cli, ["HI", "#ff0000,#0000ff", "--color"])
    assert result.exit_code == 0
    assert "\x1b[1;38;2;255;0;0m" in result.output


def test_unknown_explicit_palette_fails(runner):
    result = runner.invoke(cli, ["HI", "nope"])
    assert result.exit_code == 1
    assert "Error: Unknown palette: nope" in result.output


def test_unknown_font_fails(runner):
    result = runner.invoke(cli, ["HI", "--font", "no-such-font"])
    assert result.exit_code == 1
    assert "Font not found" in result.output


@pytest.mark.parametrize("args", [[], ["   "]])
def test_missing_or_blank_text_fails(runner, args):
    result = runner.invoke(cli, args)
    assert result.exit_code == 1
    assert "Error: Invalid input" in result.output


def test_stdin_text(runner):
    piped = runner.invoke(cli, ["-", "ocean", "--no-color"], input="HI\n")
    direct = runner.invoke(cli, ["HI", "ocean", "--no-color"])
    assert piped.exit_code == 0
    assert piped.output == direct.output


def test_literal_newline_escape(runner):
    result = runner.invoke(cli, ["A\\nB", "--no-color"])
    single = runner.invoke(cli, ["A", "--no-color"])
    assert result.exit_code == 0
    assert len(result.output.splitlines()) > len(single.output.splitlines())


def test_filled_output(runner, quiet_renderer):
    result = runner.invoke(cli, ["HI", "fire", "--filled", "--no-color"])
    assert result.exit_code == 0
    assert "█" in result.output
    assert "\x1b[" not in result.output


def test_filled_negative_spacing_fails(runner, quiet_renderer):
    result = runner.invoke(cli, ["HI", "--filled", "--letter-spacing", "-1"])
    assert result.exit_code == 1
    assert "letter_spacing" in result.output


def test_gallery_renders_every_palette(runner):
    result = runner.invoke(cli, ["A", "--gallery", "--no-color"])
    assert result.exit_code == 0
    for name in get_palette_names():
        assert f"=== {name.upper()} ===" in result.output


def test_stats_table(runner):
    result = runner.invoke(cli, ["HI", "--stats", "--no-color"])
    assert result.exit_code == 0
    assert "Render performance" in result.output


def test_config_file(runner, tmp_path):
    path = tmp_path / "chromalogo.yaml"
    path.write_text("cache:\n  glyph_cache_size: 20\n", encoding="utf-8")
    result = runner.invoke(cli, ["HI", "--config", str(path), "--no-color"])
    assert result.exit_code == 0


def test_bad_config_file_fails(runner, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("cache:\n  max_age_seconds: soon\n", encoding="utf-8")
    result = runner.invoke(cli, ["HI", "--config", str(path)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_font_from_environment(runner, monkeypatch):
    monkeypatch.setenv("CHROMALOGO_FONT", "slant")
    from_env = runner.invoke(cli, ["HI", "--no-color"])
    explicit = runner.invoke(cli, ["HI", "--no-color", "--font", "slant"])
    assert from_env.output == explicit.output


def test_implicit_palette_falls_back_to_default():
    renderer = Renderer()
    assert _choose_palette(renderer, "nope", explicit=False) == DEFAULT_PALETTE
    assert _choose_palette(renderer, "#ff0000, #00ff00", explicit=True) == ["#ff0000", "#00ff00"]


def test_gallery_keeps_color_when_forced(runner):
    result = runner.invoke(cli, ["A", "--gallery", "--color"])
    assert result.exit_code == 0
    assert result.output.count("=== ") == len(get_palette_names())
    assert "\x1b[1;38;2;" in result.output


def test_infinite_cache_size_is_clamped(runner, monkeypatch):
    monkeypatch.setenv("CHROMALOGO_CACHE_SIZE", "inf")
    result = runner.invoke(cli, ["HI", "--no-color"])
    assert result.exit_code == 0


def test_nan_cache_size_is_reported(runner, monkeypatch):
    monkeypatch.setenv("CHROMALOGO_CACHE_SIZE", "nan")
    result = runner.invoke(cli, ["HI"])
    assert result.exit_code == 1
    assert "Error: Invalid configuration for 'glyph_cache_size'" in result.output
