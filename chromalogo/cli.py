# chromalogo/cli.py
"""
chromalogo command-line interface.

Usage
-----
    chromalogo "HELLO" sunset --direction diagonal
    chromalogo "HELLO" "#ff0000,#0000ff" --font slant
    chromalogo "HELLO" --filled --letter-spacing 1
    echo "HI" | chromalogo - ocean
    chromalogo --list-palettes

Notes
-----
- ``TEXT`` may contain a literal ``\\n`` to start a new row; ``-`` reads stdin.
- ``PALETTE`` is a palette name or a comma-separated list of colors.
- An unknown palette is an error when named explicitly; the default palette
  is only used when none was given.
- Rendered art goes to stdout; logs and ``--stats`` go to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import click
from dotenv import load_dotenv
from rich.console import Console

from .cache.manager import CacheManager
from .colorizer import Direction
from .config import load_cache_config
from .errors import ChromaLogoError, InvalidInputError, PaletteNotFoundError
from .glyphs import DEFAULT_FILLED_FONT, FILLED_FONTS, GlyphGenerator
from .log_manager import get_logger, level_from_env
from .palettes import DEFAULT_PALETTE, get_palette_names, get_palette_preview
from .renderer import DEFAULT_FONT, PaletteSpec, Renderer
from .terminal import should_use_color, strip_ansi_codes

__all__ = ["cli", "main"]

logger = logging.getLogger("chromalogo.cli")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build_renderer(config_path: Optional[str]) -> Renderer:
    return Renderer(CacheManager(load_cache_config(config_path)))


def _read_text(text: str) -> str:
    """Resolve stdin (``-``) and literal ``\\n`` escapes; reject blank text."""
    if text == "-":
        text = sys.stdin.read().strip()
    if not text or not text.strip():
        raise InvalidInputError("text must not be empty", text)
    return text.replace("\\n", "\n")


def _palette_spec(palette: str) -> PaletteSpec:
    if "," in palette:
        return [part.strip() for part in palette.split(",") if part.strip()]
    return palette


def _choose_palette(renderer: Renderer, palette: str, explicit: bool) -> PaletteSpec:
    """Validate ``palette``; fall back to the default only if none was given."""
    spec = _palette_spec(palette)
    try:
        renderer.resolve_colors(spec)
    except PaletteNotFoundError:
        if explicit:
            raise
        logger.warning("Palette '%s' not found; using '%s'", palette, DEFAULT_PALETTE)
        return DEFAULT_PALETTE
    return spec


def _print_palettes() -> None:
    click.echo("Available palettes:")
    for name in get_palette_names():
        click.echo(f"  - {name:<12} {get_palette_preview(name)}")


def _print_fonts() -> None:
    click.echo("Filled fonts (--filled):")
    for name in FILLED_FONTS:
        click.echo(f"  - {name}")
    click.echo("FIGlet fonts:")
    for name in GlyphGenerator.available_fonts():
        click.echo(f"  - {name}")


def _emit(
    renderer: Renderer,
    text: str,
    palette: PaletteSpec,
    font: Optional[str],
    direction: str,
    filled: bool,
    letter_spacing: Optional[int],
    use_color: bool,
) -> None:
    if filled:
        console = Console(force_terminal=use_color or None, no_color=not use_color)
        renderer.render_filled(
            text, palette, font or DEFAULT_FILLED_FONT, letter_spacing, console=console
        )
        return
    logo = renderer.render(text, palette, font or DEFAULT_FONT, direction)
    click.echo(logo if use_color else strip_ansi_codes(logo), color=use_color)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="chromalogo")
@click.argument("text", required=False)
@click.argument("palette", required=False)
@click.option("-f", "--font", envvar="CHROMALOGO_FONT", default=None,
              help="FIGlet font (outline) or filled font name.")
@click.option("-d", "--direction", type=click.Choice([d.value for d in Direction], case_sensitive=False),
              default=Direction.VERTICAL.value, show_default=True, help="Gradient direction.")
@click.option("--filled", is_flag=True, help="Use filled block characters instead of outlines.")
@click.option("--letter-spacing", type=int, default=None, help="Columns between letters (--filled).")
@click.option("-l", "--list-palettes", is_flag=True, help="List available palettes and exit.")
@click.option("--list-fonts", is_flag=True, help="List available fonts and exit.")
@click.option("--gallery", is_flag=True, help="Render TEXT in every palette.")
@click.option("--color/--no-color", "color", default=None, help="Force or disable color output.")
@click.option("--stats", is_flag=True, help="Print render timing and cache statistics to stderr.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              default=None, help="YAML file with a 'cache' section.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(
    text: Optional[str],
    palette: Optional[str],
    font: Optional[str],
    direction: str,
    filled: bool,
    letter_spacing: Optional[int],
    list_palettes: bool,
    list_fonts: bool,
    gallery: bool,
    color: Optional[bool],
    stats: bool,
    config_path: Optional[str],
    verbose: bool,
) -> None:
    """Display giant ASCII-art TEXT with a color gradient."""
    get_logger("chromalogo", level=logging.DEBUG if verbose else level_from_env())

    if list_palettes:
        _print_palettes()
        return
    if list_fonts:
        _print_fonts()
        return

    try:
        if text is None:
            raise InvalidInputError("TEXT is required unless --list-palettes or --list-fonts is used")
        body = _read_text(text)
        renderer = _build_renderer(config_path)
        use_color = should_use_color(force_color=color is True, no_color=color is False)

        if gallery:
            names: List[str] = get_palette_names()
            for name in names:
                click.echo(f"\n=== {name.upper()} ===\n")
                _emit(renderer, body, name, font, direction, filled, letter_spacing, use_color)
        else:
            chosen = _choose_palette(renderer, palette or DEFAULT_PALETTE, explicit=palette is not None)
            _emit(renderer, body, chosen, font, direction, filled, letter_spacing, use_color)

        if stats:
            Console(stderr=True).print(renderer.monitor.report(renderer.cache))
    except ChromaLogoError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def main() -> None:
    """Console-script entry point: load ``.env`` then run the CLI."""
    load_dotenv(override=False)
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
