# chromalogo/glyphs.py
"""
Glyph generation on top of pyfiglet.

Public API
----------
- GlyphGenerator.generate(text, font, options): outlined FIGlet art.
- GlyphGenerator.generate_filled(text, font, letter_spacing): solid block art.
- GlyphGenerator.available_fonts(): FIGlet font names pyfiglet can load.
- fill_letter_interiors(lines): turn hollow outlines into solid shapes.
- FILLED_FONTS: names accepted by the filled path.

Notes
-----
- pyfiglet's own "font not found" exception is translated into
  :class:`~chromalogo.errors.FontNotFoundError`; callers never see pyfiglet
  types.
- Output is a single ``str`` of ``\\n``-separated rows. The final newline that
  pyfiglet appends is dropped; blank rows inside the art are kept.

Python 3.9+ compatible.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Final, List, Mapping, Optional, Tuple

import pyfiglet

from .errors import FontNotFoundError, InvalidConfigurationError

__all__ = [
    "DEFAULT_LAYOUT",
    "FILLED_FONTS",
    "DEFAULT_FILLED_FONT",
    "GlyphGenerator",
    "fill_letter_interiors",
]

logger = logging.getLogger("chromalogo.glyphs")

SOLID_BLOCK: Final[str] = "█"

DEFAULT_LAYOUT: Final[Dict[str, Any]] = {
    "width": 80,
    "justify": "auto",
    "direction": "auto",
}

# Filled font name ➜ (pyfiglet font, solidify outline?)
# Fonts already drawn with block characters are used untouched.
FILLED_FONTS: Final[Dict[str, Tuple[str, bool]]] = {
    "block": ("ansi_regular", False),
    "shadow": ("ansi_shadow", False),
    "simple": ("standard", True),
    "tiny": ("small", True),
    "slant": ("slant", True),
}
DEFAULT_FILLED_FONT: Final[str] = "block"


def fill_letter_interiors(lines: List[str]) -> List[str]:
    """Fill the interior spaces of ASCII art letters.

    A space is filled when it sits between two non-space characters on the
    same row, or between two on the same column with a horizontal neighbour
    that is part of a letter. Every other character is replaced by a solid
    block so the result is uniformly filled.
    """
    if not lines:
        return lines

    width = max(len(line) for line in lines)
    grid = [list(line.ljust(width)) for line in lines]
    height = len(grid)

    # Horizontal gaps between letter strokes.
    for row in range(height):
        start = -1
        for col in range(width):
            if grid[row][col] == " ":
                continue
            if start != -1 and col > start + 1:
                for fill_col in range(start + 1, col):
                    grid[row][fill_col] = SOLID_BLOCK
            start = col

    # Vertical gaps, only where the gap touches a stroke sideways.
    for col in range(width):
        start = -1
        for row in range(height):
            if grid[row][col] == " ":
                continue
            if start != -1 and row > start + 1:
                for fill_row in range(start + 1, row):
                    if grid[fill_row][col] != " ":
                        continue
                    left = col > 0 and grid[fill_row][col - 1] != " "
                    right = col < width - 1 and grid[fill_row][col + 1] != " "
                    if left or right:
                        grid[fill_row][col] = SOLID_BLOCK
            start = row

    return ["".join(SOLID_BLOCK if ch != " " else ch for ch in row).rstrip() for row in grid]


class GlyphGenerator:
    """Thin adapter around :class:`pyfiglet.Figlet`."""

    def __init__(self, layout: Optional[Mapping[str, Any]] = None) -> None:
        self.layout: Dict[str, Any] = dict(DEFAULT_LAYOUT)
        if layout:
            self.layout.update(layout)

    @staticmethod
    def available_fonts() -> List[str]:
        return sorted(pyfiglet.FigletFont.getFonts())

    def _figlet(self, font: str, options: Mapping[str, Any]) -> pyfiglet.Figlet:
        try:
            return pyfiglet.Figlet(font=font, **options)
        except pyfiglet.FontNotFound as exc:
            raise FontNotFoundError(font) from exc
        except pyfiglet.FontError as exc:
            logger.debug("pyfiglet could not load font %r: %s", font, exc)
            raise FontNotFoundError(font) from exc

    def generate(self, text: str, font: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """Render ``text`` as outlined FIGlet art.

        Raises:
            FontNotFoundError: If pyfiglet does not know ``font``.
        """
        layout = dict(self.layout)
        if options:
            layout.update(options)
        art = str(self._figlet(font, layout).renderText(text))
        if art.endswith("\n"):
            art = art[:-1]
        return art

    def _spaced_line(
        self, figlet: pyfiglet.Figlet, line: str, letter_spacing: int, solidify: bool
    ) -> List[str]:
        """Render ``line`` one letter at a time, ``letter_spacing`` columns apart."""
        blocks = []
        for ch in line:
            block = str(figlet.renderText(ch)).rstrip("\n").split("\n")
            blocks.append(fill_letter_interiors(block) if solidify else block)
        height = max((len(b) for b in blocks), default=0)
        gap = " " * letter_spacing
        rows: List[str] = []
        for row in range(height):
            cells = []
            for block in blocks:
                cell_width = max((len(r) for r in block), default=0)
                cell = block[row] if row < len(block) else ""
                cells.append(cell.ljust(cell_width))
            rows.append(gap.join(cells).rstrip())
        return rows

    def generate_filled(
        self,
        text: str,
        font: str = DEFAULT_FILLED_FONT,
        letter_spacing: Optional[int] = None,
    ) -> str:
        """Render ``text`` as solid block-character art.

        Parameters
        ----------
        text : str
            Text to draw; ``\\n`` starts a new banner row.
        font : str
            One of :data:`FILLED_FONTS`.
        letter_spacing : int | None
            Columns inserted between letters. ``None`` keeps the font's own
            kerning for block fonts and one column for solidified outlines.

        Raises:
            FontNotFoundError: If ``font`` is not a filled font.
            InvalidConfigurationError: If ``letter_spacing`` is negative.
        """
        if letter_spacing is not None and letter_spacing < 0:
            raise InvalidConfigurationError("letter_spacing", "must be 0 or greater")
        if font not in FILLED_FONTS:
            raise FontNotFoundError(font)
        figlet_font, solidify = FILLED_FONTS[font]
        figlet = self._figlet(figlet_font, self.layout)

        # Solidified outlines are filled letter by letter; filling a whole row
        # would also fill the gaps between letters.
        if solidify and letter_spacing is None:
            letter_spacing = 1

        rows: List[str] = []
        for line in text.split("\n"):
            if letter_spacing is None:
                rows.extend(str(figlet.renderText(line)).rstrip("\n").split("\n"))
            else:
                rows.extend(self._spaced_line(figlet, line, letter_spacing, solidify))
        return "\n".join(rows)
