"""Reader for XPM pixmaps as used by the game's images."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .colornames import color_by_name
from .pixels import pack_pixel

TRANSPARENT = 0xFF000000
"""Pixel value given to colours named ``None``."""

_NAME_LIMIT = 63
_QUOTED = re.compile(r'"([^"]*)"')
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: rows of 0xRRGGBB values, top row first."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def to_bytes(self, bytes_per_pixel: int, big_endian: bool) -> bytes:
        """Pack all pixels row by row with no padding between rows."""
        return b"".join(
            pack_pixel(pixel, bytes_per_pixel, big_endian)
            for row in self.pixels
            for pixel in row
        )


def split_words(text: str) -> list[str]:
    """Split text on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]", text) if word]


def find_outside_quotes(text: str, find: str) -> int:
    """Return the first index of ``find`` not inside double quotes, or -1."""
    if not find:
        raise ValueError("search string must not be empty")
    last = len(text) - len(find)
    if last < 0:
        return -1
    inside = False
    for pos, char in enumerate(text[: last + 1]):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C and C++ style comments outside strings by spaces.

    The length of the text is kept, so positions stay valid.
    """
    while (start := find_outside_quotes(text, "/*")) != -1:
        close = text.find("*/", start + 2)
        text = _blank(text, start, len(text) if close == -1 else close + 2)
    while (start := find_outside_quotes(text, "//")) != -1:
        newline = text.find("\n", start + 2)
        text = _blank(text, start, len(text) if newline == -1 else newline + 1)
    return text


def text_to_rgb(name: str, end: Optional[str]) -> int:
    """Resolve a colour spec to 0xRRGGBB.

    ``#hex`` is read as a hexadecimal number; otherwise ``name`` (joined with
    ``end`` when given) is looked up by colour name. ``None`` gives -1 and an
    unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its string lines: values, colours, then pixel rows."""
    source = iter(lines)
    words = split_words(_next_line(source, "values line"))
    if len(words) < 4:
        raise XpmError("values line needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM values: {' '.join(words[:4])!r}")

    # Short keys are looked up directly, so a later definition replaces an
    # earlier one; longer keys are searched and the first definition wins.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definitions")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        key = line[:cpp]
        spec = split_words(line[cpp:])
        try:
            at = spec.index("c")
        except ValueError:
            raise XpmError(f"colour line has no 'c' key: {line!r}") from None
        if at + 1 >= len(spec):
            raise XpmError(f"colour line has no colour value: {line!r}")
        end = spec[at + 2] if at + 2 < len(spec) else None
        rgb = text_to_rgb(spec[at + 1], end)
        if first_wins:
            palette.setdefault(key, rgb)
        else:
            palette[key] = rgb

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            value = palette.get(line[start : start + cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the contents of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))