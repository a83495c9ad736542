"""Pixel formats: packing 0xRRGGBB colours into visual-specific pixel values."""

from __future__ import annotations

from dataclasses import dataclass


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bits) of the lowest run of set bits in a channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = (~run & (run + 1)).bit_length() - 1
    return shift, bits


def _scale(component: int, bits: int) -> int:
    """Reduce a 16-bit channel value to ``bits`` bits."""
    if bits <= 16:
        return component >> (16 - bits)
    return component << (bits - 16)


@dataclass(frozen=True)
class PixelFormat:
    """Layout of the red, green and blue channels inside a pixel value."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(cls, red_mask, green_mask, blue_mask, depth):
        """Build a format from the channel masks of a TrueColor visual."""
        red_shift, red_bits = _mask_layout(red_mask)
        green_shift, green_bits = _mask_layout(green_mask)
        blue_shift, blue_bits = _mask_layout(blue_mask)
        return cls(
            depth=depth,
            red_shift=red_shift,
            red_bits=red_bits,
            green_shift=green_shift,
            green_bits=green_bits,
            blue_shift=blue_shift,
            blue_bits=blue_bits,
        )

    def convert(self, color: int) -> int:
        """Turn a 0xRRGGBB colour into a pixel value of this format.

        Visuals of depth 24 or more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            (_scale(red, self.red_bits) << self.red_shift)
            + (_scale(green, self.green_bits) << self.green_shift)
            + (_scale(blue, self.blue_bits) << self.blue_shift)
        )


def pack_pixel(color: int, bytes_per_pixel: int, big_endian: bool) -> bytes:
    """Store the low ``bytes_per_pixel`` bytes of a pixel value in the given order."""
    if bytes_per_pixel <= 0:
        raise ValueError(f"bytes_per_pixel must be positive, got {bytes_per_pixel!r}")
    mask = (1 << (8 * bytes_per_pixel)) - 1
    return (color & mask).to_bytes(bytes_per_pixel, "big" if big_endian else "little")