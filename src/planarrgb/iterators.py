"""Lazy per-pixel iterators over planar images."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from operator import length_hint
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .image import PlanarImage

Pixel: TypeAlias = tuple[int, int, int]

# BT.709 relative luminance
R_WEIGHT = 0.21263901
G_WEIGHT = 0.71516868
B_WEIGHT = 0.07219232


def luma(r: int, g: int, b: int) -> int:
    """
    Convert one 8-bit RGB pixel to an 8-bit luma value.

    The weighted sum is computed on channels normalized to [0.0, 1.0] and scaled back
    by truncation, so ``luma(255, 0, 0) == 54``. A sum reaching 1.0 maps to 255.

    Args:
        r: Red component, 0-255.
        g: Green component, 0-255.
        b: Blue component, 0-255.

    Returns:
        The luma value, 0-255.
    """
    lum = R_WEIGHT * (r / 255.0) + G_WEIGHT * (g / 255.0) + B_WEIGHT * (b / 255.0)

    if lum >= 1.0:
        return 255

    return int(255.0 * lum)


class PixelZipIterator(Iterator[Pixel]):
    """Yields the (r, g, b) triples of an image by walking its three planes in lockstep."""

    __slots__ = ("_b", "_g", "_idx", "_r", "_stop")

    def __init__(self, image: PlanarImage) -> None:
        self._r = image.red
        self._g = image.green
        self._b = image.blue
        self._idx = 0
        self._stop = min(len(self._r), len(self._g), len(self._b))

    def __iter__(self) -> PixelZipIterator:
        return self

    def __next__(self) -> Pixel:
        idx = self._idx

        if idx >= self._stop:
            raise StopIteration

        self._idx = idx + 1

        return self._r[idx], self._g[idx], self._b[idx]

    def __length_hint__(self) -> int:
        return self._stop - self._idx


class LumaIterator(Iterator[int]):
    """
    Maps a sequence of (r, g, b) triples to luma values, one at a time.

    The source is consumed lazily, one triple per output value,
    so it composes with ``PixelZipIterator``, generators, lists or any other iterable.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[Pixel]) -> None:
        self._source = iter(source)

    def __iter__(self) -> LumaIterator:
        return self

    def __next__(self) -> int:
        r, g, b = next(self._source)
        return luma(r, g, b)

    def __length_hint__(self) -> int:
        return length_hint(self._source)
