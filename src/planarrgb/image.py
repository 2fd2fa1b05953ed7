"""Planar 8-bit RGB image container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import InvalidBufferLength
from .iterators import PixelZipIterator

if TYPE_CHECKING:
    from collections.abc import Buffer

    from .settings import BackendChoice


def check_dimensions(height: int, width: int) -> None:
    """Raise ValueError unless height and width are both non-negative."""
    if height < 0 or width < 0:
        raise ValueError(f"Image dimensions must be non-negative, got {width}x{height}")


class PlanarImage:
    """
    An 8-bit RGB image stored in channel-major order.

    Each channel lives in its own ``bytes`` object of ``height * width`` samples,
    so the red plane is contiguous, then the green one, then the blue one.
    Many libraries work with densely packed row-major data instead,
    use ``from_packed_buffer`` and ``to_packed_buffer`` to inter-operate with them.

    Instances are immutable, a new image is the unit of update.
    """

    __slots__ = ("_blue", "_green", "_height", "_red", "_width")

    def __init__(self) -> None:
        """Create an empty 0x0 image."""
        self._red = b""
        self._green = b""
        self._blue = b""
        self._height = 0
        self._width = 0

    @classmethod
    def from_channels(cls, red: Buffer, green: Buffer, blue: Buffer, height: int, width: int) -> PlanarImage:
        """
        Construct an image from three already planar buffers.

        Args:
            red: Red samples, row-major.
            green: Green samples, row-major.
            blue: Blue samples, row-major.
            height: Number of rows.
            width: Number of columns.

        Returns:
            A new image owning copies of the three buffers.

        Raises:
            InvalidBufferLength: If a plane doesn't hold exactly ``height * width`` bytes.
            ValueError: If height or width is negative.
        """
        check_dimensions(height, width)

        total = height * width
        planes = tuple(bytes(plane) for plane in (red, green, blue))

        for name, plane in zip(("red", "green", "blue"), planes):
            if len(plane) != total:
                raise InvalidBufferLength(len(plane), total, f"{name} plane")

        image = cls()
        image._red, image._green, image._blue = planes
        image._height = height
        image._width = width

        return image

    @classmethod
    def from_packed_buffer(
        cls, buf: Buffer, height: int, width: int, backend: BackendChoice | None = None
    ) -> PlanarImage:
        """
        Construct an image from a row-major, densely packed ``[R, G, B, ...]`` buffer.

        The buffer is copied, so time and space complexity are both ``O(len(buf))``.

        Raises:
            InvalidBufferLength: If ``len(buf) != 3 * height * width``.
            ValueError: If height or width is negative.
        """
        from .codec import decode

        return decode(buf, height, width, backend)

    def to_packed_buffer(self, backend: BackendChoice | None = None) -> bytes:
        """Return the image data as a single row-major, densely packed ``[R, G, B, ...]`` buffer."""
        from .codec import encode

        return encode(self, backend)

    def to_luma_buffer(self, backend: BackendChoice | None = None) -> bytes:
        """Return the 8-bit luma of every pixel, in row-major order."""
        from .codec import encode_luma

        return encode_luma(self, backend)

    def pixels(self) -> PixelZipIterator:
        """Iterate over the (r, g, b) triples of the image in row-major order."""
        return PixelZipIterator(self)

    @property
    def red(self) -> bytes:
        return self._red

    @property
    def green(self) -> bytes:
        return self._green

    @property
    def blue(self) -> bytes:
        return self._blue

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def total(self) -> int:
        """Number of pixels, named after its OpenCV counterpart."""
        return self._height * self._width

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PlanarImage):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(height={self._height}, width={self._width})"

    def _key(self) -> tuple[int, int, bytes, bytes, bytes]:
        return self._height, self._width, self._red, self._green, self._blue
