"""Conversions between packed (interleaved) RGB buffers and planar images."""

from __future__ import annotations

from logging import getLogger
from types import ModuleType
from typing import TYPE_CHECKING

from . import numpy, python
from .errors import InvalidBufferLength
from .image import PlanarImage, check_dimensions
from .settings import BackendChoice, SettingsManager

if TYPE_CHECKING:
    from collections.abc import Buffer

logger = getLogger(__name__)


def get_backend(backend: BackendChoice | None = None, total: int = 0) -> ModuleType:
    """
    Resolve a backend name to the module implementing it.

    Args:
        backend: Backend name. If None, the globally configured one is used.
        total: Pixel count of the image about to be converted, used by "auto".

    Returns:
        The backend module.

    Raises:
        ValueError: If the backend name is unknown.
    """
    backend = backend or SettingsManager.global_settings.backend

    if backend == "auto":
        backend = "numpy" if total >= SettingsManager.global_settings.numpy_threshold else "python"
        logger.debug("Auto-selected packing backend for %d pixels: %s", total, backend)

    match backend:
        case "numpy":
            return numpy
        case "python":
            return python
        case _:
            raise ValueError(f"Unknown packing backend: {backend!r}")


def _as_packed(buf: Buffer, total: int) -> memoryview:
    data = memoryview(buf).cast("B")
    expected = total * 3

    if data.nbytes % 3 or data.nbytes != expected:
        logger.debug("Rejecting packed buffer of %d bytes for %d pixels", data.nbytes, total)
        raise InvalidBufferLength(data.nbytes, expected)

    return data


def unpack_channels(buf: Buffer, total: int, backend: BackendChoice | None = None) -> tuple[bytes, bytes, bytes]:
    """
    Split a packed RGB buffer into its red, green and blue planes.

    Args:
        buf: Interleaved ``[R, G, B, R, G, B, ...]`` bytes.
        total: Number of pixels the buffer must contain.
        backend: Packing backend.

    Returns:
        The red, green and blue planes, ``total`` bytes each.

    Raises:
        InvalidBufferLength: If the buffer isn't exactly ``3 * total`` bytes long.
    """
    data = _as_packed(buf, total)

    return get_backend(backend, total).unpack_rgb24(data, total)


def pack_channels(red: bytes, green: bytes, blue: bytes, backend: BackendChoice | None = None) -> bytes:
    """
    Interleave three planes into a packed RGB buffer.

    Raises:
        InvalidBufferLength: If the planes don't all have the same length.
    """
    total = len(red)

    for what, plane in (("green plane", green), ("blue plane", blue)):
        if len(plane) != total:
            raise InvalidBufferLength(len(plane), total, what)

    return get_backend(backend, total).pack_rgb24(red, green, blue, total)


def decode(buf: Buffer, height: int, width: int, backend: BackendChoice | None = None) -> PlanarImage:
    """
    Build a planar image from a packed RGB buffer.

    The buffer is copied, nothing refers to it once this returns.

    Args:
        buf: Interleaved ``[R, G, B, R, G, B, ...]`` bytes in row-major pixel order.
        height: Number of rows.
        width: Number of columns.
        backend: Packing backend. Defaults to the global setting.

    Returns:
        The planar image.

    Raises:
        InvalidBufferLength: If ``len(buf) != 3 * height * width``.
        ValueError: If height or width is negative.
    """
    check_dimensions(height, width)

    total = height * width
    data = _as_packed(buf, total)
    module = get_backend(backend, total)

    logger.debug("Decoding %dx%d packed buffer with %s", width, height, module.__name__)

    red, green, blue = module.unpack_rgb24(data, total)

    return PlanarImage.from_channels(red, green, blue, height, width)


def encode(image: PlanarImage, backend: BackendChoice | None = None) -> bytes:
    """
    Write a planar image into a single packed RGB buffer.

    Args:
        image: Image to encode.
        backend: Packing backend. Defaults to the global setting.

    Returns:
        ``3 * image.total`` bytes in ``[R, G, B, R, G, B, ...]`` order.
    """
    total = image.total

    assert len(image.red) == len(image.green) == len(image.blue) == total

    module = get_backend(backend, total)

    logger.debug("Encoding %dx%d image with %s", image.width, image.height, module.__name__)

    return module.pack_rgb24(image.red, image.green, image.blue, total)


def encode_luma(image: PlanarImage, backend: BackendChoice | None = None) -> bytes:
    """Convert a planar image to an 8-bit luma plane of ``image.total`` bytes."""
    module = get_backend(backend, image.total)

    return module.luma_8bit(image.red, image.green, image.blue, image.total)
