"""Planar 8-bit RGB images, packed buffer conversion and lazy luma pipelines."""

from .codec import decode, encode, encode_luma, get_backend, pack_channels, unpack_channels
from .errors import InvalidBufferLength
from .image import PlanarImage
from .iterators import LumaIterator, Pixel, PixelZipIterator, luma
from .settings import Settings, SettingsManager

__all__ = [
    "InvalidBufferLength",
    "LumaIterator",
    "Pixel",
    "PixelZipIterator",
    "PlanarImage",
    "Settings",
    "SettingsManager",
    "decode",
    "encode",
    "encode_luma",
    "get_backend",
    "luma",
    "pack_channels",
    "unpack_channels",
]
