"""NumPy-accelerated RGB packing functions."""

from .iterators import B_WEIGHT, G_WEIGHT, R_WEIGHT


def unpack_rgb24(data: memoryview, total: int) -> tuple[bytes, bytes, bytes]:
    """Split interleaved 8-bit RGB into three planes."""
    import numpy as np

    rgb = np.frombuffer(data, dtype=np.uint8).reshape((total, 3))

    return rgb[:, 0].tobytes(), rgb[:, 1].tobytes(), rgb[:, 2].tobytes()


def pack_rgb24(r_data: bytes, g_data: bytes, b_data: bytes, total: int) -> bytes:
    """Interleave three 8-bit planes into packed RGB."""
    import numpy as np

    out = np.empty((total, 3), dtype=np.uint8)
    out[:, 0] = np.frombuffer(r_data, dtype=np.uint8)
    out[:, 1] = np.frombuffer(g_data, dtype=np.uint8)
    out[:, 2] = np.frombuffer(b_data, dtype=np.uint8)

    return out.tobytes()


def luma_8bit(r_data: bytes, g_data: bytes, b_data: bytes, total: int) -> bytes:
    """Convert three 8-bit planes to a single 8-bit luma plane."""
    import numpy as np

    r_norm = np.frombuffer(r_data, dtype=np.uint8) / 255.0
    g_norm = np.frombuffer(g_data, dtype=np.uint8) / 255.0
    b_norm = np.frombuffer(b_data, dtype=np.uint8) / 255.0

    # Same operation order as the scalar path so both round identically
    lum = R_WEIGHT * r_norm + G_WEIGHT * g_norm + B_WEIGHT * b_norm

    out = np.where(lum >= 1.0, 255.0, 255.0 * lum)

    # float -> uint8 cast truncates toward zero
    return out.astype(np.uint8).tobytes()
