"""Pure Python RGB packing (reference implementation, slow on large images)."""

from .iterators import luma


def unpack_rgb24(data: memoryview, total: int) -> tuple[bytes, bytes, bytes]:
    """Split interleaved 8-bit RGB into three planes."""

    r_data = bytearray(total)
    g_data = bytearray(total)
    b_data = bytearray(total)

    for idx in range(total):
        src_offset = idx * 3
        r_data[idx] = data[src_offset + 0]
        g_data[idx] = data[src_offset + 1]
        b_data[idx] = data[src_offset + 2]

    return bytes(r_data), bytes(g_data), bytes(b_data)


def pack_rgb24(r_data: bytes, g_data: bytes, b_data: bytes, total: int) -> bytes:
    """Interleave three 8-bit planes into packed RGB."""

    out = bytearray(total * 3)

    for idx in range(total):
        dst_offset = idx * 3
        out[dst_offset + 0] = r_data[idx]
        out[dst_offset + 1] = g_data[idx]
        out[dst_offset + 2] = b_data[idx]

    return bytes(out)


def luma_8bit(r_data: bytes, g_data: bytes, b_data: bytes, total: int) -> bytes:
    """Convert three 8-bit planes to a single 8-bit luma plane."""

    out = bytearray(total)

    for idx in range(total):
        out[idx] = luma(r_data[idx], g_data[idx], b_data[idx])

    return bytes(out)
