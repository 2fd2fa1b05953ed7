import random
from collections.abc import Iterator
from operator import length_hint

import pytest
from pytest_mock import MockerFixture

from planarrgb import LumaIterator, Pixel, PixelZipIterator, PlanarImage, luma


@pytest.mark.parametrize(
    ("pixel", "expected"),
    [
        ((255, 255, 255), 255),
        ((0, 0, 0), 0),
        ((255, 0, 0), 54),
        ((0, 255, 0), 182),
        ((0, 0, 255), 18),
        ((10, 20, 30), 18),
        ((40, 50, 60), 48),
    ],
)
def test_luma(pixel: Pixel, expected: int) -> None:
    assert luma(*pixel) == expected


def test_zip_yields_every_pixel_in_order() -> None:
    packed = random.Random(7).randbytes(6 * 5 * 3)
    img = PlanarImage.from_packed_buffer(packed, 6, 5)

    pixels = list(PixelZipIterator(img))

    assert len(pixels) == img.total
    assert pixels == [(img.red[i], img.green[i], img.blue[i]) for i in range(img.total)]


def test_zip_length_hint() -> None:
    img = PlanarImage.from_packed_buffer(bytes(12), 2, 2)
    it = img.pixels()

    assert length_hint(it) == 4
    next(it)
    assert length_hint(it) == 3

    assert len(list(it)) == 3
    assert length_hint(it) == 0

    with pytest.raises(StopIteration):
        next(it)


def test_zip_is_restartable_by_recreation() -> None:
    img = PlanarImage.from_packed_buffer(bytes([1, 2, 3, 4, 5, 6]), 1, 2)

    assert list(img.pixels()) == list(img.pixels()) == [(1, 2, 3), (4, 5, 6)]


def test_end_to_end_luma() -> None:
    img = PlanarImage.from_packed_buffer(bytes([10, 20, 30, 40, 50, 60]), 1, 2)

    out = bytes(LumaIterator(img.pixels()))

    assert out == bytes([luma(10, 20, 30), luma(40, 50, 60)])
    assert len(out) == 2


def test_luma_forwards_length_hint() -> None:
    img = PlanarImage.from_packed_buffer(bytes(30), 2, 5)

    assert length_hint(LumaIterator(img.pixels())) == 10
    assert length_hint(LumaIterator([(0, 0, 0)] * 3)) == 3


def test_luma_accepts_any_triple_source() -> None:
    triples = [(255, 0, 0), (0, 0, 0)]

    assert list(LumaIterator(triples)) == [54, 0]
    assert list(LumaIterator(iter(triples))) == [54, 0]
    assert list(LumaIterator(t for t in triples)) == [54, 0]
    assert list(LumaIterator([])) == []


def test_luma_is_lazy(mocker: MockerFixture) -> None:
    consumed = mocker.stub()

    def source() -> Iterator[Pixel]:
        for value in range(3):
            consumed(value)
            yield value, value, value

    it = LumaIterator(source())
    consumed.assert_not_called()

    next(it)
    consumed.assert_called_once_with(0)

    next(it)
    assert consumed.call_count == 2


def test_luma_matches_vectorised_backend() -> None:
    packed = random.Random(42).randbytes(128 * 128 * 3)
    img = PlanarImage.from_packed_buffer(packed, 128, 128)

    assert bytes(LumaIterator(img.pixels())) == img.to_luma_buffer("numpy") == img.to_luma_buffer("python")
