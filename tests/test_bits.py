import pytest

from algokit.bits import bitcpy


@pytest.mark.parametrize(
    "dst, dst_offset, src, src_offset, count, expected",
    [
        ([0x07, 0x00], 2, [0x66, 0xFD], 8, 7, [0xF7, 0x01]),
        ([0xA8, 0x54, 0xE1], 7, [0xEF, 0xE8, 0x6C], 1, 11, [0xA8, 0x3B, 0xE2]),
        ([0xF2, 0xFD, 0xAD], 0, [0x01, 0xFF, 0x00], 0, 24, [0x01, 0xFF, 0x00]),
        ([0xAB], 0, [0x0B, 0x77, 0x1F], 7, 2, [0xAA]),
        ([0x11, 0x02], 3, [0xE8, 0xF1, 0x00], 7, 11, [0x19, 0x0F]),
        (
            [0x13, 0x12, 0x11, 0x10],
            0,
            [0xCD, 0xBF, 0xBE, 0xBD, 0xBC, 0xAF, 0xAE, 0xAD, 0xAC, 0xAB],
            24,
            32,
            [0xBD, 0xBC, 0xAF, 0xAE],
        ),
    ],
)
def test_source_cases(dst, dst_offset, src, src_offset, count, expected):
    buffer = bytearray(dst)
    bitcpy(buffer, dst_offset, bytes(src), src_offset, count)
    assert buffer == bytearray(expected)


def test_zero_bits_changes_nothing():
    buffer = bytearray([0x5A, 0xA5])
    bitcpy(buffer, 3, b"\xff", 0, 0)
    assert buffer == bytearray([0x5A, 0xA5])


def test_copy_there_and_back_restores_bits():
    original = bytes([0x3C, 0x81, 0xE7])
    middle = bytearray(4)
    bitcpy(middle, 5, original, 2, 20)
    restored = bytearray(original)
    bitcpy(restored, 2, bytes(middle), 5, 20)
    assert restored == bytearray(original)


def test_works_on_memoryview():
    buffer = bytearray([0x00, 0x00])
    bitcpy(memoryview(buffer), 0, b"\xfd", 0, 8)
    assert buffer == bytearray([0xFD, 0x00])


@pytest.mark.parametrize(
    "dst_offset, src_offset, count",
    [(0, 0, 17), (10, 0, 8), (-1, 0, 1), (0, -1, 1), (0, 0, -1)],
)
def test_out_of_range_is_rejected(dst_offset, src_offset, count):
    buffer = bytearray(2)
    with pytest.raises(ValueError):
        bitcpy(buffer, dst_offset, b"\x01\x02", src_offset, count)