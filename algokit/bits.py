"""Copying runs of bits between byte buffers."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def bitcpy(
    dst: Union[bytearray, memoryview],
    dst_offset: int,
    src: BytesLike,
    src_offset: int,
    bit_count: int,
) -> None:
    """Copy ``bit_count`` bits from ``src`` into ``dst`` in place.

    Bit ``n`` of a buffer is bit ``n % 8`` (counting from the least
    significant) of byte ``n // 8``. Bits of ``dst`` outside the copied run
    are left unchanged. Raises ValueError if an offset or count is negative
    or a run extends past the end of its buffer.
    """
    if min(dst_offset, src_offset, bit_count) < 0:
        raise ValueError("offsets and bit count must not be negative")
    if src_offset + bit_count > 8 * len(src):
        raise ValueError("source run extends past the end of the source buffer")
    if dst_offset + bit_count > 8 * len(dst):
        raise ValueError("destination run extends past the end of the destination buffer")

    sources = range(src_offset, src_offset + bit_count)
    targets = range(dst_offset, dst_offset + bit_count)
    for source_bit, target_bit in zip(sources, targets):
        mask = 1 << (target_bit & 7)
        if (src[source_bit >> 3] >> (source_bit & 7)) & 1:
            dst[target_bit >> 3] |= mask
        else:
            dst[target_bit >> 3] &= ~mask & 0xFF