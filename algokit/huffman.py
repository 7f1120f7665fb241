"""Huffman coding of byte strings and files.

The compressed form is a code table followed by a bit stream:

* the number of table entries, a 32-bit little-endian unsigned integer;
* for each byte value that occurs, in ascending order, the byte itself
  followed by its count as a 32-bit little-endian unsigned integer;
* the length of the original data, a 64-bit little-endian unsigned integer;
* the codes of the data, most significant bit first, padded with zero bits
  to a whole byte; at least one byte is always written.
"""

from __future__ import annotations

import os
import struct
from collections import Counter
from dataclasses import dataclass
from operator import attrgetter
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from algokit.stack import Stack

INTERNAL_SYMBOL = ord("*")

_COUNT = struct.Struct("<I")
_ENTRY = struct.Struct("<BI")
_LENGTH = struct.Struct("<Q")
_STACK_CAPACITY = 100000
_BY_FREQUENCY = attrgetter("freq")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a byte value."""

    symbol: int
    freq: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(frequencies: Mapping[int, int]) -> Optional[HuffmanNode]:
    """Build a Huffman tree from byte counts; None if every count is zero.

    The two least frequent nodes are merged repeatedly, the less frequent
    one becoming the right child. Among equal counts, higher byte values
    and newer merged nodes are taken first.
    """
    stack: Stack[HuffmanNode] = Stack(initial_capacity=_STACK_CAPACITY, shrink=False)
    for symbol, freq in sorted(frequencies.items()):
        if not 0 <= symbol <= 255:
            raise ValueError(f"symbol must be a byte value: {symbol}")
        if freq < 0:
            raise ValueError(f"frequency must not be negative: {freq}")
        if freq:
            stack.push(HuffmanNode(symbol, freq))
    if not len(stack):
        return None

    stack.sort(_BY_FREQUENCY)
    while len(stack) > 1:
        right = stack.pop()
        left = stack.pop()
        stack.push(HuffmanNode(INTERNAL_SYMBOL, left.freq + right.freq, left, right))
        stack.sort(_BY_FREQUENCY)
    return stack.pop()


def node_height(node: Optional[HuffmanNode]) -> int:
    """Return the length of the longest path from ``node`` down to a leaf."""
    if node is None or node.is_leaf:
        return 0
    return max(node_height(node.left), node_height(node.right)) + 1


def code_table(root: Optional[HuffmanNode]) -> Dict[int, str]:
    """Map each leaf's byte value to its code, a string of '0' and '1'."""
    table: Dict[int, str] = {}
    pending: List[Tuple[HuffmanNode, str]] = [(root, "")] if root is not None else []
    while pending:
        node, code = pending.pop()
        if node.left is not None:
            pending.append((node.left, code + "0"))
        if node.right is not None:
            pending.append((node.right, code + "1"))
        if node.left is None or node.right is None:
            table[node.symbol] = code
    return table


def encode(data: bytes) -> bytes:
    """Compress ``data``; raise ValueError if it is empty."""
    if not data:
        raise ValueError("nothing to compress: data is empty")
    frequencies = Counter(data)
    codes = code_table(build_tree(frequencies))

    out = bytearray(_COUNT.pack(len(frequencies)))
    for symbol in sorted(frequencies):
        out += _ENTRY.pack(symbol, frequencies[symbol])
    out += _LENGTH.pack(len(data))

    bits = "".join(map(codes.__getitem__, data))
    size = max(1, -(-len(bits) // 8))
    out += int(bits.ljust(size * 8, "0"), 2).to_bytes(size, "big")
    return bytes(out)


def _unpack(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    try:
        return layout.unpack_from(data, offset)
    except struct.error:
        raise ValueError("compressed data has a truncated header") from None


def _bits(payload: bytes) -> Iterator[int]:
    for byte in payload:
        for shift in range(7, -1, -1):
            yield (byte >> shift) & 1


def decode(data: bytes) -> bytes:
    """Restore the bytes that ``encode`` compressed; raise ValueError if malformed."""
    (count,) = _unpack(_COUNT, data, 0)
    offset = _COUNT.size
    frequencies: Dict[int, int] = {}
    for _ in range(count):
        symbol, freq = _unpack(_ENTRY, data, offset)
        frequencies[symbol] = freq
        offset += _ENTRY.size
    (length,) = _unpack(_LENGTH, data, offset)
    offset += _LENGTH.size

    root = build_tree(frequencies)
    if root is None:
        raise ValueError("compressed data has an empty code table")
    if length == 0:
        return b""
    if root.is_leaf:
        return bytes([root.symbol]) * length

    out = bytearray()
    node = root
    for bit in _bits(data[offset:]):
        node = node.right if bit else node.left
        if node.is_leaf:
            out.append(node.symbol)
            if len(out) == length:
                return bytes(out)
            node = root
    raise ValueError("compressed data ends too early")


def compress_file(source: PathLike, target: PathLike) -> int:
    """Compress the file ``source`` into ``target``; return the bytes written.

    Raises ValueError if ``source`` is empty.
    """
    with open(source, "rb") as reader:
        data = reader.read()
    if not data:
        raise ValueError(f"{os.fspath(source)} is an empty file")
    encoded = encode(data)
    with open(target, "wb") as writer:
        writer.write(encoded)
    return len(encoded)


def decompress_file(source: PathLike, target: PathLike) -> int:
    """Decompress the file ``source`` into ``target``; return the bytes written.

    Raises ValueError if ``source`` is empty or malformed.
    """
    with open(source, "rb") as reader:
        data = reader.read()
    if not data:
        raise ValueError(f"{os.fspath(source)} is an empty file")
    decoded = decode(data)
    with open(target, "wb") as writer:
        writer.write(decoded)
    return len(decoded)