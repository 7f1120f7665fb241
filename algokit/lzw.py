"""LZW compression of byte strings and files with 12-bit codes.

Codes 0 to 255 stand for single bytes; new strings are numbered from 256
until the dictionary holds 4096 entries, after which it stops growing.
Codes are packed two into three bytes, most significant bits first. When
the number of codes is odd, the last code's low four bits are written in
the high half of one final byte.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

DICT_SIZE = 4096
CODE_SIZE = 12
EMPTY_PREFIX = -1
FIRST_FREE_CODE = 256

PathLike = Union[str, "os.PathLike[str]"]


class LzwDictionary:
    """Maps a (prefix code, next byte) pair to the code of that string.

    It starts with the 256 single-byte strings, whose prefix is
    ``EMPTY_PREFIX`` and whose code is the byte value itself.
    """

    def __init__(self) -> None:
        self._codes: Dict[Tuple[int, int], int] = {}
        for byte in range(FIRST_FREE_CODE):
            self.add(EMPTY_PREFIX, byte, byte)

    def add(self, prefix: int, current: int, code: int) -> None:
        """Record that ``prefix`` followed by byte ``current`` has ``code``."""
        self._codes[(prefix, current)] = code

    def search(self, prefix: int, current: int) -> Optional[int]:
        """Return the code of ``prefix`` followed by ``current``, or None."""
        return self._codes.get((prefix, current))

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, pair: object) -> bool:
        return pair in self._codes


def _codes_of(data: Iterable[int]) -> Iterator[int]:
    dictionary = LzwDictionary()
    next_code = FIRST_FREE_CODE
    stream = iter(data)
    prefix = next(stream, None)
    if prefix is None:
        return
    for current in stream:
        code = dictionary.search(prefix, current)
        if code is not None:
            prefix = code
            continue
        yield prefix
        if next_code < DICT_SIZE:
            dictionary.add(prefix, current, next_code)
            next_code += 1
        prefix = current
    yield prefix


def _pack(codes: Iterable[int]) -> bytes:
    out = bytearray()
    pending: Optional[int] = None
    for code in codes:
        if pending is None:
            out.append(code >> (CODE_SIZE - 8))
            pending = code & 0x0F
        else:
            out.append((pending << (CODE_SIZE - 8)) | (code >> 8))
            out.append(code & 0xFF)
            pending = None
    if pending is not None:
        out.append(pending << (CODE_SIZE - 8))
    return bytes(out)


def _unpack(data: bytes) -> Iterator[int]:
    pending: Optional[int] = None
    stream = iter(data)
    for byte in stream:
        if pending is not None:
            yield (pending << 8) | byte
            pending = None
            continue
        low = next(stream, None)
        if low is None:
            raise ValueError("compressed data ends in the middle of a code")
        yield (byte << (CODE_SIZE - 8)) | (low >> (CODE_SIZE - 8))
        pending = low & 0x0F


def encode(data: bytes) -> bytes:
    """Compress ``data``; empty data gives empty output."""
    return _pack(_codes_of(data))


def decode(data: bytes) -> bytes:
    """Restore the bytes that ``encode`` compressed; raise ValueError if malformed."""
    codes = _unpack(data)
    first = next(codes, None)
    if first is None:
        return b""
    if first >= FIRST_FREE_CODE:
        raise ValueError(f"first code must stand for a single byte: {first}")

    table: List[bytes] = [bytes([byte]) for byte in range(FIRST_FREE_CODE)]
    out = bytearray(table[first])
    prefix = first
    for current in codes:
        if current < len(table):
            entry = table[current]
        elif current == len(table):
            entry = table[prefix] + table[prefix][:1]
        else:
            raise ValueError(f"code {current} is not yet defined")
        out += entry
        if len(table) < DICT_SIZE:
            table.append(table[prefix] + entry[:1])
        prefix = current
    return bytes(out)


def _read_nonempty(path: PathLike) -> bytes:
    with open(path, "rb") as reader:
        data = reader.read()
    if not data:
        raise ValueError(f"{os.fspath(path)} is an empty file")
    return data


def compress_file(source: PathLike, target: PathLike) -> int:
    """Compress the file ``source`` into ``target``; return the bytes written.

    Raises ValueError if ``source`` is empty.
    """
    encoded = encode(_read_nonempty(source))
    with open(target, "wb") as writer:
        writer.write(encoded)
    return len(encoded)


def decompress_file(source: PathLike, target: PathLike) -> int:
    """Decompress the file ``source`` into ``target``; return the bytes written.

    Raises ValueError if ``source`` is empty or malformed.
    """
    decoded = decode(_read_nonempty(source))
    with open(target, "wb") as writer:
        writer.write(decoded)
    return len(decoded)