"""Helpers for comparing files and creating sample input files."""

from __future__ import annotations

import filecmp
import os
import random
import sys
from typing import Callable, Iterator, Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

TEXT_LOW = 31
TEXT_HIGH = 127
_CHUNK = 1 << 16


def _require_nonempty(path: PathLike) -> None:
    if os.path.getsize(path) == 0:
        raise ValueError(f"{os.fspath(path)} is an empty file")


def files_equal(first: PathLike, second: PathLike) -> bool:
    """Return whether two files hold the same bytes.

    Raises ValueError if either file is empty and OSError if one cannot be read.
    """
    _require_nonempty(first)
    _require_nonempty(second)
    return filecmp.cmp(first, second, shallow=False)


def _write_chunks(path: PathLike, count: int, chunk: Callable[[int], bytes]) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    with open(path, "wb") as writer:
        remaining = count
        while remaining:
            size = min(remaining, _CHUNK)
            writer.write(chunk(size))
            remaining -= size


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def create_text_file(path: PathLike, count: int, rng: Optional[random.Random] = None) -> None:
    """Write ``count`` random bytes between 31 and 127 inclusive to ``path``."""
    rng = _rng_or_default(rng)
    _write_chunks(path, count, lambda n: bytes(rng.randint(TEXT_LOW, TEXT_HIGH) for _ in range(n)))


def create_random_file(path: PathLike, count: int, rng: Optional[random.Random] = None) -> None:
    """Write ``count`` random bytes to ``path``."""
    rng = _rng_or_default(rng)
    _write_chunks(path, count, lambda n: bytes(rng.randrange(256) for _ in range(n)))


def create_uniform_file(path: PathLike, count: int, rng: Optional[random.Random] = None) -> None:
    """Write one randomly chosen byte ``count`` times to ``path``."""
    rng = _rng_or_default(rng)
    byte = bytes([rng.randrange(256)])
    _write_chunks(path, count, lambda n: byte * n)


def _chunks(path: PathLike) -> Iterator[bytes]:
    with open(path, "rb") as reader:
        yield from iter(lambda: reader.read(_CHUNK), b"")


def _usage() -> None:
    print("\tParameters:\n <file name> <file name> compare files")


def compare_main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare two files named on the command line and report the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        _usage()
        return 0
    try:
        same = files_equal(args[0], args[1])
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print("Files are similar." if same else "Different files.")
    return 0