# algokit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies:

- `algokit.stack.Stack`: a last-in, first-out stack. It reports a capacity
  that doubles when it fills and halves when it falls below a quarter full.
  It can also be sorted in place, with the smallest value on top.
- `algokit.avl.AVLTree`: a self-balancing AVL tree that holds one item per
  key and has a consistency check.
- `algokit.bits.bitcpy`: copies a run of bits between byte buffers at any
  bit offsets.
- `algokit.text.collapse_whitespace`: replaces each run of whitespace with
  the run's last character.
- `algokit.number_systems.convert`: converts numerals, fractional part
  included, between bases 2 and 36.
- `algokit.rational.Rational`: exact fractions kept in lowest terms with a
  positive denominator.
- `algokit.huffman` and `algokit.lzw`: two byte-oriented compressors. Each has
  `encode`/`decode` for bytes and `compress_file`/`decompress_file` for files.
- `algokit.filetools`: compares files and writes sample input files.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

A tree keeps one item per key. Inserting an item with an existing key replaces
the stored item and returns the old one:

```python
from algokit.avl import AVLTree

tree = AVLTree(key=lambda entry: entry[0])
tree.insert(("a", 3))
tree.insert(("b", 7))
old = tree.insert(("a", 8))   # returns ("a", 3)
assert len(tree) == 2
assert tree.find(("a", 0)) == ("a", 8)
assert tree.check()
```

A stack:

```python
from algokit.stack import Stack

stack = Stack()
stack.push(1)
stack.push(2)
assert stack.pop() == 2
assert stack.capacity() == 100
```

Text, numbers and bits:

```python
from algokit.text import collapse_whitespace
from algokit.number_systems import convert
from algokit.bits import bitcpy

collapse_whitespace("a           b")   # "a b"
convert("1.1", 2, 10)                 # "1.5"
convert("HELLOWORLD", 36, 10)         # "1767707668033969"

dst = bytearray([0x07, 0x00])
bitcpy(dst, 2, bytes([0x66, 0xFD]), 8, 7)
assert dst == bytearray([0xF7, 0x01])
```

Rational numbers:

```python
from algokit.rational import Rational

total = Rational(3, 2) + Rational(2, 3)
assert total == Rational(13, 6)
print(total)          # 13/6
Rational(11, 4).to_int()   # 3
```

Compression in memory and on disk:

```python
from algokit import huffman, lzw

payload = b"abracadabra" * 100
assert huffman.decode(huffman.encode(payload)) == payload
assert lzw.decode(lzw.encode(payload)) == payload

huffman.compress_file("input.txt", "input.huf")
huffman.decompress_file("input.huf", "restored.txt")
```

Both `compress_file` and `decompress_file` raise `ValueError` for an empty
input file.

## Command-line tool

To check that a round trip reproduced the original:

```
algokit-filecmp input.txt restored.txt
```

It prints `Files are similar.` or `Different files.`. Run it without two file
names to see the usage text.

## What it does not do

- There is no command for compressing or decompressing files. Call the
  `compress_file` and `decompress_file` functions of `algokit.huffman` or
  `algokit.lzw` from Python instead.
- There are no sorting routines and no unbalanced binary search tree. For
  ordered storage, use `AVLTree`.