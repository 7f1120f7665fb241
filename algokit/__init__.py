"""Stack, AVL tree, rationals, base conversion, bit and text helpers, and Huffman and LZW compressors."""

__version__ = "0.1.0"