"""Huffman coding of files.

An encoded file holds the code tree (pre-order, one bit per node, leaves
followed by their symbol byte), zero padded to a whole byte, then the code of
every input byte written as the ASCII characters ``0`` and ``1``, ending with
the code of the end marker.
"""

from __future__ import annotations

import heapq
import io
import itertools
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Mapping

from taskbench.bits import BitReader, BitWriter

PSEUDO_EOF = 256


@dataclass
class Node:
    """A code tree node; internal nodes carry no symbol."""

    data: int | None
    freq: int
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_frequency_table(data: bytes) -> Counter:
    """Count how often each byte value occurs."""
    return Counter(data)


def build_tree(frequencies: Mapping[int, int]) -> Node:
    """Build the code tree, adding the end marker with weight one."""
    order = itertools.count()
    heap = [(freq, next(order), Node(symbol, freq)) for symbol, freq in sorted(frequencies.items())]
    heap.append((1, next(order), Node(PSEUDO_EOF, 1)))
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), Node(None, total, left, right)))
    return heap[0][2]


def code_table(root: Node) -> dict[int, str]:
    """Map each leaf symbol to its code as a string of '0' and '1'."""
    codes: dict[int, str] = {}
    pending = [(root, "")]
    while pending:
        node, prefix = pending.pop()
        if node.is_leaf():
            codes[node.data] = prefix
            continue
        if node.right is not None:
            pending.append((node.right, prefix + "1"))
        if node.left is not None:
            pending.append((node.left, prefix + "0"))
    return codes


def iter_symbols(root: Node) -> Iterator[int]:
    """Yield the leaf symbols in pre-order."""
    pending = [root]
    while pending:
        node = pending.pop()
        if node.is_leaf():
            yield node.data
            continue
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def encode_tree(root: Node, writer: BitWriter) -> None:
    """Write the tree in pre-order: 1 and the symbol byte for a leaf, 0 otherwise."""
    if root.is_leaf():
        writer.write_bit(1)
        writer.write_byte(root.data & 0xFF)
    else:
        writer.write_bit(0)
        encode_tree(root.left, writer)
        encode_tree(root.right, writer)


def decode_tree(reader: BitReader) -> Node:
    """Read a tree written by :func:`encode_tree`."""
    if reader.read_bit() == 1:
        return Node(reader.read_byte(), 0)
    left = decode_tree(reader)
    right = decode_tree(reader)
    return Node(None, 0, left, right)


def _encode_bytes(data: bytes) -> bytes:
    root = build_tree(build_frequency_table(data))
    codes = code_table(root)
    buffer = io.BytesIO()
    writer = BitWriter(buffer)
    encode_tree(root, writer)
    writer.flush()
    body = "".join(codes[byte] for byte in data) + codes[PSEUDO_EOF]
    buffer.write(body.encode("ascii"))
    return buffer.getvalue()


def _decode_stream(stream: BinaryIO) -> bytes:
    root = decode_tree(BitReader(stream))
    symbols = bytearray()
    node = root
    for char in stream.read():
        node = node.left if char == ord("0") else node.right
        if node is None:
            raise ValueError("encoded data does not match the code tree")
        if node.is_leaf():
            symbols.append(node.data)
            node = root
    # The stream always ends with the end marker's code.
    if symbols:
        del symbols[-1]
    return bytes(symbols)


class HuffmanEncoder:
    """Encodes a file into the Huffman file format."""

    def encode(self, file_in: str | Path, file_out: str | Path) -> None:
        data = Path(file_in).read_bytes()
        Path(file_out).write_bytes(_encode_bytes(data))


class HuffmanDecoder:
    """Decodes a file written by :class:`HuffmanEncoder`."""

    def decode(self, file_in: str | Path, file_out: str | Path) -> None:
        with open(file_in, "rb") as stream:
            data = _decode_stream(stream)
        Path(file_out).write_bytes(data)


class HuffmanCode:
    """Encoding and decoding of files in one object."""

    def __init__(self) -> None:
        self._encoder = HuffmanEncoder()
        self._decoder = HuffmanDecoder()

    def encode(self, file_in: str | Path, file_out: str | Path) -> None:
        self._encoder.encode(file_in, file_out)

    def decode(self, file_in: str | Path, file_out: str | Path) -> None:
        self._decoder.decode(file_in, file_out)