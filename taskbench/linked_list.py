"""Doubly linked list whose nodes may also point at any other node.

The binary form is little-endian: a ``uint32`` node count, then each node's
text as a ``uint32`` byte length followed by its UTF-8 bytes, then for every
node an ``int32`` position of the node its ``rand`` link points at, or ``-1``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

_COUNT = struct.Struct("<I")
_INDEX = struct.Struct("<i")
_NO_LINK = -1


@dataclass(eq=False)
class ListNode:
    """One element of a :class:`LinkedList`."""

    data: str
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)
    rand: ListNode | None = field(default=None, repr=False)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ValueError("truncated list data")
    return chunk


def _read_value(stream: BinaryIO, layout: struct.Struct) -> int:
    (value,) = layout.unpack(_read_exact(stream, layout.size))
    return value


class LinkedList:
    """A doubly linked list of strings with an extra arbitrary link per node."""

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._count = 0

    def __iter__(self) -> Iterator[ListNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._count

    def add_tail(self, data: str) -> ListNode:
        """Append a node holding ``data`` and return it."""
        node = ListNode(data, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._count += 1
        return node

    def link_next_as_random(self) -> None:
        """Point every node's ``rand`` link at the node that follows it."""
        for node in self:
            node.rand = node.next

    def describe(self) -> str:
        """Render each node's text and, where set, the text its ``rand`` link reaches."""
        parts: list[str] = []
        for node in self:
            parts.append(f" data = {node.data}")
            if node.rand is not None:
                parts.append(f" rand data = {node.rand.data}\n")
        return "".join(parts)

    def serialize(self, stream: BinaryIO) -> None:
        """Write the list, including its ``rand`` links, to a binary stream."""
        nodes = list(self)
        positions = {id(node): index for index, node in enumerate(nodes)}
        stream.write(_COUNT.pack(len(nodes)))
        for node in nodes:
            encoded = node.data.encode("utf-8")
            stream.write(_COUNT.pack(len(encoded)))
            stream.write(encoded)
        for node in nodes:
            if node.rand is None:
                index = _NO_LINK
            else:
                try:
                    index = positions[id(node.rand)]
                except KeyError:
                    raise ValueError("rand link points outside the list") from None
            stream.write(_INDEX.pack(index))

    def deserialize(self, stream: BinaryIO) -> None:
        """Fill this empty list from data written by :meth:`serialize`.

        An empty stream leaves the list empty.
        """
        if self._count:
            raise ValueError("list is not empty")
        header = stream.read(_COUNT.size)
        if not header:
            return
        if len(header) != _COUNT.size:
            raise ValueError("truncated list data")
        (count,) = _COUNT.unpack(header)

        texts = [
            _read_exact(stream, _read_value(stream, _COUNT)).decode("utf-8")
            for _ in range(count)
        ]
        links = [_read_value(stream, _INDEX) for _ in range(count)]
        for index in links:
            if index != _NO_LINK and not 0 <= index < count:
                raise ValueError(f"rand index {index} out of range")

        nodes = [self.add_tail(text) for text in texts]
        for node, index in zip(nodes, links):
            if index != _NO_LINK:
                node.rand = nodes[index]