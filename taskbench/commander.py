"""Line-oriented command interpreter for the Huffman file codec."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from taskbench.huffman import HuffmanCode

_COMMAND_SIZE = 3


def split_string(text: str, delim: str) -> list[str]:
    """Split on every occurrence of ``delim``, keeping empty fields."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return text.split(delim)


class Commander:
    """Runs ``encode IN OUT`` and ``decode IN OUT`` commands read from a stream."""

    def __init__(self, codec: HuffmanCode | None = None) -> None:
        codec = codec if codec is not None else HuffmanCode()
        self._commands: dict[str, Callable[[str, str], None]] = {
            "encode": codec.encode,
            "decode": codec.decode,
        }

    def read_stream(self, stream: TextIO) -> None:
        """Execute commands line by line; stop at the first line with too few words."""
        for line in stream:
            words = split_string(line.rstrip("\n"), " ")
            if len(words) < _COMMAND_SIZE:
                break
            handler = self._commands.get(words[0])
            if handler is None:
                print("wrong command", file=sys.stderr)
                continue
            handler(words[1], words[2])


def main(argv: list[str] | None = None) -> int:
    """Read commands from standard input."""
    Commander().read_stream(sys.stdin)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())