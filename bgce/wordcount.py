"""Count lines, words, characters and bytes of a file or of standard input."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence

MAX_LINE_LENGTH = 64 * 1024

USAGE = """Usage: ccwc [options] [filename]
Options:
  -c    Print byte count
  -l    Print line count
  -w    Print word count
  -m    Print character count (locale-dependent)

If no options are provided, the default behavior will print:
  line count, word count, and byte count."""

_WORD = re.compile(
    "[^\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _lines(data: bytes | str) -> Iterator[bytes]:
    """Yield the lines of ``data`` without their line endings."""
    pieces = _as_bytes(data).split(b"\n")
    if pieces[-1] == b"":
        pieces.pop()
    for piece in pieces:
        if len(piece) >= MAX_LINE_LENGTH:
            raise ValueError("token too long")
        yield piece[:-1] if piece.endswith(b"\r") else piece


def _text_lines(data: bytes | str) -> Iterator[str]:
    for line in _lines(data):
        yield line.decode("utf-8", errors="surrogateescape")


def count_bytes(data: bytes | str) -> int:
    """Return the number of bytes in ``data``."""
    return len(_as_bytes(data))


def count_lines(data: bytes | str) -> int:
    """Return the number of lines; a final unterminated line counts too."""
    return sum(1 for _ in _lines(data))


def count_words(data: bytes | str) -> int:
    """Return the number of whitespace-separated words."""
    return sum(len(_WORD.findall(line)) for line in _text_lines(data))


def count_chars(data: bytes | str) -> int:
    """Return the number of characters, not counting line endings."""
    return sum(len(line) for line in _text_lines(data))


def _render(counts: Sequence[int], filename: str) -> str:
    text = " ".join(f"{count:8d}" for count in counts)
    return f"{text} {filename}" if filename else text


_COUNTERS = {
    "-c": count_bytes,
    "-l": count_lines,
    "-w": count_words,
    "-m": count_chars,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the counter on the given arguments and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE)
        return 0

    option = ""
    filename = ""
    if len(args) == 1:
        if args[0].startswith("-"):
            option = args[0]
        else:
            filename = args[0]
    else:
        option, filename = args[0], args[1]

    if filename:
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            print(f"Error: Unable to open file '{filename}'. {exc}")
            return 0
    else:
        data = sys.stdin.buffer.read()

    try:
        counter = _COUNTERS.get(option)
        if counter is None:
            counts = [count_lines(data), count_words(data), count_bytes(data)]
        else:
            counts = [counter(data)]
    except ValueError as exc:
        print("Error:", exc)
        return 0

    print(_render(counts, filename))
    return 0


if __name__ == "__main__":
    sys.exit(main())