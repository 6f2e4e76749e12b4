"""A minimal checker that accepts only an empty-object shape of braces."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def tokenize(text: str) -> list[str]:
    """Return the curly braces found in ``text``, in order."""
    return [char for char in text.strip() if char in "{}"]


def parse(tokens: Sequence[str]) -> bool:
    """Accept exactly one opening brace followed by one closing brace."""
    return list(tokens) == ["{", "}"]


def main(argv: Sequence[str] | None = None) -> int:
    """Check the file named by the first argument and report the verdict."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: JSON Parsing file!")
        return 1
    try:
        with open(args[0], "rb") as handle:
            text = handle.read().decode("utf-8", errors="replace")
    except OSError:
        text = ""
    if parse(tokenize(text)):
        print("Valid JSON")
        return 0
    print("Invalid JSON")
    return 1


if __name__ == "__main__":
    sys.exit(main())