"""Count the words in a piece of text or in a file."""

from __future__ import annotations

import sys
from pathlib import Path


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(text.split())


def main(argv: list[str] | None = None) -> int:
    """Print the number of words in the file named by the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: wordcount <file>")
        return 2

    try:
        contents = Path(args[0]).read_bytes()
    except OSError as err:
        print("There was an error opening the file:", err)
        return 1

    count = count_words(contents.decode("utf-8", errors="replace"))
    print(f"There are {count} words in your text. ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())