#!/usr/bin/env python3
"""
Split text while keeping the delimiters.

Shows both attachment modes:
- split_inclusive keeps each newline at the end of its line
- split_inclusive_left keeps each list marker at the start of its item

Usage:
    python examples/split_lines.py
"""

from resplit import RegexSplitter, SplitConfig, iter_pieces, split_inclusive_left


def main() -> None:
    text = "This is just\na set of lines\r\nwith different newlines."
    newlines = RegexSplitter(r"\r?\n")
    for line in newlines.split_inclusive(text):
        print(repr(line))

    print()
    fruits = "List of fruits:\n-apple\n-pear\n-banana"
    for item in split_inclusive_left(r"(?m)^-", fruits):
        print(repr(item))

    print()
    cfg = SplitConfig(mode="delimiter_start")
    for piece in iter_pieces(r"(?m)^-", fruits, config=cfg):
        print(f"{piece.start:3d}..{piece.end:<3d} {piece.text!r}")


if __name__ == "__main__":
    main()
