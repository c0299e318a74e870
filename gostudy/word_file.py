"""Generate a large file of random words and split it into fixed-size pieces."""

from __future__ import annotations

import argparse
import random
import string
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import IO

LINE_COUNT = 200_000
PIECE_LIMIT = 1000
FILE_STORE = "file-store"
INPUT_NAME = "big_input_file.txt"
PIECE_PREFIX = "input_piece_"


def random_line(rng: random.Random) -> str:
    """Return up to nine random lowercase words, each followed by a space.

    Every word is three to nine letters long.
    """
    words = []
    for _ in range(rng.randrange(10)):
        letters = 0
        while letters < 3:
            letters = rng.randrange(10)
        words.append(
            "".join(string.ascii_lowercase[rng.randrange(26)] for _ in range(letters))
        )
    return "".join(word + " " for word in words)


def generate_file(
    path: str | Path, lines: int = LINE_COUNT, rng: random.Random | None = None
) -> None:
    """Write ``lines`` random lines to ``path``."""
    rng = rng if rng is not None else random.Random()
    with open(path, "w", encoding="ascii", newline="\n") as out:
        for _ in range(lines):
            out.write(random_line(rng) + "\n")


def _read_lines(handle: IO[str]) -> Iterator[str]:
    for raw in handle:
        line = raw[:-1] if raw.endswith("\n") else raw
        yield line[:-1] if line.endswith("\r") else line


def split_file(
    path: str | Path, out_dir: str | Path, limit: int = PIECE_LIMIT
) -> list[Path]:
    """Copy ``path`` into pieces of at most ``limit`` lines in ``out_dir``.

    Pieces are named ``input_piece_1``, ``input_piece_2``, ... A piece is
    opened before lines are read into it, so the last piece may be empty.
    Returns the paths of all pieces in order.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    out_dir = Path(out_dir)
    pieces: list[Path] = []
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as source:
        lines = _read_lines(source)
        piece = 1
        while True:
            target = out_dir / f"{PIECE_PREFIX}{piece}"
            pieces.append(target)
            with open(
                target, "w", encoding="utf-8", errors="surrogateescape", newline=""
            ) as out:
                for _ in range(limit):
                    line = next(lines, None)
                    if line is None:
                        return pieces
                    out.write(line + "\n")
            piece += 1


def main(argv: list[str] | None = None) -> int:
    """Generate the input file or split it into pieces."""
    parser = argparse.ArgumentParser(description="Random word files.")
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="write the random input file")
    generate.add_argument("--dir", type=Path, default=Path(FILE_STORE))
    generate.add_argument("--lines", type=int, default=LINE_COUNT)
    generate.add_argument("--seed", type=int, default=None)

    split = commands.add_parser("split", help="split the input file into pieces")
    split.add_argument("--dir", type=Path, default=Path(FILE_STORE))
    split.add_argument("--limit", type=int, default=PIECE_LIMIT)

    args = parser.parse_args(argv)
    args.dir.mkdir(parents=True, exist_ok=True)
    source = args.dir / INPUT_NAME

    if args.command == "generate":
        generate_file(source, args.lines, random.Random(args.seed))
        return 0

    try:
        pieces = split_file(source, args.dir, args.limit)
    except OSError as err:
        print(f"Read inputfile error: {err}", file=sys.stderr)
        return 1
    for piece in pieces:
        print(piece)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())