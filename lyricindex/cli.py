"""Command that indexes every file in a folder and prints the index."""

from __future__ import annotations

import argparse
import os
import sys

from lyricindex.index import InvertedIndex

DEFAULT_FOLDER = os.path.join("..", "songs")


def list_files(folder) -> list[str]:
    """Return the paths of the regular files directly inside ``folder``, by name."""
    with os.scandir(folder) as entries:
        names = sorted(entry.name for entry in entries if not entry.is_dir())
    return [os.path.join(folder, name) for name in names]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="lyricindex",
        description="Build and print an inverted index of the files in a folder.",
    )
    parser.add_argument("folder", nargs="?", default=DEFAULT_FOLDER)
    args = parser.parse_args(argv)

    try:
        files = list_files(args.folder)
    except OSError:
        print(f"Failed to open folder: {args.folder}", file=sys.stderr)
        files = []
    else:
        print()

    for path in files:
        print(f"File: {path}")

    index = InvertedIndex()
    for path in files:
        try:
            index.add_document(path)
        except OSError:
            print(f"ERROR: cannot open file: {path}", file=sys.stderr)

    sys.stdout.write(index.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())