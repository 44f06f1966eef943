"""Command-line entry point: assemble each SIC/XE file given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .assembler import Assembler


def main(argv: Sequence[str] | None = None) -> int:
    """Assemble every file named in *argv*; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: essy <file1.sic> <file2.sic> ...")
        return 1

    for filename in args:
        print(f"Assembling file: {filename}")
        assembler = Assembler(filename)
        try:
            assembler.assemble()
        except OSError as exc:
            print(f"Error: Could not open file! {filename} ({exc.strerror})")
            continue
        except ValueError as exc:
            print(f"Error: {filename}: {exc}", file=sys.stderr)
            return 1

        print("-- INFO PRINTED TO SYMTAB --")
        for label in assembler.symbols:
            print(f"{label} {assembler.symbols.address(label):X}")

    print("Process complete, all files have been assembled!")
    return 0


if __name__ == "__main__":
    sys.exit(main())