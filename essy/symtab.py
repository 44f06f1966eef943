"""Symbol table mapping labels to addresses."""

from __future__ import annotations

import os
from collections.abc import Iterator


class DuplicateSymbolError(ValueError):
    """Raised when a label is defined more than once."""

    def __init__(self, label: str) -> None:
        super().__init__(f"This label already exist: {label}")
        self.label = label


class SymbolTable:
    """Labels and their addresses, kept in label order."""

    def __init__(self) -> None:
        self._table: dict[str, int] = {}

    def insert(self, label: str, address: int) -> None:
        """Define *label* at *address*.

        The first definition wins; a redefinition raises DuplicateSymbolError
        and leaves the table unchanged.
        """
        if label in self._table:
            raise DuplicateSymbolError(label)
        self._table[label] = address

    def address(self, label: str) -> int:
        """Return the address of *label*; raise KeyError if undefined."""
        try:
            return self._table[label]
        except KeyError:
            raise KeyError(f"Label not found in symbol table: {label}") from None

    def __contains__(self, label: object) -> bool:
        return label in self._table

    def __iter__(self) -> Iterator[str]:
        """Iterate over labels in sorted order."""
        return iter(sorted(self._table))

    def __len__(self) -> int:
        return len(self._table)

    def lines(self) -> Iterator[str]:
        """Yield 'LABEL ADDR' lines, addresses in upper-case hex of at least 4 digits."""
        for label in self:
            yield f"{label} {self._table[label]:04X}"

    def write(self, path: str | os.PathLike[str]) -> None:
        """Write the table to *path*, one symbol per line."""
        with open(path, "w", encoding="utf-8") as handle:
            for line in self.lines():
                handle.write(line + "\n")