"""SIC/XE register numbers."""

from __future__ import annotations

from types import MappingProxyType


class InvalidRegisterError(ValueError):
    """Raised when a name is not a SIC/XE register."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid Register: '{name}'")
        self.name = name


_REGISTERS = MappingProxyType(
    {
        "A": 0,  # accumulator
        "X": 1,  # index register
        "L": 2,  # linkage register
        "B": 3,  # base register
        "S": 4,
        "T": 5,
        "F": 6,  # floating-point accumulator
        "PC": 8,  # program counter
        "SW": 9,  # status word
    }
)


def register_number(name: str) -> int:
    """Return the numeric code of register *name*.

    Raises InvalidRegisterError for an unknown register.
    """
    try:
        return _REGISTERS[name]
    except KeyError:
        raise InvalidRegisterError(name) from None