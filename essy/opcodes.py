"""SIC/XE operation code table."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class InvalidInstructionError(ValueError):
    """Raised when a mnemonic is not a SIC/XE instruction."""

    def __init__(self, instruction: str) -> None:
        super().__init__(f"Invalid instruction: {instruction}")
        self.instruction = instruction


@dataclass(frozen=True)
class OpcodeInfo:
    """Hex opcode of an instruction and the formats it may be assembled in."""

    opcode_hex: str
    formats: tuple[int, ...]

    @property
    def opcode(self) -> int:
        """Numeric value of the opcode."""
        return int(self.opcode_hex, 16)

    @property
    def default_format(self) -> int:
        """Format used when no extension prefix is given."""
        return self.formats[0]


_F1 = (1,)
_F2 = (2,)
_F34 = (3, 4)

_OPCODES: Mapping[str, OpcodeInfo] = MappingProxyType(
    {
        mnemonic: OpcodeInfo(opcode_hex, formats)
        for mnemonic, opcode_hex, formats in (
            ("ADD", "18", _F34),
            ("ADDF", "58", _F34),
            ("ADDR", "90", _F2),
            ("AND", "40", _F34),
            ("CLEAR", "B4", _F2),
            ("COMP", "28", _F34),
            ("COMPF", "88", _F34),
            ("COMPR", "A0", _F2),
            ("DIV", "24", _F34),
            ("DIVF", "64", _F34),
            ("DIVR", "9C", _F2),
            ("FIX", "C4", _F1),
            ("FLOAT", "C0", _F1),
            ("HIO", "F4", _F1),
            ("J", "3C", _F34),
            ("JEQ", "30", _F34),
            ("JGT", "34", _F34),
            ("JLT", "38", _F34),
            ("JSUB", "48", _F34),
            ("LDA", "00", _F34),
            ("LDB", "68", _F34),
            ("LDCH", "50", _F34),
            ("LDF", "70", _F34),
            ("LDL", "08", _F34),
            ("LDS", "6C", _F34),
            ("LDT", "74", _F34),
            ("LDX", "04", _F34),
            ("LPS", "D0", _F34),
            ("MUL", "20", _F34),
            ("MULF", "60", _F34),
            ("MULR", "98", _F2),
            ("NORM", "C8", _F1),
            ("OR", "44", _F34),
            ("RD", "D8", _F34),
            ("RMO", "AC", _F2),
            ("RSUB", "4C", _F34),
            ("SHIFTL", "A4", _F2),
            ("SHIFTR", "A8", _F2),
            ("SIO", "F0", _F1),
            ("SSK", "EC", _F34),
            ("STA", "0C", _F34),
            ("STB", "78", _F34),
            ("STCH", "54", _F34),
            ("STF", "80", _F34),
            ("STI", "D4", _F34),
            ("STL", "14", _F34),
            ("STS", "7C", _F34),
            ("STSW", "E8", _F34),
            ("STT", "84", _F34),
            ("STX", "10", _F34),
            ("SUB", "1C", _F34),
            ("SUBF", "5C", _F34),
            ("SUBR", "94", _F2),
            ("SVC", "B0", _F2),
            ("TD", "E0", _F34),
            ("TIO", "F8", _F1),
            ("TIX", "2C", _F34),
            ("TIXR", "B8", _F2),
            ("WD", "DC", _F34),
        )
    }
)


class OpcodeTable:
    """Lookup of SIC/XE mnemonics to their opcode information."""

    def __init__(self) -> None:
        self._table = _OPCODES

    def lookup(self, instruction: str) -> OpcodeInfo:
        """Return the opcode information for *instruction*.

        Raises InvalidInstructionError if the mnemonic is unknown.
        """
        try:
            return self._table[instruction]
        except KeyError:
            raise InvalidInstructionError(instruction) from None

    def is_instruction(self, instruction: str) -> bool:
        """Tell whether *instruction* is a known mnemonic."""
        return instruction in self._table

    def __contains__(self, instruction: object) -> bool:
        return instruction in self._table