"""Two-pass SIC/XE assembler producing intermediate, symbol and listing files."""

from __future__ import annotations

import logging
import os
import re

from .opcodes import OpcodeTable
from .registers import InvalidRegisterError, register_number
from .symtab import DuplicateSymbolError, SymbolTable

logger = logging.getLogger(__name__)

_NOT_LABELLED = frozenset({"START", "END", "BASE"})
_NO_OBJECT_CODE = frozenset({"START", "END", "RESW", "RESB"})
_PC_RELATIVE_MIN = -2048
_PC_RELATIVE_MAX = 2047
_MISSING_LABEL_CODE = "000000"
_DIGITS = "0123456789"

_INTEGER_PATTERNS = {
    10: re.compile(r"\s*([+-]?[0-9]+)"),
    16: re.compile(r"\s*([+-]?(?:0[xX])?[0-9A-Fa-f]+)"),
}


def _parse_int(text: str, base: int = 10) -> int:
    """Parse the leading integer of *text*, ignoring whatever follows it."""
    match = _INTEGER_PATTERNS[base].match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1), base)


def _starts_with_digit(text: str) -> bool:
    return bool(text) and text[0] in _DIGITS


def _listing_row(location: str, label: str, opcode: str, operand: str, objcode: str) -> str:
    return f"{location:<8}{label:<8}{opcode:<8}{operand:<10}{objcode:<8}"


def _split_source_line(line: str) -> tuple[str, str, str]:
    """Return (label, opcode, operand) from the first three fields of a source line."""
    fields = line.split()[:3]
    if len(fields) == 3:
        return fields[0], fields[1], fields[2]
    if len(fields) == 2:
        return "", fields[0], fields[1]
    if len(fields) == 1:
        return "", fields[0], ""
    return "", "", ""


class Assembler:
    """Assembles one SIC/XE source file in two passes."""

    def __init__(self, source: str | os.PathLike[str]) -> None:
        self.source = os.fspath(source)
        self.symbols = SymbolTable()
        self._optab = OpcodeTable()
        self._base = 0

    def _derived_path(self, suffix: str) -> str:
        name = self.source
        stem = name[: len(name) - 4] if len(name) >= 4 else name
        return stem + suffix

    def pass_one(self) -> str:
        """Build the symbol table and write the intermediate and symbol files.

        Returns the path of the intermediate file.
        """
        self.symbols = SymbolTable()
        intermediate_path = self._derived_path(".interm")
        location = 0

        with open(self.source, encoding="utf-8") as source, open(
            intermediate_path, "w", encoding="utf-8"
        ) as intermediate:
            for raw in source:
                line = raw.rstrip("\n")
                if line.startswith("."):
                    continue

                label, opcode, operand = _split_source_line(line)

                if label and opcode not in _NOT_LABELLED:
                    try:
                        self.symbols.insert(label, location)
                    except DuplicateSymbolError as exc:
                        logger.warning("Warning: %s", exc)

                if opcode == "START":
                    location = _parse_int(operand, 16)

                intermediate.write(f"{location:04X}  {label} {opcode} {operand}\n")
                location += self._size_of(opcode, operand)

        symtab_path = self._derived_path(".st")
        self.symbols.write(symtab_path)
        logger.info("Symbol table export complete! File saved as: %s", symtab_path)
        return intermediate_path

    def _size_of(self, opcode: str, operand: str) -> int:
        """Number of bytes a source line occupies."""
        if opcode == "BYTE":
            if operand.startswith("X"):
                return (len(operand) - 3) // 2
            return len(operand) - 3
        if opcode == "WORD":
            return 3
        if opcode == "RESB":
            return _parse_int(operand)
        if opcode == "RESW":
            return 3 * _parse_int(operand)
        if opcode.startswith("+"):
            return 4
        if opcode in self._optab:
            return self._optab.lookup(opcode).default_format
        return 0

    def pass_two(self, intermediate_path: str | os.PathLike[str]) -> str:
        """Generate object code from the intermediate file and write the listing.

        Returns the path of the listing file.
        """
        listing_path = self._derived_path(".l")
        self._base = 0

        with open(intermediate_path, encoding="utf-8") as intermediate, open(
            listing_path, "w", encoding="utf-8"
        ) as listing:
            for raw in intermediate:
                line = raw.rstrip("\n")
                if line.startswith("."):
                    continue

                parts = line.split()
                if len(parts) == 4:
                    location, label, opcode, operand = parts
                elif len(parts) == 3:
                    location, opcode, operand = parts
                    label = ""
                elif len(parts) == 2:
                    location, opcode = parts
                    label = operand = ""
                else:
                    continue

                objcode = self._translate(location, opcode, operand)
                listing.write(_listing_row(location, label, opcode, operand, objcode) + "\n")

        return listing_path

    def assemble(self) -> str:
        """Run both passes and return the path of the listing file."""
        return self.pass_two(self.pass_one())

    def _translate(self, location: str, opcode: str, operand: str) -> str:
        """Object code for one intermediate line, or an empty string."""
        if opcode in _NO_OBJECT_CODE:
            return ""
        if opcode == "BASE":
            try:
                self._base = self.symbols.address(operand)
            except KeyError:
                logger.warning("BASE label not found: %s", operand)
                self._base = -1
            return ""
        if opcode == "WORD":
            return f"{_parse_int(operand) & 0xFFFFFFFF:06X}"
        if opcode == "BYTE":
            if operand.startswith("C"):
                return "".join(f"{ord(char):X}" for char in operand[2:-1])
            if operand.startswith("X"):
                return operand[2:-1]
            return ""
        if opcode == "RSUB":
            return f"{self._optab.lookup(opcode).opcode | 3:02X}0000"

        n = i = x = b = e = 0
        p = 1
        target_address = 0
        displacement = 0
        target = operand

        if operand:
            if operand[0] == "@":
                n = 1
                target = operand[1:]
            elif operand[0] == "#":
                i = 1
                target = operand[1:]
                if _starts_with_digit(target):
                    target_address = displacement = _parse_int(target)
                    p = 0
            else:
                n = i = 1
            if ",X" in target:
                x = 1
                target = target[: target.index(",X")]

        mnemonic = opcode
        extended = opcode.startswith("+")
        if extended:
            mnemonic = opcode[1:]
            e = 1

        if mnemonic not in self._optab:
            return ""
        info = self._optab.lookup(mnemonic)
        if extended:
            if len(info.formats) < 2:
                return ""
            fmt = info.formats[1]
        else:
            fmt = info.default_format

        if p:
            if _starts_with_digit(target):
                target_address = _parse_int(target)
            else:
                try:
                    target_address = self.symbols.address(target)
                except KeyError:
                    logger.warning("Label not found in symbol table: %s", target)
                    return _MISSING_LABEL_CODE
            program_counter = _parse_int(location, 16) + fmt
            difference = target_address - program_counter
            if _PC_RELATIVE_MIN <= difference <= _PC_RELATIVE_MAX:
                p, b, displacement = 1, 0, difference
            else:
                p, b, displacement = 0, 1, target_address - self._base

        if fmt == 1:
            return info.opcode_hex
        if fmt == 2:
            first, _, second = operand.partition(",")
            try:
                r1 = register_number(first)
                r2 = register_number(second) if second else 0
            except InvalidRegisterError as exc:
                logger.warning("%s", exc)
                return ""
            return f"{(info.opcode << 8) | (r1 << 4) | r2:04X}"
        if fmt in (3, 4):
            first_byte = (info.opcode & 0xFC) | (n << 1) | i
            flags = (x << 3) | (b << 2) | (p << 1) | e
            if fmt == 3:
                return f"{(first_byte << 16) | (flags << 12) | (displacement & 0xFFF):06X}"
            return f"{(first_byte << 24) | (flags << 20) | (target_address & 0xFFFFF):08X}"
        return ""