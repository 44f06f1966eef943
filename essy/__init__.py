"""Two-pass SIC/XE assembler with opcode, register and symbol tables and a command line."""

__version__ = "0.1.0"
__all__ = ["assembler", "cli", "opcodes", "registers", "symtab"]