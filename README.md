# essy

`essy` is a two-pass assembler for SIC/XE assembly source. For each input
file it writes three files:

- an intermediate file (`.interm`) that gives the location counter for each
  source line,
- a symbol table file (`.st`) that lists every label with its address as
  upper-case hex, padded to at least four digits and sorted by label,
- a listing file (`.l`) that puts each line next to its generated object code.

The output files go next to the input file. Each is named by removing the last
four characters of the input name (normally `.sic`) and adding the new
extension.

## Installation

```
pip install .
```

## Command line

```
essy program.sic [other.sic ...]
```

The files are assembled in the order given. For each one, `essy` prints
`Assembling file: <name>`, runs both passes, and then prints the symbol table
to the console. Each label is shown with its address in hex.

- With no files, it prints a usage message and exits with status 1.
- If a file cannot be opened, it reports the error and moves on to the next
  file.
- If a numeric operand cannot be parsed, it reports the error on standard
  error and exits with status 1.

When every file is done, it prints `Process complete, all files have been
assembled!` and exits with status 0.

## Source format

A line has up to three fields separated by whitespace:

- an optional label,
- an opcode or directive,
- an optional operand.

With one field, that field is the opcode. With two, they are opcode and
operand. Lines that begin with `.` are comments and are skipped.

Directives:

- `START` sets the location counter to its operand, read as hex.
- `END` ends the program.
- `BASE` sets the base register value from a label.
- `BYTE` takes `C'...'` or `X'...'`.
- `WORD` is three bytes. Its value is written as hex of at least six digits.
- `RESB` and `RESW` reserve space. Their counts are decimal.

Labels on `START`, `END` and `BASE` lines do not go into the symbol table.

Instructions use the standard SIC/XE opcode set:

- A `+` before the mnemonic selects format 4.
- Operand prefixes are `#` for immediate and `@` for indirect. A `,X` suffix
  means indexed.
- Format 3 uses a PC-relative displacement when it is between -2048 and 2047.
  Otherwise it uses base-relative addressing from the last `BASE` value.
- Format 2 operands are register names: `A`, `X`, `L`, `B`, `S`, `T`, `F`,
  `PC` and `SW`.
- `RSUB` always assembles to `4F0000`.

```
COPY    START   1000
FIRST   LDA     #5
        STA     RESULT
        RSUB
RESULT  RESW    1
        END     FIRST
```

Problems are reported with the standard `logging` module, and assembly goes on:

- A label defined twice gets a warning, and its first address is kept.
- An operand that names an undefined label gets object code `000000`.
- An unknown register gives no object code.
- Mnemonics the opcode table does not know are listed with no object code.

## Library use

```python
from essy.assembler import Assembler

assembler = Assembler("program.sic")
listing_path = assembler.assemble()   # runs pass_one() then pass_two()
print(assembler.symbols.address("FIRST"))
```

`Assembler.pass_one()` returns the path of the intermediate file.
`Assembler.pass_two(intermediate_path)` returns the path of the listing file.

The building blocks can also be used on their own:

- `essy.opcodes.OpcodeTable`
  - `lookup(mnemonic)` returns an `OpcodeInfo` with `opcode_hex`, `formats`,
    `opcode` and `default_format`.
  - It raises `InvalidInstructionError` for an unknown mnemonic.
  - `is_instruction(mnemonic)` and `in` test whether a mnemonic is known.
- `essy.symtab.SymbolTable`
  - `insert(label, address)` raises `DuplicateSymbolError` when the label is
    already defined.
  - `address(label)` raises `KeyError` for an unknown label.
  - Iteration gives the labels in sorted order.
  - `lines()` yields the lines of the symbol table file.
  - `write(path)` writes that file.
- `essy.registers.register_number(name)` maps a register name to its number.
  It raises `InvalidRegisterError` for an unknown name.

## What it does not do

`essy` writes a listing only. It does not produce an object program (header,
text and end records), and it does not link or load. It has no support for
literals, `EQU`, `ORG`, program blocks or control sections.

## Running the tests

```
pip install .[test]
pytest
```