# tinyasm

tinyasm reads programs written in a small 8-bit assembly language and runs them
on a simulated machine. The machine has seven registers (`R0` to `R6`), 64 bytes
of memory, a program counter and overflow, underflow, carry and zero flags. When
a program finishes, tinyasm prints the machine state and saves it to a numbered
text file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running a program

```
tinyasm program.asm
```

If no path is given, the command asks for one:

```
tinyasm
```

The program is run and the final machine state is printed. The same dump is
written to the first free file named `main_1.txt`, `main_2.txt` and so on. By
default that file goes in the current directory. Use `-o DIR` / `--output-dir DIR`
to put it somewhere else.

If the file cannot be opened, or the program has a lexical, syntax or runtime
error, the command prints the error and exits with status 1. Otherwise it exits
with status 0.

## The language

There is one instruction per line. An opcode must be followed by at least one
space. Operands are separated by commas, and the commas may have spaces around
them. Number literals are decimal and must be between 0 and 255.

| Instruction          | Effect                                              |
|----------------------|-----------------------------------------------------|
| `IN Rn`              | read a value (0-255) into `Rn`                      |
| `OUT Rn`             | write the value of `Rn`                             |
| `INC Rn` / `DEC Rn`  | increment or decrement `Rn`                         |
| `MOV src, Rn`        | copy a number, a register or `[Rm]` into `Rn`       |
| `ADD Ra, Rb`         | `Rb = Rb + Ra`                                      |
| `SUB Ra, Rb`         | `Rb = Rb - Ra`                                      |
| `MUL Ra, Rb`         | `Rb = Rb * Ra`                                      |
| `DIV Ra, Rb`         | `Rb = Rb // Ra`                                     |
| `ROL/ROR Rn, k`      | rotate `Rn` left or right by `k` bits               |
| `SHL/SHR Rn, k`      | shift `Rn` left or right by `k` bits                |
| `LOAD Rn, addr`      | `Rn = memory[addr]`; `addr` is 0-63 or `[Rm]`       |
| `STORE Rn, addr`     | `memory[addr] = Rn`; `addr` is 0-63 or `[Rm]`       |

`[Rm]` means "the memory address held in `Rm`". When it is used as a `MOV` source,
the value at that address is copied.

Arithmetic wraps at 8 bits. Every instruction adds one to the program counter.
Flags are set and never cleared:

- overflow: set by `INC` from 255, or by `ADD` or `MUL` when the result exceeds 255
- underflow: set by `DEC` from 0, or by `SUB` when the result is negative
- carry: always has the same value as overflow
- zero: set when a result is 0. `INC` from 255 sets it too.

Example:

```
MOV 5, R0
MOV 7, R1
ADD R0, R1
STORE R1, 0
OUT R1
```

## The dump

`MachineState.dump()` returns the text that the command prints and saves. It
looks like this:

```
Registers : 05 12 00 00 00 00 00#
Flags     : 0 0 0 0#
PC        : 5

Memory    :
12 00 00 00 00 00 00 00 
...
#
```

The flags are listed in this order: overflow, underflow, carry, zero.

## Using it from Python

```python
from tinyasm.parser import run_program

state = run_program("MOV 5, R0\nINC R0\n", read=input, write=print)
print(state.registers[0])  # 6
print(state.dump())
```

`run_program(program, read=None, write=None)` runs the program on a fresh
`MachineState` and returns that state. `read` is called with a prompt for each
`IN` instruction and must return the text that was entered. `write` is called
with the text for each `OUT`. They default to `input` and `print`.

The parts can also be used on their own:

- `tinyasm.tokens`: `TokenType` and the frozen `Token(type, content)`
- `tinyasm.lexer`: `read_words(program)` and `tokenize(program)`, which returns a list of tokens ending with an `EOF` token
- `tinyasm.machine`: `MachineState`, with `registers`, `memory`, `program_counter`, the flags and `dump()`
- `tinyasm.runner`: `Runner(state, read, write)`, with one method per instruction (`in_`, `out`, `inc`, `dec`, `mov`, `add`, `sub`, `mul`, `div`, `rol`, `ror`, `shl`, `shr`, `load`, `store`)
- `tinyasm.parser`: `Parser(tokens, runner).parse()`, which carries out each instruction as it is parsed
- `tinyasm.cli`: `main(argv=None)` and `write_dump(dump, directory=".")`

## Errors

- `LexerError` (a `ValueError`): an unknown token, or a number outside 0-255.
- `AssemblySyntaxError` (a `SyntaxError`): a malformed instruction. The message gives the line number, and the error has `line` and `message` attributes.
- `MachineError` (a `RuntimeError`): division by zero, `IN` input that is not a number in 0-255, or a `[Rm]` address outside 0-63.

Instructions run as they are parsed. A program that fails part way through has
already carried out the instructions before the error.