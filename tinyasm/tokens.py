"""Token kinds and the token value produced by the lexer."""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """The kinds of token that appear in an assembly program."""

    UNARY_OPCODE = auto()  # IN, OUT, INC, DEC
    MOV_OPCODE = auto()  # MOV
    ARITHMETIC_OPCODE = auto()  # ADD, SUB, MUL, DIV
    BITWISE_OPCODE = auto()  # ROL, ROR, SHL, SHR
    SERIAL_OPCODE = auto()  # LOAD, STORE
    REGISTER = auto()  # R0 .. R6
    WHITESPACE = auto()
    NEWLINE = auto()
    COMMA = auto()
    OPEN_BRACKET = auto()
    CLOSED_BRACKET = auto()
    NUM_LITERAL = auto()  # 0 .. 255
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A classified piece of program text."""

    type: TokenType
    content: str