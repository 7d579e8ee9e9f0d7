"""Splitting assembly source text into tokens."""

import re
from typing import Iterator, List

from .tokens import Token, TokenType

_DELIMITERS = frozenset(" ,\n[]")
_LEADING_DIGITS = re.compile(r"\d+")

_KEYWORDS = {
    "IN": TokenType.UNARY_OPCODE,
    "OUT": TokenType.UNARY_OPCODE,
    "INC": TokenType.UNARY_OPCODE,
    "DEC": TokenType.UNARY_OPCODE,
    "MOV": TokenType.MOV_OPCODE,
    "ADD": TokenType.ARITHMETIC_OPCODE,
    "SUB": TokenType.ARITHMETIC_OPCODE,
    "MUL": TokenType.ARITHMETIC_OPCODE,
    "DIV": TokenType.ARITHMETIC_OPCODE,
    "ROL": TokenType.BITWISE_OPCODE,
    "ROR": TokenType.BITWISE_OPCODE,
    "SHL": TokenType.BITWISE_OPCODE,
    "SHR": TokenType.BITWISE_OPCODE,
    "LOAD": TokenType.SERIAL_OPCODE,
    "STORE": TokenType.SERIAL_OPCODE,
    " ": TokenType.WHITESPACE,
    ",": TokenType.COMMA,
    "\n": TokenType.NEWLINE,
    "[": TokenType.OPEN_BRACKET,
    "]": TokenType.CLOSED_BRACKET,
}

_REGISTERS = frozenset(f"R{n}" for n in range(7))


class LexerError(ValueError):
    """Raised when the program text holds something that is not a token."""


def read_words(program: str) -> Iterator[str]:
    """Yield words and delimiters; a run of spaces becomes a single space."""
    position = 0
    length = len(program)
    while position < length:
        char = program[position]
        if char == " ":
            while position < length and program[position] == " ":
                position += 1
            yield " "
        elif char in _DELIMITERS:
            position += 1
            yield char
        else:
            start = position
            while position < length and program[position] not in _DELIMITERS:
                position += 1
            yield program[start:position]


def _classify(word: str) -> Token:
    if word in _KEYWORDS:
        return Token(_KEYWORDS[word], word)
    if word in _REGISTERS:
        return Token(TokenType.REGISTER, word[1])
    digits = _LEADING_DIGITS.match(word)
    if digits and word[0].isascii():
        value = int(digits.group())
        if not 0 <= value <= 255:
            raise LexerError(f"Number out of range (0-255): {word}.")
        return Token(TokenType.NUM_LITERAL, word)
    raise LexerError(f"Unknown token {word}.")


def tokenize(program: str) -> List[Token]:
    """Return the tokens of a program, ending with an EOF token."""
    tokens = [_classify(word) for word in read_words(program)]
    tokens.append(Token(TokenType.EOF, ""))
    return tokens