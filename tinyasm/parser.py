"""Parsing a token stream and executing each instruction as it is read."""

import re
from typing import Callable, Iterable, List, Optional

from .lexer import tokenize
from .machine import MEMORY_SIZE, MachineState
from .runner import MachineError, Runner
from .tokens import Token, TokenType

_LEADING_DIGITS = re.compile(r"\d+")


class AssemblySyntaxError(SyntaxError):
    """Raised when the token stream does not form a valid instruction."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"Syntax error at line {line}. {message}")
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"Syntax error at line {self.line}. {self.message}"


def _number(content: str) -> int:
    """Return the value of the leading digits of a numeric token."""
    match = _LEADING_DIGITS.match(content)
    if match is None:
        raise ValueError(f"not a number: {content!r}")
    return int(match.group())


def _checked_address(address: int) -> int:
    if not 0 <= address < MEMORY_SIZE:
        raise MachineError(f"Address out of range (0-{MEMORY_SIZE - 1}): {address}")
    return address


class Parser:
    """Walks the tokens of a program and drives a runner with them."""

    def __init__(self, tokens: Iterable[Token], runner: Runner) -> None:
        self._tokens: List[Token] = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.EOF:
            self._tokens.append(Token(TokenType.EOF, ""))
        self._index = 0
        self._line = 1
        self._runner = runner

    @property
    def _current(self) -> Token:
        return self._tokens[self._index]

    @property
    def _previous(self) -> Token:
        return self._tokens[self._index - 1]

    def _error(self, message: str) -> AssemblySyntaxError:
        return AssemblySyntaxError(self._line, message)

    def _advance(self) -> None:
        self._index = min(self._index + 1, len(self._tokens) - 1)

    def _is(self, kind: TokenType) -> bool:
        return self._current.type is kind

    def _expect_register(self, after: str) -> int:
        if not self._is(TokenType.REGISTER):
            raise self._error(f"Expected register after {after}")
        return int(self._current.content)

    def _expect_whitespace(self) -> None:
        if not self._is(TokenType.WHITESPACE):
            raise self._error(f"Expected whitespace after {self._previous.content}")

    def _skip_whitespace(self) -> None:
        while self._current.type in (TokenType.WHITESPACE, TokenType.NEWLINE):
            if self._is(TokenType.NEWLINE):
                self._line += 1
            self._advance()

    def _skip_comma(self) -> None:
        self._skip_whitespace()
        if not self._is(TokenType.COMMA):
            raise self._error("Expected a comma")
        self._advance()
        self._skip_whitespace()

    def _opcode_operand(self) -> str:
        """Consume an opcode and the whitespace after it; return the opcode."""
        opcode = self._current.content
        self._advance()
        self._expect_whitespace()
        self._skip_whitespace()
        return opcode

    def _bracketed_register(self) -> int:
        """Consume '[ Rn ]' starting at the open bracket; return the register value."""
        self._advance()
        self._skip_whitespace()
        register = self._expect_register("[")
        value = self._runner.value_at_register(register)
        self._advance()
        self._skip_whitespace()
        if not self._is(TokenType.CLOSED_BRACKET):
            raise self._error("Expected ']' after register")
        return value

    def _unary(self) -> None:
        opcode = self._opcode_operand()
        register = self._expect_register(opcode)
        actions: dict = {
            "IN": self._runner.in_,
            "OUT": self._runner.out,
            "INC": self._runner.inc,
            "DEC": self._runner.dec,
        }
        actions[opcode](register)

    def _mov(self) -> None:
        self._opcode_operand()
        if self._is(TokenType.NUM_LITERAL):
            value = _number(self._current.content)
        elif self._is(TokenType.REGISTER):
            value = self._runner.value_at_register(int(self._current.content))
        elif self._is(TokenType.OPEN_BRACKET):
            address = _checked_address(self._bracketed_register())
            value = self._runner.value_at_address(address)
        else:
            raise self._error(
                "Expected a number, register or [register], got "
                f"{self._current.content} instead"
            )
        self._advance()
        self._skip_comma()
        register = self._expect_register(",")
        self._runner.mov(value, register)

    def _arithmetic(self) -> None:
        opcode = self._opcode_operand()
        first = self._expect_register(opcode)
        self._advance()
        self._skip_comma()
        second = self._expect_register(",")
        actions: dict = {
            "ADD": self._runner.add,
            "SUB": self._runner.sub,
            "MUL": self._runner.mul,
            "DIV": self._runner.div,
        }
        actions[opcode](first, second)

    def _bitwise(self) -> None:
        opcode = self._opcode_operand()
        register = self._expect_register(opcode)
        self._advance()
        self._skip_comma()
        if not self._is(TokenType.NUM_LITERAL):
            raise self._error(f"Expected a number but got: {self._current.content}")
        count = _number(self._current.content)
        actions: dict = {
            "ROL": self._runner.rol,
            "ROR": self._runner.ror,
            "SHL": self._runner.shl,
            "SHR": self._runner.shr,
        }
        actions[opcode](register, count)

    def _serial(self) -> None:
        opcode = self._opcode_operand()
        register = self._expect_register(opcode)
        self._advance()
        self._skip_comma()
        if self._is(TokenType.NUM_LITERAL):
            address = _number(self._current.content)
            if not 0 <= address <= MEMORY_SIZE - 1:
                raise self._error(
                    f"Address out of range (0-{MEMORY_SIZE - 1}): {self._current.content}"
                )
        elif self._is(TokenType.OPEN_BRACKET):
            address = _checked_address(self._bracketed_register())
        else:
            raise self._error(
                f"Expected an address or [register], got {self._current.content} instead"
            )
        if opcode == "LOAD":
            self._runner.load(register, address)
        else:
            self._runner.store(register, address)

    def _instruction(self) -> None:
        handlers = {
            TokenType.UNARY_OPCODE: self._unary,
            TokenType.MOV_OPCODE: self._mov,
            TokenType.ARITHMETIC_OPCODE: self._arithmetic,
            TokenType.BITWISE_OPCODE: self._bitwise,
            TokenType.SERIAL_OPCODE: self._serial,
        }
        handler = handlers.get(self._current.type)
        if handler is None:
            raise self._error(
                f"Expected an opcode. Found {self._current.content} instead"
            )
        handler()

    def parse(self) -> None:
        """Execute every instruction in the token stream up to the end."""
        while not self._is(TokenType.EOF):
            self._skip_whitespace()
            if self._is(TokenType.EOF):
                break
            self._instruction()
            self._advance()


def run_program(
    program: str,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> MachineState:
    """Tokenize and run a program on a fresh machine; return its final state."""
    state = MachineState()
    Parser(tokenize(program), Runner(state, read, write)).parse()
    return state