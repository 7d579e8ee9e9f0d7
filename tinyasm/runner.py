"""Execution of individual instructions against a machine state."""

from typing import Callable, Optional

from .machine import MachineState


class MachineError(RuntimeError):
    """Raised when an instruction cannot be carried out."""


class Runner:
    """Carries out instructions, each one advancing the program counter."""

    def __init__(
        self,
        state: MachineState,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.state = state
        self._read = read if read is not None else input
        self._write = write if write is not None else print

    def _step(self) -> None:
        self.state.program_counter += 1

    def _finish(self, register: int, value: int) -> None:
        value &= 0xFF
        if value == 0:
            self.state.zero_flag = True
        self.state.registers[register] = value

    def value_at_register(self, register: int) -> int:
        """Return a register's value without executing an instruction."""
        return self.state.registers[register]

    def value_at_address(self, address: int) -> int:
        """Return a memory cell's value without executing an instruction."""
        return self.state.memory[address]

    def in_(self, register: int) -> None:
        self._step()
        text = self._read(f"Enter input to be put into R{register}: ")
        try:
            value = int(text.strip())
        except ValueError:
            raise MachineError(f"Invalid input: {text!r}") from None
        if not 0 <= value <= 255:
            raise MachineError("Input value out of range")
        self.state.registers[register] = value

    def out(self, register: int) -> None:
        self._step()
        self._write(str(self.state.registers[register]))

    def inc(self, register: int) -> None:
        self._step()
        current = self.state.registers[register]
        if current == 255:
            self.state.overflow_flag = True
            self.state.zero_flag = True
        self.state.registers[register] = (current + 1) & 0xFF

    def dec(self, register: int) -> None:
        self._step()
        current = self.state.registers[register]
        if current == 0:
            self.state.underflow_flag = True
        elif current == 1:
            self.state.zero_flag = True
        self.state.registers[register] = (current - 1) & 0xFF

    def mov(self, value: int, register: int) -> None:
        self._step()
        self.state.registers[register] = value & 0xFF

    def add(self, first: int, second: int) -> None:
        self._step()
        regs = self.state.registers
        result = regs[first] + regs[second]
        if result > 255:
            self.state.overflow_flag = True
        elif result == 0:
            self.state.zero_flag = True
        regs[second] = result & 0xFF

    def sub(self, first: int, second: int) -> None:
        self._step()
        regs = self.state.registers
        result = regs[second] - regs[first]
        if result < 0:
            self.state.underflow_flag = True
        elif result == 0:
            self.state.zero_flag = True
        regs[second] = result & 0xFF

    def mul(self, first: int, second: int) -> None:
        self._step()
        regs = self.state.registers
        result = regs[first] * regs[second]
        if result > 255:
            self.state.overflow_flag = True
        elif result == 0:
            self.state.zero_flag = True
        regs[second] = result & 0xFF

    def div(self, first: int, second: int) -> None:
        self._step()
        regs = self.state.registers
        if regs[second] == 0 or regs[first] == 0:
            raise MachineError("Division by zero")
        result = regs[second] // regs[first]
        if result == 0:
            self.state.zero_flag = True
        regs[second] = result

    def rol(self, register: int, count: int) -> None:
        self._step()
        shift = count % 8
        value = self.state.registers[register]
        self._finish(register, (value << shift) | (value >> (8 - shift)))

    def ror(self, register: int, count: int) -> None:
        self._step()
        shift = count % 8
        value = self.state.registers[register]
        self._finish(register, (value >> shift) | (value << (8 - shift)))

    def shl(self, register: int, count: int) -> None:
        self._step()
        self._finish(register, self.state.registers[register] << count)

    def shr(self, register: int, count: int) -> None:
        self._step()
        self._finish(register, self.state.registers[register] >> count)

    def load(self, register: int, address: int) -> None:
        self._step()
        self.state.registers[register] = self.state.memory[address]

    def store(self, register: int, address: int) -> None:
        self._step()
        self.state.memory[address] = self.state.registers[register]