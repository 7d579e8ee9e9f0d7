"""The state of the simulated 8-bit machine."""

from dataclasses import dataclass, field
from typing import List

REGISTER_COUNT = 7
MEMORY_SIZE = 64


@dataclass
class MachineState:
    """Registers, memory, program counter and flags, all starting at zero."""

    registers: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    memory: List[int] = field(default_factory=lambda: [0] * MEMORY_SIZE)
    program_counter: int = 0
    overflow_flag: bool = False
    underflow_flag: bool = False
    zero_flag: bool = False

    @property
    def carry_flag(self) -> bool:
        """The carry flag; it shares its value with the overflow flag."""
        return self.overflow_flag

    @carry_flag.setter
    def carry_flag(self, value: bool) -> None:
        self.overflow_flag = value

    def dump(self) -> str:
        """Return the textual dump of registers, flags, counter and memory."""
        registers = " ".join(f"{value:02d}" for value in self.registers)
        flags = " ".join(
            str(int(flag))
            for flag in (
                self.overflow_flag,
                self.underflow_flag,
                self.carry_flag,
                self.zero_flag,
            )
        )
        rows = [
            "".join(f"{value:02d} " for value in self.memory[start:start + 8])
            for start in range(0, len(self.memory), 8)
        ]
        return (
            f"Registers : {registers}#\n"
            f"Flags     : {flags}#\n"
            f"PC        : {self.program_counter}\n\n"
            "Memory    :\n" + "\n".join(rows) + "\n#\n"
        )