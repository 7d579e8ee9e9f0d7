from tinyasm.machine import MachineState


def test_initial_state_is_zeroed():
    state = MachineState()
    assert state.registers == [0] * 7
    assert state.memory == [0] * 64
    assert state.program_counter == 0
    assert not (state.overflow_flag or state.underflow_flag or state.zero_flag)


def test_carry_flag_aliases_overflow():
    state = MachineState()
    state.overflow_flag = True
    assert state.carry_flag is True
    state.carry_flag = False
    assert state.overflow_flag is False


def test_dump_first_lines_of_fresh_machine():
    lines = MachineState().dump().splitlines()
    assert lines[0] == "Registers : 00 00 00 00 00 00 00#"
    assert lines[1] == "Flags     : 0 0 0 0#"
    assert lines[2] == "PC        : 0"
    assert lines[3] == ""
    assert lines[4] == "Memory    :"


def test_dump_memory_rows_and_terminator():
    state = MachineState()
    state.memory[9] = 255
    dump = state.dump()
    lines = dump.splitlines()
    rows = lines[5:-1]
    assert all(len(row.split()) == 8 for row in rows)
    assert sum(len(row.split()) for row in rows) == len(state.memory)
    assert "255" in rows[1].split()
    assert lines[-1] == "#"
    assert dump.endswith("\n#\n")


def test_dump_reflects_registers_flags_and_counter():
    state = MachineState()
    state.registers[6] = 255
    state.zero_flag = True
    state.overflow_flag = True
    state.program_counter = 12
    lines = state.dump().splitlines()
    assert lines[0].endswith(" 255#")
    assert lines[1] == "Flags     : 1 0 1 1#"
    assert lines[2] == "PC        : 12"