from tinyasm.cli import main, write_dump
from tinyasm.parser import run_program

PROGRAM = "MOV 10, R1\nMOV 42, R0\nSTORE R0, [R1]\nINC R2\n"


def test_write_dump_picks_next_free_name(tmp_path):
    first = write_dump("first", tmp_path)
    second = write_dump("second", tmp_path)
    assert first == tmp_path / "main_1.txt"
    assert second == tmp_path / "main_2.txt"
    assert first.read_text() == "first"
    assert second.read_text() == "second"


def test_main_runs_file_and_writes_dump(tmp_path, capsys):
    source = tmp_path / "prog.asm"
    source.write_text(PROGRAM)
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    assert main([str(source), "-o", str(out_dir)]) == 0

    expected = run_program(PROGRAM).dump()
    assert (out_dir / "main_1.txt").read_text() == expected
    assert capsys.readouterr().out == expected


def test_main_prompts_for_path(tmp_path, capsys, monkeypatch):
    source = tmp_path / "prog.asm"
    source.write_text(PROGRAM)
    monkeypatch.setattr("builtins.input", lambda prompt: str(source))

    assert main(["-o", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        "Please enter path to an .asm file. Relative path recommended.\n"
    )
    assert (tmp_path / "main_1.txt").read_text() == run_program(PROGRAM).dump()


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.asm"
    assert main([str(missing), "-o", str(tmp_path)]) == 1
    assert capsys.readouterr().out == f"Unable to open file {missing}\n\n"
    assert not (tmp_path / "main_1.txt").exists()


def test_main_reports_unknown_token(tmp_path, capsys):
    source = tmp_path / "bad.asm"
    source.write_text("JMP R1\n")
    assert main([str(source), "-o", str(tmp_path)]) == 1
    assert capsys.readouterr().out == "Error: Unknown token JMP.\n"


def test_main_reports_syntax_error(tmp_path, capsys):
    source = tmp_path / "bad.asm"
    source.write_text("MOV 1, R0\nADD R0 R1\n")
    assert main([str(source), "-o", str(tmp_path)]) == 1
    assert capsys.readouterr().out == "Syntax error at line 2. Expected a comma\n"


def test_main_reports_division_by_zero(tmp_path, capsys):
    source = tmp_path / "bad.asm"
    source.write_text("DIV R0, R1\n")
    assert main([str(source), "-o", str(tmp_path)]) == 1
    assert capsys.readouterr().out == "Error: Division by zero\n"