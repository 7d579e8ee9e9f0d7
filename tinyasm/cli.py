"""Command line entry point: run an assembly file and dump the machine."""

import argparse
from pathlib import Path
from typing import List, Optional, Union

from .lexer import LexerError
from .parser import AssemblySyntaxError, run_program
from .runner import MachineError


def write_dump(dump: str, directory: Union[str, Path] = ".") -> Optional[Path]:
    """Write the dump to the first free main_<n>.txt in a directory."""
    directory = Path(directory)
    count = 1
    while (directory / f"main_{count}.txt").exists():
        count += 1
    target = directory / f"main_{count}.txt"
    try:
        target.write_text(dump)
    except OSError:
        print(f"Unable to create file {target.name}")
        return None
    return target


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run an assembly program and dump the final machine state."
    )
    parser.add_argument("path", nargs="?", help="path to an .asm file")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="directory for the main_<n>.txt dump (default: current directory)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the program named on the command line or asked for on stdin."""
    args = _build_parser().parse_args(argv)
    path = args.path
    if path is None:
        print("Please enter path to an .asm file. Relative path recommended.")
        path = input("Input file path: ")

    try:
        with open(path, encoding="utf-8") as handle:
            source = handle.read().split("\0", 1)[0]
    except OSError:
        print(f"Unable to open file {path}\n")
        return 1

    try:
        state = run_program(source)
    except AssemblySyntaxError as error:
        print(error)
        return 1
    except (LexerError, MachineError) as error:
        print(f"Error: {error}")
        return 1

    dump = state.dump()
    print(dump, end="")
    write_dump(dump, args.output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())