import argparse
import sys
from pathlib import Path

from lexer import tokenize
from generator import TranslationError, generate
from toolchain import (
    Assembler,
    Linker,
    ToolchainError,
    compile_to_executable,
    output_name_for,
    run_executable,
)

SOURCE_SUFFIX = ".ria"

INSTALL_HINTS = (
    "   Make sure 'nasm' and 'ld' are installed:",
    "   Ubuntu/Debian: sudo apt install nasm",
    "   Fedora: sudo dnf install nasm",
    "   Arch: sudo pacman -S nasm",
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="zakaria", description="Compile a .ria program to a native executable")
    parser.add_argument("source", help="Source file to compile (input.ria)")
    parser.add_argument("-o", "--output", help="Name of the executable (default: source file stem)")
    parser.add_argument("--no-run", action="store_true", help="Build the executable without running it")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print the source, tokens and assembly")
    parser.add_argument("--nasm", default="nasm", help="Assembler executable (default: nasm)")
    parser.add_argument("--ld", default="ld", help="Linker executable (default: ld)")
    return parser.parse_args(argv)


def error(message):
    print(message, file=sys.stderr)


def main(argv=None):
    args = parse_args(argv)
    path = Path(args.source)

    if not path.exists():
        error(f"File not found: {path}")
        return 1

    if path.suffix != SOURCE_SUFFIX:
        error(f"Warning: Expected {SOURCE_SUFFIX} file extension")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error(f"Error reading file '{path}': {e}")
        return 1

    if not args.quiet:
        print(f"File content:\n{content}")

    tokens = tokenize(content)

    if not args.quiet:
        print("\nTokens found:")
        for i, token in enumerate(tokens, start=1):
            print(f"  {i}. Token: {token.kind}, Value: {token.text!r}")

    if not tokens:
        error("No tokens found in file")
        return 1

    try:
        asm_code = generate(tokens)
    except TranslationError as e:
        error(f"Error generating assembly: {e}")
        return 1

    if not args.quiet:
        print(f"\nGenerated Assembly:\n{asm_code}")

    output_name = args.output or output_name_for(path)
    print(f"\nOutput executable will be: {output_name}")

    try:
        exe_path = compile_to_executable(asm_code, output_name, Assembler(args.nasm), Linker(args.ld))
    except ToolchainError as e:
        error(f"   Compilation failed: {e}")
        for hint in INSTALL_HINTS:
            error(hint)
        return 1

    print(f"\nCompilation successful! Executable '{output_name}' created.")

    if args.no_run:
        return 0

    print("\nRunning the executable...")
    status = run_executable(exe_path)
    print(f"Program exited with: {status}")

    print("\nTo check the exit code manually, run:")
    print(f"   ./{output_name}")
    print("   echo $?")
    return 0


if __name__ == "__main__":
    sys.exit(main())
