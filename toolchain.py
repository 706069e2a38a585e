import shutil
import subprocess
from pathlib import Path


class ToolchainError(Exception):
    pass

class ToolNotFound(ToolchainError):
    def __init__(self, tool):
        self.tool = tool
        super().__init__(f"'{tool}' not found in PATH")

class AssemblyFailed(ToolchainError):
    pass

class LinkFailed(ToolchainError):
    pass

class ToolLaunchFailed(ToolchainError):
    pass

class OutputWriteFailed(ToolchainError):
    pass


def _run_tool(executable, args):
    path = shutil.which(executable)
    if path is None:
        raise ToolNotFound(executable)
    try:
        return subprocess.run([path, *args], capture_output=True, text=True)
    except OSError as e:
        raise ToolLaunchFailed(f"could not run '{executable}': {e}") from e


class Assembler:
    """Turns NASM source into a 64-bit ELF object file."""

    def __init__(self, executable="nasm"):
        self.executable = executable

    def assemble(self, asm_path, obj_path):
        result = _run_tool(self.executable, ["-f", "elf64", str(asm_path), "-o", str(obj_path)])
        if result.returncode != 0:
            raise AssemblyFailed(f"nasm assembly failed: {result.stderr.strip()}")


class Linker:
    def __init__(self, executable="ld"):
        self.executable = executable

    def link(self, obj_path, exe_path):
        result = _run_tool(self.executable, [str(obj_path), "-o", str(exe_path)])
        if result.returncode != 0:
            raise LinkFailed(f"linking failed: {result.stderr.strip()}")


def output_name_for(source_path):
    stem = Path(source_path).stem
    return stem or "output"


def compile_to_executable(asm_code, output_name, assembler=None, linker=None):
    """Write ``<name>.asm``, assemble it to ``<name>.o`` and link ``<name>``.

    Returns the path of the linked executable.
    """
    assembler = assembler or Assembler()
    linker = linker or Linker()

    asm_path = Path(f"{output_name}.asm")
    obj_path = Path(f"{output_name}.o")
    exe_path = Path(output_name)

    try:
        asm_path.write_text(asm_code, encoding="utf-8")
    except OSError as e:
        raise OutputWriteFailed(f"could not write {asm_path}: {e}") from e
    print(f"Generated assembly written to {asm_path}")

    print("Assembling with nasm...")
    assembler.assemble(asm_path, obj_path)
    print(f"Assembled to object file: {obj_path}")

    print("Linking with ld...")
    linker.link(obj_path, exe_path)
    print(f"Linked to executable: {exe_path}")

    return exe_path


def run_executable(exe_path):
    exe_path = Path(exe_path)
    # a bare name would be looked up on PATH
    if exe_path.parent == Path("."):
        target = f"./{exe_path}"
    else:
        target = str(exe_path)
    return subprocess.run([target]).returncode
