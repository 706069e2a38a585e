import re

from lexer import KEYWORD, NUMBER, RETURN, SEMI

SYS_EXIT = 60

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

_INTEGER = re.compile(r'[+-]?[0-9]+')


class TranslationError(Exception):
    pass

class IncompleteStatement(TranslationError):
    def __init__(self):
        super().__init__(f"Incomplete return statement: expected '{KEYWORD} <number>;'")

class MissingNumber(TranslationError):
    def __init__(self):
        super().__init__(f"Expected number after '{KEYWORD}'")

class MissingSemicolon(TranslationError):
    def __init__(self):
        super().__init__("Expected semicolon after number")

class InvalidNumber(TranslationError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid number: '{text}'")

class OutOfRange(TranslationError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Exit code must be between 0 and 255, got {value}")

class NoStatementFound(TranslationError):
    def __init__(self):
        super().__init__(f"No '{KEYWORD}' statement found")


def parse_exit_code(text):
    """Parse a literal as a signed 32-bit integer and check it is a valid exit code."""
    if text is None or not _INTEGER.fullmatch(text):
        raise InvalidNumber(text)
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidNumber(text)
    if not 0 <= value <= 255:
        raise OutOfRange(value)
    return value


class CodeGenerator:
    def __init__(self, tokens):
      self.tokens = tuple(tokens)
      self.instructions = []

    def emit(self, instr):
      self.instructions.append(instr)

    def emit_header(self):
        self.emit("global _start")
        self.emit("section .text")
        self.emit("_start:")

    def emit_exit(self, code):
        self.emit(f"    mov rax, {SYS_EXIT}     ; sys_exit")
        self.emit(f"    mov rdi, {code}    ; exit code")
        self.emit("    syscall")

    def match_statement(self, pos):
        """Check the statement whose keyword sits at ``pos`` and return its exit code."""
        remaining = len(self.tokens) - pos - 1

        if remaining >= 1 and self.tokens[pos + 1].kind != NUMBER:
            raise MissingNumber()
        if remaining < 2:
            raise IncompleteStatement()
        if self.tokens[pos + 2].kind != SEMI:
            raise MissingSemicolon()

        return parse_exit_code(self.tokens[pos + 1].text)

    def generate(self):
        self.emit_header()

        found = False
        pos = 0
        while pos < len(self.tokens):
            if self.tokens[pos].kind == RETURN:
                found = True
                self.emit_exit(self.match_statement(pos))
                # skip the number and the semicolon
                pos += 3
            else:
                pos += 1

        if not found:
            raise NoStatementFound()

        return "\n".join(self.instructions) + "\n"


def generate(tokens):
    return CodeGenerator(tokens).generate()
