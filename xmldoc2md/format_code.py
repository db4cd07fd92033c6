"""Re-indentation of code samples embedded in documentation comments."""

import os


def leading_spaces(line: str) -> int:
    """Count the space characters at the start of a line."""
    return len(line) - len(line.lstrip(" "))


def reindent_line(line: str, indent: int) -> str:
    """Strip up to ``indent`` leading spaces, never any other character."""
    return line[min(indent, leading_spaces(line)) :]


def format_code(code: str | None) -> str | None:
    """Shift a code sample left so that its first line starts at column zero.

    Samples are usually indented to match the surrounding source; relative
    indentation of the following lines is preserved.
    """
    if not code:
        return code
    code = code.replace("\r\n", "\n").lstrip("\n").rstrip("\n ")
    indent = leading_spaces(code)
    lines = (reindent_line(line, indent) for line in code.split("\n"))
    return os.linesep.join(lines)
