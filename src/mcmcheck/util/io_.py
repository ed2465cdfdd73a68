"""Convenience functions for I/O."""

import os
from collections.abc import Sequence
from pathlib import Path

TextInput = str | Path | Sequence[str]
TextOutput = str | Path | None


def read_lines(inp: TextInput) -> list[str]:
    """Read text input as a list of lines.

    A `Path`, or a string naming an existing file, is read as a file; any other
    string is treated as file contents; any other sequence is taken to be the lines
    themselves. Reading a missing or unreadable `Path` raises `OSError`.

    :param inp: Text input Path object, path string, contents string, or lines
    :return: Lines, without line endings
    """
    if isinstance(inp, Path) or (isinstance(inp, str) and is_file_path(inp)):
        return Path(inp).read_text().splitlines()

    if isinstance(inp, str):
        return inp.splitlines()

    return list(map(str, inp))


def is_file_path(inp: str) -> bool:
    """Determine whether a string names an existing file.

    :param inp: A path string or contents string
    :return: `True` if it does, `False` if it doesn't
    """
    return "\n" not in inp and os.path.exists(inp)


def source_label(inp: TextInput) -> str:
    """Describe a text input for use in messages.

    :param inp: Text input Path object, path string, contents string, or lines
    :return: The file path, or a placeholder for in-memory text
    """
    if isinstance(inp, Path) or (isinstance(inp, str) and is_file_path(inp)):
        return str(inp)
    return "<text>"


def write_text(text: str, out: TextOutput) -> None:
    """Write text to a file, creating parent folders as needed.

    If `out` is `None`, this function does nothing.

    :param text: The text
    :param out: The file path
    """
    if out is not None:
        out: Path = Path(out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text)
