"""Terminal input/output helpers shared by the interactive tree programs."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Iterable
from typing import TextIO

_HEADER_LIMIT = 99
_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def render_menu(title: str, items: Iterable[str], quit: bool) -> str:
    """Return the text of a numbered menu, ending with the choice prompt."""
    header = f"MENU : {title}"[:_HEADER_LIMIT]
    separator = "=" * len(header)
    lines = [header, separator]
    lines.extend(f"[ {number} ] - {name}" for number, name in enumerate(items, start=1))
    lines.append("[ 0 ] - Sair" if quit else "[ 0 ] - Voltar")
    lines.append(separator)
    return "\n".join(lines) + "\nEscolha uma opção: "


class Console:
    """Line-oriented console bound to a pair of text streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: bool = True,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear_screen = clear_screen

    def clear(self) -> None:
        """Clear the terminal, if clearing is enabled."""
        if not self._clear_screen:
            return
        self._stdout.flush()
        try:
            if os.name == "nt":
                subprocess.run("cls", shell=True, check=False)
            else:
                subprocess.run(["clear"], check=False)
        except OSError:
            pass

    def write(self, text: str) -> None:
        """Write text to the output stream and flush it."""
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> str:
        """Read one line without its line ending; raise EOFError at end of input."""
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def _read_nonblank(self, prompt: str) -> str:
        if prompt:
            self.write(prompt)
        while True:
            line = self.read_line()
            if line.strip():
                return line

    def read_word(self, prompt: str = "") -> str:
        """Prompt, then return the first whitespace-separated word typed."""
        return self._read_nonblank(prompt).split()[0]

    def read_int(self, prompt: str = "") -> int:
        """Prompt, then return the integer at the start of the next line."""
        line = self._read_nonblank(prompt)
        match = _INT_PATTERN.match(line)
        if match is None:
            raise ValueError(f"not an integer: {line!r}")
        return int(match.group(1))

    def wait_enter(self) -> None:
        """Ask the user to press Enter and wait for one line."""
        self.write("\nPressione Enter para continuar...\n")
        try:
            self.read_line()
        except EOFError:
            pass

    def menu(self, title: str, items: Iterable[str], quit: bool) -> int:
        """Show a menu and return the chosen number, or -1 if it was not a number."""
        self.clear()
        self.write(render_menu(title, items, quit))
        try:
            return self.read_int()
        except ValueError:
            return -1