"""Terminal input and output with validated prompts."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import Optional, TextIO

from .dates import is_date_valid
from .render import Color

_INT_PREFIX = re.compile(r"[+-]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Console:
    """Reads answers from an input stream and writes reports to output streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        clear_screens: bool = True,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else sys.stderr
        self._clear_screens = clear_screens
        self._at_eof = False

    def _read_line(self) -> Optional[str]:
        line = self._in.readline()
        if not line:
            self._at_eof = True
            return None
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def _next_token(self) -> str:
        """First word of the next non-blank line; blank lines are skipped."""
        while True:
            line = self._read_line()
            if line is None:
                raise EOFError("end of input")
            words = line.split()
            if words:
                return words[0]

    def write(self, text: str) -> None:
        """Write ``text`` as given to the output stream."""
        self._out.write(text)
        self._out.flush()

    def error(self, text: str) -> None:
        """Write a red message line to the error stream."""
        self._err.write(f"{Color.RED.value}{text}{Color.RESET.value}\n")
        self._err.flush()

    def clear_screen(self) -> None:
        """Clear the terminal, if screen clearing is enabled."""
        if not self._clear_screens:
            return
        self._out.flush()
        try:
            if os.name == "nt":
                subprocess.run("cls", shell=True, check=False)
            else:
                subprocess.run(["clear"], check=False)
        except OSError:
            pass

    def wait_for_enter(self) -> None:
        """Prompt and consume one line of input; end of input just returns."""
        self.write("\nPress Enter to continue...")
        self._read_line()

    def ask_int(self, prompt: str, low: int, high: int) -> int:
        """Ask until an integer within ``low``..``high`` is entered."""
        while True:
            self.write(prompt)
            match = _INT_PREFIX.match(self._next_token())
            if match is not None:
                value = int(match.group())
                if low <= value <= high:
                    return value
            self.error(f"Invalid input. Please enter an integer between {low} and {high}.")

    def ask_float(self, prompt: str, minimum: float, allow_equal: bool = False) -> float:
        """Ask until a number above ``minimum`` (or equal, if allowed) is entered."""
        while True:
            self.write(prompt)
            match = _FLOAT_PREFIX.match(self._next_token())
            if match is not None:
                value = float(match.group())
                if value > minimum or (allow_equal and value == minimum):
                    return value
            relation = ">= " if allow_equal else "> "
            self.error(f"Invalid input. Please enter a number {relation}{minimum:g}.")

    def ask_string(self, prompt: str, default: str) -> str:
        """Ask for a line of text; an empty answer gives ``default``."""
        self.write(f"{prompt} [{default}]: ")
        line = self._read_line()
        return line if line else default

    def ask_date(self, prompt: str, default: str) -> str:
        """Ask until a valid ``YYYY-MM-DD`` date is entered."""
        while True:
            date = self.ask_string(prompt, default)
            if is_date_valid(date):
                return date
            self.error(
                "Invalid date format or values. Please use YYYY-MM-DD format with valid values."
            )
            if self._at_eof:
                raise EOFError("end of input")