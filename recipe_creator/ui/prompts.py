# ui/prompts.py — reading and parsing free-text console input

from __future__ import annotations
import logging
from typing import TextIO

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when console text cannot be parsed as the requested number."""

    def __init__(self, text: str, expected: str) -> None:
        super().__init__(f"{text!r} is not a valid {expected}")
        self.text = text
        self.expected = expected


class Console:
    """
    Thin wrapper over an input and output stream pair.
    read_line() raises EOFError when the input is exhausted.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    @property
    def out(self) -> TextIO:
        return self._out

    def write_line(self, text: str = "") -> None:
        print(text, file=self._out)

    def read_line(self, prompt: str = "") -> str:
        if prompt:
            self._out.write(prompt)
            self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        return parse_int(self.read_line(prompt))

    def read_float(self, prompt: str = "") -> float:
        return parse_float(self.read_line(prompt))


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        logger.info("Rejected integer input %r", text)
        raise InvalidInputError(text, "whole number") from None


def parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        logger.info("Rejected decimal input %r", text)
        raise InvalidInputError(text, "number") from None
