"""
Output writers for the command line.

Generated documentation already ends every block with a newline, so writers
pass text through unchanged.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for documentation output."""

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


class ConsoleOutput:
    """
    Writer for a text stream, stdout by default.

    Example:
        out = ConsoleOutput()
        out.write(generator.generate_crud_docs())
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self._stream.write(text)

    def flush(self) -> None:
        self._stream.flush()


class BufferedOutput:
    """
    Writer that keeps everything in memory.

    Example:
        out = BufferedOutput()
        main(["app.models.Product", "-c", "etc/swaggergen.yaml"], out=out)
        assert out.text.startswith("/**")
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def flush(self) -> None:
        pass

    @property
    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._parts)
