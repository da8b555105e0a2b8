"""
Command-line interface for swaggergen.

Output goes through writer objects so the command can be tested without
capturing stdout.
"""

from .output import BufferedOutput, ConsoleOutput

__all__ = [
    "ConsoleOutput",
    "BufferedOutput",
]
