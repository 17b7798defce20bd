"""Line-oriented diagnostic output sinks."""

from abc import ABC, abstractmethod

import click


class DiagnosticOutput(ABC):
    @abstractmethod
    def write_error(self, message: str) -> None:
        """Write one line to the error/status stream."""


class ClickOutput(DiagnosticOutput):
    def write_error(self, message: str) -> None:
        click.echo(message, err=True)


class BufferedOutput(DiagnosticOutput):
    """Collects lines in memory."""

    def __init__(self):
        self.lines: list[str] = []

    def write_error(self, message: str) -> None:
        self.lines.append(message)

    def getvalue(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)
