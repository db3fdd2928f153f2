"""Exception hierarchy for cmdshell."""

from __future__ import annotations


class ExecError(Exception):
    """Base error for everything a dispatch can report."""

    description = "Command execution failed"
    is_quit = False


class OtherError(ExecError):
    """Catch-all failure carrying its own message."""

    description = "Other error occurred"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingArgs(ExecError):
    description = "Not enough arguments have been provided"

    def __str__(self) -> str:
        return "Not enough arguments"


class UnknownCommand(ExecError):
    description = "The provided command is unknown"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown Command {self.name}"


class Quit(ExecError):
    """Request to stop the read loop; never shown to the user."""

    description = "The command requested to quit"
    is_quit = True

    def __str__(self) -> str:
        return "Quit"


__all__ = ["ExecError", "OtherError", "MissingArgs", "UnknownCommand", "Quit"]
