"""cmdshell package: an embeddable command shell over shared application state."""

from .command import Command
from .common import CommandFunc, ExecResult
from .core import Shell
from .exceptions import ExecError, MissingArgs, OtherError, Quit, UnknownCommand
from .registry import CommandRegistry

__all__ = [
    "Shell",
    "Command",
    "CommandFunc",
    "CommandRegistry",
    "ExecResult",
    "ExecError",
    "OtherError",
    "MissingArgs",
    "UnknownCommand",
    "Quit",
]
