"""Shared shell types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from .exceptions import ExecError

StateT = TypeVar("StateT")

BUILTIN_COMMANDS = frozenset({"help", "quit"})


@dataclass(frozen=True, slots=True)
class ExecResult:
    error: ExecError | None = None

    @classmethod
    def success(cls) -> "ExecResult":
        return cls()

    @classmethod
    def failure(cls, error: ExecError) -> "ExecResult":
        return cls(error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def quit(self) -> bool:
        return self.error is not None and self.error.is_quit

    @property
    def message(self) -> str:
        """Display text of a reportable error, empty for success and quit."""
        if self.error is None or self.error.is_quit:
            return ""
        return str(self.error)


CommandFunc = Callable[[StateT, list[str]], None]


__all__ = ["BUILTIN_COMMANDS", "CommandFunc", "ExecResult", "StateT"]
