"""Registry for shell commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic

from .command import Command
from .common import BUILTIN_COMMANDS, StateT

logger = logging.getLogger(__name__)


class CommandRegistry(Generic[StateT]):
    """Name-keyed command store that iterates in name order."""

    def __init__(self) -> None:
        self._commands: dict[str, Command[StateT]] = {}

    def register(self, command: Command[StateT]) -> Command[StateT]:
        name = command.name
        if name.split() != [name]:
            logger.warning("Command name %r can never be selected from an input line", name)
        elif name in BUILTIN_COMMANDS:
            logger.warning("Command %r is shadowed by the built-in of the same name", name)
        if name in self._commands:
            logger.debug("Replacing command %r", name)
        else:
            logger.debug("Registering command %r", name)
        self._commands[name] = command
        return command

    def get(self, name: str) -> Command[StateT] | None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def iter_commands(self) -> Iterator[Command[StateT]]:
        for name in self.names():
            yield self._commands[name]

    def __iter__(self) -> Iterator[Command[StateT]]:
        return self.iter_commands()

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)


__all__ = ["CommandRegistry"]
