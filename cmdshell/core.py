"""Core Shell implementation."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from typing import Generic, TextIO

from .command import Command
from .common import CommandFunc, ExecResult, StateT
from .exceptions import Quit, UnknownCommand
from .registry import CommandRegistry

logger = logging.getLogger(__name__)


class Shell(Generic[StateT]):
    """Dispatches whitespace-tokenised input lines to commands over shared state.

    ``help`` and ``quit`` are built in and always take precedence over
    registered commands with the same name. The shell is single-threaded;
    each dispatch, handler call included, completes before the next line is
    read, so ``value`` is never accessed concurrently.
    """

    def __init__(
        self,
        value: StateT,
        *,
        prompt: str = ">",
        stdin: Iterable[str] | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.value = value
        self.prompt = prompt
        self.commands: CommandRegistry[StateT] = CommandRegistry()
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> Iterable[str]:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    # ------------------------------------------------------------------
    # Command registration
    # ------------------------------------------------------------------
    def register_command(self, command: Command[StateT]) -> None:
        self.commands.register(command)

    def new_command(
        self,
        name: str,
        description: str,
        nargs: int,
        func: CommandFunc[StateT],
    ) -> Command[StateT]:
        command = Command(name, description, nargs, func)
        self.register_command(command)
        return command

    def command(
        self,
        name: str,
        *,
        description: str = "",
        nargs: int = 0,
    ) -> Callable[[CommandFunc[StateT]], CommandFunc[StateT]]:
        """Decorator variant of :meth:`new_command`."""

        def decorator(func: CommandFunc[StateT]) -> CommandFunc[StateT]:
            self.new_command(name, description, nargs, func)
            return func

        return decorator

    def available_commands(self) -> list[str]:
        return self.commands.names()

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def help(self) -> ExecResult:
        for command in self.commands:
            command.help(self.stdout)
        return ExecResult.success()

    def dispatch(self, line: str) -> ExecResult:
        tokens = line.strip().split()
        if not tokens:
            return ExecResult.success()
        name, *args = tokens
        logger.debug("Dispatching %r with %d argument(s)", name, len(args))
        if name == "help":
            return self.help()
        if name == "quit":
            return ExecResult.failure(Quit())
        command = self.commands.get(name)
        if command is None:
            result = ExecResult.failure(UnknownCommand(name))
        else:
            result = command.run(self.value, args)
        if result.error is not None and not result.quit:
            logger.debug("%s: %s", result.error.description, result.error)
        return result

    # ------------------------------------------------------------------
    # Read loop
    # ------------------------------------------------------------------
    def _print_prompt(self) -> None:
        out = self.stdout
        out.write(self.prompt)
        out.flush()

    def run_loop(self, lines: Iterable[str] | None = None) -> None:
        """Read lines until ``quit`` or end of input.

        ``lines`` defaults to the shell's input stream. Errors raised by the
        transport while reading propagate to the caller.
        """
        source = self.stdin if lines is None else lines
        logger.debug("Entering read loop")
        self._print_prompt()
        for raw in source:
            result = self.dispatch(raw.rstrip("\r\n"))
            if result.quit:
                logger.debug("Read loop stopped by quit")
                return
            if not result.ok:
                self.stdout.write(f"{result.message}\n")
            self._print_prompt()
        logger.debug("Read loop reached end of input")


__all__ = ["Shell"]
