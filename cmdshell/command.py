"""Command objects bound to a handler over shared state."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TextIO

from .common import CommandFunc, ExecResult, StateT
from .exceptions import ExecError, MissingArgs

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command(Generic[StateT]):
    """A named handler guarded by a minimum argument count.

    ``nargs`` is an inclusive lower bound; handlers receive every argument
    and must tolerate extras. A handler may raise an :class:`ExecError`
    (typically :class:`OtherError` or :class:`Quit`) to report through the
    dispatch result. Any other exception propagates to the caller.
    """

    name: str
    description: str
    nargs: int
    func: CommandFunc[StateT]

    def help(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(f"{self.name} :\t{self.description}\n")

    def run(self, state: StateT, args: Sequence[str]) -> ExecResult:
        if len(args) < self.nargs:
            return ExecResult.failure(MissingArgs())
        try:
            self.func(state, list(args))
        except ExecError as exc:
            logger.debug("Command %s reported %s: %s", self.name, exc.description, exc)
            return ExecResult.failure(exc)
        return ExecResult.success()


__all__ = ["Command"]
