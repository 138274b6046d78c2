"""Interactive read-eval-print loop. Uses cmd as backend."""

from __future__ import annotations

import cmd
import dataclasses

from arith.common.errors import ArithError
from arith.driver import RunConfig, Strategy, run_source
from arith.surface.diagnostics import report


class Shell(cmd.Cmd):
    """Arithmetic lambda calculus shell."""

    intro = "arith shell. Type 'help' for commands, 'exit' or Ctrl-D to leave."
    prompt = "> "

    def __init__(self, config: RunConfig | None = None, color: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.config = config or RunConfig()
        self.color = color

    def default(self, line: str) -> None:
        """Evaluate ``line`` as a program and print each result."""
        try:
            outcomes = run_source(line, self.config)
        except ArithError as exc:
            report(exc, color=self.color, stream=self.stdout)
            return
        except RecursionError:
            print("error: maximum recursion depth exceeded", file=self.stdout)
            return
        for outcome in outcomes:
            print(outcome, file=self.stdout)

    def emptyline(self) -> bool:
        """Do not repeat previous command on empty line."""
        return False

    def do_typed(self, arg: str) -> None:
        """Switch to the simply typed language (lambda x: T. t)."""
        self.config = dataclasses.replace(self.config, typed=True)

    def do_untyped(self, arg: str) -> None:
        """Switch to the untyped language (lambda x. t)."""
        self.config = dataclasses.replace(self.config, typed=False)

    def do_strategy(self, arg: str) -> None:
        """strategy cbv|full: choose call-by-value or full reduction."""
        try:
            strategy = Strategy(arg.strip())
        except ValueError:
            print(f"unknown strategy {arg.strip()!r}", file=self.stdout)
            return
        self.config = dataclasses.replace(self.config, strategy=strategy)

    def do_config(self, arg: str) -> None:
        """Show the current settings."""
        print(self.config, file=self.stdout)

    def do_EOF(self, arg: str) -> bool:
        """Exits the shell."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg: str) -> bool:
        """Exits the shell."""
        return True


__all__ = ["Shell"]
