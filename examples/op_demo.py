"""
Nested subcommands with Argstream.

    python examples/op_demo.py add 9 10 --verbose
    python examples/op_demo.py --version
    python examples/op_demo.py ad 1 2          # did you mean 'add'?
    python examples/op_demo.py --verbose add 1 2   # out-of-context argument
    python examples/op_demo.py echo -- -n raw words
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any

from argstream import Cli, CliConfig, Flag, FromCli, Help, Positional, Runner, run
from argstream.utils import setup_logging

OP_HELP = """usage: op [--version] <command>

commands:
    add     add two numbers together
    echo    print the words behind `--`"""

ADD_HELP = """usage: op add <lhs> <rhs> [--verbose]

Adds two integers."""


@dataclass
class Add(Runner):
    lhs: int
    rhs: int
    verbose: bool

    @classmethod
    def from_cli(cls, cli: Cli) -> Add:
        cli.help(Help(text=ADD_HELP, usage_line=0))
        return cls(
            verbose=cli.check_flag(Flag("verbose", "v")),
            lhs=cli.require_positional(Positional("lhs"), type=int),
            rhs=cli.require_positional(Positional("rhs"), type=int),
        )

    def exec(self, context: Any) -> int:
        total = self.lhs + self.rhs
        print(f"{self.lhs} + {self.rhs} = {total}" if self.verbose else total)
        return 0


@dataclass
class Echo(Runner):
    words: list[str]

    @classmethod
    def from_cli(cls, cli: Cli) -> Echo:
        return cls(words=cli.check_remainder())

    def exec(self, context: Any) -> int:
        print(" ".join(self.words))
        return 0


class OpCommand(FromCli):
    @classmethod
    def from_cli(cls, cli: Cli) -> Add | Echo:
        word = cli.match_command(["add", "echo"])
        if word == "add":
            return Add.from_cli(cli)
        return Echo.from_cli(cli)


@dataclass
class Op(Runner):
    version: bool
    command: Add | Echo | None

    @classmethod
    def from_cli(cls, cli: Cli) -> Op:
        cli.help(Help(text=OP_HELP, usage_line=0))
        return cls(
            version=cli.check_flag(Flag("version")),
            command=cli.check_command(Positional("command"), OpCommand),
        )

    def exec(self, context: Any) -> int:
        if self.version:
            print("op 0.1.0")
            return 0
        if self.command is None:
            print(OP_HELP)
            return 0
        return self.command.exec(context)


if __name__ == "__main__":
    setup_logging(console_log_level=logging.WARNING)
    sys.exit(run(Op, config=CliConfig(threshold=2)))
