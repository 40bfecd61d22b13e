"""
Argstream CLI Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg import Arg, Flag, Optional, Positional
from .cli import Cli
from .command import Command, FromCli, Runner
from .config import CliConfig, load_config
from .exceptions import (
    ArgStreamError,
    BadType,
    CliError,
    ConfigError,
    DuplicateOptions,
    ExceedingMaxCount,
    ExpectingValue,
    MissingPositional,
    OutOfContextArgSuggest,
    ParserMisuseError,
    SuggestArg,
    SuggestSubcommand,
    TokenTextError,
    UnexpectedArg,
    UnexpectedValue,
    UnknownSubcommand,
)
from .help import Help
from .logger import logger
from .runner import parse, run
from .signals import HelpSignal

__all__ = [
    "Arg",
    "ArgStreamError",
    "BadType",
    "Cli",
    "CliConfig",
    "CliError",
    "Command",
    "ConfigError",
    "DuplicateOptions",
    "ExceedingMaxCount",
    "ExpectingValue",
    "Flag",
    "FromCli",
    "Help",
    "HelpSignal",
    "MissingPositional",
    "Optional",
    "OutOfContextArgSuggest",
    "ParserMisuseError",
    "Positional",
    "Runner",
    "SuggestArg",
    "SuggestSubcommand",
    "TokenTextError",
    "UnexpectedArg",
    "UnexpectedValue",
    "UnknownSubcommand",
    "load_config",
    "logger",
    "parse",
    "run",
]
