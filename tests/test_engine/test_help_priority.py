import pytest

from argstream.arg import Flag, Optional, Positional
from argstream.cli import Cli
from argstream.exceptions import DuplicateOptions, MissingPositional
from argstream.help import Help
from argstream.signals import HelpSignal

HELP = Help(text="usage: add <lhs> <rhs> [--verbose]\n\nAdds two numbers.", usage_line=0)


def test_help_flag_sets_sticky_state():
    cli = Cli.from_args(["prog", "--help"])
    cli.help(HELP)
    assert cli.asking_for_help is True
    with pytest.raises(HelpSignal) as exc_info:
        cli.is_empty()
    assert exc_info.value.help is HELP


def test_help_switch_is_recognized():
    cli = Cli.from_args(["prog", "-h"])
    cli.help(HELP)
    assert cli.asking_for_help is True


def test_help_takes_priority_over_missing_positional():
    cli = Cli.from_args(["prog", "add", "--help"])
    cli.help(HELP)
    cli.require_positional(Positional("command"))
    with pytest.raises(HelpSignal):
        cli.require_positional(Positional("lhs"), type=int)


def test_help_takes_priority_over_bad_type():
    cli = Cli.from_args(["prog", "--rate=fast", "-h"])
    cli.help(HELP)
    with pytest.raises(HelpSignal):
        cli.check_option(Optional("rate"), type=int)


def test_help_raised_twice():
    cli = Cli.from_args(["prog", "--help", "-h"])
    with pytest.raises(HelpSignal):
        cli.help(HELP)


def test_errors_without_help_request_carry_help():
    cli = Cli.from_args(["prog", "add"])
    cli.help(HELP)
    cli.require_positional(Positional("command"))
    with pytest.raises(MissingPositional) as exc_info:
        cli.require_positional(Positional("lhs"))
    assert exc_info.value.help is HELP
    assert exc_info.value.usage() == "usage: add <lhs> <rhs> [--verbose]"


def test_disable_help():
    cli = Cli.from_args(["prog", "--verbose", "--verbose"])
    cli.help(HELP)
    assert cli.is_help_enabled() is True
    cli.disable_help()
    assert cli.is_help_enabled() is False
    with pytest.raises(DuplicateOptions):
        cli.check_flag(Flag("verbose"))


def test_help_with_custom_flag():
    cli = Cli.from_args(["prog", "--usage"])
    cli.help(Help(text="usage", flag=Flag("usage")))
    assert cli.asking_for_help is True


def test_help_takes_priority_over_value_behind_terminator():
    cli = Cli.from_args(["prog", "--help", "--=x"])
    cli.help(HELP)
    with pytest.raises(HelpSignal):
        cli.check_remainder()
