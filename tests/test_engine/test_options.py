import pytest

from argstream.arg import Optional
from argstream.cli import Cli
from argstream.exceptions import (
    BadType,
    DuplicateOptions,
    ExceedingMaxCount,
    ExpectingValue,
)


def test_check_option_all_strings():
    cli = Cli.from_args(["prog", "plan", "--fileset", "a", "--fileset=b", "--fileset", "c"])
    assert cli.check_option_all(Optional("fileset")) == ["a", "b", "c"]


def test_check_option_all_integers_in_order():
    cli = Cli.from_args(["prog", "--rate", "10", "--rate=9", "--rate", "1"])
    assert cli.check_option_all(Optional("rate"), type=int) == [10, 9, 1]


def test_check_option_all_mixed_switch_and_long_form_in_order():
    cli = Cli.from_args(["prog", "--rate", "1", "-r", "2", "--rate=3", "-r=4"])
    assert cli.check_option_all(Optional("rate", "r"), type=int) == [1, 2, 3, 4]


def test_check_option_all_bad_conversion():
    cli = Cli.from_args(["prog", "plan", "--digit", "10", "--digit=9", "--digit", "c"])
    with pytest.raises(BadType) as exc_info:
        cli.check_option_all(Optional("digit"), type=int)
    assert exc_info.value.value == "c"
    assert exc_info.value.arg == Optional("digit")


def test_check_option_all_not_provided():
    cli = Cli.from_args(["prog", "plan"])
    assert cli.check_option_all(Optional("fileset")) is None


def test_check_option_all_missing_value():
    cli = Cli.from_args(["prog", "--fileset", "a", "--fileset"])
    with pytest.raises(ExpectingValue):
        cli.check_option_all(Optional("fileset"))


def test_check_option():
    cli = Cli.from_args(["prog", "command", "--rate", "10"])
    assert cli.check_option(Optional("rate"), type=int) == 10
    assert cli._next_unattached() == "command"


def test_check_option_duplicate_across_forms():
    cli = Cli.from_args(["prog", "--flag", "--rate=9", "command", "-r", "14"])
    with pytest.raises(DuplicateOptions) as exc_info:
        cli.check_option(Optional("rate", "r"), type=int)
    assert exc_info.value == DuplicateOptions(Optional("rate", "r"))


def test_check_option_switch():
    cli = Cli.from_args(["prog", "--flag", "-r", "14"])
    assert cli.check_option(Optional("rate", "r"), type=int) == 14


def test_check_option_expecting_value():
    cli = Cli.from_args(["prog", "--flag", "--rate", "--verbose"])
    with pytest.raises(ExpectingValue) as exc_info:
        cli.check_option(Optional("rate"), type=int)
    assert exc_info.value == ExpectingValue(Optional("rate"))


def test_check_option_value_at_end_of_line():
    cli = Cli.from_args(["prog", "--rate"])
    with pytest.raises(ExpectingValue):
        cli.check_option(Optional("rate"))


def test_check_option_bad_type():
    cli = Cli.from_args(["prog", "--flag", "--rate", "five", "--verbose"])
    with pytest.raises(BadType):
        cli.check_option(Optional("rate"), type=int)


def test_check_option_not_provided():
    cli = Cli.from_args(["prog"])
    assert cli.check_option(Optional("rate"), type=int) is None


def test_check_option_second_query_sees_nothing():
    cli = Cli.from_args(["prog", "--rate", "10"])
    assert cli.check_option(Optional("rate"), type=int) == 10
    assert cli.check_option(Optional("rate"), type=int) is None


@pytest.mark.parametrize("limit", [1, 2])
def test_check_option_n_within_limit(limit):
    cli = Cli.from_args(["prog", "command", "--rate", "10"])
    assert cli.check_option_n(Optional("rate"), limit, type=int) == [10]


def test_check_option_n_exceeding():
    cli = Cli.from_args(["prog", "command", "--rate", "10", "--rate", "4", "--rate", "3"])
    with pytest.raises(ExceedingMaxCount) as exc_info:
        cli.check_option_n(Optional("rate"), 2, type=int)
    assert (exc_info.value.limit, exc_info.value.count) == (2, 3)


def test_check_option_n_not_provided():
    cli = Cli.from_args(["prog"])
    assert cli.check_option_n(Optional("rate"), 2) is None
