import pytest

from argstream.arg import Flag, Optional, Positional, flag_name
from argstream.exceptions import ParserMisuseError
from argstream.help import Help


def test_flag_text():
    assert str(Flag("verbose")) == "--verbose"
    assert Flag("verbose").with_switch("v") == Flag("verbose", "v")


def test_optional_text():
    option = Optional("rate").with_switch("r")
    assert option.name == "rate"
    assert option.switch == "r"
    assert str(option) == "--rate <rate>"


def test_positional_text():
    assert str(Positional("path")) == "<path>"


def test_switch_must_be_single_character():
    with pytest.raises(ParserMisuseError):
        Flag("verbose", "vv")
    with pytest.raises(ParserMisuseError):
        Optional("rate", "")


def test_flag_name():
    assert flag_name(Flag("verbose")) == "verbose"
    assert flag_name(Optional("rate")) == "rate"
    assert flag_name(Positional("path")) is None


def test_help_usage():
    help = Help(text="usage: op <cmd>\n\nDetails.", usage_line=0)
    assert help.usage() == "usage: op <cmd>"
    assert Help(text="one line", usage_line=4).usage() is None
    assert Help(text="one line").usage() is None
    assert help.flag == Flag("help", "h")
