import pytest

from argstream.cli import Cli
from argstream.exceptions import TokenTextError
from argstream.tokens import Tag, Token, tokenize


def test_tokenize_empty():
    assert tokenize([]).slots == []
    assert tokenize(["prog"]).slots == []


def test_tokenize_flag_and_switch():
    assert tokenize(["prog", "--help"]).slots == [Token.flag(0)]
    assert tokenize(["prog", "--help", "-v"]).slots == [Token.flag(0), Token.switch(1, "v")]


def test_tokenize_unattached_arguments():
    assert tokenize(["prog", "new", "rary.gates"]).slots == [
        Token.unattached(0, "new"),
        Token.unattached(1, "rary.gates"),
    ]


def test_tokenize_switch_bundle():
    stream = tokenize(["prog", "--help", "-vhc=10"])
    assert stream.slots == [
        Token.flag(0),
        Token.switch(1, "v"),
        Token.switch(1, "h"),
        Token.switch(1, "c"),
        Token.attached(1, "10"),
    ]


def test_tokenize_empty_switch():
    stream = tokenize(["prog", "-", "-=x"])
    assert stream.slots == [
        Token.empty_switch(0),
        Token.empty_switch(1),
        Token.attached(1, "x"),
    ]
    assert stream.index == {Tag.switch(""): [0, 1]}


def test_tokenize_attached_value_behind_terminator():
    stream = tokenize(["prog", "--=value", "extra"])
    assert stream.slots == [
        Token.terminator(0),
        Token.attached(0, "value"),
        Token.ignore(1, "extra"),
    ]


def test_tokenize_splits_on_first_equals_only():
    stream = tokenize(["prog", "--define=key=value"])
    assert stream.slots == [Token.flag(0), Token.attached(0, "key=value")]


def test_tokenize_full_line():
    stream = tokenize(
        [
            "prog", "--help", "-v", "new", "ip", "--lib", "--name=rary.gates",
            "--help", "-sci", "--", "--map", "synthesis", "-jto",
        ]
    )
    assert stream.slots == [
        Token.flag(0),
        Token.switch(1, "v"),
        Token.unattached(2, "new"),
        Token.unattached(3, "ip"),
        Token.flag(4),
        Token.flag(5),
        Token.attached(5, "rary.gates"),
        Token.flag(6),
        Token.switch(7, "s"),
        Token.switch(7, "c"),
        Token.switch(7, "i"),
        Token.terminator(8),
        Token.ignore(9, "--map"),
        Token.ignore(10, "synthesis"),
        Token.ignore(11, "-jto"),
    ]
    assert stream.index == {
        Tag.flag("help"): [0, 7],
        Tag.flag("lib"): [4],
        Tag.flag("name"): [5],
        Tag.switch("v"): [1],
        Tag.switch("s"): [8],
        Tag.switch("c"): [9],
        Tag.switch("i"): [10],
    }


def test_take_str():
    assert Token.unattached(0, "get").take_str() == "get"
    assert Token.attached(1, "rary.gates").take_str() == "rary.gates"
    assert Token.ignore(7, "--map").take_str() == "--map"


@pytest.mark.parametrize(
    "token",
    [Token.flag(7), Token.switch(7, "h"), Token.empty_switch(3), Token.terminator(9)],
)
def test_take_str_on_tag_only_token(token):
    with pytest.raises(TokenTextError):
        token.take_str()


def test_take_locations():
    cli = Cli.from_args(
        [
            "prog", "--help", "-v", "new", "ip", "--lib", "--name=rary.gates",
            "--help", "-sci", "-i", "--", "--map", "synthesis", "-jto",
        ]
    )
    assert cli._take_flag_locs("version") == []
    assert cli._take_flag_locs("lib") == [4]
    assert cli._take_flag_locs("help") == [0, 7]
    assert cli._take_flag_locs("map") == []
    assert cli._take_flag_locs("rary.gates") == []
    # taken once, gone for good
    assert cli._take_flag_locs("help") == []

    assert cli._take_switch_locs("q") == []
    assert cli._take_switch_locs("v") == [1]
    assert cli._take_switch_locs("i") == [10, 11]
    assert cli._take_switch_locs("j") == []
    assert Tag.flag("help") not in cli.occurrences
    assert cli.occurrences[Tag.flag("name")] == [5]


def test_pull_flag_values():
    cli = Cli.from_args(["prog", "--help"])
    locs = cli._take_flag_locs("help")
    assert cli._pull_flag(locs, False) == [None]
    assert cli.tokens[0] is None

    cli = Cli.from_args(
        ["prog", "--name", "gates", "arg", "--lib", "new", "--name=gates2", "--opt=1", "--opt", "--help"]
    )
    assert cli._pull_flag(cli._take_flag_locs("lib"), False) == [None]
    assert cli.tokens[3] is None
    # the bare word behind --lib was not claimed
    assert cli.tokens[4] == Token.unattached(4, "new")

    assert cli._pull_flag(cli._take_flag_locs("name"), True) == ["gates", "gates2"]
    assert cli.tokens[0] is None
    assert cli.tokens[1] is None
    assert cli.tokens[5] is None
    assert cli.tokens[6] is None

    assert cli._pull_flag(cli._take_flag_locs("opt"), True) == ["1", None]


def test_pull_switch_values():
    cli = Cli.from_args(
        ["prog", "--name", "gates", "-sicn", "dut", "new", "-vl=direct", "--help", "-l", "-m", "install"]
    )
    assert cli._pull_flag(cli._take_switch_locs("l"), True) == ["direct", None]
    assert cli.tokens[9] is None
    assert cli.tokens[12] is None
    assert cli._pull_flag(cli._take_switch_locs("s"), True) == [None]
    assert cli._pull_flag(cli._take_switch_locs("n"), True) == ["dut"]
    assert cli._pull_flag(cli._take_switch_locs("m"), False) == [None]


def test_next_unattached_stops_at_terminator():
    cli = Cli.from_args(
        [
            "prog", "--help", "-v", "new", "ip", "--lib", "--name=rary.gates",
            "--help", "-scii", "get", "--", "--map", "synthesis", "-jto",
        ]
    )
    assert cli._next_unattached() == "new"
    assert cli._next_unattached() == "ip"
    assert cli._next_unattached() == "get"
    assert cli._next_unattached() is None
