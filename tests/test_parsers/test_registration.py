import pytest

from igor.exceptions import (
    DuplicateIdentifierError,
    DuplicateParameterError,
    MissingNameError,
    UnknownParameterError,
)
from igor.parser import CommandParser


def test_argument_defaults():
    parser = CommandParser("<cmd>")
    parser.argument("team|t")
    registration = parser.arguments["team"]
    assert registration.long_hand == "team"
    assert registration.short_hand == "t"
    assert registration.type == "string"
    assert registration.validate is None
    assert registration.tokens == ["--team", "-t"]


def test_argument_without_short_hand():
    parser = CommandParser("<cmd>")
    parser.argument("dry-run", type="boolean", description="no changes")
    registration = parser.arguments["dry-run"]
    assert registration.short_hand is None
    assert registration.tokens == ["--dry-run"]
    assert registration.dest == "dryrun"
    assert registration.description == "no changes"


def test_registration_is_chainable():
    parser = CommandParser("<cmd> <a>")
    result = parser.argument("team|t").flag("admins|a").parameter("a")
    assert result is parser
    assert list(parser.arguments) == ["team"]
    assert list(parser.flags) == ["admins"]
    assert list(parser.parameters) == ["a"]


@pytest.mark.parametrize("name", ["", None, "|t"])
def test_missing_name(name):
    parser = CommandParser("<cmd>")
    with pytest.raises(MissingNameError):
        parser.argument(name)
    with pytest.raises(MissingNameError):
        parser.flag(name)


def test_missing_parameter_name():
    parser = CommandParser("<cmd> <a>")
    with pytest.raises(MissingNameError):
        parser.parameter("")


def test_short_hand_collision_between_argument_and_flag():
    parser = CommandParser("<cmd>")
    parser.argument("team|t")
    with pytest.raises(DuplicateIdentifierError) as excinfo:
        parser.flag("trace|t")
    assert excinfo.value.identifier == "t"
    assert excinfo.value.kind == "argument"
    assert "trace" not in parser.flags


def test_long_hand_collision_between_flag_and_argument():
    parser = CommandParser("<cmd>")
    parser.flag("all|a")
    with pytest.raises(DuplicateIdentifierError) as excinfo:
        parser.argument("all")
    assert excinfo.value.kind == "flag"
    assert "argument" not in str(excinfo.value)
    assert "all" not in parser.arguments


def test_short_hand_may_not_reuse_a_long_hand():
    parser = CommandParser("<cmd>")
    parser.argument("t")
    with pytest.raises(DuplicateIdentifierError):
        parser.flag("trace|t")


def test_duplicate_argument():
    parser = CommandParser("<cmd>")
    parser.argument("team|t")
    with pytest.raises(DuplicateIdentifierError):
        parser.argument("team|x")
    assert parser.arguments["team"].short_hand == "t"


def test_parameter_must_be_in_pattern():
    parser = CommandParser("<cmd> <a>")
    with pytest.raises(UnknownParameterError):
        parser.parameter("b")


def test_parameter_registered_once():
    parser = CommandParser("<cmd> <a>")
    parser.parameter("a", type="int")
    with pytest.raises(DuplicateParameterError):
        parser.parameter("a")
    assert parser.parameters["a"].type == "int"


def test_parameter_name_must_match_exactly():
    parser = CommandParser("<cmd> <name?>")
    with pytest.raises(UnknownParameterError):
        parser.parameter("name?")
    parser.parameter("name")
    assert parser.parameters["name"].type == "string"
