import pytest

from roadnet.cli import CommandLineParser


def test_values_and_flags():
    clp = CommandLineParser(["-a", "CH", "-g", "graph.bin", "-s"])
    assert clp.get_value("a") == "CH"
    assert clp.get_value("g") == "graph.bin"
    assert clp.is_set("s")
    assert clp.get_value("s") == ""
    assert not clp.is_set("o")


def test_defaults_and_casts():
    clp = CommandLineParser(["-n", "42", "-ce_param", "0.5"])
    assert clp.get_value("n", cast=int) == 42
    assert clp.get_value("ce_param", 0.0, cast=float) == 0.5
    assert clp.get_value("i", 30, cast=int) == 30
    assert clp.get_value("missing", cast=int) == 0
    assert clp.get_value("missing") == ""


def test_multiple_values_and_replacement():
    clp = CommandLineParser(["-x", "1", "2", "3", "-y", "a", "-x", "7", "8"])
    assert clp.get_values("x", cast=int) == [7, 8]
    assert clp.get_value("x", cast=int) == 7
    assert clp.get_values("y") == ["a"]
    assert clp.get_values("z") == []


def test_missing_option_name():
    with pytest.raises(ValueError, match="missing option name before 'stray'"):
        CommandLineParser(["stray"])


def test_bad_number():
    clp = CommandLineParser(["-n", "ten"])
    with pytest.raises(ValueError):
        clp.get_value("n", cast=int)


def test_empty_parser_then_parse():
    clp = CommandLineParser()
    assert not clp.is_set("help")
    clp.parse(["-help"])
    assert clp.is_set("help")