import pytest

from clbuilder.arg_key import ArgKey
from clbuilder.parsed_arg import ArgIter, ParsedArg, PositionalParsedArgs


def _sample():
    return (
        PositionalParsedArgs("value")
        .add_argument("--k", "1")
        .add_argument(ArgKey("--o"), "x")
        .add_argument("--k", "2")
    )


def test_positional_first_of():
    args = _sample()
    assert args.first_of("--k") == (ArgKey("--k"), "1")
    assert args.first_of(ArgKey("--o")) == (ArgKey("--o"), "x")
    assert args.first_of("--missing") is None


def test_positional_filter_and_count():
    args = _sample()
    assert [value for _, value in args.filter("--k")] == ["1", "2"]
    assert args.count("--k") == 2
    assert args.count("--o") == 1
    assert args.count("--none") == 0


def test_positional_contains_and_len():
    args = _sample()
    assert args.contains("--o")
    assert not args.contains("--z")
    assert len(args) == 3
    assert args.value == "value"


def test_positional_keys_stored_as_arg_keys():
    args = _sample()
    assert list(args) == [
        (ArgKey("--k"), "1"),
        (ArgKey("--o"), "x"),
        (ArgKey("--k"), "2"),
    ]


def test_arg_iter_walks_words():
    it = ArgIter(["prog", "a", "b"])
    assert it.arg() == "prog"
    assert it.arg() == "prog"
    assert it.next_arg() == "a"
    assert it.next_arg() == "b"
    assert it.next_arg() is None
    assert it.next_arg() is None


def test_arg_iter_empty():
    it = ArgIter([])
    assert it.arg() is None
    assert it.next_arg() is None


def test_arg_iter_defaults_to_process_arguments(monkeypatch):
    monkeypatch.setattr("sys.argv", ["tool", "run"])
    it = ArgIter()
    assert it.arg() == "tool"
    assert it.next_arg() == "run"


def test_parsed_arg_cursor():
    parsed = ParsedArg(["prog", "--x"])
    assert parsed.current_arg() == "prog"
    assert parsed.next_arg() == "--x"
    assert parsed.current_arg() == "--x"
    assert parsed.next_arg() is None


def test_parsed_arg_queries_use_last_positional():
    parsed = ParsedArg([])
    parsed.add_positional("first").add_argument("--a", "1")
    parsed.add_positional("second").add_argument("--b", "2").add_argument("--b", "3")
    assert parsed.current_positional() == "second"
    assert parsed.positional_argument_size() == 2
    assert len(parsed) == 2
    assert parsed.count("--a") == 0
    assert parsed.count("--b") == 2
    assert parsed.first_of("--b") == "2"
    assert parsed.first_of("--a") is None
    assert list(parsed.filter("--b")) == ["2", "3"]
    assert parsed.contains("--b")
    assert not parsed.contains("--a")
    assert parsed.parametric_argument_size() == 2
    assert list(parsed.parametric_iter()) == [(ArgKey("--b"), "2"), (ArgKey("--b"), "3")]


def test_parsed_arg_iterates_positionals():
    parsed = ParsedArg([]).add_positional("p").add_positional("q")
    assert [arg.value for arg in parsed] == ["p", "q"]


def test_parsed_arg_without_positional_raises():
    parsed = ParsedArg([])
    assert len(parsed) == 0
    with pytest.raises(IndexError):
        parsed.current_positional()
    with pytest.raises(IndexError):
        parsed.count("-h")
    with pytest.raises(IndexError):
        parsed.add_argument("--k", "v")