import pytest

from amendedit.app import parse_args


def test_parse_args_with_file():
    args = parse_args(["notes.txt"])
    assert args.file == "notes.txt"


def test_parse_args_without_file():
    args = parse_args([])
    assert args.file is None


def test_parse_args_rejects_extra_arguments():
    with pytest.raises(SystemExit) as info:
        parse_args(["one.txt", "two.txt"])
    assert info.value.code == 2


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        parse_args(["--no-such-option"])
    assert info.value.code == 2