import pytest

from nomlite.parser_combinators import Ok
from nomlite.words import classify, split_words, word, words


def test_word():
    assert word("push 1") == Ok("push", " 1")
    assert not word(" push")


@pytest.mark.parametrize("line,expected", [
    ("1 2 ADD PRINT", ["1", "2", "ADD", "PRINT"]),
    ("   10\t20   +  ", ["10", "20", "+"]),
    ("", []),
    ("   ", []),
    ("-3 p", ["-3", "p"]),
])
def test_split_words(line, expected):
    assert split_words(line) == expected


def test_words_consumes_whole_line():
    assert words("a b\n") == Ok(["a", "b"], "")


@pytest.mark.parametrize("token,expected", [
    ("42", ("int", 42)),
    ("-7", ("int", -7)),
    ("+7", ("int", 7)),
    ("ADD", ("word", "ADD")),
    ("+", ("word", "+")),
    ("12abc", ("word", "12abc")),
])
def test_classify(token, expected):
    assert classify(token) == expected
