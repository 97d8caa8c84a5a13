from typing import Literal, Union

from nomlite.parser_combinators import (
  Parser,
  ResultKind,
  all_consuming,
  many1,
  map,
  non_space_char,
  sep_by,
  signed_integer,
  skip_ws,
  whitespace,
)

Classified = Union[tuple[Literal["int"], int], tuple[Literal["word"], str]]

word: Parser[str] = map(many1(non_space_char), "".join).named("word")
words: Parser[list[str]] = skip_ws(sep_by(word, whitespace)).named("words")

_whole_integer = all_consuming(signed_integer)

def split_words(line: str) -> list[str]:
  """Splits a line into its whitespace-separated tokens."""
  return words(line).unwrap()

def classify(token: str) -> Classified:
  res = _whole_integer(token)
  if res.kind is ResultKind.OK:
    return ("int", res.val)
  return ("word", token)
