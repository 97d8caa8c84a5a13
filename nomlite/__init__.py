from nomlite.parser_combinators import (
  ParseError,
  Parser,
  Forward,
  Ok,
  Err,
  Result,
  ResultKind,
  make_parser,
  forward_decl,
  any_char,
  char_p,
  string_p,
  digit,
  whitespace_char,
  non_space_char,
  satisfy,
  one_of,
  none_of,
  succeed,
  fail,
  eof,
  take_while,
  take_while1,
  take_till,
  map,
  bind,
  sequence,
  consecutive,
  preceded,
  terminated,
  between,
  choice,
  alt,
  many,
  many1,
  many_m_n,
  count,
  optional_p,
  sep_by,
  sep_by1,
  sep_by_strict,
  chainl1,
  whitespace,
  skip_ws,
  lexeme,
  natural,
  integer_p,
  signed_integer,
  all_consuming,
  parse_all,
)
from nomlite.words import word, words, split_words, classify
