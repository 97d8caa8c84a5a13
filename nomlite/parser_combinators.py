# pylint: disable
import logging
from collections.abc import Container, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Literal, NoReturn, Optional, TypeVar

log = logging.getLogger("nomlite")

# Set to True to log every named parser as it runs (at DEBUG level).
debug = False

class ResultKind(Enum):
  OK = 0
  ERR = 1

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
R = TypeVar("R")

ASCII_DIGITS = frozenset("0123456789")
ASCII_WHITESPACE = frozenset(" \t\n\v\f\r")

_UNBOUNDED = ~(-1 << 63)


class ParseError(ValueError):
  """Raised when an `Err` is unwrapped."""

  def __init__(self, msg: str):
    super().__init__(msg)
    self.msg = msg

@dataclass(init=False)
class Ok(Generic[T]):
  kind: Literal[ResultKind.OK]
  val: T
  rest: str

  def __init__(self, val: T, rest: str):
    self.kind = ResultKind.OK
    self.val = val
    self.rest = rest

  def map(self, f: Callable[[T], R]) -> "Result[R]":
    return Ok(f(self.val), self.rest)

  def validate(self, msg: str, f: Callable[[T], bool]) -> "Result[T]":
    if not f(self.val):
      return Err(msg)
    return self

  def unwrap(self) -> T:
    return self.val

  def __bool__(self) -> Literal[True]:
    return True

@dataclass(init=False)
class Err:
  kind: Literal[ResultKind.ERR]
  msg: str

  def __init__(self, msg: str):
    self.kind = ResultKind.ERR
    self.msg = msg

  def map(self, f: Callable[[Any], Any]) -> "Err":
    return self

  def validate(self, msg: str, f: Callable[[Any], bool]) -> "Err":
    return self

  def unwrap(self) -> NoReturn:
    raise ParseError(self.msg)

  def __bool__(self) -> Literal[False]:
    return False

Result = Ok[T] | Err

@dataclass(eq=False)
class Parser(Generic[T]):
  f: Callable[[str], Result[T]]
  name: Optional[str] = None

  def __call__(self, inp: str) -> Result[T]:
    if not debug or self.name is None:
      return self.f(inp)
    log.debug("trying %s on %r", self.name, inp[:20])
    res = self.f(inp)
    if res.kind is ResultKind.OK:
      log.debug("%s matched %r", self.name, res.val)
    else:
      log.debug("%s failed: %s", self.name, res.msg)
    return res

  def parse(self, inp: str) -> Result[T]:
    return self(inp)

  def named(self, name: str) -> "Parser[T]":
    return Parser(self.f, name)

  def map(self, transformer: Callable[[T], R]) -> "Parser[R]":
    return map(self, transformer)

  def and_then(self, parser2_func: "Callable[[T], Parser[R]]") -> "Parser[R]":
    return bind(self, parser2_func)

  def validate(self, msg: str, check: Callable[[T], bool]) -> "Parser[T]":
    def validate_impl(inp: str) -> Result[T]:
      return self(inp).validate(msg, check)
    return Parser(validate_impl)

  def __or__(self, parser2: "Parser[T]") -> "Parser[T]":
    return choice([self, parser2])

  def __add__(self, parser2: "Parser[T2]") -> "Parser[tuple[T, T2]]":
    return sequence(self, parser2)

  def __lshift__(self, parser2: "Parser[Any]") -> "Parser[T]":
    return terminated(self, parser2)

  def __rshift__(self, parser2: "Parser[T2]") -> "Parser[T2]":
    return preceded(self, parser2)

  def __repr__(self) -> str:
    if self.name is not None:
      return f"Parser({self.name})"
    return f"Parser({getattr(self.f, '__qualname__', self.f)!r})"

class Forward(Parser[T]):
  """A parser whose definition is supplied later, for recursive grammars."""

  def __init__(self) -> None:
    super().__init__(self._forward_impl, "forward_decl")
    self.target: Optional[Parser[T]] = None

  def define(self, parser: Parser[T]) -> None:
    self.target = parser

  def _forward_impl(self, inp: str) -> Result[T]:
    if self.target is None:
      raise NotImplementedError("forward_decl() parser used before define()")
    return self.target(inp)

def forward_decl() -> Forward[Any]:
  return Forward()

def make_parser(f: Callable[[str], Result[T]]) -> Parser[T]:
  return Parser(f)

def _found(inp: str) -> str:
  return "EOF" if len(inp) == 0 else inp[0]

# Primitives

def satisfy(check: Callable[[str], bool], expected: str) -> Parser[str]:
  def satisfy_impl(inp: str) -> Result[str]:
    if len(inp) == 0 or not check(inp[0]):
      return Err(f"Expected {expected}, found '{_found(inp)}'")
    return Ok(inp[0], inp[1:])
  return Parser(satisfy_impl, expected)

def _any_char_impl(inp: str) -> Result[str]:
  if len(inp) == 0:
    return Err("Unexpected end of input")
  return Ok(inp[0], inp[1:])

any_char: Parser[str] = Parser(_any_char_impl, "any_char")

def char_p(expected: str) -> Parser[str]:
  return satisfy(lambda c: c == expected, f"'{expected}'")

def string_p(expected: str) -> Parser[str]:
  sz = len(expected)
  def string_p_impl(inp: str) -> Result[str]:
    if inp[:sz] != expected:
      return Err(f'Expected "{expected}", found "{inp[:sz]}"')
    return Ok(expected, inp[sz:])
  return Parser(string_p_impl, f'"{expected}"')

def one_of(items: Container[str]) -> Parser[str]:
  return satisfy(lambda c: c in items, f"one of {items!r}")

def none_of(items: Container[str]) -> Parser[str]:
  return satisfy(lambda c: c not in items, f"none of {items!r}")

digit: Parser[str] = satisfy(lambda c: c in ASCII_DIGITS, "digit")
whitespace_char: Parser[str] = satisfy(lambda c: c in ASCII_WHITESPACE, "whitespace")
non_space_char: Parser[str] = satisfy(lambda c: c not in ASCII_WHITESPACE, "non-whitespace character")

def succeed(v: T) -> Parser[T]:
  return Parser(lambda inp: Ok(v, inp))

def fail(msg: str) -> Parser[Any]:
  return Parser(lambda inp: Err(msg))

def _eof_impl(inp: str) -> Result[None]:
  if len(inp) != 0:
    return Err(f'Expected end of input, found "{inp[:20]}"')
  return Ok(None, inp)

eof: Parser[None] = Parser(_eof_impl, "eof")

def take_while_m(min: int, predicate: Callable[[str], bool], expected: str = "", complement: bool = False) -> Parser[str]:
  def take_while_impl(inp: str) -> Result[str]:
    index = 0
    while index < len(inp) and bool(predicate(inp[index])) != complement:
      index += 1
    if index < min:
      return Err(f"Expected {expected or 'match'}, found '{_found(inp[index:])}'")
    return Ok(inp[:index], inp[index:])
  return Parser(take_while_impl)

def take_while(predicate: Callable[[str], bool]) -> Parser[str]:
  return take_while_m(0, predicate)

def take_while1(predicate: Callable[[str], bool], expected: str = "") -> Parser[str]:
  return take_while_m(1, predicate, expected)

def take_till(predicate: Callable[[str], bool]) -> Parser[str]:
  return take_while_m(0, predicate, complement=True)

# Value and chaining combinators

def map(parser: Parser[T], f: Callable[[T], R]) -> Parser[R]:
  def map_impl(inp: str) -> Result[R]:
    return parser(inp).map(f)
  return Parser(map_impl)

def bind(parser: Parser[T], f: "Callable[[T], Parser[R]]") -> Parser[R]:
  """Runs the parser returned by `f(value)` on whatever `parser` left over."""
  def bind_impl(inp: str) -> Result[R]:
    res = parser(inp)
    if res.kind is ResultKind.ERR:
      return res
    return f(res.val)(res.rest)
  return Parser(bind_impl)

def consecutive(parser1: Parser[T1], parser2: Parser[T2], combiner: Callable[[T1, T2], R]) -> Parser[R]:
  def consecutive_impl(inp: str) -> Result[R]:
    res1 = parser1(inp)
    if res1.kind is ResultKind.ERR:
      return res1
    res2 = parser2(res1.rest)
    if res2.kind is ResultKind.ERR:
      return res2
    return Ok(combiner(res1.val, res2.val), res2.rest)
  return Parser(consecutive_impl)

def sequence(parser1: Parser[T1], parser2: Parser[T2]) -> Parser[tuple[T1, T2]]:
  return consecutive(parser1, parser2, lambda v1, v2: (v1, v2))

def preceded(parser1: Parser[Any], parser2: Parser[T]) -> Parser[T]:
  return consecutive(parser1, parser2, lambda _, v2: v2)

def terminated(parser1: Parser[T], parser2: Parser[Any]) -> Parser[T]:
  return consecutive(parser1, parser2, lambda v1, _: v1)

def between(opening: Parser[Any], parser: Parser[T], closing: Parser[Any]) -> Parser[T]:
  return preceded(opening, terminated(parser, closing))

# Alternation, repetition and structure

def choice(parsers: Sequence[Parser[T]]) -> Parser[T]:
  """First success wins; when every branch fails, their messages are joined with " | "."""
  parsers = list(parsers)
  def choice_impl(inp: str) -> Result[T]:
    errors: list[str] = []
    for parser in parsers:
      res = parser(inp)
      if res.kind is ResultKind.OK:
        return res
      errors.append(res.msg)
    return Err(" | ".join(errors) or "No alternatives matched")
  return Parser(choice_impl)

def alt(*parsers: Parser[T]) -> Parser[T]:
  return choice(parsers)

def many_m_n(min: int, max: int, parser: Parser[T]) -> Parser[list[T]]:
  def many_impl(inp: str) -> Result[list[T]]:
    fullparsed: list[T] = []
    curr = inp
    while len(fullparsed) < max:
      res = parser(curr)
      if res.kind is ResultKind.ERR:
        break
      fullparsed.append(res.val)
      curr = res.rest
    if len(fullparsed) < min:
      if min == 1:
        return Err("Expected at least one occurrence")
      return Err(f"Expected at least {min} occurrences, found {len(fullparsed)}")
    return Ok(fullparsed, curr)
  return Parser(many_impl)

def many(parser: Parser[T]) -> Parser[list[T]]:
  return many_m_n(0, _UNBOUNDED, parser)

def many1(parser: Parser[T]) -> Parser[list[T]]:
  return many_m_n(1, _UNBOUNDED, parser)

def count(n: int, parser: Parser[T]) -> Parser[list[T]]:
  return many_m_n(n, n, parser)

def optional_p(parser: Parser[T], default: Optional[T] = None) -> Parser[Optional[T]]:
  def optional_impl(inp: str) -> Result[Optional[T]]:
    res = parser(inp)
    if res.kind is ResultKind.OK:
      return res
    return Ok(default, inp)
  return Parser(optional_impl)

def sep_by_m(min: int, element: Parser[T], separator: Parser[Any], restore_separator: bool = False) -> Parser[list[T]]:
  def sep_by_impl(inp: str) -> Result[list[T]]:
    fullparsed: list[T] = []
    curr = inp
    before_sep = inp
    while True:
      res = element(curr)
      if res.kind is ResultKind.ERR:
        if restore_separator and len(fullparsed) > 0:
          curr = before_sep
        break
      fullparsed.append(res.val)
      curr = before_sep = res.rest
      sep = separator(curr)
      if sep.kind is ResultKind.ERR:
        break
      curr = sep.rest
    if len(fullparsed) < min:
      return Err("Expected at least one occurrence")
    return Ok(fullparsed, curr)
  return Parser(sep_by_impl)

def sep_by(element: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
  """
  Zero or more `element`s separated by `separator`. Never fails.

  A separator with no element after it is still consumed: on "10,20," the
  result is [10, 20] with nothing left over. Use `sep_by_strict` to leave it
  in the input instead.
  """
  return sep_by_m(0, element, separator)

def sep_by1(element: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
  return sep_by_m(1, element, separator)

def sep_by_strict(element: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
  return sep_by_m(0, element, separator, restore_separator=True)

def chainl1(parser: Parser[T], op: "Parser[Callable[[T, T], T]]") -> Parser[T]:
  """
  Left-associative chain `p op p op p ...`, folded as it is read.

  An operator that divides by zero fails the parse with "Division by zero".
  """
  rest = many(sequence(op, parser))
  def chainl1_impl(inp: str) -> Result[T]:
    res = parser(inp)
    if res.kind is ResultKind.ERR:
      return res
    tail = rest(res.rest)
    acc = res.val
    for f, v in tail.val:
      try:
        acc = f(acc, v)
      except ZeroDivisionError:
        return Err("Division by zero")
    return Ok(acc, tail.rest)
  return Parser(chainl1_impl)

# Whitespace and numbers

whitespace: Parser[list[str]] = many(whitespace_char)

def skip_ws(parser: Parser[T]) -> Parser[T]:
  return bind(whitespace, lambda _: parser)

def lexeme(parser: Parser[T]) -> Parser[T]:
  return skip_ws(parser)

def _fold_digits(digits: list[str]) -> int:
  value = 0
  for c in digits:
    value = value * 10 + (ord(c) - ord("0"))
  return value

natural: Parser[int] = map(many1(digit), _fold_digits)
integer_p: Parser[int] = skip_ws(natural).named("integer")

def _apply_sign(sign: Optional[str]) -> Parser[int]:
  return map(natural, lambda n: -n if sign == "-" else n)

signed_integer: Parser[int] = bind(optional_p(one_of("+-")), _apply_sign).named("signed_integer")

# Running parsers

def all_consuming(parser: Parser[T]) -> Parser[T]:
  return terminated(parser, eof)

def parse_all(parser: Parser[T], text: str) -> T:
  """Parses the whole of `text`, raising `ParseError` on failure or leftover input."""
  return all_consuming(parser)(text).unwrap()
