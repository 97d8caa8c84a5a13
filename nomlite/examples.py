"""Small grammars built from the combinators, usable as starting points."""
import operator
from typing import Callable

from nomlite.parser_combinators import (
  Parser,
  between,
  chainl1,
  char_p,
  choice,
  forward_decl,
  integer_p,
  map,
  one_of,
  sep_by,
  sequence,
  skip_ws,
)

# integer '+' integer, yielding the sum
plus_p: Parser[int] = map(sequence(skip_ws(char_p("+")), skip_ws(integer_p)), lambda p: p[1])
sum_expr: Parser[int] = map(sequence(integer_p, plus_p), lambda p: p[0] + p[1]).named("sum_expr")

int_list: Parser[list[int]] = sep_by(integer_p, skip_ws(char_p(","))).named("int_list")

OPERATORS: dict[str, Callable[[int, int], int]] = {
  "+": operator.add,
  "-": operator.sub,
  "*": operator.mul,
  "/": operator.floordiv,
}

def _op(symbols: str) -> Parser[Callable[[int, int], int]]:
  return map(skip_ws(one_of(symbols)), OPERATORS.__getitem__)

arith = forward_decl()
factor: Parser[int] = choice([
  integer_p,
  between(skip_ws(char_p("(")), arith, skip_ws(char_p(")"))),
]).named("factor")
term: Parser[int] = chainl1(factor, _op("*/")).named("term")
arith.define(chainl1(term, _op("+-")))


if __name__ == "__main__":
  import sys
  from nomlite.parser_combinators import parse_all
  for expr in sys.argv[1:]:
    print(expr, "=", parse_all(arith, expr))
