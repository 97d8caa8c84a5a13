from dataclasses import dataclass
import logging
import os
import sys
from typing import IO, Iterable, Iterator

import cbor2
from tqdm import tqdm

from nomlite.words import classify, split_words

log = logging.getLogger("nomlite.tokenize_lines")


@dataclass
class Context:
    input_path: str
    output_path: str

    @property
    def input_size(self):
        return os.path.getsize(self.input_path)

@dataclass
class Summary:
    lines: int = 0
    ints: int = 0
    words: int = 0

def tokenize(lines: Iterable[str]) -> Iterator[dict]:
    """Turns each line into a record of its classified tokens. Blank lines are skipped."""
    for lineno, line in enumerate(lines, start=1):
        tokens = split_words(line)
        if len(tokens) == 0:
            continue
        yield {
            "line": lineno,
            "tokens": [list(classify(tok)) for tok in tokens],
        }

def write_records(records: Iterable[dict], outfile: IO[bytes]) -> Summary:
    summary = Summary()
    for record in records:
        cbor2.dump(record, outfile)
        summary.lines += 1
        for kind, _ in record["tokens"]:
            if kind == "int":
                summary.ints += 1
            else:
                summary.words += 1
    return summary

def create_token_file(ctx: Context) -> Summary:
    """Tokenizes every line of the input file into a stream of CBOR records. Undecodable bytes become U+FFFD."""
    with open(ctx.input_path, "r", encoding="utf-8", errors="replace") as fp, open(ctx.output_path, "wb") as outfile:
        with tqdm(total=ctx.input_size, unit_scale=True, unit_divisor=1024, unit="B") as progress:
            def lines() -> Iterator[str]:
                for line in fp:
                    progress.update(len(line.encode("utf-8")))
                    yield line
            return write_records(tokenize(lines()), outfile)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ctx = Context(
        input_path=sys.argv[1],
        output_path=sys.argv[2]
    )
    print(ctx)
    summary = create_token_file(ctx)
    log.info("wrote %d lines (%d ints, %d words) to %s", summary.lines, summary.ints, summary.words, ctx.output_path)
