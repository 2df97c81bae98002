"""Parse affinity requirement strings into AffinityRequirement objects.

Grammar (one line = one requirement; commas separate clauses):

    requirement := clause ("," clause)*
    clause      := total | term
    total       := "(" NUMBER ")"
    term        := NUMBER colors
    colors      := "(" color_list ")" | color_list
    color_list  := COLOR ("|" COLOR)*

A single bare colour is an AND-term ("7B"). A parenthesised set or a
pipe-separated list is an OR-term; "9R|G" and "9(R|G)" parse identically.
The total is the last "(N)" group anywhere in the line, whether or not a
comma sets it apart ("7B (9)" is 7B with total 9). Any earlier totals are
ignored. Whitespace is insignificant.

Ability data is hand-entered, so clauses that don't fit the grammar are
skipped rather than rejected. Nothing in this module raises for bad text.

Multi-rank abilities list one requirement per line ("\\n" or "\\r\\n").
"""

import re
from functools import lru_cache
from typing import NamedTuple

from bp_planner.models.ability import (
    EMPTY_REQUIREMENT,
    AffinityColorReq,
    AffinityRequirement,
)
from bp_planner.models.ranks import pick_by_rank


_TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<NUMBER>\d+)"
    r"|(?P<COLOR>[A-Z])"
    r"|(?P<LPAREN>\()"
    r"|(?P<RPAREN>\))"
    r"|(?P<PIPE>\|)"
    r"|(?P<COMMA>,)"
    r"|(?P<OTHER>\S)"
    r")"
)

_LINE_SPLIT_RE = re.compile(r"\r?\n")


class Token(NamedTuple):
    kind: str   # NUMBER | COLOR | LPAREN | RPAREN | PIPE | COMMA | OTHER
    text: str


class _NoMatch(Exception):
    """Internal: the clause doesn't fit the grammar."""


def tokenize(text: str) -> list[Token]:
    """Split requirement text into tokens, dropping whitespace."""
    return [Token(m.lastgroup, m.group(m.lastgroup)) for m in _TOKEN_RE.finditer(text)]


_TOTAL_KINDS = ("LPAREN", "NUMBER", "RPAREN")


def _extract_total(tokens: list[Token]) -> tuple[int, list[Token]]:
    """Pull the last ``( NUMBER )`` group out of the stream.

    Returns the total (0 if there is none) and the remaining tokens.
    """
    for start in range(len(tokens) - 3, -1, -1):
        if tuple(t.kind for t in tokens[start:start + 3]) == _TOTAL_KINDS:
            return int(tokens[start + 1].text), tokens[:start] + tokens[start + 3:]
    return 0, tokens


def _split_clauses(tokens: list[Token]) -> list[list[Token]]:
    clauses: list[list[Token]] = [[]]
    for tok in tokens:
        if tok.kind == "COMMA":
            clauses.append([])
        else:
            clauses[-1].append(tok)
    return [c for c in clauses if c]


class _ClauseParser:
    """Recursive-descent parser for a single comma-free clause."""

    __slots__ = ("_tokens", "_pos")

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> str | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos].kind
        return None

    def _expect(self, kind: str) -> str:
        if self._peek() != kind:
            raise _NoMatch
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok.text

    def _end(self) -> None:
        if self._pos != len(self._tokens):
            raise _NoMatch

    def parse(self) -> AffinityColorReq | int:
        """Return a term, or an int for a total clause."""
        if self._peek() == "LPAREN":
            return self._total()
        return self._term()

    def _total(self) -> int:
        self._expect("LPAREN")
        amount = int(self._expect("NUMBER"))
        self._expect("RPAREN")
        self._end()
        return amount

    def _term(self) -> AffinityColorReq:
        amount = int(self._expect("NUMBER"))
        if self._peek() == "LPAREN":
            self._expect("LPAREN")
            colors = self._color_list()
            self._expect("RPAREN")
            is_or = True
        else:
            colors = self._color_list()
            is_or = len(colors) > 1
        self._end()
        return AffinityColorReq(colors=tuple(colors), is_or=is_or, amount=amount)

    def _color_list(self) -> list[str]:
        colors = [self._expect("COLOR")]
        while self._peek() == "PIPE":
            self._expect("PIPE")
            colors.append(self._expect("COLOR"))
        return colors


def parse_clause(tokens: list[Token]) -> AffinityColorReq | int | None:
    """Parse one clause; None if it doesn't fit the grammar."""
    try:
        return _ClauseParser(tokens).parse()
    except _NoMatch:
        return None


@lru_cache(maxsize=1024)
def parse_affinity_req(req_string: str | None) -> AffinityRequirement:
    """Parse a single-rank requirement such as ``"4R,5(B|R),(12)"``."""
    if not req_string or not req_string.strip():
        return EMPTY_REQUIREMENT

    total, rest = _extract_total(tokenize(req_string))
    terms = [
        parsed
        for parsed in map(parse_clause, _split_clauses(rest))
        if isinstance(parsed, AffinityColorReq)
    ]
    return AffinityRequirement(requirements=tuple(terms), total=total)


@lru_cache(maxsize=1024)
def parse_affinity_req_by_rank(req_string: str | None) -> tuple[AffinityRequirement, ...]:
    """Parse one requirement per non-empty line; never returns an empty tuple."""
    if not req_string or not req_string.strip():
        return (EMPTY_REQUIREMENT,)
    lines = [line for line in _LINE_SPLIT_RE.split(req_string) if line.strip()]
    return tuple(parse_affinity_req(line) for line in lines)


def affinity_req_for_rank(req_string: str | None, rank: int) -> AffinityRequirement:
    """Requirement for a 0-indexed rank; out-of-range ranks use rank 0."""
    reqs = parse_affinity_req_by_rank(req_string)
    return pick_by_rank(reqs, rank, overflow="first", default=EMPTY_REQUIREMENT)


def format_affinity_req(requirement: AffinityRequirement) -> str:
    """Render a requirement back to canonical text (OR-terms parenthesised)."""
    parts: list[str] = []
    for term in requirement.requirements:
        if term.is_or:
            parts.append(f"{term.amount}({'|'.join(term.colors)})")
        else:
            parts.append(f"{term.amount}{term.colors[0]}")
    if requirement.total:
        parts.append(f"({requirement.total})")
    return ",".join(parts)
