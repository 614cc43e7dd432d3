"""Pattern compiler: turns pattern text into a :class:`Matcher`."""
from __future__ import annotations

import logging

from .matcher import Matcher
from .models import DEFAULT_SYNTAX, PatternSyntax
from .tokens import Alternatives, Literal, Span, Token, Wildcard

logger = logging.getLogger(__name__)


class MalformedPatternError(ValueError):
    """A group was opened but the rest of the pattern never closes it."""

    def __init__(self, pattern: str, position: int, close: str = ")") -> None:
        super().__init__(f"missing closing {close!r} for group opened at index {position}")
        self.pattern = pattern
        self.position = position


def _split_options(pattern: str, start: int, end: int, separator: str) -> tuple[Span, ...]:
    options: list[Span] = []
    pos = start
    while True:
        found = pattern.find(separator, pos, end)
        if found == -1:
            options.append(Span(pattern, pos, end))
            return tuple(options)
        options.append(Span(pattern, pos, found))
        pos = found + 1


def _next_marker(pattern: str, pos: int, syntax: PatternSyntax) -> int:
    found = [
        index
        for index in (pattern.find(syntax.wildcard, pos), pattern.find(syntax.group_open, pos))
        if index != -1
    ]
    return min(found) if found else len(pattern)


def tokenize_pattern(pattern: str, syntax: PatternSyntax | None = None) -> list[Token]:
    """Scan ``pattern`` left to right into literal, wildcard and group tokens.

    A group ends at the first close marker after it opens, so an open marker
    inside a group is plain option text. Close and separator markers outside a
    group are plain literal text.

    Raises:
        MalformedPatternError: a group has no close marker.
    """
    if syntax is None:
        syntax = DEFAULT_SYNTAX
    tokens: list[Token] = []
    pos = 0
    while pos < len(pattern):
        ch = pattern[pos]
        if ch == syntax.wildcard:
            tokens.append(Wildcard(Span(pattern, pos, pos + 1)))
            pos += 1
        elif ch == syntax.group_open:
            close = pattern.find(syntax.group_close, pos + 1)
            if close == -1:
                logger.debug("unterminated group at index %d in %r", pos, pattern)
                raise MalformedPatternError(pattern, pos, syntax.group_close)
            options = _split_options(pattern, pos + 1, close, syntax.separator)
            tokens.append(Alternatives(Span(pattern, pos, close + 1), options))
            pos = close + 1
        else:
            end = _next_marker(pattern, pos + 1, syntax)
            tokens.append(Literal(Span(pattern, pos, end)))
            pos = end
    return tokens


def compile_pattern(pattern: str, syntax: PatternSyntax | None = None) -> Matcher:
    if syntax is None:
        syntax = DEFAULT_SYNTAX
    tokens = tokenize_pattern(pattern, syntax)
    logger.debug("compiled %r into %d tokens", pattern, len(tokens))
    return Matcher(pattern, tokens, syntax)
