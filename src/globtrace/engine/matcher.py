"""Matching engine: walks compiled tokens over a candidate string."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from .models import DEFAULT_SYNTAX, PatternSyntax
from .tokens import Alternatives, Literal, Span, Token

logger = logging.getLogger(__name__)


class MatchStep(NamedTuple):
    """One matched token and the part of the candidate it consumed."""

    token: Token
    span: Span

    @property
    def text(self) -> str:
        return self.span.text


def _match_token(token: Token, candidate: str, pos: int) -> int | None:
    """Return the cursor after ``token`` matches at ``pos``, or None if it does not."""
    if isinstance(token, Literal):
        text = token.text
        return pos + len(text) if candidate.startswith(text, pos) else None
    if isinstance(token, Alternatives):
        for option in token.options:
            text = option.text
            if candidate.startswith(text, pos):
                return pos + len(text)
        return None
    # Wildcard: one code point, and an exhausted candidate stops the scan.
    return pos + 1 if pos < len(candidate) else None


class Matcher:
    """A compiled pattern plus the token count reached by the latest match.

    Build one with :func:`globtrace.compile_pattern`. The token sequence never
    changes after compilation; ``most_tokens_matched`` is overwritten by every
    call to :meth:`match_string`, so a matcher shared between threads needs
    external locking.
    """

    __slots__ = ("pattern", "tokens", "syntax", "most_tokens_matched")

    def __init__(
        self, pattern: str, tokens: Sequence[Token], syntax: PatternSyntax = DEFAULT_SYNTAX
    ) -> None:
        self.pattern = pattern
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.syntax = syntax
        self.most_tokens_matched = 0

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"Matcher({self.pattern!r}, tokens={len(self.tokens)})"

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def match_string(self, candidate: str) -> list[MatchStep]:
        """Match tokens left to right, stopping at the first one that fails.

        Returned spans index into ``candidate``; returned tokens are this
        matcher's own. Never raises.
        """
        steps: list[MatchStep] = []
        pos = 0
        for token in self.tokens:
            end = _match_token(token, candidate, pos)
            if end is None:
                break
            steps.append(MatchStep(token, Span(candidate, pos, end)))
            pos = end
        self.most_tokens_matched = len(steps)
        logger.debug(
            "pattern %r matched %d of %d tokens against %r",
            self.pattern,
            len(steps),
            len(self.tokens),
            candidate,
        )
        return steps

    def matches(self, candidate: str) -> bool:
        return len(self.match_string(candidate)) == len(self.tokens)

    def match_all(self, candidates: Sequence[str]) -> list[bool]:
        return [self.matches(candidate) for candidate in candidates]
