"""globtrace: compile glob-like patterns and trace how far candidates match."""

from .engine.compiler import MalformedPatternError, compile_pattern, tokenize_pattern
from .engine.explain import explain_dict, explain_text
from .engine.matcher import Matcher, MatchStep
from .engine.models import DEFAULT_SYNTAX, PatternSyntax, TokenKind
from .engine.tokens import Alternatives, Literal, Span, Token, Wildcard

__all__ = [
    "compile_pattern",
    "tokenize_pattern",
    "MalformedPatternError",
    "Matcher",
    "MatchStep",
    "PatternSyntax",
    "DEFAULT_SYNTAX",
    "TokenKind",
    "Token",
    "Literal",
    "Alternatives",
    "Wildcard",
    "Span",
    "explain_dict",
    "explain_text",
]
