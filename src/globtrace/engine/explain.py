"""Explanation helpers that read back a match trace."""
from __future__ import annotations

from .matcher import Matcher
from .tokens import token_to_json


def explain_dict(matcher: Matcher, candidate: str) -> dict[str, object]:
    steps = matcher.match_string(candidate)
    matched = len(steps)
    consumed = steps[-1].span.end if steps else 0
    failed_at = None
    if matched < len(matcher.tokens):
        failed_at = {"index": matched, **token_to_json(matcher.tokens[matched])}
    return {
        "pattern": matcher.pattern,
        "candidate": candidate,
        "tokens_total": len(matcher.tokens),
        "tokens_matched": matched,
        "full_match": failed_at is None,
        "consumed": consumed,
        "remainder": candidate[consumed:],
        "steps": [
            {"index": index, **token_to_json(step.token), "matched": step.text}
            for index, step in enumerate(steps)
        ],
        "failed_at": failed_at,
    }


def explain_text(matcher: Matcher, candidate: str) -> str:
    payload = explain_dict(matcher, candidate)
    lines = [
        f"PATTERN: {payload['pattern']}",
        f"CANDIDATE: {payload['candidate']}",
        f"MATCHED {payload['tokens_matched']} of {payload['tokens_total']} tokens "
        f"(consumed {payload['consumed']} chars)",
    ]
    for step in payload["steps"]:
        lines.append(
            f"  [{step['index']}] {step['kind']:<12} {step['pattern']!r} -> {step['matched']!r}"
        )
    failed = payload["failed_at"]
    if failed is not None:
        lines.append(
            f"STOPPED AT [{failed['index']}] {failed['kind']} {failed['pattern']!r} "
            f"with remainder {payload['remainder']!r}"
        )
    return "\n".join(lines)
