"""
Name patterns for selecting features.

A pattern is "syntax:body" where syntax is "glob" or "regex";
without a ':' the whole pattern is a glob. Matching is case-insensitive
and always covers the whole name.

Glob syntax (names have no directory structure, so '*' and '**' are the same):
- *        any run of characters
- ?        exactly one character
- [a-z]    character class; [!a-z] or [^a-z] negates it
- {a,b}    alternatives
- \\x      the character x literally
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from ..errors import InvalidPatternError

DEFAULT_SYNTAX = "glob"

_GLOB_TOKEN_SPECS = [
    (r'\\(.)', 'ESCAPE'),
    (r'\\', 'DANGLING'),
    (r'\*+', 'STAR'),
    (r'\?', 'ANY'),
    (r'\[', 'CLASS'),
    (r'\{', 'GROUP_OPEN'),
    (r'\}', 'GROUP_CLOSE'),
    (r',', 'COMMA'),
    (r'[^\\*?\[{},]+', 'LITERAL'),
]

_GLOB_TOKENS = [(re.compile(p, re.DOTALL), t) for p, t in _GLOB_TOKEN_SPECS]


def translate_glob(glob: str) -> str:
    """
    Compiles a glob into an (unanchored) regular expression.

    Raises:
        InvalidPatternError: On an unclosed class/group or a dangling backslash
    """
    out: List[str] = []
    depth = 0
    position = 0

    while position < len(glob):
        for pattern, token_type in _GLOB_TOKENS:
            match = pattern.match(glob, position)
            if match:
                break
        else:  # pragma: no cover - LITERAL covers the rest
            raise InvalidPatternError(glob, f"unexpected character at position {position}")

        if token_type == 'ESCAPE':
            out.append(re.escape(match.group(1)))
        elif token_type == 'DANGLING':
            raise InvalidPatternError(glob, "trailing backslash")
        elif token_type == 'STAR':
            out.append(".*")
        elif token_type == 'ANY':
            out.append(".")
        elif token_type == 'CLASS':
            cls_regex, end = _translate_class(glob, position)
            out.append(cls_regex)
            position = end
            continue
        elif token_type == 'GROUP_OPEN':
            depth += 1
            out.append("(?:")
        elif token_type == 'GROUP_CLOSE':
            if depth:
                depth -= 1
                out.append(")")
            else:
                out.append(re.escape("}"))
        elif token_type == 'COMMA':
            out.append("|" if depth else ",")
        else:
            out.append(re.escape(match.group(0)))

        position = match.end()

    if depth:
        raise InvalidPatternError(glob, "unclosed '{' group")
    return "".join(out)


def _translate_class(glob: str, start: int) -> tuple[str, int]:
    """Translates the class starting at glob[start] == '['; returns (regex, end)."""
    i = start + 1
    negate = i < len(glob) and glob[i] in "!^"
    if negate:
        i += 1
    body_start = i
    # A ']' right after the opening bracket is a member, not the end
    if i < len(glob) and glob[i] == "]":
        i += 1
    close = glob.find("]", i)
    if close < 0:
        raise InvalidPatternError(glob, f"unclosed character class at position {start}")

    body = glob[body_start:close]
    body = body.replace("\\", "\\\\").replace("[", "\\[").replace("]", "\\]")
    if not negate and body.startswith("^"):
        body = "\\" + body
    return f"[{'^' if negate else ''}{body}]", close + 1


@dataclass(frozen=True)
class NamePattern:
    """A compiled, lower-cased name pattern."""
    source: str
    syntax: str
    regex: Pattern[str]

    @classmethod
    def compile(cls, pattern: str) -> NamePattern:
        lowered = pattern.lower()
        syntax, sep, body = lowered.partition(":")
        if not sep:
            syntax, body = DEFAULT_SYNTAX, lowered

        if syntax == "glob":
            expr = translate_glob(body)
        elif syntax == "regex":
            expr = body
        else:
            raise InvalidPatternError(pattern, f"unknown syntax '{syntax}' (expected 'glob' or 'regex')")

        try:
            regex = re.compile(expr, re.DOTALL)
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
        return cls(source=pattern, syntax=syntax, regex=regex)

    def matches(self, candidate: str) -> bool:
        return self.regex.fullmatch(candidate.lower()) is not None

    def matches_names(self, short_name: Optional[str], full_name: str) -> bool:
        """Short name first (if any), then the full name."""
        if short_name is not None and self.matches(short_name):
            return True
        return self.matches(full_name)


__all__ = ["NamePattern", "translate_glob", "DEFAULT_SYNTAX"]
