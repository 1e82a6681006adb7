"""
Parser of manifest header values.

Turns a raw header value into an ordered list of ValueElement.

Grammar:
header   → clause ("," clause)*
clause   → id (";" segment)*
segment  → name ":=" value | name "=" value | marker
value    → (TEXT | QUOTED | WHITESPACE)*

Whitespace next to a delimiter is trimmed; whitespace inside quotes is kept.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..errors import MalformedHeaderError
from .lexer import HeaderLexer, HeaderLexerError, Token
from .model import ValueElement

logger = logging.getLogger(__name__)

_SEGMENT_END = ('COMMA', 'SEMICOLON', 'EOF')


class HeaderParser:
    """
    Parser of comma-separated clause lists.

    One instance may be reused for many headers; the state is reset
    on every call to parse().
    """

    def __init__(self):
        self.lexer = HeaderLexer()
        self._tokens: List[Token] = []
        self._position = 0
        self._header = ""
        self._raw = ""

    def parse(
        self,
        raw: Optional[str],
        *,
        header: str = "<header>",
        multi_valued: bool = True,
    ) -> List[ValueElement]:
        """
        Parses a header value into clauses.

        Args:
            raw: Raw header value, None if the header is absent
            header: Header name, used in error messages
            multi_valued: False to take the whole value as a single id

        Returns:
            Clauses in source order; empty for an absent or blank value

        Raises:
            MalformedHeaderError: On an empty id or an unterminated quote
        """
        if raw is None or not raw.strip():
            return []

        if not multi_valued:
            return [ValueElement(id=raw.strip())]

        self._header = header
        self._raw = raw
        try:
            self._tokens = self.lexer.tokenize(raw)
        except HeaderLexerError as e:
            raise self._error(str(e)) from e
        self._position = 0

        elements = [self._parse_clause()]
        while self._match('COMMA'):
            elements.append(self._parse_clause())

        if not self._is_at_end():
            current = self._current_token()
            raise self._error(f"unexpected '{current.value}' at position {current.position}")

        logger.debug("%s: parsed %d clause(s)", header, len(elements))
        return elements

    def _parse_clause(self) -> ValueElement:
        start = self._current_token().position
        segments = [self._collect_segment()]
        while self._match('SEMICOLON'):
            segments.append(self._collect_segment())

        id_segment = segments[0]
        if any(tok.type == 'ASSIGN' for tok in id_segment):
            raise self._error(f"clause at position {start} does not start with an identifier")
        ident = _join(id_segment)
        if not ident:
            raise self._error(f"empty identifier in clause at position {start}")

        qualifiers: Dict[str, str] = {}
        markers: List[str] = []
        for segment in segments[1:]:
            assign_at = next((i for i, tok in enumerate(segment) if tok.type == 'ASSIGN'), None)
            if assign_at is None:
                marker = _join(segment)
                if marker:
                    markers.append(marker)
                continue
            name = _join(segment[:assign_at])
            if not name:
                raise self._error(f"qualifier without a name in clause '{ident}'")
            # Duplicates: the last one wins
            qualifiers[name] = _join(segment[assign_at + 1:])

        return ValueElement(id=ident, qualifiers=qualifiers, markers=tuple(markers))

    def _collect_segment(self) -> List[Token]:
        """Collects tokens up to the next ',' / ';' / EOF."""
        segment: List[Token] = []
        while self._current_token().type not in _SEGMENT_END:
            segment.append(self._advance())
        return segment

    # ---- Navigation helpers ----

    def _current_token(self) -> Token:
        if self._position >= len(self._tokens):
            return self._tokens[-1]
        return self._tokens[self._position]

    def _advance(self) -> Token:
        token = self._current_token()
        if not self._is_at_end():
            self._position += 1
        return token

    def _match(self, token_type: str) -> bool:
        if self._current_token().type == token_type:
            self._advance()
            return True
        return False

    def _is_at_end(self) -> bool:
        return self._current_token().type == 'EOF'

    def _error(self, reason: str) -> MalformedHeaderError:
        return MalformedHeaderError(self._header, self._raw, reason)


def _join(tokens: List[Token]) -> str:
    """Concatenates segment tokens, dropping whitespace at both ends."""
    start, end = 0, len(tokens)
    while start < end and tokens[start].type == 'WHITESPACE':
        start += 1
    while end > start and tokens[end - 1].type == 'WHITESPACE':
        end -= 1
    return "".join(tok.value for tok in tokens[start:end])


def parse_header(
    raw: Optional[str],
    *,
    header: str = "<header>",
    multi_valued: bool = True,
) -> List[ValueElement]:
    """Shortcut for HeaderParser().parse(...)."""
    return HeaderParser().parse(raw, header=header, multi_valued=multi_valued)


__all__ = ["HeaderParser", "parse_header"]
