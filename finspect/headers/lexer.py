"""
Lexer for manifest header values.

Splits a raw header value into the elements the clause grammar cares about:
- Delimiters (',' between clauses, ';' between segments)
- Assignment operators (':=' for directives, '=' for attributes)
- Quoted strings (delimiters inside quotes are plain text)
- Plain text runs and whitespace (whitespace is kept, the parser trims it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List


@dataclass
class Token:
    """
    Token of a header value.

    Attributes:
        type: Token type (COMMA, SEMICOLON, ASSIGN, QUOTED, TEXT, WHITESPACE, EOF)
        value: Token text; for QUOTED the unquoted, unescaped content
        position: Offset in the raw header value
    """
    type: str
    value: str
    position: int

    def __repr__(self):
        return f"Token({self.type}, '{self.value}', pos={self.position})"


class HeaderLexerError(ValueError):
    """Tokenization failure; the parser turns it into MalformedHeaderError."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"{message} at position {position}")


_ESCAPE = re.compile(r"\\(.)", re.DOTALL)


class HeaderLexer:
    """
    Lexer that breaks a header value into tokens.

    Quoted strings are recognized before any delimiter so that
    commas and semicolons inside quotes never split a clause.
    """

    # Token specification: (regex_pattern, token_type)
    TOKEN_SPECS = [
        (r'"(?:[^"\\]|\\.)*"', 'QUOTED'),
        (r'"', 'UNTERMINATED'),
        (r'\s+', 'WHITESPACE'),
        (r',', 'COMMA'),
        (r';', 'SEMICOLON'),
        (r':=', 'ASSIGN'),
        (r'=', 'ASSIGN'),
        # Anything else up to the next delimiter; a lone ':' is plain text
        (r'(?:[^\s,;=":]|:(?!=))+', 'TEXT'),
    ]

    def __init__(self):
        self._compiled_patterns = [
            (re.compile(pattern, re.DOTALL), token_type)
            for pattern, token_type in self.TOKEN_SPECS
        ]

    def tokenize(self, text: str) -> List[Token]:
        """
        Breaks a header value into tokens.

        Args:
            text: Raw header value

        Returns:
            List of tokens, EOF included

        Raises:
            HeaderLexerError: On an unterminated quoted string
        """
        tokens: List[Token] = []
        position = 0

        while position < len(text):
            for pattern, token_type in self._compiled_patterns:
                match = pattern.match(text, position)
                if not match:
                    continue

                value = match.group(0)
                if token_type == 'UNTERMINATED':
                    raise HeaderLexerError("Unterminated quoted string", position)
                if token_type == 'QUOTED':
                    value = _ESCAPE.sub(r"\1", value[1:-1])

                tokens.append(Token(type=token_type, value=value, position=position))
                position = match.end()
                break
            else:
                # Unreachable: TEXT takes any remaining character
                raise HeaderLexerError("Failed to tokenize", position)

        tokens.append(Token(type='EOF', value='', position=position))
        return tokens


__all__ = ["Token", "HeaderLexer", "HeaderLexerError"]
