"""
Manifest header grammar: lexer, parser and the registry of known headers.
"""

from .keys import RecognizedHeader
from .model import ValueElement
from .parser import HeaderParser, parse_header

__all__ = ["RecognizedHeader", "ValueElement", "HeaderParser", "parse_header"]
