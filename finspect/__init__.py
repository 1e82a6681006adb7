"""
Feature inspector: identity metadata of feature descriptors.
"""

from .errors import (
    FinspectError,
    IoFailure,
    MissingIdentityError,
    MalformedHeaderError,
    InvalidPatternError,
    ConfigError,
)
from .feature import Feature, NamePattern, Visibility
from .headers import RecognizedHeader, ValueElement, HeaderParser, parse_header

__all__ = [
    "Feature",
    "NamePattern",
    "Visibility",
    "RecognizedHeader",
    "ValueElement",
    "HeaderParser",
    "parse_header",
    "FinspectError",
    "IoFailure",
    "MissingIdentityError",
    "MalformedHeaderError",
    "InvalidPatternError",
    "ConfigError",
]
