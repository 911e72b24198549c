"""
Configuration package for findit.

This package turns command-line arguments into a validated search
configuration.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    USAGE,
    parse_args
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'USAGE',
    'parse_args'
]
