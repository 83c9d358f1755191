"""
relaxjson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    ErrorContext, ErrorReporter, ErrorSuggestionEngine, JSONDecodeError,
    ParseError, RelaxJSONError, SecurityError,
)
from .limits import LimitValidator

__all__ = [
    'RelaxJSONError', 'ParseError', 'SecurityError', 'JSONDecodeError',
    'ErrorContext', 'ErrorReporter', 'ErrorSuggestionEngine', 'LimitValidator',
]
