"""
relaxjson Core Parsing Engine.

This module provides the lexer, token cursor, tree builder and value types.
"""

from .engine import Parser, parse
from .token_stream import TokenStream
from .tokenizer import Lexer, Position, Span, Token, TokenType
from .values import (
    Array, Boolean, JsonValue, Null, Number, Object, String, Value, ValueKind,
    from_python,
)

__all__ = [
    'parse', 'Parser',
    'Lexer', 'Token', 'TokenType', 'Position', 'Span',
    'TokenStream',
    'Value', 'JsonValue', 'ValueKind', 'Null', 'Boolean', 'Number', 'String',
    'Array', 'Object', 'from_python',
]
