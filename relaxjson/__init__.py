"""
relaxjson - parser for a small, relaxed JSON dialect.

The dialect is JSON with one relaxation: strings may be quoted with single
or double quotes. Everything else is strict: no trailing commas, no
unquoted keys, no exponents, no comments.

Quick Start:
    import relaxjson

    doc = relaxjson.parse("{'name': 'api', 'port': 8080}")
    doc["port"]            # Number(value=8080.0)
    doc.to_python()        # {'name': 'api', 'port': 8080.0}

    # json-style API returning plain Python data
    data = relaxjson.loads('[1, 2, "three"]')

    # Errors
    from relaxjson import ParseError
    try:
        relaxjson.parse('[1, 2,]')
    except ParseError as e:
        print(e.message)
"""

from .core.engine import Parser, dumps, load, loads, parse
from .core.token_stream import TokenStream
from .core.tokenizer import Lexer, Position, Span, Token, TokenType
from .core.values import (
    Array, Boolean, JsonValue, Null, Number, Object, String, Value, ValueKind,
    from_python,
)
from .security.exceptions import JSONDecodeError, ParseError, RelaxJSONError, SecurityError
from .utils.config import (
    DuplicateKeyPolicy, ErrorReporting, ParseConfig, ParseLimits, ParsingBehavior,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "parse", "loads", "load", "dumps",
    # Layers
    "Lexer", "Token", "TokenType", "Position", "Span", "TokenStream", "Parser",
    # Value tree
    "Value", "JsonValue", "ValueKind", "Null", "Boolean", "Number", "String",
    "Array", "Object", "from_python",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ParsingBehavior", "ErrorReporting",
    "DuplicateKeyPolicy",
    # Exception classes
    "RelaxJSONError", "ParseError", "SecurityError", "JSONDecodeError",
]
