"""
Common constants and mappings used across the relaxjson library.
"""

# Import here to avoid circular imports
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenType

# Escape sequences recognized inside string literals. Any other escaped
# character is passed through as-is.
ESCAPE_MAP = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

QUOTE_CHARS = "\"'"
WHITESPACE_CHARS = " \t\r"
DIGITS = "0123456789"
ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def get_structural_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of structural characters to TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
    }


def get_keyword_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of reserved words to their TokenType enums."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "true": TokenType.BOOLEAN,
        "false": TokenType.BOOLEAN,
        "null": TokenType.NULL,
    }
