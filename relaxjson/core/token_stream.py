"""
Replayable cursor over a tokenized document.
"""

from collections.abc import Sequence

from .tokenizer import Position, Span, Token, TokenType


def _eof_after(tokens: Sequence[Token]) -> Token:
    """EOF token placed just past the last token, or at 0:0 for no tokens."""
    if not tokens:
        return Token(TokenType.EOF, "", Position(0, 0), Span(0, 0))
    last = tokens[-1]
    width = last.span.end - last.span.start
    return Token(
        TokenType.EOF,
        "",
        Position(last.line, last.column + width),
        Span(last.span.end, last.span.end),
    )


class TokenStream:
    """Positional view over an immutable token sequence.

    The sequence always ends with EOF: lexer output already does, and any
    other sequence gets one appended. ``position`` may run past the end.
    Every accessor clamps to that final EOF instead of raising, so repeated
    reads past the end keep returning the same sentinel.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].type != TokenType.EOF:
            tokens = [*tokens, _eof_after(tokens)]
        self._tokens = tuple(tokens)
        self.position = 0

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def current(self) -> Token:
        """Token at the cursor, or EOF once past the end."""
        if self.position >= len(self._tokens):
            return self._tokens[-1]
        return self._tokens[self.position]

    def previous(self) -> Token:
        """Token just before the cursor.

        Clamps to the first token at position 0 and to EOF once the position
        is past the end.
        """
        if self.position == 0:
            return self._tokens[0]
        if self.position > len(self._tokens):
            return self._tokens[-1]
        return self._tokens[self.position - 1]

    def advance(self) -> Token:
        """Move forward one token and return the token that was consumed."""
        self.position += 1
        return self.previous()

    def look_ahead(self, k: int) -> Token:
        """Token ``k`` positions beyond the current one, clamped to EOF."""
        if k < 0:
            raise ValueError(f"look_ahead distance must be non-negative, got {k}")
        index = self.position + k
        if index >= len(self._tokens):
            return self._tokens[-1]
        return self._tokens[index]

    def backtrack(self) -> None:
        """Undo one advance()."""
        if self.position == 0:
            raise IndexError("cannot backtrack before the first token")
        self.position -= 1

    def is_at_end(self) -> bool:
        return self.current().type == TokenType.EOF
