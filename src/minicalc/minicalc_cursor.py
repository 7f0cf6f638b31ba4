"""Cursor over a sequence of MiniCalc tokens."""

from typing import Any, Iterable

from minicalc.minicalc_error import MiniCalcUnexpectedTokenError
from minicalc.minicalc_token import MiniCalcToken, MiniCalcTokenType


class MiniCalcCursor:
    """
    Tracks a read position within a token sequence.

    The position always stays within [0, len(tokens)].  Reading at the end yields None.
    """

    def __init__(self, tokens: Iterable[MiniCalcToken]) -> None:
        self.tokens: tuple[MiniCalcToken, ...] = tuple(tokens)
        self.pos = 0

    def current(self) -> MiniCalcToken | None:
        """Return the token at the cursor, or None if the cursor is past the end."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]

        return None

    def advance(self) -> None:
        """Move to the next token."""
        if self.pos < len(self.tokens):
            self.pos += 1

    def at_end(self) -> bool:
        """Check whether all tokens have been consumed."""
        return self.pos >= len(self.tokens)

    def expect(self, token_type: MiniCalcTokenType) -> Any:
        """
        Consume a token of the given type.

        Args:
            token_type: The token type required at the cursor

        Returns:
            The value carried by the consumed token (None for structural tokens)

        Raises:
            MiniCalcUnexpectedTokenError: If the current token has a different type or there
                are no tokens left
        """
        token = self.current()
        if token is None or token.type != token_type:
            raise MiniCalcUnexpectedTokenError((token_type,), token)

        self.advance()
        return token.value
