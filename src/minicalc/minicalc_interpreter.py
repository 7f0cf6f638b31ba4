"""Interpreter for MiniCalc token sequences."""

import logging
import operator
from typing import Callable, Iterable

from minicalc.minicalc_cursor import MiniCalcCursor
from minicalc.minicalc_error import MiniCalcOverflowError, MiniCalcUnexpectedTokenError
from minicalc.minicalc_token import MiniCalcToken, MiniCalcTokenType
from minicalc.minicalc_tokenizer import MINICALC_INT_MAX, MINICALC_INT_MIN


class MiniCalcInterpreter:
    """
    Evaluates a token sequence using the grammar:

        expr := INTEGER (PLUS | MINUS) INTEGER

    Any tokens following a complete expression are ignored.
    """

    BINARY_OPERATORS: dict[MiniCalcTokenType, Callable[[int, int], int]] = {
        MiniCalcTokenType.PLUS: operator.add,
        MiniCalcTokenType.MINUS: operator.sub,
    }

    def __init__(self) -> None:
        self._logger = logging.getLogger("MiniCalcInterpreter")

    def interpret(self, tokens: Iterable[MiniCalcToken]) -> int:
        """
        Evaluate a token sequence.

        Args:
            tokens: Tokens to evaluate, from the tokenizer or built by hand

        Returns:
            The integer result

        Raises:
            MiniCalcUnexpectedTokenError: If a token is missing or of the wrong kind
            MiniCalcOverflowError: If the result does not fit in a 32-bit signed integer
        """
        cursor = MiniCalcCursor(tokens)
        result = self._expr(cursor)

        if not cursor.at_end():
            self._logger.debug(
                "Ignoring %d trailing token(s) starting at %s",
                len(cursor.tokens) - cursor.pos,
                cursor.current()
            )

        return result

    def _expr(self, cursor: MiniCalcCursor) -> int:
        """Evaluate a single binary expression at the cursor."""
        left = cursor.expect(MiniCalcTokenType.INTEGER)

        token = cursor.current()
        if token is None or token.type not in self.BINARY_OPERATORS:
            raise MiniCalcUnexpectedTokenError(tuple(self.BINARY_OPERATORS), token)

        cursor.advance()

        right = cursor.expect(MiniCalcTokenType.INTEGER)

        result = self.BINARY_OPERATORS[token.type](left, right)
        if not MINICALC_INT_MIN <= result <= MINICALC_INT_MAX:
            raise MiniCalcOverflowError(
                message=f"Integer overflow: {left} {token.type.value} {right}",
                position=token.position,
                received=f"Result: {result}",
                expected=f"Result between {MINICALC_INT_MIN} and {MINICALC_INT_MAX}"
            )

        return result
