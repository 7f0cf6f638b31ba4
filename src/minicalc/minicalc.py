"""Main MiniCalc class and function-level entry points."""

import logging
from typing import Iterable, List

from minicalc.minicalc_error import MiniCalcError
from minicalc.minicalc_interpreter import MiniCalcInterpreter
from minicalc.minicalc_token import MiniCalcToken
from minicalc.minicalc_tokenizer import MiniCalcTokenizer


class MiniCalc:
    """
    MiniCalc calculator: tokenizes and evaluates single binary integer expressions.

    Each stage is logged, and failures are logged before being re-raised to the caller.
    """

    def __init__(self, strict: bool = False):
        """
        Initialize MiniCalc.

        Args:
            strict: Reject unrecognised characters during tokenization instead of skipping them
        """
        self.strict = strict
        self._logger = logging.getLogger("MiniCalc")

    def tokenize(self, expression: str) -> List[MiniCalcToken]:
        """
        Tokenize an expression.

        Raises:
            MiniCalcTokenError: If tokenization fails
        """
        self._logger.debug("Tokenizing expression: %s", expression)

        try:
            tokens = MiniCalcTokenizer(strict=self.strict).tokenize(expression)

        except MiniCalcError as e:
            self._logger.warning("Tokenization failed for '%s': %s", expression, e.message, exc_info=True)
            raise

        self._logger.debug("Produced %d token(s): %s", len(tokens), tokens)
        return tokens

    def interpret(self, tokens: Iterable[MiniCalcToken]) -> int:
        """
        Evaluate a token sequence.

        Raises:
            MiniCalcEvalError: If evaluation fails
        """
        try:
            result = MiniCalcInterpreter().interpret(tokens)

        except MiniCalcError as e:
            self._logger.warning("Evaluation failed: %s", e.message, exc_info=True)
            raise

        self._logger.debug("Evaluation successful: %d", result)
        return result

    def evaluate(self, expression: str) -> int:
        """
        Tokenize and evaluate an expression.

        Args:
            expression: Expression string, e.g. "2 + 2"

        Returns:
            The integer result

        Raises:
            MiniCalcTokenError: If tokenization fails
            MiniCalcEvalError: If evaluation fails
        """
        return self.interpret(self.tokenize(expression))


def tokenize(expression: str) -> List[MiniCalcToken]:
    """Tokenize an expression using the default (permissive) tokenizer."""
    return MiniCalcTokenizer().tokenize(expression)


def interpret(tokens: Iterable[MiniCalcToken]) -> int:
    """Evaluate a token sequence."""
    return MiniCalcInterpreter().interpret(tokens)
