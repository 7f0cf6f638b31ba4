"""Exception classes for MiniCalc with detailed context."""

from typing import Optional, Sequence

from minicalc.minicalc_token import MiniCalcToken, MiniCalcTokenType


class MiniCalcError(Exception):
    """Base exception for MiniCalc errors with detailed context information."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            position: Character position where error occurred
            received: What was actually received
            expected: What was expected
            suggestion: Suggestion for fixing the error
        """
        self.message = message
        self.position = position
        self.received = received
        self.expected = expected
        self.suggestion = suggestion

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [self.message]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class MiniCalcTokenError(MiniCalcError):
    """Tokenization errors with detailed context."""


class MiniCalcEvalError(MiniCalcError):
    """Evaluation errors with detailed context."""


class MiniCalcUnexpectedTokenError(MiniCalcEvalError):
    """The evaluator found a token (or the end of input) where another kind was required."""

    def __init__(self, expected_kinds: Sequence[MiniCalcTokenType], found: MiniCalcToken | None):
        """
        Initialize unexpected token error.

        Args:
            expected_kinds: Token types that would have been accepted at this point
            found: The token actually found, or None at the end of input
        """
        self.expected_kinds = tuple(expected_kinds)
        self.found = found

        kinds = " or ".join(kind.name for kind in self.expected_kinds)
        found_text = found.describe() if found is not None else "none"

        super().__init__(
            message=f"Expected {kinds}, found {found_text}",
            position=found.position if found is not None else None,
            suggestion="Expressions take the form: <integer> + <integer> or <integer> - <integer>"
        )


class MiniCalcOverflowError(MiniCalcEvalError):
    """The result of an evaluation does not fit in a 32-bit signed integer."""
