"""Tokenizer for MiniCalc expressions."""

from typing import List

from minicalc.minicalc_error import MiniCalcTokenError
from minicalc.minicalc_token import MiniCalcToken, MiniCalcTokenType


# Integers are 32-bit signed values
MINICALC_INT_MIN = -2**31
MINICALC_INT_MAX = 2**31 - 1


class MiniCalcTokenizer:
    """
    Tokenizes MiniCalc expressions into tokens.

    The tokenizer is permissive by default: characters that do not start any token are
    silently dropped.  With strict set, they raise a MiniCalcTokenError instead.
    """

    SINGLE_CHAR_TOKENS = {
        '(': MiniCalcTokenType.LPAREN,
        ')': MiniCalcTokenType.RPAREN,
        '+': MiniCalcTokenType.PLUS,
        '-': MiniCalcTokenType.MINUS,
        '*': MiniCalcTokenType.MULTIPLY,
        '/': MiniCalcTokenType.DIVIDE,
    }

    def __init__(self, strict: bool = False) -> None:
        """
        Initialize the tokenizer.

        Args:
            strict: Raise an error on unrecognised characters instead of skipping them
        """
        self.strict = strict

    def tokenize(self, expression: str) -> List[MiniCalcToken]:
        """
        Tokenize a MiniCalc expression.

        Args:
            expression: The expression string to tokenize

        Returns:
            List of tokens

        Raises:
            MiniCalcTokenError: If an integer literal is out of range, or, in strict mode,
                if an unrecognised character is found
        """
        tokens = []
        i = 0

        while i < len(expression):
            char = expression[i]

            if char == ' ':
                i += 1
                continue

            token_type = self.SINGLE_CHAR_TOKENS.get(char)
            if token_type is not None:
                tokens.append(MiniCalcToken(token_type, position=i))
                i += 1
                continue

            if self._is_digit(char):
                number, length = self._read_integer(expression, i)
                tokens.append(MiniCalcToken(MiniCalcTokenType.INTEGER, number, i))
                i += length
                continue

            if self._is_lower(char):
                identifier, length = self._read_identifier(expression, i)
                tokens.append(MiniCalcToken(MiniCalcTokenType.IDENTIFIER, identifier, i))
                i += length
                continue

            if char == "'":
                string_value, length = self._read_string(expression, i)
                tokens.append(MiniCalcToken(MiniCalcTokenType.STRING, string_value, i))
                i += length
                continue

            if self.strict and not char.isspace():
                raise MiniCalcTokenError(
                    message=f"Invalid character: {char}",
                    position=i,
                    received=f"Character: {char!r} (code {ord(char)})",
                    expected="Digits, lowercase letters, quoted strings, spaces or one of ( ) + - * /",
                    suggestion="Remove the character or disable strict tokenization"
                )

            i += 1

        return tokens

    def _is_digit(self, char: str) -> bool:
        """Check for an ASCII decimal digit."""
        return '0' <= char <= '9'

    def _is_lower(self, char: str) -> bool:
        """Check for an ASCII lowercase letter."""
        return 'a' <= char <= 'z'

    def _read_integer(self, expression: str, start: int) -> tuple[int, int]:
        """
        Read a run of decimal digits from the expression.

        Returns:
            Tuple of (integer_value, length_consumed)

        Raises:
            MiniCalcTokenError: If the value does not fit in a 32-bit signed integer
        """
        i = start + 1
        while i < len(expression) and self._is_digit(expression[i]):
            i += 1

        digits = expression[start:i]

        # Check the length first: int() refuses very long digit strings
        significant = digits.lstrip('0')
        if len(significant) > len(str(MINICALC_INT_MAX)) or int(significant or '0') > MINICALC_INT_MAX:
            shown = digits if len(digits) <= 40 else f"{digits[:40]}... ({len(digits)} digits)"
            raise MiniCalcTokenError(
                message=f"Failed to parse number: {shown}",
                position=start,
                received=f"Integer literal: {shown}",
                expected=f"Integer no larger than {MINICALC_INT_MAX}",
                suggestion="Use a smaller integer"
            )

        return int(significant or '0'), i - start

    def _read_identifier(self, expression: str, start: int) -> tuple[str, int]:
        """
        Read an identifier: a lowercase letter followed by lowercase letters and digits.

        Returns:
            Tuple of (identifier, length_consumed)
        """
        i = start + 1
        while i < len(expression) and (self._is_lower(expression[i]) or self._is_digit(expression[i])):
            i += 1

        return expression[start:i], i - start

    def _read_string(self, expression: str, start: int) -> tuple[str, int]:
        """
        Read a single-quoted string literal verbatim.

        A literal with no closing quote ends silently at the end of the input.

        Returns:
            Tuple of (string_value, length_consumed)
        """
        end = expression.find("'", start + 1)
        if end == -1:
            return expression[start + 1:], len(expression) - start

        return expression[start + 1:end], end + 1 - start
