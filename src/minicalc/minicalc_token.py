"""Token types and token representation for MiniCalc expressions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MiniCalcTokenType(Enum):
    """Token types for MiniCalc expressions."""
    LPAREN = "("
    RPAREN = ")"
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    IDENTIFIER = "IDENTIFIER"
    INTEGER = "INTEGER"
    STRING = "STRING"


@dataclass(frozen=True)
class MiniCalcToken:
    """
    Represents a single token in a MiniCalc expression.

    Structural tokens carry no value.  The position is the index of the first character
    of the lexeme in the source text and is ignored when comparing tokens, so hand-built
    tokens compare equal to tokenizer output.
    """
    type: MiniCalcTokenType
    value: Any = None
    position: int | None = field(default=None, compare=False)

    def describe(self) -> str:
        """Render the token for diagnostics, e.g. PLUS, INTEGER(2) or IDENTIFIER('add')."""
        if self.value is None:
            return self.type.name

        return f"{self.type.name}({self.value!r})"

    def __repr__(self) -> str:
        return f"MiniCalcToken({self.type.name}, {self.value!r}, pos={self.position})"
