"""MiniCalc package: a small tokenizer and evaluator for binary integer expressions."""

# Main API
from minicalc.minicalc import MiniCalc, tokenize, interpret

# Exceptions
from minicalc.minicalc_error import (
    MiniCalcError, MiniCalcTokenError, MiniCalcEvalError, MiniCalcUnexpectedTokenError, MiniCalcOverflowError
)

# Lower-level components
from minicalc.minicalc_token import MiniCalcToken, MiniCalcTokenType
from minicalc.minicalc_tokenizer import MiniCalcTokenizer, MINICALC_INT_MIN, MINICALC_INT_MAX
from minicalc.minicalc_cursor import MiniCalcCursor
from minicalc.minicalc_interpreter import MiniCalcInterpreter


__all__ = [
    # Main API
    "MiniCalc", "tokenize", "interpret",

    # Exceptions
    "MiniCalcError", "MiniCalcTokenError", "MiniCalcEvalError", "MiniCalcUnexpectedTokenError",
    "MiniCalcOverflowError",

    # Lower-level components
    "MiniCalcToken", "MiniCalcTokenType", "MiniCalcTokenizer", "MINICALC_INT_MIN", "MINICALC_INT_MAX",
    "MiniCalcCursor", "MiniCalcInterpreter"
]
