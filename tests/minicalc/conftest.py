"""Shared fixtures and utilities for MiniCalc tests."""

import pytest
from typing import Any, List

from minicalc import MiniCalc, MiniCalcInterpreter, MiniCalcToken, MiniCalcTokenizer, MiniCalcTokenType


@pytest.fixture
def minicalc():
    """Create a fresh MiniCalc instance for each test."""
    return MiniCalc()


@pytest.fixture
def tokenizer():
    """Create a permissive tokenizer."""
    return MiniCalcTokenizer()


@pytest.fixture
def strict_tokenizer():
    """Create a tokenizer that rejects unrecognised characters."""
    return MiniCalcTokenizer(strict=True)


@pytest.fixture
def interpreter():
    """Create a fresh interpreter."""
    return MiniCalcInterpreter()


class MiniCalcTestHelpers:
    """Helper utilities for MiniCalc testing."""

    @staticmethod
    def tok(token_type: MiniCalcTokenType, value: Any = None) -> MiniCalcToken:
        """Build a token without a source position."""
        return MiniCalcToken(token_type, value)

    @staticmethod
    def integer(value: int) -> MiniCalcToken:
        """Build an INTEGER token."""
        return MiniCalcToken(MiniCalcTokenType.INTEGER, value)

    @staticmethod
    def binary(left: int, op: str, right: int) -> List[MiniCalcToken]:
        """Build the token sequence for '<left> <op> <right>'."""
        return [
            MiniCalcTestHelpers.integer(left),
            MiniCalcToken(MiniCalcTokenType(op)),
            MiniCalcTestHelpers.integer(right),
        ]


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return MiniCalcTestHelpers
