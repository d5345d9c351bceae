# LeanSum SDK - Exceptions
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
Exception hierarchy for LeanSum.

All errors raised by the SDK derive from LeanSumError, so callers can catch
a single base class. The concrete classes also inherit from the matching
builtin (ValueError, OverflowError) for code that already handles those.
"""

from __future__ import annotations
from typing import Any, Optional


class LeanSumError(Exception):
    """Base class for all LeanSum errors."""


class InvalidArgument(LeanSumError, ValueError):
    """Raised when an argument is not a natural number or is otherwise malformed."""


class ArithmeticOverflow(LeanSumError, OverflowError):
    """
    Raised when a result does not fit the configured integer width.

    Attributes:
        value: The argument that was being evaluated
        bit_width: The configured width that was exceeded
    """

    def __init__(self, message: str, value: Optional[int] = None, bit_width: Optional[int] = None):
        super().__init__(message)
        self.value = value
        self.bit_width = bit_width


class VerificationFailed(LeanSumError):
    """
    Raised when a checked property does not hold.

    Attributes:
        result: The VerificationResult (or offending values) behind the failure
    """

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.result = result
