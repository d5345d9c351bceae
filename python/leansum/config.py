# LeanSum SDK - Configuration
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
Configuration for summation and verification.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .exceptions import InvalidArgument


class Method(Enum):
    """How sum(n) is evaluated."""
    CLOSED_FORM = "closed_form"  # Halve the doubled identity n * (n + 1)
    ITERATIVE = "iterative"  # Accumulate k + sum(k - 1) from 0 upwards


@dataclass(frozen=True)
class Config:
    """
    Configuration for sum evaluation.

    Attributes:
        method: Evaluation method used by leansum.sum()
        bit_width: Width of the unsigned result word (None = arbitrary precision)
        cross_check: Compute both methods and fail if they disagree
    """
    method: Method = Method.CLOSED_FORM
    bit_width: Optional[int] = None
    cross_check: bool = False

    def __post_init__(self):
        if isinstance(self.method, str):
            try:
                object.__setattr__(self, 'method', Method(self.method))
            except ValueError:
                raise InvalidArgument(f"Unknown method: {self.method!r}")
        elif not isinstance(self.method, Method):
            raise InvalidArgument(f"Unknown method: {self.method!r}")
        if self.bit_width is not None:
            if isinstance(self.bit_width, bool) or not isinstance(self.bit_width, int):
                raise InvalidArgument(f"bit_width must be an int, got {self.bit_width!r}")
            if self.bit_width <= 0:
                raise InvalidArgument(f"bit_width must be positive, got {self.bit_width}")

    @property
    def max_value(self) -> Optional[int]:
        """Largest representable result, or None when unbounded."""
        if self.bit_width is None:
            return None
        return (1 << self.bit_width) - 1

    @classmethod
    def reference(cls) -> 'Config':
        """Evaluate with the iterative reference definition."""
        return cls(method=Method.ITERATIVE)

    @classmethod
    def checked(cls) -> 'Config':
        """Evaluate both forms and require agreement."""
        return cls(cross_check=True)

    @classmethod
    def uint32(cls) -> 'Config':
        """Results must fit an unsigned 32-bit word."""
        return cls(bit_width=32)

    @classmethod
    def uint64(cls) -> 'Config':
        """Results must fit an unsigned 64-bit word."""
        return cls(bit_width=64)
