# LeanSum SDK - Summation
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
The sum of the first n natural numbers, 0 + 1 + ... + n.

Two definitions are provided and must agree for every natural n:

1. The reference definition, ``nat_sum``, follows the inductive equations
   sum(0) = 0 and sum(k) = k + sum(k - 1).
2. The closed form, ``nat_sum_closed``, is derived from the doubled identity
   2 * sum(n) = n * (n + 1). The product is computed first with no division
   and halved only once it is known to be even.

Example:
    >>> import leansum as ls
    >>> ls.sum(4)
    10
    >>> ls.doubled_sum(4)
    20
    >>> ls.sum(22, ls.Config(bit_width=8))
    253
"""

from __future__ import annotations
from math import isqrt
from numbers import Integral
from typing import Any, Optional

import numpy as np

from .config import Config, Method
from .exceptions import InvalidArgument, ArithmeticOverflow, VerificationFailed

__all__ = [
    "sum",
    "nat_sum",
    "nat_sum_closed",
    "doubled_sum",
    "halve_even",
    "max_argument",
    "nat_sum_array",
]

_INT64_MAX = int(np.iinfo(np.int64).max)


def _as_nat(n: Any) -> int:
    """Validate and normalize a natural number argument."""
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, Integral):
        raise InvalidArgument(f"Expected a natural number, got {n!r}")
    n = int(n)
    if n < 0:
        raise InvalidArgument(f"sum is only defined on natural numbers, got {n}")
    return n


def _check_width(value: int, n: int, config: Config) -> int:
    """Raise ArithmeticOverflow if value does not fit the configured width."""
    limit = config.max_value
    if limit is not None and value > limit:
        raise ArithmeticOverflow(
            f"sum({n}) does not fit in {config.bit_width} bits",
            value=n,
            bit_width=config.bit_width,
        )
    return value


def _largest_argument_below(limit: int) -> int:
    """Largest n with n * (n + 1) / 2 <= limit."""
    return (isqrt(8 * limit + 1) - 1) // 2


def max_argument(config: Optional[Config] = None) -> Optional[int]:
    """
    Largest n whose sum fits the configured width.

    Returns:
        The bound, or None when the configuration is arbitrary precision.
    """
    config = config or Config()
    limit = config.max_value
    if limit is None:
        return None
    return _largest_argument_below(limit)


def nat_sum(n: int, config: Optional[Config] = None) -> int:
    """
    Reference definition: sum(0) = 0, sum(k) = k + sum(k - 1).

    Evaluated bottom-up so that large n does not hit the recursion limit.
    With a fixed width, overflow is reported at the first step that leaves
    the word rather than after the fact.

    Raises:
        InvalidArgument: If n is not a natural number
        ArithmeticOverflow: If a partial sum exceeds the configured width
    """
    config = config or Config()
    n = _as_nat(n)
    total = 0
    if config.max_value is None:
        for k in range(1, n + 1):
            total += k
        return total
    for k in range(1, n + 1):
        total = _check_width(k + total, n, config)
    return total


def doubled_sum(n: int) -> int:
    """The doubled identity's right-hand side, n * (n + 1). No division."""
    n = _as_nat(n)
    return n * (n + 1)


def halve_even(m: int) -> int:
    """
    Exact halving of an even natural number.

    Raises:
        InvalidArgument: If m is not a natural number
        VerificationFailed: If m is odd
    """
    m = _as_nat(m)
    if m % 2 != 0:
        raise VerificationFailed(f"Cannot halve odd value {m}", result=m)
    return m // 2


def nat_sum_closed(n: int, config: Optional[Config] = None) -> int:
    """
    Closed form n * (n + 1) / 2, derived from the doubled identity.

    Only the halved result is checked against the configured width; the
    doubled intermediate is an arbitrary-precision Python int.
    """
    config = config or Config()
    n = _as_nat(n)
    return _check_width(halve_even(doubled_sum(n)), n, config)


def sum(n: int, config: Optional[Config] = None) -> int:
    """
    Sum of the first n natural numbers, 0 + 1 + ... + n.

    Args:
        n: A natural number
        config: Evaluation method, integer width and cross-checking

    Returns:
        The sum, a natural number. sum(0) == 0.

    Raises:
        InvalidArgument: If n is negative or not an integer
        ArithmeticOverflow: If the result exceeds config.bit_width
        VerificationFailed: If cross_check is set and the two forms disagree
    """
    config = config or Config()
    if config.cross_check:
        reference = nat_sum(n, config)
        closed = nat_sum_closed(n, config)
        if reference != closed:
            raise VerificationFailed(
                f"sum({n}): reference {reference} != closed form {closed}",
                result=(reference, closed),
            )
        return closed
    if config.method is Method.ITERATIVE:
        return nat_sum(n, config)
    return nat_sum_closed(n, config)


def nat_sum_array(ns: Any, config: Optional[Config] = None) -> np.ndarray:
    """
    Vectorized closed form over an array of natural numbers.

    The even factor of n and n + 1 is halved before multiplying, so a
    fixed-width result never overflows in the intermediate product.

    Returns:
        Array of sums with the same shape as ns. The dtype is uint64 when a
        width of at most 64 bits is configured, int64 when every result fits
        it, and object (Python ints) otherwise.

    Raises:
        InvalidArgument: If ns is not integral or contains negative entries
        ArithmeticOverflow: If an entry exceeds max_argument(config)
    """
    config = config or Config()
    arr = np.asarray(ns)
    if arr.dtype == object:
        arr = np.array([_as_nat(v) for v in arr.ravel()], dtype=object).reshape(arr.shape)
    elif not np.issubdtype(arr.dtype, np.integer):
        raise InvalidArgument(f"Expected an integer array, got dtype {arr.dtype}")
    elif arr.size and (arr < 0).any():
        raise InvalidArgument("sum is only defined on natural numbers")

    top = int(arr.max()) if arr.size else 0
    limit = max_argument(config)
    if limit is not None and top > limit:
        raise ArithmeticOverflow(
            f"sum({top}) does not fit in {config.bit_width} bits",
            value=top,
            bit_width=config.bit_width,
        )

    if config.bit_width is not None:
        dtype = np.uint64 if config.bit_width <= 64 else object
    elif top <= _largest_argument_below(_INT64_MAX):
        dtype = np.int64
    else:
        dtype = object

    work = arr.astype(dtype)
    even = work % 2 == 0
    result = np.where(even, (work // 2) * (work + 1), work * ((work + 1) // 2))
    return result.astype(dtype)
