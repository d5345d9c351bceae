# LeanSum SDK - Property Verification
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
Checks that the reference and closed-form sums satisfy their defining
properties.

Properties checked:
1. closed_form       sum(n) == n * (n + 1) / 2, with zero remainder
2. doubled_identity  2 * sum(n) == n * (n + 1), independent of any division
3. even_product      n * (n + 1) is even, so halving is exact
4. recurrence        sum(n) == n + sum(n - 1) for n >= 1

The scalar checks evaluate a single argument. verify_range() checks a whole
range at once with numpy, seeding the reference cumulative sum with the
iterative definition.

Example:
    >>> import leansum as ls
    >>> result = ls.verify_range(0, 10001)
    >>> result.verified
    True
    >>> print(result.summary())
"""

from __future__ import annotations
from math import isqrt
from numbers import Integral
from typing import Optional
import logging
import time

import numpy as np

from .config import Config
from .exceptions import InvalidArgument, VerificationFailed
from .result import Certificate, FailureDiagnosis, VerificationResult
from .summation import (
    _INT64_MAX,
    _as_nat,
    doubled_sum,
    nat_sum,
    nat_sum_array,
    nat_sum_closed,
)

logger = logging.getLogger(__name__)

__all__ = [
    "PROPERTIES",
    "MAX_VERIFY_STOP",
    "check_closed_form",
    "check_doubled_identity",
    "check_recurrence",
    "verify_range",
    "assert_verified",
]

PROPERTIES = ("closed_form", "doubled_identity", "even_product", "recurrence")

# Largest stop for which n * (n + 1) fits int64 for every n in the range
MAX_VERIFY_STOP = (isqrt(4 * _INT64_MAX + 1) - 1) // 2 + 1


def check_closed_form(n: int) -> bool:
    """sum(n) equals n * (n + 1) / 2 and the division leaves no remainder."""
    doubled = doubled_sum(n)
    return doubled % 2 == 0 and nat_sum(n) == doubled // 2


def check_doubled_identity(n: int) -> bool:
    """2 * sum(n) equals n * (n + 1)."""
    return 2 * nat_sum(n) == doubled_sum(n)


def check_recurrence(n: int) -> bool:
    """
    sum(n) equals n + sum(n - 1), comparing the closed form on the left
    against the reference definition on the right.

    Raises:
        InvalidArgument: If n < 1, where the recurrence does not apply
    """
    n = _as_nat(n)
    if n < 1:
        raise InvalidArgument(f"The recurrence only applies for n >= 1, got {n}")
    return nat_sum_closed(n) == n + nat_sum(n - 1)


def _collect(
    name: str,
    ok: np.ndarray,
    ns: np.ndarray,
    expected: np.ndarray,
    actual: np.ndarray,
    failures: list[FailureDiagnosis],
    max_failures: int,
) -> int:
    """Record failures for one property. Returns the number of failing points."""
    ok = np.asarray(ok, dtype=bool)
    bad = np.flatnonzero(~ok)
    for i in bad[:max(0, max_failures - len(failures))]:
        failures.append(FailureDiagnosis(
            property=name,
            n=int(ns[i]),
            expected=int(expected[i]),
            actual=int(actual[i]),
        ))
    return len(bad)


def verify_range(
    start: int = 0,
    stop: int = 10001,
    config: Optional[Config] = None,
    max_failures: int = 10,
) -> VerificationResult:
    """
    Check every property for each n in [start, stop).

    The reference sums are seeded with the iterative nat_sum(start), so the
    cost grows linearly with start as well as with the range length. All
    arithmetic is int64; stop may not exceed MAX_VERIFY_STOP.

    Args:
        start: First argument (inclusive)
        stop: Last argument (exclusive)
        config: Width configuration passed to the vectorized closed form
        max_failures: Maximum number of FailureDiagnosis entries to record

    Returns:
        VerificationResult with a Certificate describing the run

    Raises:
        InvalidArgument: If start is negative, the range is empty, or stop
            exceeds MAX_VERIFY_STOP
        ArithmeticOverflow: If the range exceeds the configured width
    """
    config = config or Config()
    start = _as_nat(start)
    if isinstance(stop, bool) or not isinstance(stop, Integral):
        raise InvalidArgument(f"stop must be an integer, got {stop!r}")
    stop = int(stop)
    if stop <= start:
        raise InvalidArgument(f"Empty range [{start}, {stop})")

    if doubled_sum(stop - 1) > _INT64_MAX:
        raise InvalidArgument(
            f"Range [{start}, {stop}) exceeds the int64 verification bound; "
            f"stop must be at most {MAX_VERIFY_STOP}"
        )

    t0 = time.perf_counter()

    ns = np.arange(start, stop, dtype=np.int64)
    dtype = ns.dtype
    logger.debug("Verifying %d arguments in [%d, %d)", len(ns), start, stop)

    # Reference: sum(k) = k + sum(k - 1), accumulated from sum(start)
    reference = nat_sum(start) + np.cumsum(ns) - start
    closed = nat_sum_array(ns, config).astype(dtype)
    doubled = ns * (ns + 1)

    failures: list[FailureDiagnosis] = []
    counts = {}
    counts['closed_form'] = _collect(
        'closed_form', closed == reference, ns, reference, closed, failures, max_failures
    )
    counts['doubled_identity'] = _collect(
        'doubled_identity', 2 * reference == doubled, ns, doubled, 2 * reference, failures, max_failures
    )
    remainder = doubled % 2
    counts['even_product'] = _collect(
        'even_product', remainder == 0, ns, np.zeros_like(remainder), remainder, failures, max_failures
    )

    expected_step = ns[1:] + closed[:-1]
    counts['recurrence'] = _collect(
        'recurrence', closed[1:] == expected_step, ns[1:], expected_step, closed[1:], failures, max_failures
    )
    if start >= 1:
        seam = start + nat_sum(start - 1)
        if int(closed[0]) != seam:
            counts['recurrence'] += 1
            if len(failures) < max_failures:
                failures.append(FailureDiagnosis('recurrence', start, seam, int(closed[0])))

    verified = not any(counts.values())
    total_time = (time.perf_counter() - t0) * 1000

    certificate = Certificate(
        operation='verify_range',
        start=start,
        stop=stop,
        properties=list(PROPERTIES),
        result_json={
            'verified': verified,
            'checked': len(ns),
            'failure_counts': counts,
            'bit_width': config.bit_width,
            'total_time_ms': total_time,
        },
    )

    if verified:
        logger.debug("All %d arguments verified in %.1fms", len(ns), total_time)
    else:
        logger.warning("Verification failed on [%d, %d): %s", start, stop, counts)

    return VerificationResult(
        verified=verified,
        checked=len(ns),
        failures=failures,
        certificate=certificate,
        total_time_ms=total_time,
    )


def assert_verified(result: VerificationResult) -> VerificationResult:
    """
    Raise VerificationFailed unless every property held.

    Returns:
        The result unchanged, for chaining
    """
    if not result.verified:
        first = result.failures[0] if result.failures else "unknown failure"
        raise VerificationFailed(f"Verification failed: {first}", result=result)
    return result
