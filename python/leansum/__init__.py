# LeanSum SDK
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
LeanSum: the sum of the first n natural numbers, with its closed form
checked against the inductive definition and exported to Lean.

Example:
    >>> import leansum as ls
    >>> ls.sum(4)
    10
    >>> ls.verify_range(0, 10001).verified
    True
"""

from .config import Config, Method
from .exceptions import LeanSumError, InvalidArgument, ArithmeticOverflow, VerificationFailed
from .summation import (
    sum,
    nat_sum,
    nat_sum_closed,
    doubled_sum,
    halve_even,
    max_argument,
    nat_sum_array,
)
from .properties import (
    check_closed_form,
    check_doubled_identity,
    check_recurrence,
    verify_range,
    assert_verified,
)
from .result import Certificate, FailureDiagnosis, VerificationResult
from .lean import LeanProofExporter, export_lean

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Method",
    "LeanSumError",
    "InvalidArgument",
    "ArithmeticOverflow",
    "VerificationFailed",
    "sum",
    "nat_sum",
    "nat_sum_closed",
    "doubled_sum",
    "halve_even",
    "max_argument",
    "nat_sum_array",
    "check_closed_form",
    "check_doubled_identity",
    "check_recurrence",
    "verify_range",
    "assert_verified",
    "Certificate",
    "FailureDiagnosis",
    "VerificationResult",
    "LeanProofExporter",
    "export_lean",
]
