# LeanSum SDK - Results
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
Result types for property verification.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional, Union
import json


@dataclass
class FailureDiagnosis:
    """
    A single point where a property did not hold.

    Attributes:
        property: Name of the property ('closed_form', 'doubled_identity', ...)
        n: The argument at which it failed
        expected: Value required by the property
        actual: Value that was computed
    """
    property: str
    n: int
    expected: int
    actual: int

    def __str__(self) -> str:
        return f"{self.property} fails at n={self.n}: expected {self.expected}, got {self.actual}"


@dataclass
class Certificate:
    """
    Record of a verification run.

    Attributes:
        operation: Name of the operation that produced the certificate
        start: First argument checked (inclusive)
        stop: Last argument checked (exclusive)
        properties: Names of the properties that were checked
        result_json: Outcome details
    """
    operation: str
    start: int
    stop: int
    properties: list[str] = field(default_factory=list)
    result_json: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, sort_keys=True)

    def save(self, path: Union[str, Path]) -> Path:
        """Write the certificate as JSON and return the path."""
        path = Path(path)
        path.write_text(self.to_json() + "\n", encoding="utf-8")
        return path


@dataclass
class VerificationResult:
    """
    Result of checking the summation properties over a range of arguments.

    Attributes:
        verified: True if every property held for every argument
        checked: Number of arguments checked
        failures: Recorded failures (capped by max_failures)
        certificate: Verification certificate
        total_time_ms: Wall-clock time in milliseconds
    """
    verified: bool
    checked: int = 0
    failures: list[FailureDiagnosis] = field(default_factory=list)
    certificate: Optional[Certificate] = None
    total_time_ms: float = 0.0

    @property
    def num_failed(self) -> int:
        return len(self.failures)

    def summary(self) -> str:
        """Return a human-readable summary."""
        status = "VERIFIED" if self.verified else "FAILED"
        lines = [f"VerificationResult: {status}"]
        if self.certificate is not None:
            lines.append(f"  Range: [{self.certificate.start}, {self.certificate.stop})")
            lines.append(f"  Properties: {', '.join(self.certificate.properties)}")
        lines.append(f"  Checked: {self.checked}")
        lines.append(f"  Time: {self.total_time_ms:.1f}ms")
        for failure in self.failures:
            lines.append(f"  {failure}")
        return "\n".join(lines)
