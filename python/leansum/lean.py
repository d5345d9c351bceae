# LeanSum SDK - Lean Export
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
Export of the summation function and its closed-form proof to Lean 4.

The generated file follows the doubled-identity route: it proves
2 * sum n = n * (n + 1) by induction and ring arithmetic, derives that
n * (n + 1) is even, and only then states the halved closed form.

Example:
    >>> import leansum as ls
    >>> lean_code = ls.export_lean(name="triangle", namespace="MyProject")
    >>>
    >>> # Save to file
    >>> with open("Triangle.lean", "w") as f:
    ...     f.write(lean_code)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union
import logging
import re

from .exceptions import InvalidArgument
from .summation import _as_nat, nat_sum_closed

logger = logging.getLogger(__name__)

__all__ = [
    "LeanProofExporter",
    "export_lean",
]

_IDENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_']*$")


def _check_ident(value: str, what: str) -> str:
    if not isinstance(value, str) or not _IDENT.match(value):
        raise InvalidArgument(f"Invalid Lean {what}: {value!r}")
    return value


def _check_namespace(namespace: str) -> str:
    if not isinstance(namespace, str) or not namespace:
        raise InvalidArgument(f"Invalid Lean namespace: {namespace!r}")
    for part in namespace.split("."):
        _check_ident(part, "namespace")
    return namespace


@dataclass
class LeanProofExporter:
    """Lean 4 source generator for the summation function.

    Attributes:
        name: Name of the Lean definition (e.g., "sum")
        namespace: Lean namespace wrapping the definitions
        examples: Arguments for which `example` checks are emitted
        include_closed_form: Whether to emit the halved closed-form theorem
        description: Optional description for documentation
    """
    name: str = "sum"
    namespace: str = "LeanSum.Examples"
    examples: Tuple[int, ...] = (0, 4)
    include_closed_form: bool = True
    description: str = ""

    def __post_init__(self):
        _check_ident(self.name, "identifier")
        _check_namespace(self.namespace)
        # Duplicates would emit identical `example` stanzas
        self.examples = tuple(dict.fromkeys(_as_nat(n) for n in self.examples))

    def export_lean(self) -> str:
        """Generate the Lean source.

        Returns:
            Complete Lean source code as string
        """
        name = self.name
        lines = []

        # Header
        lines.append("/-")
        lines.append("Copyright (c) 2025 LeanSum Contributors. All rights reserved.")
        lines.append("Authors: LeanSum Contributors (auto-generated)")
        lines.append("-/")
        lines.append("import Mathlib.Tactic.NormNum")
        lines.append("import Mathlib.Tactic.Ring")
        lines.append("")

        # Documentation
        lines.append("/-!")
        lines.append(f"# Summation: {name}")
        lines.append("")
        if self.description:
            lines.append(self.description)
            lines.append("")
        lines.append(f"`{name} n` is `0 + 1 + ... + n`. The closed form is reached through")
        lines.append(f"the doubled identity `2 * {name} n = n * (n + 1)`, which needs no")
        lines.append("division and is proved by induction. Halving comes last.")
        lines.append("-/")
        lines.append("")

        lines.append(f"namespace {self.namespace}")
        lines.append("")

        # Definition
        lines.append("/-- Sum of the first `n` natural numbers, inclusive of `n`. -/")
        lines.append(f"def {name} : Nat → Nat")
        lines.append("  | 0 => 0")
        lines.append(f"  | n + 1 => (n + 1) + {name} n")
        lines.append("")

        # Doubled identity
        lines.append(f"theorem {name}_doubled (n : Nat) : 2 * {name} n = n * (n + 1) := by")
        lines.append("  induction n with")
        lines.append("  | zero => rfl")
        lines.append("  | succ k ih =>")
        lines.append(f"    rw [show {name} (k + 1) = (k + 1) + {name} k from rfl, Nat.mul_add, ih]")
        lines.append("    ring")
        lines.append("")

        # Evenness
        lines.append(f"theorem {name}_two_dvd (n : Nat) : 2 ∣ n * (n + 1) :=")
        lines.append(f"  ⟨{name} n, ({name}_doubled n).symm⟩")
        lines.append("")

        if self.include_closed_form:
            lines.append(f"theorem {name}_closed (n : Nat) : {name} n = n * (n + 1) / 2 := by")
            lines.append(f"  rw [← {name}_doubled n, Nat.mul_div_cancel_left _ (by norm_num : 0 < 2)]")
            lines.append("")

        if self.examples:
            lines.append("/-! ## Evaluated examples -/")
            lines.append("")
            for n in self.examples:
                lines.append(self._example(n))
            lines.append("")

        lines.append(f"end {self.namespace}")
        lines.append("")

        return "\n".join(lines)

    def _example(self, n: int) -> str:
        """An evaluated check, proved through the closed form rather than by
        unfolding the recursion n times."""
        name = self.name
        value = nat_sum_closed(n)
        if self.include_closed_form:
            return f"example : {name} {n} = {value} := ({name}_closed {n}).trans (by norm_num)"
        return (
            f"example : {name} {n} = {value} :=\n"
            f"  Nat.eq_of_mul_eq_mul_left (by norm_num : 0 < 2)\n"
            f"    (({name}_doubled {n}).trans (by norm_num : {n} * ({n} + 1) = 2 * {value}))"
        )

    def save(self, path: Union[str, Path]) -> Path:
        """Write the Lean source to path and return it."""
        path = Path(path)
        path.write_text(self.export_lean(), encoding="utf-8")
        logger.debug("Wrote Lean export %s.%s to %s", self.namespace, self.name, path)
        return path


def export_lean(
    name: str = "sum",
    namespace: str = "LeanSum.Examples",
    examples: Sequence[int] = (0, 4),
    include_closed_form: bool = True,
    description: str = "",
    path: Optional[Union[str, Path]] = None,
) -> str:
    """Export the summation function and its proofs as Lean source.

    Args:
        name: Name for the Lean definition
        namespace: Lean namespace
        examples: Arguments for which evaluated `example` checks are emitted
        include_closed_form: Whether to include the halved closed-form theorem
        description: Optional description for documentation
        path: If given, also write the source to this file

    Returns:
        Complete Lean source code as string
    """
    exporter = LeanProofExporter(
        name=name,
        namespace=namespace,
        examples=tuple(examples),
        include_closed_form=include_closed_form,
        description=description,
    )
    if path is not None:
        exporter.save(path)
    return exporter.export_lean()
