"""Tests for Lean export."""

import pytest

from leansum import InvalidArgument, LeanProofExporter, export_lean


class TestLeanProofExporter:
    @pytest.fixture
    def code(self):
        return LeanProofExporter().export_lean()

    def test_definition(self, code):
        assert "def sum : Nat → Nat" in code
        assert "  | 0 => 0" in code
        assert "  | n + 1 => (n + 1) + sum n" in code

    def test_doubled_identity_precedes_closed_form(self, code):
        doubled = code.index("theorem sum_doubled (n : Nat) : 2 * sum n = n * (n + 1)")
        even = code.index("theorem sum_two_dvd (n : Nat) : 2 ∣ n * (n + 1)")
        closed = code.index("theorem sum_closed (n : Nat) : sum n = n * (n + 1) / 2")
        assert doubled < even < closed

    def test_induction_proof(self, code):
        assert "  induction n with" in code
        assert "  | zero => rfl" in code
        assert "    ring" in code

    def test_examples(self, code):
        assert "example : sum 0 = 0 := (sum_closed 0).trans (by norm_num)" in code
        assert "example : sum 4 = 10 := (sum_closed 4).trans (by norm_num)" in code

    def test_examples_never_unfold_recursion(self):
        code = export_lean(examples=(100000,))
        assert "example : sum 100000 = 5000050000 := (sum_closed 100000).trans (by norm_num)" in code
        assert "decide" not in code

    def test_duplicate_examples_emitted_once(self):
        code = export_lean(examples=(0, 0, 4, 0))
        assert code.count("example : sum 0 = 0") == 1
        assert code.count("example : sum 4 = 10") == 1

    def test_namespace(self, code):
        assert "namespace LeanSum.Examples" in code
        assert code.rstrip().endswith("end LeanSum.Examples")

    def test_imports_mathlib_ring(self, code):
        assert "import Mathlib.Tactic.Ring" in code


class TestExportOptions:
    def test_custom_name(self):
        code = export_lean(name="triangle", namespace="MyProject", examples=(10,))
        assert "def triangle : Nat → Nat" in code
        assert "theorem triangle_doubled" in code
        assert "example : triangle 10 = 55 := (triangle_closed 10).trans (by norm_num)" in code
        assert "namespace MyProject" in code

    def test_without_closed_form(self):
        code = export_lean(include_closed_form=False)
        assert "theorem sum_doubled" in code
        assert "sum_closed" not in code
        assert "example : sum 4 = 10 :=\n  Nat.eq_of_mul_eq_mul_left" in code
        assert "(by norm_num : 4 * (4 + 1) = 2 * 10)" in code

    def test_without_examples(self):
        code = export_lean(examples=())
        assert "example :" not in code

    def test_description(self):
        code = export_lean(description="Gauss's schoolroom sum.")
        assert "Gauss's schoolroom sum." in code

    def test_save(self, tmp_path):
        path = tmp_path / "Sum.lean"
        code = export_lean(path=path)
        assert path.read_text(encoding="utf-8") == code

    @pytest.mark.parametrize("name", ["", "1sum", "my sum", "sum-total"])
    def test_invalid_name(self, name):
        with pytest.raises(InvalidArgument, match="identifier"):
            LeanProofExporter(name=name)

    @pytest.mark.parametrize("namespace", ["", "A..B", "My Project"])
    def test_invalid_namespace(self, namespace):
        with pytest.raises(InvalidArgument, match="namespace"):
            LeanProofExporter(namespace=namespace)

    def test_negative_example(self):
        with pytest.raises(InvalidArgument):
            LeanProofExporter(examples=(-1,))
