"""Tests for the leansum command line entry point."""

import pytest

from leansum.cli import (
    main,
    EXIT_OK,
    EXIT_VERIFICATION_FAILED,
    EXIT_INVALID_ARGUMENT,
    EXIT_OVERFLOW,
)


class TestMain:
    def test_prints_sum(self, capsys):
        assert main(["4"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "sum(4) = 10"

    def test_zero(self, capsys):
        assert main(["0"]) == EXIT_OK
        assert "sum(0) = 0" in capsys.readouterr().out

    def test_iterative_method(self, capsys):
        assert main(["100", "--method", "iterative"]) == EXIT_OK
        assert "sum(100) = 5050" in capsys.readouterr().out

    def test_cross_check(self, capsys):
        assert main(["100", "--cross-check"]) == EXIT_OK
        assert "sum(100) = 5050" in capsys.readouterr().out

    def test_negative(self, capsys):
        assert main(["-1"]) == EXIT_INVALID_ARGUMENT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "natural numbers" in captured.err

    def test_overflow(self, capsys):
        assert main(["23", "--bit-width", "8"]) == EXIT_OVERFLOW
        assert "8 bits" in capsys.readouterr().err

    def test_invalid_bit_width(self, capsys):
        assert main(["4", "--bit-width", "0"]) == EXIT_INVALID_ARGUMENT
        assert "bit_width" in capsys.readouterr().err

    def test_verify_upto(self, capsys):
        assert main(["4", "--verify-upto", "1000"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "VERIFIED" in out
        assert "Checked: 1001" in out

    def test_verify_failure(self, capsys, monkeypatch):
        def always_wrong(ns, config=None):
            from leansum.summation import nat_sum_array
            return nat_sum_array(ns, config) + 1

        monkeypatch.setattr("leansum.properties.nat_sum_array", always_wrong)
        assert main(["4", "--verify-upto", "10"]) == EXIT_VERIFICATION_FAILED
        assert "FAILED" in capsys.readouterr().out

    def test_export_lean(self, capsys, tmp_path):
        path = tmp_path / "Sum.lean"
        assert main(["7", "--export-lean", str(path)]) == EXIT_OK
        assert "example : sum 7 = 28 := (sum_closed 7).trans (by norm_num)" in path.read_text(encoding="utf-8")
        assert str(path) in capsys.readouterr().out

    def test_export_lean_zero_has_single_example(self, tmp_path):
        path = tmp_path / "Sum.lean"
        assert main(["0", "--export-lean", str(path)]) == EXIT_OK
        assert path.read_text(encoding="utf-8").count("example : sum 0 = 0") == 1

    def test_non_integer_argument_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["four"])
        assert exc_info.value.code == 2
