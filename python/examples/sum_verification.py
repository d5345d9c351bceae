"""
Summation Verification Example
==============================

This example walks the route from the inductive definition of

    sum(0) = 0,  sum(k) = k + sum(k - 1)

to the closed form n * (n + 1) / 2. The doubled identity
2 * sum(n) = n * (n + 1) is checked first, with no division, and halving
happens only after evenness is established.

Run: python examples/sum_verification.py
"""

import numpy as np
import leansum as ls


def main():
    print("=" * 60)
    print("LeanSum Summation Verification Example")
    print("=" * 60)

    # ===== Reference vs closed form =====
    print("\n[1] Reference definition and closed form")
    print("-" * 40)
    for n in (0, 1, 4, 10, 100):
        print(f"  sum({n}) = {ls.nat_sum(n)}  (closed form: {ls.nat_sum_closed(n)})")

    # ===== Doubled identity =====
    print("\n[2] Doubled identity: 2 * sum(n) = n * (n + 1)")
    print("-" * 40)
    for n in (3, 4, 7):
        doubled = ls.doubled_sum(n)
        print(f"  n={n}: 2 * {ls.nat_sum(n)} = {doubled}, halved: {ls.halve_even(doubled)}")

    # ===== Range verification =====
    print("\n[3] Every property for n in 0..10,000")
    print("-" * 40)
    result = ls.verify_range(0, 10001)
    print(result.summary())

    # ===== Fixed width =====
    print("\n[4] Fixed-width results")
    print("-" * 40)
    for config in (ls.Config(bit_width=8), ls.Config.uint32(), ls.Config.uint64()):
        top = ls.max_argument(config)
        print(f"  {config.bit_width:>2} bits: largest n = {top}, sum = {ls.sum(top, config)}")
    try:
        ls.sum(23, ls.Config(bit_width=8))
    except ls.ArithmeticOverflow as e:
        print(f"  sum(23) in 8 bits: {e}")

    # ===== Vectorized =====
    print("\n[5] Vectorized closed form")
    print("-" * 40)
    ns = np.arange(0, 11)
    print(f"  n:      {ns.tolist()}")
    print(f"  sum(n): {ls.nat_sum_array(ns).tolist()}")

    # ===== Lean export =====
    print("\n[6] Lean export")
    print("-" * 40)
    print(ls.export_lean(examples=(0, 4, 100)))

    print("=" * 60)


if __name__ == "__main__":
    main()
