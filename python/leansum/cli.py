# LeanSum SDK - Command Line
# Copyright (c) 2024 LeanSum Contributors. All rights reserved.

"""
Demonstration entry point.

Run: leansum 4
     leansum 100 --method iterative --verify-upto 10000
     leansum 22 --bit-width 8 --export-lean Sum.lean
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Config, Method
from .exceptions import ArithmeticOverflow, InvalidArgument, VerificationFailed
from .lean import export_lean
from .properties import verify_range
from .summation import sum as nat_sum

logger = logging.getLogger("leansum")

EXIT_OK = 0
EXIT_VERIFICATION_FAILED = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_OVERFLOW = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leansum",
        description="Print the sum 0 + 1 + ... + n and optionally verify its closed form.",
    )
    parser.add_argument("n", type=int, help="a natural number")
    parser.add_argument(
        "--method",
        choices=[m.value for m in Method],
        default=Method.CLOSED_FORM.value,
        help="evaluation method (default: closed_form)",
    )
    parser.add_argument("--bit-width", type=int, default=None, help="fail if the result exceeds this many bits")
    parser.add_argument("--cross-check", action="store_true", help="evaluate both methods and require agreement")
    parser.add_argument("--verify-upto", type=int, default=None, metavar="M", help="verify all properties for 0..M")
    parser.add_argument("--export-lean", default=None, metavar="PATH", help="write the Lean proof to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = Config(method=args.method, bit_width=args.bit_width, cross_check=args.cross_check)
        value = nat_sum(args.n, config)
        print(f"sum({args.n}) = {value}")

        if args.verify_upto is not None:
            result = verify_range(0, args.verify_upto + 1, config)
            print(result.summary())
            if not result.verified:
                return EXIT_VERIFICATION_FAILED

        if args.export_lean:
            export_lean(examples=(0, args.n), path=args.export_lean)
            print(f"Lean proof written to {args.export_lean}")
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT
    except ArithmeticOverflow as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_OVERFLOW
    except VerificationFailed as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED

    logger.debug("Done")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
