#!/usr/bin/env python3

"""
Reads two polynomials as "coefficient exponent" pairs, each terminated by
"-1 -1", and prints them together with their sum, difference and product.
Run with --help for options.
"""

import argparse
import sys

from polynomial import Polynomial


def calculate(a, b):
    return [
        ('A', a),
        ('B', b),
        ('A + B', a + b),
        ('A - B', a - b),
        ('A * B', a * b),
    ]


def report(stream, as_json=False):
    a = Polynomial().read(stream)
    b = Polynomial().read(stream)

    for label, poly in calculate(a, b):
        # Text output already starts with a space.
        shown = " " + poly.to_json() if as_json else str(poly)
        print(f"{label}:{shown}")
    print(f"A == B: {a == b}")


def run(argv=None):
    """Entry point for the polycalc executable."""

    parser = argparse.ArgumentParser(description='Dense integer polynomial calculator.')
    parser.add_argument("-i", "--input", metavar="FILE", type=str, default=None,
                        help="Read terms from FILE instead of standard input")
    parser.add_argument("--json", action="store_true", help="Print results as JSON coefficient lists")
    args = parser.parse_args(argv)

    if args.input is None:
        report(sys.stdin, args.json)
        return 0

    try:
        f = open(args.input)
    except OSError as e:
        parser.error("can't open '{}': {}".format(args.input, e))
    with f:
        report(f, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(run())
