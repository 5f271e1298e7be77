"""Command-line front end for a few of the exercises."""

from __future__ import annotations

import argparse
import sys

from kata.arrays import bubble_sort
from kata.calculator import calculate
from kata.numbers import multiplication_table
from kata.patterns import floyd_triangle

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kata", description="Small programming exercises.")
    commands = parser.add_subparsers(dest="command", required=True)

    table = commands.add_parser("table", help="multiplication table of an integer")
    table.add_argument("n", type=int)

    calc = commands.add_parser("calc", help="apply + - * / to two operands")
    calc.add_argument("operator")
    calc.add_argument("a", type=float)
    calc.add_argument("b", type=float)

    floyd = commands.add_parser("floyd", help="print Floyd's triangle")
    floyd.add_argument("rows", type=int)

    sort = commands.add_parser("sort", help="bubble-sort integers")
    sort.add_argument("values", type=int, nargs="*")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one exercise chosen by subcommand; returns the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "table":
        for line in multiplication_table(args.n):
            print(line)
    elif args.command == "calc":
        try:
            result = calculate(args.operator, args.a, args.b)
        except ZeroDivisionError:
            print("Div by Zero")
            return 1
        except ValueError:
            print("Invalid operator")
            return 1
        print(f"{result:.2f}")
    elif args.command == "floyd":
        for row in floyd_triangle(args.rows):
            print(" ".join(str(n) for n in row))
    elif args.command == "sort":
        print("Sorted list: " + " ".join(str(n) for n in bubble_sort(args.values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())