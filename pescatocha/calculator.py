"""A four-operation accumulator calculator."""

from __future__ import annotations

import argparse
import math
from typing import Optional, Sequence


def _divide(accumulator: float, value: float) -> float:
    if value != 0:
        return accumulator / value
    if accumulator == 0 or math.isnan(accumulator):
        return math.nan
    return math.copysign(math.inf, accumulator) * math.copysign(1.0, value)


def apply_operation(sign: str, accumulator: float, value: float) -> float:
    """Apply the operator named by the first character of ``sign``.

    Unknown operators leave the accumulator unchanged. Division by zero
    follows floating-point rules and yields an infinity or NaN.
    """
    operator = sign[:1]
    if operator == "+":
        return accumulator + value
    if operator == "-":
        return accumulator - value
    if operator == "*":
        return accumulator * value
    if operator == "/":
        return _divide(accumulator, value)
    return accumulator


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the calculator's greeting."""
    parser = argparse.ArgumentParser(prog="calculadora", description=__doc__)
    parser.parse_args(argv)
    print("Welcome to my world!")
    return 0