"""Entry point of the fishing game."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Seed the random source from the clock and print the greeting."""
    parser = argparse.ArgumentParser(prog="pescatocha", description=__doc__)
    parser.parse_args(argv)
    random.seed()
    print("Man, I love Stacks")
    return 0