"""Command that prints the sample eating-speed answer."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from leetsolutions.arrays import min_eating_speed

SAMPLE_PILES = [312884470]
SAMPLE_HOURS = 968709470


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the minimum eating speed for the sample piles."""
    parser = argparse.ArgumentParser(
        prog="leetsolutions",
        description="Print the minimum eating speed for the sample piles.",
    )
    parser.parse_args(argv)
    sys.stdout.write(str(min_eating_speed(SAMPLE_PILES, SAMPLE_HOURS)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())