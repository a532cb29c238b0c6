# codelines/markdown/highlighting/ranges.py
"""
Numeric range expressions as used in code block meta strings.

    "1,3-5"   -> {1, 3, 4, 5}
    "4-2"     -> {2, 3, 4}
"""

import re
from typing import FrozenSet

RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")
NUMBER_PATTERN = re.compile(r"^\d+$")


def parse_range(expression: str) -> FrozenSet[int]:
    """
    Expand a comma-separated list of numbers and ranges into a set of ints.

    Parts that are neither a number nor a range are skipped, as are zero
    and anything that would expand below 1.
    """
    numbers = set()

    for part in (expression or "").split(","):
        part = part.strip()
        if not part:
            continue

        match = RANGE_PATTERN.match(part)
        if match:
            first, last = int(match.group(1)), int(match.group(2))
            low, high = min(first, last), max(first, last)
            numbers.update(range(max(low, 1), high + 1))
        elif NUMBER_PATTERN.match(part):
            value = int(part)
            if value > 0:
                numbers.add(value)

    return frozenset(numbers)
