"""Arithmetic progression detection for drag fill.

Functions:
    detect_pattern: Classify a short sample as an arithmetic progression.
    common_difference: Read the step off a detected progression.
    find_difference: Step of the progression formed by a sample, if any.
    extrapolate: Value of a progression at a given row.
"""

import logging
from typing import Any, Sequence

from gridkit.shared.utils import is_number, to_number

logger = logging.getLogger(__name__)


def _progression(samples: Sequence[Any]) -> list[int | float] | None:
    if len(samples) < 2:
        return None

    numbers = [to_number(value) for value in samples]
    if any(number is None for number in numbers):
        logger.debug(f"No numeric pattern in samples: {list(samples)}")
        return None

    difference = numbers[1] - numbers[0]
    progression = [numbers[0] + difference * i for i in range(len(numbers))]
    if progression != numbers:
        logger.debug(f"Samples are not an arithmetic progression: {list(samples)}")
        return None

    return progression


def detect_pattern(samples: Sequence[Any]) -> list[Any]:
    """Detect whether ``samples`` form an arithmetic progression.

    Every sample is coerced to a number (numbers as-is, numeric-looking
    strings parsed). The sequence is a progression when, for every index i,
    ``sample[i] == sample[0] + difference * i`` with
    ``difference = sample[1] - sample[0]``. Equality is exact.

    Args:
        samples: Ordered sample values, oldest first.

    Returns:
        The synthesized numeric progression when a pattern is found, else the
        input samples unchanged. Fewer than two samples never form a pattern.

    Example:
        >>> detect_pattern(["2", 4, 6])
        [2, 4, 6]
        >>> detect_pattern([1, "x"])
        [1, 'x']
    """
    progression = _progression(samples)
    if progression is None:
        return list(samples)
    return progression


def common_difference(pattern: Sequence[Any]) -> int | float:
    """Step between the first two values of a detected pattern, 0 if none."""
    if len(pattern) < 2:
        return 0
    first, second = pattern[0], pattern[1]
    if not (is_number(first) and is_number(second)):
        return 0
    return second - first


def find_difference(samples: Sequence[Any]) -> int | float | None:
    """Common difference of ``samples``, or None when they are no progression."""
    progression = _progression(samples)
    if progression is None:
        return None
    return common_difference(progression)


def extrapolate(
    source_value: int | float,
    difference: int | float,
    source_row: int,
    target_row: int,
) -> int | float:
    """Value at ``target_row`` of the progression through ``source_value``.

    Example:
        >>> extrapolate(10, 2, source_row=0, target_row=3)
        16
    """
    return source_value + difference * (target_row - source_row)
