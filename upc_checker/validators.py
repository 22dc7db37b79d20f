# upc_checker/validators.py

from __future__ import annotations

from typing import Sequence, Tuple

PARTITION_POSITION = "position"
PARTITION_VALUE = "value"
PARTITIONS = (PARTITION_POSITION, PARTITION_VALUE)


def is_1_digit(value) -> bool:
    """
    Return True if value is a single decimal digit (an int in 0-9).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= 9


def split_by_position(payload: Sequence[int]) -> Tuple[int, int]:
    """
    Sum digits by position: 1st, 3rd, 5th... into the odd group, the rest
    into the even group.
    """
    odd_sum = 0
    even_sum = 0
    for i, d in enumerate(payload):
        if i % 2 == 0:
            odd_sum += d
        else:
            even_sum += d
    return odd_sum, even_sum


def split_by_value(payload: Sequence[int]) -> Tuple[int, int]:
    # Legacy rule: groups by the digit's own parity, not where it sits.
    odd_sum = 0
    even_sum = 0
    for d in payload:
        if d % 2 == 0:
            even_sum += d
        else:
            odd_sum += d
    return odd_sum, even_sum


def expected_check_digit(
    payload: Sequence[int], partition: str = PARTITION_POSITION
) -> int:
    """
    Return the check digit the weighted modulo-10 formula expects.

    The odd group is weighted by 3, the even group by 1.
    """
    if partition == PARTITION_POSITION:
        odd_sum, even_sum = split_by_position(payload)
    elif partition == PARTITION_VALUE:
        odd_sum, even_sum = split_by_value(payload)
    else:
        raise ValueError(f"Unknown partition rule: {partition!r}")

    weighted = (odd_sum * 3 + even_sum) % 10
    if weighted == 0:
        return 0
    return 10 - weighted


def upc_check_ok(
    payload: Sequence[int], check_digit: int, partition: str = PARTITION_POSITION
) -> bool:
    return check_digit == expected_check_digit(payload, partition)
