"""Input checks for the dispatcher handlers.

Every check returns ``None`` when the input is accepted, or the exact rejection
message that is sent back as the acknowledgement.
"""

from __future__ import annotations

from wsdemo.constants import (
    ERR_MAX_DELAY,
    ERR_MAX_SUM_NUMS,
    ERR_NUM_RANGE,
    ERR_NUMS_RANGE,
    MAX_DELAY_MS,
    MAX_SUM_NUMS,
    NUM_MAX,
    NUM_MIN,
)


def in_range(num) -> bool:
    return NUM_MIN <= num <= NUM_MAX


def check_delay(duration) -> str | None:
    if duration > MAX_DELAY_MS:
        return ERR_MAX_DELAY
    return None


def check_square(num) -> str | None:
    if not in_range(num):
        return ERR_NUM_RANGE
    return None


def check_sum(nums) -> str | None:
    """Count is checked first, element values are only looked at when it passes."""
    if len(nums) > MAX_SUM_NUMS:
        return ERR_MAX_SUM_NUMS
    if any(not in_range(num) for num in nums):
        return ERR_NUMS_RANGE
    return None


def format_number(num) -> str:
    """Render a number the way a JSON client wrote it (``5.0`` becomes ``5``)."""
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)
