"""N-day window statistics over ordered day buckets.

The scan walks a possibly gapped bucket sequence with two pointers:

  - ``slow`` is the left edge of the window being built,
  - ``fast`` is the next bucket to consider,
  - ``window_sum`` is the running total of the buckets folded so far.

With ``gap = B[fast].day - B[slow].day``:

  gap == N-1  the window spans exactly N calendar days.  Fold ``B[fast]``,
              record the sum, then restart from the next left edge.
  gap <  N-1  ``B[fast]`` is still inside the window; fold it and move on.
  otherwise   the window overshot a calendar gap; drop it and restart from
              the next left edge.

Each left edge completes at most one window.  Days missing *inside* a
window contribute nothing to its sum but do not break it; only a gap that
pushes ``B[fast]`` beyond the N-th day does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Sequence

import numpy as np

from wearstats.buckets import DayBucket


class Reduction(str, Enum):
    MIN = "min"
    MAX = "max"


_REDUCERS: dict[Reduction, Callable[[float, float], float]] = {
    Reduction.MIN: min,
    Reduction.MAX: max,
}


@dataclass
class WindowScan:
    """Raw result of a window scan, before reduction."""

    sums: list[float] = field(default_factory=list)  # one per completed window
    points_folded: int = 1  # buckets folded on the "still open" branch, plus the seed

    @property
    def complete(self) -> int:
        return len(self.sums)


def _check_window(n_days: int) -> None:
    if n_days < 2:
        raise ValueError(f"window must span at least 2 days, got {n_days}")


def scan_windows(buckets: Sequence[DayBucket], n_days: int) -> WindowScan:
    """Collect the sum of every completed N-day window.

    Args:
        buckets: Day buckets, strictly increasing by day index.
        n_days: Window length in calendar days (>= 2).

    Returns:
        A WindowScan.  Empty if fewer than two buckets are given.
    """
    _check_window(n_days)
    scan = WindowScan()
    if len(buckets) < 2:
        return scan

    slow, fast = 0, 1
    window_sum = buckets[0].value
    while fast < len(buckets):
        gap = buckets[fast].day_index - buckets[slow].day_index
        if gap == n_days - 1:
            window_sum += buckets[fast].value
            scan.sums.append(window_sum)
            slow += 1
            fast = slow + 1
            window_sum = buckets[slow].value
        elif gap < n_days - 1:
            window_sum += buckets[fast].value
            scan.points_folded += 1
            fast += 1
        else:
            slow += 1
            fast = slow + 1
            window_sum = buckets[slow].value
    return scan


def _resolve(reduction: Reduction | str) -> Callable[[float, float], float]:
    try:
        return _REDUCERS[Reduction(reduction)]
    except ValueError:
        raise ValueError(f"unknown reduction {reduction!r}; expected 'min' or 'max'") from None


def min_or_max_over_window(
    buckets: Sequence[DayBucket],
    n_days: int,
    reduction: Reduction | str,
) -> float:
    """Smallest or largest N-day window sum.

    Returns 0 for no buckets, the bucket's value for a single bucket, and
    0 when no window completes.
    """
    reduce = _resolve(reduction)
    if not buckets:
        return 0
    if len(buckets) == 1:
        return buckets[0].value

    scan = scan_windows(buckets, n_days)
    if not scan.sums:
        return 0
    result = scan.sums[0]
    for total in scan.sums[1:]:
        result = reduce(result, total)
    return result


def average_over_window(buckets: Sequence[DayBucket], n_days: int) -> float:
    """Mean of all completed N-day window sums."""
    if not buckets:
        return 0
    if len(buckets) == 1:
        return buckets[0].value

    scan = scan_windows(buckets, n_days)
    if not scan.sums:
        return 0
    return float(np.mean(scan.sums))


def average_per_workout(
    buckets: Sequence[DayBucket],
    n_days: int,
    workout_type: str,
) -> float:
    """Average calories per workout of ``workout_type`` over N-day windows.

    Only buckets tagged ``workout_type`` take part; days without one are
    absent rather than zero.  The total of the completed window sums is
    divided by the number of buckets folded while windows were still open,
    not by the window count.
    """
    matching = [b for b in buckets if b.tag == workout_type]
    if not matching:
        return 0
    if len(matching) == 1:
        return matching[0].value

    scan = scan_windows(matching, n_days)
    if not scan.sums:
        return 0
    return float(np.sum(scan.sums)) / scan.points_folded
