"""Statistics over day buckets and heart-rate streams.

Modules:
    windows    -- Two-pointer N-day window scan with min/max/average reductions
    heart_rate -- Two-level (per-day, then overall) resting heart-rate mean
"""

from wearstats.analytics.windows import (
    Reduction,
    WindowScan,
    scan_windows,
    min_or_max_over_window,
    average_over_window,
    average_per_workout,
)
from wearstats.analytics.heart_rate import daily_means, average_resting_heart_rate

__all__ = [
    # windows
    "Reduction",
    "WindowScan",
    "scan_windows",
    "min_or_max_over_window",
    "average_over_window",
    "average_per_workout",
    # heart_rate
    "daily_means",
    "average_resting_heart_rate",
]
