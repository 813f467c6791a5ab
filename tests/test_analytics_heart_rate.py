"""Tests for wearstats.analytics.heart_rate -- two-level resting HR mean."""

import numpy as np
import pytest

from wearstats.analytics.heart_rate import average_resting_heart_rate, daily_means
from wearstats.heart_rate import HeartRateBucketer

from tests.conftest import RESTING_HR, on_day


def _resting(*runs: tuple[int, list[float]]):
    b = HeartRateBucketer()
    for offset, bpms in runs:
        b.record_batch(on_day(offset), bpms, is_resting=True)
    return b.streams().resting


class TestDailyMeans:
    def test_single_day(self):
        samples = _resting((0, [60, 70]))
        assert daily_means(samples) == [(samples[0].day_index, 65.0)]

    def test_every_sample_counted_on_day_change(self):
        samples = _resting((0, [60, 70]), (1, [80, 90, 100]))
        assert [m for _, m in daily_means(samples)] == [65.0, 90.0]

    def test_missing_day_has_no_entry(self):
        samples = _resting((0, [60]), (2, [80]))
        days = [d for d, _ in daily_means(samples)]
        assert days[1] - days[0] == 2
        assert len(days) == 2


class TestAverageRestingHeartRate:
    def test_empty(self):
        assert average_resting_heart_rate([], 1) == 0

    def test_one_day_is_plain_mean(self):
        samples = _resting((0, RESTING_HR))
        assert len(samples) == 10
        assert average_resting_heart_rate(samples, 1) == pytest.approx(np.mean(RESTING_HR))

    def test_mean_of_daily_means(self):
        # day 0: mean 60 from 4 samples; day 1: mean 90 from 1 sample
        samples = _resting((0, [60, 60, 60, 60]), (1, [90]))
        assert average_resting_heart_rate(samples, 2) == 75.0

    def test_invalid_period(self):
        with pytest.raises(ValueError):
            average_resting_heart_rate(_resting((0, [60])), 0)
