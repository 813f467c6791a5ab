"""Tests for wearstats.heart_rate -- resting/active stream classification."""

from wearstats.heart_rate import HEART_RATE_CADENCE_SEC, HeartRateBucketer


class TestHeartRateBucketer:
    def test_resting_sample(self):
        b = HeartRateBucketer()
        sample = b.record(1600565160, 70, is_resting=True)
        assert sample.day_index == 18525
        assert sample.resting is True
        assert b.streams().resting == (sample,)
        assert b.streams().active == ()

    def test_active_sample(self):
        b = HeartRateBucketer()
        b.record(1600565160, 140, is_resting=False)
        streams = b.streams()
        assert len(streams.active) == 1
        assert streams.resting == ()

    def test_same_day_not_merged(self):
        b = HeartRateBucketer()
        b.record(1600565160, 70, True)
        b.record(1600565220, 72, True)
        assert len(b.streams().resting) == 2

    def test_order_preserved(self):
        b = HeartRateBucketer()
        for i, bpm in enumerate([70, 71, 72]):
            b.record(1600565160 + i * 60, bpm, True)
        assert [s.bpm for s in b.streams().resting] == [70, 71, 72]


class TestRecordBatch:
    def test_fixed_cadence(self):
        b = HeartRateBucketer()
        samples = b.record_batch(1600565160, [70, 75, 70], is_resting=True)
        assert [s.timestamp for s in samples] == [
            1600565160,
            1600565160 + HEART_RATE_CADENCE_SEC,
            1600565160 + 2 * HEART_RATE_CADENCE_SEC,
        ]

    def test_custom_cadence(self):
        b = HeartRateBucketer()
        samples = b.record_batch(0, [60, 61], is_resting=True, cadence_sec=1)
        assert samples[1].timestamp == 1

    def test_batch_crossing_midnight(self):
        b = HeartRateBucketer()
        samples = b.record_batch(86400 - 60, [60, 61], is_resting=True)
        assert [s.day_index for s in samples] == [0, 1]

    def test_empty_batch(self):
        b = HeartRateBucketer()
        assert b.record_batch(0, [], is_resting=True) == []


class TestStreamsToDict:
    def test_shape(self):
        b = HeartRateBucketer()
        b.record(1600565160, 70, True)
        d = b.streams().to_dict()
        assert d["active"] == []
        assert d["resting"] == [
            {"dayIndex": 18525, "timestamp": 1600565160.0, "heartRate": 70}
        ]
