from datetime import datetime, timedelta, timezone

from mediarank.common.timeutil import EPOCH, as_utc, or_epoch, utcnow


def test_utcnow_is_aware():
    assert utcnow().tzinfo is not None


def test_as_utc_treats_naive_as_utc():
    naive = datetime(2024, 5, 1, 12, 0)
    assert as_utc(naive) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_as_utc_converts_offsets():
    plus2 = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert as_utc(plus2) == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_or_epoch():
    assert or_epoch(None) == EPOCH
    assert as_utc(None) is None
