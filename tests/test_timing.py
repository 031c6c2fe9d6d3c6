import time

from dinner.timing import get_time_ms, sleep_ms


def test_get_time_ms_counts_whole_seconds():
    assert get_time_ms() % 1000 == 0


def test_get_time_ms_tracks_wall_clock():
    before = int(time.time())
    value = get_time_ms()
    after = int(time.time())
    assert before * 1000 <= value <= after * 1000


def test_get_time_ms_does_not_go_backwards():
    first = get_time_ms()
    second = get_time_ms()
    assert second >= first


def test_sleep_ms_waits_at_least_requested_time():
    start = time.monotonic()
    result = sleep_ms(30)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.03


def test_sleep_ms_zero_returns_quickly():
    start = time.monotonic()
    result = sleep_ms(0)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed < 0.5


def test_sleep_ms_longer_request_waits_longer():
    start = time.monotonic()
    result = sleep_ms(60)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.06