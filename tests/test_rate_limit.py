import asyncio

from jobquery.core.rate_limit import backoff, backoff_seconds, random_delay


def test_backoff_doubles_per_attempt(recording_sleep):
    assert [backoff_seconds(n) for n in (1, 2, 3)] == [2.0, 4.0, 8.0]

    asyncio.run(backoff(2, sleep=recording_sleep))
    assert recording_sleep.delays == [4.0]


def test_random_delay_stays_in_range(recording_sleep):
    for _ in range(50):
        asyncio.run(random_delay(2.0, 3.0, sleep=recording_sleep))

    assert len(recording_sleep.delays) == 50
    assert all(2.0 <= delay <= 3.0 for delay in recording_sleep.delays)
