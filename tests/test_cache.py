import asyncio

from conftest import FakeHttpClient, page_html

from jobquery.core.cache import JobCache
from jobquery.core.models import JobRecord, QueryOptions
from jobquery.adapters.linkedin.pagination import PaginationController, RetrievalStrategy
from jobquery.adapters.linkedin.params import build_api_url


def _jobs(count: int):
    return [JobRecord(position=f"Dev {i}", company="Acme") for i in range(count)]


def test_get_set_size_and_clear(clock):
    cache = JobCache(ttl=3600, clock=clock)

    assert cache.get("missing") is None
    cache.set("a", _jobs(2))
    cache.set("b", _jobs(1))

    assert cache.size == 2
    assert [job.position for job in cache.get("a")] == ["Dev 0", "Dev 1"]

    cache.clear()
    assert cache.size == 0
    assert cache.get("a") is None


def test_entries_expire_after_ttl(clock):
    cache = JobCache(ttl=3600, clock=clock)
    cache.set("a", _jobs(1))

    clock.advance(3600)
    assert cache.get("a") is not None

    clock.advance(1)
    assert cache.get("a") is None
    assert cache.size == 0


def test_expired_entries_are_purged_on_access(clock):
    cache = JobCache(ttl=10, clock=clock)
    cache.set("old", _jobs(1))
    clock.advance(11)
    cache.set("new", _jobs(1))

    assert cache.size == 1
    assert cache.get("new") is not None


def test_cached_list_is_a_snapshot(clock):
    cache = JobCache(clock=clock)
    jobs = _jobs(2)
    cache.set("a", jobs)

    jobs.append(JobRecord(position="late", company="Acme"))
    returned = cache.get("a")
    returned.clear()

    assert len(cache.get("a")) == 2


def _cached_controller(client, identity, sleep, cache):
    return PaginationController(
        client, identity, strategy=RetrievalStrategy.CACHED, cache=cache, sleep=sleep
    )


def test_second_query_within_ttl_is_served_from_cache(identity, recording_sleep, clock):
    cache = JobCache(clock=clock)
    client = FakeHttpClient(batches=[page_html(25), page_html(7, first_index=25), ""])
    controller = _cached_controller(client, identity, recording_sleep, cache)
    options = QueryOptions(keyword="python", location="Manila")

    first = asyncio.run(controller.run(options))
    requests_after_first = len(client.requests)
    second = asyncio.run(controller.run(QueryOptions(keyword="python", location="Manila")))

    assert len(first) == 32
    assert second == first
    assert len(client.requests) == requests_after_first
    assert cache.size == 1
    assert cache.get(build_api_url(options, start=0)) == first


def test_query_after_ttl_hits_the_network_again(identity, recording_sleep, clock):
    cache = JobCache(clock=clock)
    client = FakeHttpClient(batches=[page_html(3), "", page_html(4), ""])
    controller = _cached_controller(client, identity, recording_sleep, cache)
    options = QueryOptions(keyword="python")

    first = asyncio.run(controller.run(options))
    clock.advance(3601)
    second = asyncio.run(controller.run(options))

    assert len(first) == 3
    assert len(second) == 4
    assert len(client.api_requests) == 4


def test_empty_result_is_not_cached(identity, recording_sleep, clock):
    cache = JobCache(clock=clock)
    client = FakeHttpClient(batches=[""])
    controller = _cached_controller(client, identity, recording_sleep, cache)

    assert asyncio.run(controller.run(QueryOptions(keyword="nothing"))) == []
    assert cache.size == 0


def test_different_queries_use_different_keys(identity, recording_sleep, clock):
    cache = JobCache(clock=clock)
    client = FakeHttpClient(batches=[page_html(2), "", page_html(5), ""])
    controller = _cached_controller(client, identity, recording_sleep, cache)

    asyncio.run(controller.run(QueryOptions(keyword="python")))
    asyncio.run(controller.run(QueryOptions(keyword="rust")))

    assert cache.size == 2
    assert len(client.api_requests) == 4
