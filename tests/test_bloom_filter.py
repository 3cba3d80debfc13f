"""
Tests for Bloom filter insert/query behaviour
"""

import threading

import pytest

from bloomguard.error_handler import ConfigurationError
from bloomguard.filter import BloomFilter, FilterConfig, SynchronizedBloomFilter
from bloomguard.filter.filter_statistics import theoretical_false_positive_rate

from .helpers import random_strings


def test_end_to_end_scenario(bloom_filter):
    bloom_filter.insert("evil.com")
    bloom_filter.insert("bad.net")

    assert bloom_filter.query("evil.com")
    assert bloom_filter.query("bad.net")
    assert not bloom_filter.query("good.org")
    assert bloom_filter.size() == 1_000_001
    assert bloom_filter.item_count == 2


def test_empty_filter_rejects_everything(bloom_filter):
    assert bloom_filter.is_empty
    for item in ["evil.com", "", "a", "good.org"] + random_strings(200, "q-", seed=1):
        assert not bloom_filter.query(item)


def test_contains_operator(bloom_filter):
    bloom_filter.insert("phish.example")
    assert "phish.example" in bloom_filter
    assert "safe.example" not in bloom_filter


def test_no_false_negatives(small_filter):
    items = random_strings(3000, "known-", seed=11)
    for item in items:
        small_filter.insert(item)

    # heavily loaded filter: every inserted item must still be found
    assert all(small_filter.query(item) for item in items)


def test_query_is_deterministic(small_filter):
    small_filter.insert_all(random_strings(500, "x-", seed=3))
    candidates = random_strings(500, "y-", seed=4)
    first = [small_filter.query(c) for c in candidates]
    second = [small_filter.query(c) for c in candidates]
    assert first == second


def test_positive_stays_positive_after_more_inserts(small_filter):
    small_filter.insert("evil.com")
    assert small_filter.query("evil.com")

    small_filter.insert_all(random_strings(2000, "later-", seed=5))
    assert small_filter.query("evil.com")


def test_false_positive_rate_near_theoretical(small_filter):
    inserted = random_strings(1000, "in-", seed=21)
    small_filter.insert_all(inserted)

    probes = random_strings(20000, "out-", seed=22)
    false_positives = sum(1 for probe in probes if small_filter.query(probe))
    observed = false_positives / len(probes)
    expected = theoretical_false_positive_rate(small_filter.size(), len(inserted), 3)

    assert expected / 3 <= observed <= expected * 3


def test_insert_all_counts_items(small_filter):
    assert small_filter.insert_all(["a", "b", "c"]) == 3
    assert small_filter.item_count == 3


def test_duplicate_inserts_count_each_call(small_filter):
    small_filter.insert("dup")
    small_filter.insert("dup")
    assert small_filter.item_count == 2
    assert small_filter.bits.count() <= 3


def test_empty_string_item(small_filter):
    small_filter.insert("")
    assert small_filter.query("")


@pytest.mark.parametrize("item", [None, 42, b"evil.com", ["evil.com"]])
def test_non_string_items_rejected(bloom_filter, item):
    with pytest.raises(TypeError):
        bloom_filter.insert(item)
    with pytest.raises(TypeError):
        bloom_filter.query(item)
    assert bloom_filter.item_count == 0


def test_zero_size_rejected_at_construction():
    with pytest.raises(ConfigurationError):
        BloomFilter(FilterConfig(bit_array_size=0))


def test_custom_size_reported():
    assert BloomFilter(FilterConfig(bit_array_size=4099)).size() == 4099


def test_synchronized_filter_concurrent_inserts():
    shared = SynchronizedBloomFilter(config=FilterConfig(bit_array_size=50021))
    batches = [random_strings(500, f"t{n}-", seed=n) for n in range(4)]

    threads = [threading.Thread(target=shared.insert_all, args=(batch,)) for batch in batches]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert shared.item_count == 2000
    assert all(item in shared for batch in batches for item in batch)
    assert shared.size() == 50021


def test_synchronized_filter_queries_during_inserts():
    shared = SynchronizedBloomFilter(config=FilterConfig(bit_array_size=50021))
    seeded = random_strings(500, "seed-", seed=40)
    shared.insert_all(seeded)

    writers = [random_strings(500, f"w{n}-", seed=50 + n) for n in range(3)]
    misses = []

    def read_seeded():
        for _ in range(5):
            misses.extend(item for item in seeded if not shared.query(item))

    threads = [threading.Thread(target=shared.insert_all, args=(batch,)) for batch in writers]
    threads += [threading.Thread(target=read_seeded) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert misses == []
    assert shared.item_count == 2000
    assert all(shared.query(item) for batch in writers for item in batch)
