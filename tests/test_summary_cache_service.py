from datetime import timedelta

from review_summary.entities import SummaryCacheEntryEntity

HASH = "a" * 64


def test_store_sets_expiry_from_ttl(cache, cache_store, clock):
    entry = cache.store("therapist_reviews", 42, "review_summary", "X", HASH)

    assert entry.created_at == clock()
    assert entry.expires_at == clock() + timedelta(days=7)
    assert cache_store.count_entity("therapist_reviews", 42) == 1


def test_lookup_returns_valid_entry(cache):
    cache.store("therapist_reviews", 42, "review_summary", "X", HASH)

    hit = cache.lookup("therapist_reviews", 42, HASH)

    assert hit is not None
    assert hit.summary == "X"


def test_lookup_misses_other_keys(cache):
    cache.store("therapist_reviews", 42, "review_summary", "X", HASH)

    assert cache.lookup("therapist_reviews", 42, "b" * 64) is None
    assert cache.lookup("therapist_reviews", 43, HASH) is None
    assert cache.lookup("other", 42, HASH) is None


def test_expired_entry_is_a_miss_but_still_stored(cache, cache_store, clock):
    cache.store("therapist_reviews", 42, "review_summary", "X", HASH, ttl=60)

    clock.advance(seconds=59)
    assert cache.lookup("therapist_reviews", 42, HASH) is not None

    clock.advance(seconds=1)
    assert cache.lookup("therapist_reviews", 42, HASH) is None
    assert cache_store.count_entity("therapist_reviews", 42) == 1


def test_entry_without_expiry_never_expires(cache, clock):
    cache.store("therapist_reviews", 42, "review_summary", "X", HASH, expires=False)

    clock.advance(days=3650)

    assert cache.lookup("therapist_reviews", 42, HASH) is not None


def test_store_same_key_replaces_row(cache, cache_store):
    cache.store("therapist_reviews", 42, "review_summary", "old", HASH)
    cache.store("therapist_reviews", 42, "review_summary", "new", HASH)

    assert cache_store.count_entity("therapist_reviews", 42) == 1
    assert cache.lookup("therapist_reviews", 42, HASH).summary == "new"


def test_clear_removes_all_rows_for_entity(cache, cache_store):
    cache.store("therapist_reviews", 42, "review_summary", "X", HASH)
    cache.store("therapist_reviews", 42, "review_summary", "Y", "b" * 64)
    cache.store("therapist_reviews", 7, "review_summary", "Z", HASH)

    assert cache.clear("therapist_reviews", 42) == 2
    assert cache_store.count_entity("therapist_reviews", 42) == 0
    assert cache_store.count_entity("therapist_reviews", 7) == 1


def test_is_valid_boundary(clock):
    entry = SummaryCacheEntryEntity(
        entity_type="therapist_reviews",
        entity_id=42,
        input_hash=HASH,
        prompt_name="review_summary",
        summary="X",
        created_at=clock(),
        expires_at=clock(),
    )

    assert not entry.is_valid(clock())
    assert entry.is_valid(clock() - timedelta(microseconds=1))
