from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from app.domain.entities.verification_code import VerificationCode
from app.infrastructure.stores.verification_code_store import InMemoryVerificationCodeStore


NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _code(code_id: str = "c1", value: str = "XYZ9", ttl_seconds: int = 300) -> VerificationCode:
    return VerificationCode(id=code_id, value=value, expires_at=NOW + timedelta(seconds=ttl_seconds))


def test_validate_does_not_remove_code():
    store = InMemoryVerificationCodeStore()
    store.save(_code(), now=NOW)

    assert store.validate(code_id="c1", supplied_value="XYZ9", now=NOW) is True
    assert store.validate(code_id="c1", supplied_value="XYZ9", now=NOW) is True


def test_consume_succeeds_once():
    store = InMemoryVerificationCodeStore()
    store.save(_code(), now=NOW)

    assert store.consume(code_id="c1", supplied_value="XYZ9", now=NOW) is True
    assert store.consume(code_id="c1", supplied_value="XYZ9", now=NOW) is False


def test_failed_consume_still_removes_code():
    store = InMemoryVerificationCodeStore()
    store.save(_code(), now=NOW)

    assert store.consume(code_id="c1", supplied_value="0000", now=NOW) is False
    assert store.validate(code_id="c1", supplied_value="XYZ9", now=NOW) is False


def test_expired_code_fails_like_a_mismatch():
    store = InMemoryVerificationCodeStore()
    store.save(_code(ttl_seconds=10), now=NOW)

    assert store.validate(code_id="c1", supplied_value="XYZ9", now=NOW + timedelta(seconds=10)) is False
    assert store.consume(code_id="c1", supplied_value="XYZ9", now=NOW + timedelta(seconds=11)) is False


def test_case_policy():
    lenient = InMemoryVerificationCodeStore()
    strict = InMemoryVerificationCodeStore(case_sensitive=True)
    lenient.save(_code(), now=NOW)
    strict.save(_code(), now=NOW)

    assert lenient.validate(code_id="c1", supplied_value="xyz9", now=NOW) is True
    assert strict.validate(code_id="c1", supplied_value="xyz9", now=NOW) is False
    assert strict.validate(code_id="c1", supplied_value="XYZ9", now=NOW) is True


def test_invalidate_is_idempotent():
    store = InMemoryVerificationCodeStore()
    store.save(_code(), now=NOW)

    store.invalidate(code_id="c1")
    store.invalidate(code_id="c1")
    store.invalidate(code_id="missing")

    assert store.validate(code_id="c1", supplied_value="XYZ9", now=NOW) is False


def test_purge_expired_keeps_live_codes():
    store = InMemoryVerificationCodeStore()
    store.save(_code("old", ttl_seconds=1), now=NOW)
    store.save(_code("new", ttl_seconds=600), now=NOW)

    removed = store.purge_expired(now=NOW + timedelta(seconds=5))

    assert removed == 1
    assert store.validate(code_id="old", supplied_value="XYZ9", now=NOW) is False
    assert store.validate(code_id="new", supplied_value="XYZ9", now=NOW) is True


def test_save_purges_with_callers_clock_once_over_threshold():
    store = InMemoryVerificationCodeStore(purge_threshold=1)
    store.save(_code("old", ttl_seconds=1), now=NOW)

    store.save(_code("new", ttl_seconds=600), now=NOW + timedelta(seconds=5))

    assert store.validate(code_id="old", supplied_value="XYZ9", now=NOW) is False
    assert store.validate(code_id="new", supplied_value="XYZ9", now=NOW) is True


def test_concurrent_consume_has_single_winner():
    store = InMemoryVerificationCodeStore()
    store.save(_code(), now=NOW)

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(
            pool.map(
                lambda _: store.consume(code_id="c1", supplied_value="XYZ9", now=NOW),
                range(64),
            )
        )

    assert results.count(True) == 1
