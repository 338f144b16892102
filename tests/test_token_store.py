from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from app.infrastructure.security.token_service import JwtTokenService
from app.infrastructure.stores.token_store import InMemoryTokenStore


NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _store(ttl_minutes: int = 60) -> InMemoryTokenStore:
    return InMemoryTokenStore(
        token_port=JwtTokenService(jwt_secret="test-secret-with-enough-length-0123456789", session_ttl_minutes=ttl_minutes)
    )


def test_issue_then_lookup_returns_principal():
    store = _store()

    session = store.issue(principal="alice", now=NOW)

    assert session.principal == "alice"
    assert session.issued_at == NOW
    assert store.lookup(token=session.token, now=NOW) == "alice"


def test_issue_replaces_previous_token():
    store = _store()
    first = store.issue(principal="alice", now=NOW)
    second = store.issue(principal="alice", now=NOW)

    assert store.lookup(token=first.token, now=NOW) is None
    assert store.lookup(token=second.token, now=NOW) == "alice"


def test_sessions_are_independent_per_principal():
    store = _store()
    alice = store.issue(principal="alice", now=NOW)
    bob = store.issue(principal="bob", now=NOW)

    store.revoke(principal="alice")

    assert store.lookup(token=alice.token, now=NOW) is None
    assert store.lookup(token=bob.token, now=NOW) == "bob"


def test_revoke_is_idempotent():
    store = _store()

    store.revoke(principal="ghost")
    store.revoke(principal="ghost")


def test_expired_session_is_rejected():
    store = _store(ttl_minutes=5)
    session = store.issue(principal="alice", now=NOW)

    assert store.lookup(token=session.token, now=NOW + timedelta(minutes=4)) == "alice"
    assert store.lookup(token=session.token, now=NOW + timedelta(minutes=5)) is None


def test_garbage_and_foreign_tokens_are_rejected():
    store = _store()
    other = InMemoryTokenStore(
        token_port=JwtTokenService(jwt_secret="another-secret-with-enough-length-987654", session_ttl_minutes=60)
    )
    foreign = other.issue(principal="alice", now=NOW)
    store.issue(principal="alice", now=NOW)

    assert store.lookup(token="not-a-token", now=NOW) is None
    assert store.lookup(token=foreign.token, now=NOW) is None


def test_concurrent_issue_leaves_exactly_one_live_token():
    store = _store()

    def _login(_):
        store.revoke(principal="alice")
        return store.issue(principal="alice", now=NOW).token

    with ThreadPoolExecutor(max_workers=8) as pool:
        tokens = list(pool.map(_login, range(32)))

    live = [token for token in tokens if store.lookup(token=token, now=NOW) == "alice"]
    assert len(live) == 1
