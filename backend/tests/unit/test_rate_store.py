"""Unit tests for the in-memory RateStore."""

import threading
from datetime import timedelta
from decimal import Decimal

from asset_tracking.application.services import RateStore
from asset_tracking.domain.entities import RateTable


def _table(fetched_at, usd="1.08"):
    return RateTable(rates={"USD": Decimal(usd), "SEK": Decimal("11.2")}, fetched_at=fetched_at)


def test_empty_store_is_stale(clock):
    store = RateStore(clock=clock)
    assert store.get_rates() is None
    assert store.last_updated is None
    assert store.is_stale(timedelta(hours=24))


def test_staleness_follows_table_age(clock):
    store = RateStore(clock=clock)
    store.set_rates(_table(clock()))
    assert not store.is_stale(timedelta(hours=24))

    clock.advance(timedelta(hours=24))
    assert not store.is_stale(timedelta(hours=24))

    clock.advance(timedelta(seconds=1))
    assert store.is_stale(timedelta(hours=24))


def test_set_rates_replaces_whole_table(clock):
    store = RateStore(clock=clock)
    first = _table(clock(), usd="1.08")
    second = _table(clock() + timedelta(hours=1), usd="1.09")

    store.set_rates(first)
    store.set_rates(second)

    assert store.get_rates() is second
    assert store.last_updated == second.fetched_at
    # The earlier snapshot is untouched.
    assert first.rate_for("USD") == Decimal("1.08")


def test_concurrent_readers_only_see_complete_tables(clock):
    store = RateStore(clock=clock)
    tables = [_table(clock(), usd=f"1.{i:02d}") for i in range(1, 50)]
    store.set_rates(tables[0])
    seen = []

    def reader():
        for _ in range(200):
            table = store.get_rates()
            seen.append(table is not None and table.rate_for("SEK") == Decimal("11.2"))

    def writer():
        for table in tables:
            store.set_rates(table)

    threads = [threading.Thread(target=reader) for _ in range(4)] + [threading.Thread(target=writer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(seen)
    assert store.get_rates() is tables[-1]
