"""Unit tests for the CurrencyConverter."""

import asyncio
import logging
from datetime import timedelta
from decimal import Decimal
from itertools import permutations

import pytest

from asset_tracking.application.services import CurrencyConverter, RateStore
from asset_tracking.domain.entities import Currency, MonetaryValue, RateTable, fallback_table
from asset_tracking.domain.exceptions import MissingRateError

AMOUNTS = [Decimal("0"), Decimal("1"), Decimal("999.99"), Decimal("12345.67")]


@pytest.mark.asyncio
async def test_same_currency_returns_amount_unchanged(converter: CurrencyConverter):
    for currency in Currency:
        for amount in AMOUNTS:
            assert await converter.convert(amount, currency, currency) == amount


@pytest.mark.asyncio
async def test_round_trip_stays_within_rounding_tolerance(converter: CurrencyConverter):
    for a, b in permutations(Currency, 2):
        for amount in AMOUNTS:
            there = await converter.convert(amount, a, b)
            back = await converter.convert(there, b, a)
            assert abs(back - amount) < Decimal("0.000001")


@pytest.mark.asyncio
async def test_conversion_triangulates_through_eur(converter: CurrencyConverter):
    for a, b in permutations(Currency, 2):
        direct = await converter.convert(Decimal("250.00"), a, b)
        in_eur = await converter.convert(Decimal("250.00"), a, Currency.EUR)
        via_eur = await converter.convert(in_eur, Currency.EUR, b)
        assert direct == via_eur


@pytest.mark.asyncio
async def test_usd_to_sek_uses_eur_relative_rates(converter: CurrencyConverter):
    result = await converter.convert(Decimal("100"), Currency.USD, Currency.SEK)
    assert result == Decimal("100") / Decimal("1.0389") * Decimal("11.4900")


@pytest.mark.asyncio
async def test_eur_source_is_not_divided(converter: CurrencyConverter):
    result = await converter.convert(Decimal("10"), Currency.EUR, Currency.USD)
    assert result == Decimal("10.3890")


@pytest.mark.asyncio
async def test_convert_accepts_currency_codes(converter: CurrencyConverter):
    result = await converter.convert(Decimal("10"), "eur", "SEK")
    assert result == Decimal("114.9000")


@pytest.mark.asyncio
async def test_first_conversion_loads_rates(converter, rate_source):
    assert converter.current_rates() is None
    await converter.convert(Decimal("1"), Currency.USD, Currency.EUR)
    assert rate_source.calls == 1
    assert converter.current_rates().source == "fake"


@pytest.mark.asyncio
async def test_stale_table_triggers_refresh_before_converting(rate_source, clock):
    store = RateStore(clock=clock)
    store.set_rates(RateTable(
        rates={"USD": Decimal("2"), "SEK": Decimal("20")},
        fetched_at=clock() - timedelta(hours=25),
    ))
    converter = CurrencyConverter(rate_source, store, clock=clock)

    result = await converter.convert(Decimal("10"), Currency.EUR, Currency.USD)

    assert rate_source.calls == 1
    assert result == Decimal("10.3890")


@pytest.mark.asyncio
async def test_fresh_table_is_used_without_fetching(rate_source, clock):
    store = RateStore(clock=clock)
    store.set_rates(RateTable(
        rates={"USD": Decimal("2"), "SEK": Decimal("20")},
        fetched_at=clock() - timedelta(hours=23),
    ))
    converter = CurrencyConverter(rate_source, store, clock=clock)

    result = await converter.convert(Decimal("10"), Currency.EUR, Currency.USD)

    assert rate_source.calls == 0
    assert result == Decimal("20")


@pytest.mark.asyncio
async def test_provider_failure_installs_fallback(converter, rate_source):
    rate_source.error = "connection refused"

    result = await converter.convert(Decimal("110"), Currency.USD, Currency.EUR)

    assert result == Decimal("100")
    table = converter.current_rates()
    assert table.is_fallback
    assert converter.has_valid_rates()
    assert "connection refused" in converter.last_error


@pytest.mark.asyncio
async def test_ensure_fresh_reports_live_and_fallback(converter, rate_source, clock):
    assert await converter.ensure_fresh() is True
    assert rate_source.calls == 1

    # Still fresh: no second fetch.
    assert await converter.ensure_fresh() is True
    assert rate_source.calls == 1

    clock.advance(timedelta(hours=25))
    rate_source.error = "timeout"
    assert await converter.ensure_fresh(suppress_errors=True) is False
    assert converter.current_rates().is_fallback


@pytest.mark.asyncio
async def test_ensure_fresh_honours_custom_max_age(converter, rate_source, clock):
    await converter.ensure_fresh()
    clock.advance(timedelta(minutes=10))
    await converter.ensure_fresh(max_age=timedelta(minutes=5))
    assert rate_source.calls == 2


@pytest.mark.asyncio
async def test_unsuppressed_failure_is_logged(converter, rate_source, caplog):
    rate_source.error = "boom"
    with caplog.at_level(logging.WARNING):
        await converter.ensure_fresh(suppress_errors=False)
    assert "Error updating currency rates" in caplog.text
    assert "fallback" in caplog.text


@pytest.mark.asyncio
async def test_suppressed_failure_is_not_logged_as_warning(converter, rate_source, caplog):
    rate_source.error = "boom"
    with caplog.at_level(logging.WARNING):
        await converter.ensure_fresh(suppress_errors=True)
    assert "Error updating currency rates" not in caplog.text


@pytest.mark.asyncio
async def test_missing_rate_is_reported(rate_source, clock):
    store = RateStore(clock=clock)
    store.set_rates(RateTable(rates={"USD": Decimal("1.1")}, fetched_at=clock()))
    converter = CurrencyConverter(rate_source, store, clock=clock)

    assert converter.has_valid_rates() is False
    with pytest.raises(MissingRateError) as exc_info:
        await converter.convert(Decimal("1"), Currency.SEK, Currency.USD)
    assert exc_info.value.currency == "SEK"
    with pytest.raises(MissingRateError):
        await converter.convert(Decimal("1"), Currency.USD, Currency.SEK)


@pytest.mark.asyncio
async def test_fallback_table_has_valid_rates(rate_source, clock):
    store = RateStore(clock=clock)
    store.set_rates(fallback_table(clock()))
    converter = CurrencyConverter(rate_source, store, clock=clock)
    assert converter.has_valid_rates() is True


@pytest.mark.asyncio
async def test_concurrent_refreshes_fetch_once(converter, rate_source):
    rate_source.delay = 0.01
    results = await asyncio.gather(
        converter.ensure_fresh(),
        converter.ensure_fresh(),
        converter.ensure_fresh(),
    )
    assert results == [True, True, True]
    assert rate_source.calls == 1


@pytest.mark.asyncio
async def test_readers_see_old_table_while_refresh_is_pending(rate_source, clock):
    store = RateStore(clock=clock)
    old = fallback_table(clock() - timedelta(hours=30))
    store.set_rates(old)
    converter = CurrencyConverter(rate_source, store, clock=clock)

    rate_source.gate = asyncio.Event()
    refresh = asyncio.create_task(converter.ensure_fresh())
    await asyncio.sleep(0)

    assert converter.current_rates() is old
    rate_source.gate.set()
    assert await refresh is True
    assert converter.current_rates() is not old


@pytest.mark.asyncio
async def test_convert_uses_stale_table_while_refresh_is_pending(rate_source, clock):
    store = RateStore(clock=clock)
    store.set_rates(fallback_table(clock() - timedelta(hours=25)))
    converter = CurrencyConverter(rate_source, store, clock=clock)

    rate_source.gate = asyncio.Event()
    refresh = asyncio.create_task(converter.ensure_fresh())
    await asyncio.sleep(0)

    # Would hang on the gate if conversions waited for the running refresh.
    result = await asyncio.wait_for(
        converter.convert(Decimal("10"), Currency.EUR, Currency.USD), timeout=1
    )
    assert result == Decimal("11.0")
    assert await converter.ensure_fresh() is False
    assert rate_source.calls == 1

    rate_source.gate.set()
    assert await refresh is True
    assert await converter.convert(Decimal("10"), Currency.EUR, Currency.USD) == Decimal("10.3890")


@pytest.mark.asyncio
async def test_to_usd_rounds_to_cents(converter):
    value = MonetaryValue(Decimal("12500.00"), Currency.SEK)
    usd = await converter.to_usd(value)
    assert usd == Decimal("1130.22")
    assert usd.as_tuple().exponent == -2
