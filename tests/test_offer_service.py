"""
test_offer_service.py: offer expiry rules.

Checks:
- end date parsing (ISO strings, bare dates, epoch milliseconds)
- inclusive expiry boundary
- offers without an end date never expire
- malformed end dates are dropped with a warning
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from nursery_directory.app.services.offer_service import OfferService, is_active, parse_end_date


NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("value,expected", [
    ("2025-06-01T12:00:00Z", NOW),
    ("2025-06-01T15:00:00+03:00", NOW),
    ("2025-06-01T12:00:00", NOW),
    ("2025-06-01", datetime(2025, 6, 1, tzinfo=timezone.utc)),
    (1748779200000, NOW),
])
def test_parse_end_date(value, expected):
    assert parse_end_date(value) == expected


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
def test_missing_end_date_parses_to_none(value):
    assert parse_end_date(value) is None


@pytest.mark.parametrize("value", [0, False, None, ""])
def test_falsy_end_date_keeps_offer_active(value, caplog):
    with caplog.at_level(logging.WARNING):
        assert is_active("o1", {"title": "Sale", "endDate": value}, NOW)

    assert "Invalid endDate" not in caplog.text


@pytest.mark.parametrize("value", ["not-a-date", "31/12/2025", True, ["2025-01-01"], float("nan")])
def test_unparsable_end_date_raises(value):
    with pytest.raises(ValueError):
        parse_end_date(value)


def test_offer_without_end_date_is_always_active():
    far_future = datetime(2999, 1, 1, tzinfo=timezone.utc)
    assert is_active("o1", {"title": "Sale"}, NOW)
    assert is_active("o1", {"title": "Sale"}, far_future)


def test_end_date_boundary_is_inclusive():
    offer = {"endDate": "2025-06-01T12:00:00Z"}

    assert is_active("o1", offer, NOW)
    assert is_active("o1", offer, NOW - timedelta(days=1))
    assert not is_active("o1", offer, NOW + timedelta(microseconds=1))


def test_unpublished_offer_is_never_active():
    assert not is_active("o1", {"published": False}, NOW)


def test_invalid_end_date_is_excluded_and_logged(caplog):
    with caplog.at_level(logging.WARNING):
        assert not is_active("offer-9", {"endDate": "not-a-date"}, NOW)

    assert "Invalid endDate for offer offer-9" in caplog.text
    assert "not-a-date" in caplog.text


@pytest.mark.asyncio
async def test_list_offers_filters_expired_and_invalid(store, caplog):
    store.put_document("offers", "open", {"title": "Always on"})
    store.put_document("offers", "today", {"title": "Ends now", "endDate": "2025-06-01T12:00:00Z"})
    store.put_document("offers", "expired", {"title": "Old", "endDate": "2025-05-31"})
    store.put_document("offers", "broken", {"title": "Broken", "endDate": "not-a-date"})
    store.put_document("offers", "hidden", {"title": "Hidden", "published": False})

    with caplog.at_level(logging.WARNING):
        offers = await OfferService.list_offers(now=NOW)

    assert [o["id"] for o in offers] == ["open", "today"]
    assert "broken" in caplog.text
