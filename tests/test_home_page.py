"""
test_home_page.py: loading and state of the home page controller.

The API client is replaced by a MagicMock returning ``(data, error)``
tuples, as the real client does.
"""

import logging
from unittest.mock import MagicMock

import pytest

from nursery_directory.app.schemas.site_settings import DEFAULT_SITE_SETTINGS
from nursery_home import LOADING_TEXT, HomePage


NURSERIES = [
    {"id": "n1", "name": "Green Oasis", "location": "Riyadh", "categories": ["Succulents"],
     "services": ["Delivery"], "featured": True},
    {"id": "n2", "name": "Desert Rose", "location": "Jeddah", "categories": ["Roses"], "services": []},
]
OFFERS = [{"id": "o1", "title": "Rose week", "description": "Roses for less", "nurseryName": "Desert Rose"}]
CATEGORIES = [{"id": "c1", "title": "Roses", "order": 1}, {"id": "c2", "title": "Succulents", "order": 2}]
SPONSORS = [{"id": "s1", "name": "Agri Co"}]


def make_api(**overrides):
    api = MagicMock()
    api.get_site_settings.return_value = ({"title": "مشاتل الرياض"}, None)
    api.list_nurseries.return_value = (NURSERIES, None)
    api.list_offers.return_value = (OFFERS, None)
    api.list_categories.return_value = (CATEGORIES, None)
    api.list_sponsors.return_value = (SPONSORS, None)
    for name, value in overrides.items():
        getattr(api, name).return_value = value
    return api


def failure(message="فشل"):
    return [], {"status_code": 500, "message": message}


@pytest.mark.asyncio
async def test_load_populates_every_section():
    page = HomePage(make_api())
    assert page.is_loading
    assert page.render() == LOADING_TEXT

    await page.load()

    assert not page.is_loading
    assert page.site_settings.title == "مشاتل الرياض"
    assert page.site_settings.subtitle == DEFAULT_SITE_SETTINGS.subtitle
    assert [n.id for n in page.nurseries] == ["n1", "n2"]
    assert [o.id for o in page.offers] == ["o1"]
    assert [c.id for c in page.categories] == ["c1", "c2"]
    assert [s.id for s in page.sponsors] == ["s1"]
    assert [n.id for n in page.featured_nurseries] == ["n1"]
    assert "مشاتل الرياض" in page.render()


@pytest.mark.asyncio
async def test_failed_nurseries_fetch_leaves_other_sections(caplog):
    page = HomePage(make_api(list_nurseries=failure("فشل تحميل المشاتل")))

    with caplog.at_level(logging.ERROR):
        await page.load()

    assert page.nurseries == []
    assert [o.id for o in page.offers] == ["o1"]
    assert [c.id for c in page.categories] == ["c1", "c2"]
    assert not page.is_loading
    assert "Error fetching nurseries: فشل تحميل المشاتل" in caplog.text


@pytest.mark.asyncio
async def test_every_fetch_failing_still_finishes_loading():
    api = make_api(
        get_site_settings=(None, {"status_code": 404, "message": "missing"}),
        list_nurseries=failure(),
        list_offers=failure(),
        list_categories=failure(),
        list_sponsors=failure(),
    )
    page = HomePage(api)

    await page.load()

    assert not page.is_loading
    assert page.site_settings is DEFAULT_SITE_SETTINGS
    assert page.nurseries == page.offers == page.categories == page.sponsors == []


@pytest.mark.asyncio
async def test_unexpected_client_exception_is_contained(caplog):
    api = make_api()
    api.list_sponsors.side_effect = RuntimeError("socket closed")
    page = HomePage(api)

    with caplog.at_level(logging.ERROR):
        await page.load()

    assert page.sponsors == []
    assert not page.is_loading
    assert [n.id for n in page.nurseries] == ["n1", "n2"]
    assert "socket closed" in caplog.text


@pytest.mark.asyncio
async def test_malformed_record_is_skipped(caplog):
    nurseries = NURSERIES + [{"id": "bad", "name": "Broken", "categories": "not-a-list"}]
    page = HomePage(make_api(list_nurseries=(nurseries, None)))

    with caplog.at_level(logging.WARNING):
        await page.load()

    assert [n.id for n in page.nurseries] == ["n1", "n2"]
    assert "Skipping malformed nursery bad" in caplog.text


@pytest.mark.asyncio
async def test_invalid_remote_settings_keep_default():
    page = HomePage(make_api(get_site_settings=({"benefits": 42}, None)))

    await page.load()

    assert page.site_settings is DEFAULT_SITE_SETTINGS


@pytest.mark.asyncio
async def test_results_follow_query_and_data():
    page = HomePage(make_api())
    page.set_query("rose")
    assert page.results == []

    await page.load()

    assert [(r.type, r.id) for r in page.results] == [("nursery", "n2"), ("offer", "o1"), ("category", "c1")]

    page.set_filter("service")
    assert [r.type for r in page.filtered_results] == ["nursery", "offer"]
    page.set_filter("category")
    assert [r.id for r in page.filtered_results] == ["c1"]

    page.offers = []
    assert [r.type for r in page.results] == ["nursery", "category"]

    page.set_query("   ")
    assert page.results == []


@pytest.mark.asyncio
async def test_category_view():
    page = HomePage(make_api())
    await page.load()

    page.select_category("Succulents")
    assert page.view_mode == "category-results"
    assert [n.id for n in page.category_nurseries] == ["n1"]
    assert "Green Oasis - Riyadh" in page.render()

    page.show_home()
    assert page.view_mode == "home"
    assert page.category_nurseries == []


@pytest.mark.asyncio
async def test_null_titles_and_tags_keep_records(caplog):
    offers = [{"id": "o9", "title": None, "description": "Palm sale", "tags": ["palms", None]}]
    categories = [{"id": "c9", "title": None, "description": "Seasonal plants", "order": 5}]
    nurseries = [{"id": "n9", "name": "Palm House", "location": None, "categories": [None, "Palms"]}]
    page = HomePage(make_api(
        list_offers=(offers, None),
        list_categories=(categories, None),
        list_nurseries=(nurseries, None),
    ))

    with caplog.at_level(logging.WARNING):
        await page.load()

    assert "Skipping malformed" not in caplog.text
    assert [(o.id, o.title, o.tags) for o in page.offers] == [("o9", "", ["palms"])]
    assert [(c.id, c.title) for c in page.categories] == [("c9", "")]
    assert [(n.id, n.location, n.categories) for n in page.nurseries] == [("n9", "", ["Palms"])]

    page.set_query("palm")
    assert [(r.type, r.id) for r in page.results] == [("nursery", "n9"), ("offer", "o9")]
    page.set_query("seasonal")
    assert [(r.type, r.id) for r in page.results] == [("category", "c9")]
