"""
test_search.py: home page search, filters and derived lists.
"""

import pytest

from nursery_directory.app.schemas.category import CategoryRead
from nursery_directory.app.schemas.nursery import NurseryRead
from nursery_directory.app.schemas.offer import OfferRead
from nursery_home import (
    featured_nurseries,
    filter_results,
    nurseries_in_category,
    search_records,
)


GREEN_OASIS = NurseryRead(
    id="n1",
    name="Green Oasis",
    location="Riyadh",
    categories=["Succulents", "Cacti", "Palms"],
    services=["Delivery"],
    featured=True,
)
DESERT_ROSE = NurseryRead(id="n2", name="Desert Rose", location="Jeddah", categories=["Roses"], services=[])

SPRING_SALE = OfferRead.model_validate({
    "id": "o1",
    "title": "Spring sale",
    "description": "Palms at half price",
    "tags": ["palms", "discount", "spring"],
    "nurseryName": "Green Oasis",
})
GENERIC_OFFER = OfferRead(id="o2", title="Free delivery week")

SUCCULENTS = CategoryRead(id="c1", title="Succulents", description="Low water plants", order=1)
TOOLS = CategoryRead(id="c2", title="Tools", order=2)


@pytest.mark.parametrize("query", ["oasis", "riyadh", "succulent", "deliv", "  OASIS  "])
def test_each_nursery_field_matches(query):
    results = search_records(query, [GREEN_OASIS], [], [])

    assert len(results) == 1
    assert results[0].type == "nursery"
    assert results[0].id == "n1"


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_yields_nothing(query):
    assert search_records(query, [GREEN_OASIS, DESERT_ROSE], [SPRING_SALE], [SUCCULENTS]) == []


def test_nursery_result_shape():
    (result,) = search_records("green", [GREEN_OASIS], [], [])

    assert result.title == "Green Oasis"
    assert result.subtitle == "Riyadh"
    assert result.link == "/nurseries/n1"
    assert result.tags == ["Succulents", "Cacti"]


def test_offer_matches_tags_and_nursery_name():
    assert [r.id for r in search_records("discount", [], [SPRING_SALE], [])] == ["o1"]
    assert [r.id for r in search_records("green oasis", [], [SPRING_SALE], [])] == ["o1"]

    (result,) = search_records("spring", [], [SPRING_SALE], [])
    assert result.subtitle == "من: Green Oasis"
    assert result.link == "/offers/o1"
    assert result.tags == ["palms", "discount"]


def test_offer_with_missing_fields():
    (result,) = search_records("delivery", [], [GENERIC_OFFER], [])

    assert result.subtitle == "من: عرض عام"
    assert result.tags == []
    assert search_records("anything-else", [], [GENERIC_OFFER], []) == []


def test_category_matches_title_and_description():
    (by_description,) = search_records("low water", [], [], [SUCCULENTS, TOOLS])

    assert by_description.id == "c1"
    assert by_description.subtitle == "تصنيف متاح"
    assert by_description.link == "/nurseries"
    assert by_description.tags == ["تصنيف"]
    assert [r.id for r in search_records("tool", [], [], [SUCCULENTS, TOOLS])] == ["c2"]


def test_results_grouped_by_type():
    results = search_records("palm", [GREEN_OASIS, DESERT_ROSE], [SPRING_SALE], [SUCCULENTS])

    assert [(r.type, r.id) for r in results] == [("nursery", "n1"), ("offer", "o1")]

    results = search_records("s", [GREEN_OASIS, DESERT_ROSE], [SPRING_SALE], [SUCCULENTS, TOOLS])
    assert [r.type for r in results] == ["nursery", "nursery", "offer", "category", "category"]


def test_filters_narrow_by_type():
    results = search_records("s", [GREEN_OASIS], [SPRING_SALE], [SUCCULENTS])

    assert filter_results(results, "all") == results
    assert [r.type for r in filter_results(results, "category")] == ["category"]
    assert [r.type for r in filter_results(results, "service")] == ["nursery", "offer"]
    assert filter_results(results, "unknown") == results


def test_featured_and_category_nurseries():
    nurseries = [GREEN_OASIS, DESERT_ROSE]

    assert featured_nurseries(nurseries) == [GREEN_OASIS]
    assert nurseries_in_category(nurseries, "Roses") == [DESERT_ROSE]
    assert nurseries_in_category(nurseries, "Bonsai") == []
