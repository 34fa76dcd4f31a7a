"""Home page controller for the nursery directory.

This module holds the state and logic behind the directory's home page:

* fetch site settings, nurseries, offers, categories and sponsors from
  the API, each independently, so one failing endpoint never blanks
  the rest of the page;
* keep a loading state that clears once settings, categories and
  sponsors have settled (successfully or not);
* derive the featured nurseries and the nurseries of a selected
  category;
* run the live search: a case-insensitive substring match over the
  loaded nurseries, offers and categories, narrowed by a type filter.

Run as a script it renders the page as text::

    python nursery_home.py --query riyadh --filter service

``NURSERY_API_BASE_URL`` selects the API; it defaults to the
production deployment.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from nursery_client import DEFAULT_BASE_URL, NurseryDirectoryAPI
from nursery_directory.app.schemas.category import CategoryRead
from nursery_directory.app.schemas.nursery import NurseryRead
from nursery_directory.app.schemas.offer import OfferRead
from nursery_directory.app.schemas.search import SearchResult
from nursery_directory.app.schemas.site_settings import DEFAULT_SITE_SETTINGS, SiteSettings, merge_site_settings
from nursery_directory.app.schemas.sponsor import SponsorRead


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

FILTERS: Tuple[Tuple[str, str], ...] = (
    ("all", "الكل"),
    ("category", "تصنيفات"),
    ("service", "خدمات"),
)

# Result types kept by each filter; "all" and unknown keys keep everything.
FILTER_TYPES: Dict[str, frozenset] = {
    "category": frozenset({"category"}),
    "service": frozenset({"nursery", "offer"}),
}

GENERIC_OFFER_SOURCE = "عرض عام"
CATEGORY_SUBTITLE = "تصنيف متاح"
CATEGORY_TAG = "تصنيف"
LOADING_TEXT = "جاري التحميل..."


# ----------------------------------------------------------------------
# Search
# ----------------------------------------------------------------------
def _contains(value: Any, term: str) -> bool:
    return isinstance(value, str) and term in value.lower()


def _any_contains(values: Optional[Iterable[Any]], term: str) -> bool:
    return any(_contains(value, term) for value in values or ())


def _match_nursery(nursery: NurseryRead, term: str) -> bool:
    return (
        _contains(nursery.name, term)
        or _contains(nursery.location, term)
        or _any_contains(nursery.categories, term)
        or _any_contains(nursery.services, term)
    )


def _match_offer(offer: OfferRead, term: str) -> bool:
    return (
        _contains(offer.title, term)
        or _contains(offer.description, term)
        or _any_contains(offer.tags, term)
        or _contains(offer.nursery_name, term)
    )


def _match_category(category: CategoryRead, term: str) -> bool:
    return _contains(category.title, term) or _contains(category.description, term)


def search_records(
    query: str,
    nurseries: Sequence[NurseryRead],
    offers: Sequence[OfferRead],
    categories: Sequence[CategoryRead],
) -> List[SearchResult]:
    """Return the search results for ``query``.

    The query is lowercased and trimmed; an empty query matches nothing.
    Results are grouped nurseries first, then offers, then categories,
    each group in the order of the input lists.
    """
    term = query.lower().strip()
    if not term:
        return []

    results: List[SearchResult] = []
    for nursery in nurseries:
        if _match_nursery(nursery, term):
            results.append(SearchResult(
                type="nursery",
                id=nursery.id,
                title=nursery.name,
                subtitle=nursery.location,
                link=f"/nurseries/{nursery.id}",
                tags=list(nursery.categories[:2]),
            ))
    for offer in offers:
        if _match_offer(offer, term):
            results.append(SearchResult(
                type="offer",
                id=offer.id,
                title=offer.title,
                subtitle=f"من: {offer.nursery_name or GENERIC_OFFER_SOURCE}",
                link=f"/offers/{offer.id}",
                tags=list((offer.tags or [])[:2]),
            ))
    for category in categories:
        if _match_category(category, term):
            results.append(SearchResult(
                type="category",
                id=category.id,
                title=category.title,
                subtitle=CATEGORY_SUBTITLE,
                link="/nurseries",
                tags=[CATEGORY_TAG],
            ))
    return results


def filter_results(results: Sequence[SearchResult], active_filter: str) -> List[SearchResult]:
    """Narrow ``results`` by result type without re-running the search.

    ``service`` covers both nurseries and offers, since both are
    service providers from the visitor's point of view.
    """
    allowed = FILTER_TYPES.get(active_filter)
    if allowed is None:
        return list(results)
    return [result for result in results if result.type in allowed]


def featured_nurseries(nurseries: Sequence[NurseryRead]) -> List[NurseryRead]:
    return [nursery for nursery in nurseries if nursery.featured]


def nurseries_in_category(nurseries: Sequence[NurseryRead], category_title: str) -> List[NurseryRead]:
    """Return nurseries tagged with ``category_title`` (exact tag match)."""
    return [nursery for nursery in nurseries if category_title in nursery.categories]


def parse_records(model: Type[ModelT], records: Iterable[Dict[str, Any]], label: str) -> List[ModelT]:
    """Validate raw API records, skipping the ones that do not fit ``model``."""
    parsed: List[ModelT] = []
    for record in records:
        try:
            parsed.append(model.model_validate(record))
        except ValidationError as exc:
            record_id = record.get("id") if isinstance(record, dict) else None
            logger.warning("Skipping malformed %s %s: %s", label, record_id, exc.errors())
    return parsed


# ----------------------------------------------------------------------
# Page controller
# ----------------------------------------------------------------------
class HomePage:
    """State of the directory home page.

    Attributes:
        site_settings: Hero and contact configuration; the built-in
            default until the remote record has been loaded.
        sponsors: Sponsor records for the banner section.
        query: Current search text.
        active_filter: Key of the selected result filter.
        results: Search results for ``query``, recomputed whenever the
            query or one of the searchable lists changes.
        view_mode: ``"home"`` or ``"category-results"``.
        selected_category: Category title shown in category-results mode.
    """

    # Fetches that must settle before the page leaves the loading state.
    GATING_TASKS = ("settings", "categories", "sponsors")

    def __init__(self, api: NurseryDirectoryAPI) -> None:
        self.api = api
        self.site_settings: SiteSettings = DEFAULT_SITE_SETTINGS
        self.sponsors: List[SponsorRead] = []
        self._nurseries: List[NurseryRead] = []
        self._offers: List[OfferRead] = []
        self._categories: List[CategoryRead] = []
        self.query = ""
        self.active_filter = "all"
        self.results: List[SearchResult] = []
        self.view_mode = "home"
        self.selected_category = ""
        self._pending = set(self.GATING_TASKS)

    # -- searchable collections -----------------------------------------
    @property
    def nurseries(self) -> List[NurseryRead]:
        return self._nurseries

    @nurseries.setter
    def nurseries(self, value: List[NurseryRead]) -> None:
        self._nurseries = value
        self._refresh_results()

    @property
    def offers(self) -> List[OfferRead]:
        return self._offers

    @offers.setter
    def offers(self, value: List[OfferRead]) -> None:
        self._offers = value
        self._refresh_results()

    @property
    def categories(self) -> List[CategoryRead]:
        return self._categories

    @categories.setter
    def categories(self, value: List[CategoryRead]) -> None:
        self._categories = value
        self._refresh_results()

    # -- derived state ----------------------------------------------------
    @property
    def is_loading(self) -> bool:
        return bool(self._pending)

    @property
    def filtered_results(self) -> List[SearchResult]:
        return filter_results(self.results, self.active_filter)

    @property
    def featured_nurseries(self) -> List[NurseryRead]:
        return featured_nurseries(self._nurseries)

    @property
    def category_nurseries(self) -> List[NurseryRead]:
        if not self.selected_category:
            return []
        return nurseries_in_category(self._nurseries, self.selected_category)

    def set_query(self, query: str) -> None:
        self.query = query
        self._refresh_results()

    def set_filter(self, active_filter: str) -> None:
        self.active_filter = active_filter

    def select_category(self, title: str) -> None:
        self.selected_category = title
        self.view_mode = "category-results"

    def show_home(self) -> None:
        self.selected_category = ""
        self.view_mode = "home"

    def _refresh_results(self) -> None:
        self.results = search_records(self.query, self._nurseries, self._offers, self._categories)

    # -- loading ----------------------------------------------------------
    async def load(self) -> None:
        """Fetch every section of the page concurrently.

        Each fetch handles its own failure, so this coroutine never
        raises because of an unreachable or failing endpoint.
        """
        tasks = [
            asyncio.create_task(self._load_settings(), name="settings"),
            asyncio.create_task(self._load_nurseries(), name="nurseries"),
            asyncio.create_task(self._load_offers(), name="offers"),
            asyncio.create_task(self._load_categories(), name="categories"),
            asyncio.create_task(self._load_sponsors(), name="sponsors"),
        ]
        await asyncio.gather(*tasks)

    def _settled(self, name: str) -> None:
        self._pending.discard(name)

    async def _fetch(self, call: Callable[[], Tuple[Any, Optional[Dict[str, Any]]]]) -> Tuple[Any, Optional[Dict[str, Any]]]:
        """Run a blocking client call in a worker thread."""
        try:
            return await asyncio.to_thread(call)
        except Exception as exc:
            logger.exception("Unexpected error during %s", getattr(call, "__name__", "fetch"))
            return None, {"status_code": None, "message": str(exc)}

    async def _load_settings(self) -> None:
        try:
            data, error = await self._fetch(self.api.get_site_settings)
            if error:
                logger.warning("Using default site settings: %s", error["message"])
                return
            if data:
                try:
                    self.site_settings = merge_site_settings(self.site_settings, data)
                except ValidationError as exc:
                    logger.warning("Using default site settings: %s", exc.errors())
        finally:
            self._settled("settings")

    async def _load_nurseries(self) -> None:
        data, error = await self._fetch(self.api.list_nurseries)
        if error:
            logger.error("Error fetching nurseries: %s", error["message"])
            self.nurseries = []
            return
        self.nurseries = parse_records(NurseryRead, data or [], "nursery")

    async def _load_offers(self) -> None:
        data, error = await self._fetch(self.api.list_offers)
        if error:
            logger.error("Error fetching offers: %s", error["message"])
            self.offers = []
            return
        self.offers = parse_records(OfferRead, data or [], "offer")

    async def _load_categories(self) -> None:
        try:
            data, error = await self._fetch(self.api.list_categories)
            if error:
                logger.error("Error fetching categories: %s", error["message"])
                self.categories = []
                return
            self.categories = parse_records(CategoryRead, data or [], "category")
        finally:
            self._settled("categories")

    async def _load_sponsors(self) -> None:
        try:
            data, error = await self._fetch(self.api.list_sponsors)
            if error:
                logger.error("Error fetching sponsors: %s", error["message"])
                self.sponsors = []
                return
            self.sponsors = parse_records(SponsorRead, data or [], "sponsor")
        finally:
            self._settled("sponsors")

    # -- text rendering -----------------------------------------------------
    def render(self) -> str:
        """Render the page as plain text."""
        if self.is_loading:
            return LOADING_TEXT

        lines = [self.site_settings.title, self.site_settings.subtitle]
        lines.extend(f"  ✓ {benefit}" for benefit in self.site_settings.benefits)

        if self.query.strip():
            labels = dict(FILTERS)
            lines.append("")
            lines.append(f"[{labels.get(self.active_filter, self.active_filter)}] {self.query}")
            for result in self.filtered_results:
                tags = f" ({', '.join(result.tags)})" if result.tags else ""
                lines.append(f"  {result.title} - {result.subtitle}{tags}  {result.link}")

        if self.view_mode == "category-results" and self.selected_category:
            lines.append("")
            lines.append(self.selected_category)
            lines.extend(f"  {n.name} - {n.location}" for n in self.category_nurseries)
            return "\n".join(lines)

        lines.append("")
        lines.extend(f"# {category.title}" for category in self.categories)
        if self.featured_nurseries:
            lines.append("")
            lines.extend(f"★ {n.name} - {n.location}" for n in self.featured_nurseries)
        if self.sponsors:
            lines.append("")
            lines.append(", ".join(str(s.model_dump().get("name", s.id)) for s in self.sponsors))
        return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the nursery directory home page.")
    parser.add_argument(
        "--base-url",
        default=os.getenv("NURSERY_API_BASE_URL", DEFAULT_BASE_URL),
        help="Base URL of the nursery directory API.",
    )
    parser.add_argument("--query", default="", help="Search text.")
    parser.add_argument("--filter", default="all", choices=[key for key, _ in FILTERS], help="Result type filter.")
    parser.add_argument("--category", default="", help="Show the nurseries of this category.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    page = HomePage(NurseryDirectoryAPI(base_url=args.base_url))
    asyncio.run(page.load())
    page.set_query(args.query)
    page.set_filter(args.filter)
    if args.category:
        page.select_category(args.category)
    print(page.render())


if __name__ == "__main__":
    main()
