"""
Service layer for categories.

Published categories are returned sorted ascending by their numeric
``order`` field.  The sort is stable, so categories sharing an order
keep their scan order.  Categories without a finite numeric order
(missing, text, ``NaN``, infinity) are placed after all ordered ones.
"""

import math
from typing import Any, Dict, List, Tuple

from nursery_directory.app.services.listing_service import scan_and_filter, visible


CATEGORIES_COLLECTION = "categories"
CATEGORIES_ERROR = "فشل تحميل التصنيفات"


def order_key(category: Dict[str, Any]) -> Tuple[int, float]:
    order = category.get("order")
    if isinstance(order, (int, float)) and not isinstance(order, bool) and math.isfinite(order):
        return (0, order)
    return (1, 0)


class CategoryService:
    """Read access to the category list."""

    @classmethod
    async def list_categories(cls) -> List[Dict[str, Any]]:
        """Return published categories ordered by ``order``."""
        categories = scan_and_filter(CATEGORIES_COLLECTION, visible, CATEGORIES_ERROR)
        categories.sort(key=order_key)
        return categories
