"""
Service layer for sponsors.

Sponsor documents are opaque display data (name, logo, link); they are
listed with the same published rule as every other collection.
"""

from typing import Any, Dict, List

from nursery_directory.app.services.listing_service import scan_and_filter, visible


SPONSORS_COLLECTION = "sponsors"
SPONSORS_ERROR = "فشل تحميل الرعاة"


class SponsorService:
    """Read access to sponsors."""

    @classmethod
    async def list_sponsors(cls) -> List[Dict[str, Any]]:
        return scan_and_filter(SPONSORS_COLLECTION, visible, SPONSORS_ERROR)
