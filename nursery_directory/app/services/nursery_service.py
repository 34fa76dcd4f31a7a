"""
Service layer for nurseries.

Nurseries are listed as-is from the ``nurseries`` collection; the only
rule applied is the published flag.
"""

from typing import Any, Dict, List

from nursery_directory.app.services.listing_service import scan_and_filter, visible


NURSERIES_COLLECTION = "nurseries"
NURSERIES_ERROR = "فشل تحميل المشاتل"


class NurseryService:
    """Read access to the nursery directory."""

    @classmethod
    async def list_nurseries(cls) -> List[Dict[str, Any]]:
        """Return every nursery whose ``published`` flag is not ``False``."""
        return scan_and_filter(NURSERIES_COLLECTION, visible, NURSERIES_ERROR)
