"""
Offer endpoints.

Only published offers that have not yet expired are returned.  Offers
with a malformed end date are left out of the response and logged on
the server; they never cause the request to fail.
"""

from typing import Any, Dict, List

from fastapi import APIRouter

from nursery_directory.app.services.offer_service import OfferService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_offers() -> List[Dict[str, Any]]:
    """Return all published, active offers."""
    return await OfferService.list_offers()
