"""Sponsor endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter

from nursery_directory.app.services.sponsor_service import SponsorService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_sponsors() -> List[Dict[str, Any]]:
    return await SponsorService.list_sponsors()
