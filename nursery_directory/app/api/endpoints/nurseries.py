"""
Nursery endpoints.

The nursery list is public and read-only.  Unpublished nurseries are
filtered out by the service layer.
"""

from typing import Any, Dict, List

from fastapi import APIRouter

from nursery_directory.app.services.nursery_service import NurseryService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_nurseries() -> List[Dict[str, Any]]:
    """Return all published nurseries."""
    return await NurseryService.list_nurseries()
