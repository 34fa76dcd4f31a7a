"""Category endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter

from nursery_directory.app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_categories() -> List[Dict[str, Any]]:
    """Return published categories sorted by ``order`` ascending."""
    return await CategoryService.list_categories()
