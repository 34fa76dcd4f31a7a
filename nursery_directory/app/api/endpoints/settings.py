"""
Settings endpoints.

Exposes the public site settings record used to render the home page
hero section.  Settings are edited outside this API; this router is
read-only.
"""

from typing import Any, Dict

from fastapi import APIRouter

from nursery_directory.app.services.settings_service import SettingsService

router = APIRouter()


@router.get("/site", response_model=Dict[str, Any])
async def get_site_settings() -> Dict[str, Any]:
    """Return the site settings.

    Responds with 404 if no settings record exists yet; clients are
    expected to fall back to their built-in defaults in that case.
    """
    return await SettingsService.get_site_settings()
