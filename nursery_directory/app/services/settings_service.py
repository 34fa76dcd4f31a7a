"""
Service layer for site settings.

The public site configuration (hero title and subtitle, hero image,
benefits list and contact details) is a single document, ``site``,
in the ``settings`` collection.  It is returned verbatim; defaults
for missing fields are the client's concern.
"""

import logging
from typing import Any, Dict

from nursery_directory.app.core import db
from nursery_directory.app.services.listing_service import DocumentNotFoundError, ListingUnavailableError


logger = logging.getLogger(__name__)

SETTINGS_COLLECTION = "settings"
SITE_SETTINGS_ID = "site"
SETTINGS_ERROR = "فشل تحميل إعدادات الموقع"
SETTINGS_MISSING = "إعدادات الموقع غير متوفرة"


class SettingsService:
    """Read access to the site settings record."""

    @classmethod
    async def get_site_settings(cls) -> Dict[str, Any]:
        """Return the ``settings/site`` document.

        Raises ``DocumentNotFoundError`` if the record has not been
        created yet and ``ListingUnavailableError`` if the store fails.
        """
        try:
            data = db.get_document(SETTINGS_COLLECTION, SITE_SETTINGS_ID)
        except Exception as exc:
            logger.exception("Error fetching site settings")
            raise ListingUnavailableError(SETTINGS_ERROR) from exc
        if data is None:
            raise DocumentNotFoundError(SETTINGS_MISSING)
        return data
