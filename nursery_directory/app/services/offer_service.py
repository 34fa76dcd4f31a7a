"""
Service layer for offers.

An offer is listed when it is published and still active.  An offer
without an end date never expires; an offer with an end date is
active up to and including that moment.  End dates that cannot be
parsed are treated as a data-quality problem: the offer is dropped
from the listing and a warning is logged, the request itself still
succeeds.

End dates are normally ISO-8601 strings (``2025-12-31`` or
``2025-12-31T23:59:59Z``).  Timestamps without an offset, including
bare dates, are read as UTC.  Numbers are read as epoch milliseconds.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from nursery_directory.app.services.listing_service import is_visible, scan_and_filter


logger = logging.getLogger(__name__)

OFFERS_COLLECTION = "offers"
OFFERS_ERROR = "فشل تحميل العروض"


def parse_end_date(value: Any) -> Optional[datetime]:
    """Convert a stored ``endDate`` into an aware datetime.

    Returns ``None`` when the offer has no end date: any falsy value
    (missing, ``null``, ``""``, ``0``, ``false``) means the offer never
    expires.  Raises ``ValueError`` when a value is present but
    cannot be interpreted.
    """
    if not value:
        return None
    if isinstance(value, bool):
        raise ValueError(f"unsupported end date type: {type(value).__name__}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"end date out of range: {value}") from exc
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise ValueError(f"unsupported end date type: {type(value).__name__}")


def is_active(doc_id: str, data: Dict[str, Any], now: datetime) -> bool:
    """Return ``True`` if the offer should be listed at ``now``."""
    if not is_visible(data):
        return False
    try:
        end_date = parse_end_date(data.get("endDate"))
    except ValueError:
        logger.warning("Invalid endDate for offer %s: %r", doc_id, data.get("endDate"))
        return False
    if end_date is None:
        return True
    return end_date >= now


class OfferService:
    """Read access to current offers."""

    @classmethod
    async def list_offers(cls, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Return published offers that have not expired.

        ``now`` defaults to the current UTC time, taken once so every
        offer in the scan is compared against the same instant.
        """
        reference = now or datetime.now(timezone.utc)
        return scan_and_filter(
            OFFERS_COLLECTION,
            lambda doc_id, data: is_active(doc_id, data, reference),
            OFFERS_ERROR,
        )
