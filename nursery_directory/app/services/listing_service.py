"""
Shared scan-and-filter logic for the read-only listings.

Every listing endpoint follows the same shape: scan one collection of
the document store, keep the documents accepted by a predicate, merge
the document id into the body and return the list.  Store failures
are logged here with full detail and re-raised as
``ListingUnavailableError`` carrying the localized message the client
will see; the application turns that error into a 500 response.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from nursery_directory.app.core import db


logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Predicate = Callable[[str, Document], bool]


class ListingUnavailableError(Exception):
    """Raised when a collection could not be read from the store.

    ``message`` is the user-facing (localized) text; the underlying
    exception is chained and has already been logged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DocumentNotFoundError(Exception):
    """Raised when a singleton document is missing from the store."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def is_visible(document: Document) -> bool:
    """Return ``True`` unless the document is explicitly unpublished.

    ``published`` is tri-state: ``True``, ``False`` or absent.  Only an
    explicit ``False`` hides a record.
    """
    return document.get("published") is not False


def with_id(doc_id: str, data: Document) -> Document:
    """Merge the document id into its body.  A stored ``id`` field wins."""
    return {"id": doc_id, **data}


def scan_and_filter(collection: str, predicate: Predicate, error_message: str) -> List[Document]:
    """Scan ``collection`` and return the documents accepted by ``predicate``.

    Parameters
    ----------
    collection : str
        Name of the document collection to scan.
    predicate : callable
        Called as ``predicate(doc_id, data)`` for every document.
    error_message : str
        Localized message used for ``ListingUnavailableError`` when the
        scan or the filtering fails.
    """
    try:
        documents = db.scan_collection(collection)
        return [with_id(doc_id, data) for doc_id, data in documents if predicate(doc_id, data)]
    except Exception as exc:
        logger.exception("Error fetching %s", collection)
        raise ListingUnavailableError(error_message) from exc


def visible(doc_id: str, data: Document) -> bool:
    """Predicate form of ``is_visible`` for ``scan_and_filter``."""
    return is_visible(data)
