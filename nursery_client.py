"""Client library for the Nursery Directory API.

This module provides :class:`NurseryDirectoryAPI`, a thin wrapper around
the public read-only endpoints of the directory service (nurseries,
offers, categories, sponsors and site settings).  It is used by the
home page controller in :mod:`nursery_home`, but has no dependency on
it and can be reused by other consumers.

Every call returns a ``(data, error)`` tuple instead of raising.  On
success ``error`` is ``None``; on failure ``data`` is an empty value
and ``error`` is a dictionary with ``status_code`` and ``message``.
The message is taken from the API's ``{"message": ...}`` error body
when there is one, so callers see the same localized text the server
produced.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://react-firebase-plant-nursery-production.up.railway.app"

Error = Dict[str, Any]


class NurseryDirectoryAPI:
    """Client for interacting with the nursery directory API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/offers``).
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        # Proxies answer with bare JSON strings ("Bad gateway").
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            return None, {"status_code": status, "message": message}
        except (requests.RequestException, ValueError) as exc:
            # ValueError covers bodies that are not valid JSON.
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Directory operations
    # ------------------------------------------------------------------
    def list_nurseries(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all published nurseries."""
        return self._list("/api/nurseries")

    def list_offers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all published offers that have not expired."""
        return self._list("/api/offers")

    def list_categories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve published categories, already sorted by ``order``."""
        return self._list("/api/categories")

    def list_sponsors(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/sponsors")

    def get_site_settings(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the site settings record.

        Returns:
            A tuple ``(settings, error)``.  A payload that is not a JSON
            object is reported as ``(None, None)``.
        """
        data, error = self._request("GET", "/api/settings/site")
        if error:
            return None, error
        if isinstance(data, dict):
            return data, None
        return None, None
