"""People Management API client.

A thin wrapper around the HTTP surface of the people service using the
``requests`` library.  Each method returns a ``(data, error)`` tuple:
on success ``error`` is ``None``; on failure ``data`` is empty and
``error`` is a dictionary with keys ``status_code`` and ``message``.

* :meth:`list_people` – fetch one page of people.
* :meth:`iter_people` – walk every page and yield each person.
* :meth:`get_person` – fetch a single person by identifier.
* :meth:`create_person` – create a new person.
* :meth:`update_person` – replace an existing person.
* :meth:`delete_person` – delete a person.
* :meth:`health` – check the service health endpoint.

Any object exposing a ``requests``-compatible ``request`` method may be
passed as ``session`` (for example a test client).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PeopleAPI:
    """Client for interacting with the people API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_prefix: Prefix under which the people routes are mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds; ``None`` leaves the
                session default in place.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns ``(data, None)`` on a 2xx response (``data`` is ``None``
        for empty bodies) and ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            kwargs: Dict[str, Any] = {"params": params, "json": json_body}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        detail = body.get("detail") if isinstance(body, dict) else body
        if isinstance(detail, dict):
            return detail.get("message") or str(detail)
        return str(detail)

    def _people_path(self, identifier: Optional[str] = None) -> str:
        path = f"{self.api_prefix}/people"
        if identifier is not None:
            path = f"{path}/{quote(str(identifier), safe='')}"
        return path

    # ------------------------------------------------------------------
    # People operations
    # ------------------------------------------------------------------
    def list_people(self, page: int = 1, page_size: int = 10) -> Tuple[Dict[str, Any], Optional[Error]]:
        """Retrieve one page of people.

        Returns:
            A tuple ``(page, error)``.  ``page`` is the paged result
            document (``data``, ``page``, ``pageSize``, ``totalCount``,
            ``totalPages``, ``hasPrevious``, ``hasNext``) or an empty
            dict on failure.
        """
        data, error = self._request(
            "GET", self._people_path(), params={"page": page, "pageSize": page_size}
        )
        if error:
            return {}, error
        return data or {}, None

    def iter_people(self, page_size: int = 100) -> Iterator[Dict[str, Any]]:
        """Yield every person, requesting pages until ``hasNext`` is false.

        Raises:
            RuntimeError: if any page request fails.
        """
        page = 1
        while True:
            result, error = self.list_people(page=page, page_size=page_size)
            if error:
                raise RuntimeError(f"Failed to list people (page {page}): {error['message']}")
            yield from result.get("data", [])
            if not result.get("hasNext"):
                return
            page += 1

    def get_person(self, identifier: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._people_path(identifier))

    def create_person(self, person: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._people_path(), json_body=person)

    def update_person(
        self, identifier: str, person: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the person stored under ``identifier`` with ``person``."""
        return self._request("PUT", self._people_path(identifier), json_body=person)

    def delete_person(self, identifier: str) -> Tuple[bool, Optional[Error]]:
        """Delete a person.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self._people_path(identifier))
        return error is None, error

    def health(self) -> bool:
        _, error = self._request("GET", "/health")
        return error is None
