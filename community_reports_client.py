"""Community Reports API client.

This module defines a small client wrapper around the Community Reports
REST API.  It uses the ``requests`` library internally and is meant for
scripts and integrations that feed or read the service (bulk import of
reports, a moderation helper, a leaderboard display).

The client exposes one method per endpoint:

* :meth:`submit_report`, :meth:`list_reports`, :meth:`delete_report`,
  :meth:`approve_report` – citizen reports and their moderation.
* :meth:`register_volunteer`, :meth:`list_volunteers` – volunteers.
* :meth:`create_alert`, :meth:`list_alerts` – alerts.
* :meth:`record_donation`, :meth:`list_donations` – donations.
* :meth:`leaderboard` – locations ranked by report count.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message`` taken from the
server's ``{"success": false, "message": ...}`` body when available.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Optional[Dict[str, Any]]


class CommunityReportsAPI:
    """Client for interacting with the Community Reports API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
                The ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Tuple[Optional[Any], Error]:
        """Perform an HTTP request against ``/api<path>``.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            response on success.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _create(self, path: str, key: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        data, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        return (data or {}).get(key), None

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Error]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _command(self, method: str, path: str) -> Tuple[bool, Error]:
        data, error = self._request(method, path)
        if error:
            return False, error
        return bool((data or {}).get("success")), None

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def submit_report(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        """Submit a report and return the stored record (with id)."""
        return self._create("/reports", "report", payload)

    def list_reports(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/reports")

    def delete_report(self, report_id: int) -> Tuple[bool, Error]:
        return self._command("DELETE", f"/reports/{report_id}")

    def approve_report(self, report_id: int) -> Tuple[bool, Error]:
        return self._command("POST", f"/reports/{report_id}/approve")

    # ------------------------------------------------------------------
    # Volunteers, alerts, donations
    # ------------------------------------------------------------------
    def register_volunteer(
        self, name: str, email: str, phone: str = "", skills: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        payload = {"name": name, "email": email, "phone": phone, "skills": skills}
        return self._create("/volunteers", "volunteer", payload)

    def list_volunteers(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/volunteers")

    def create_alert(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Error]:
        return self._create("/alerts", "alert", payload)

    def list_alerts(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/alerts")

    def record_donation(
        self, name: str, amount: Any, photo_url: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Error]:
        payload = {"name": name, "amount": amount, "photoUrl": photo_url}
        return self._create("/donations", "donation", payload)

    def list_donations(self) -> Tuple[List[Dict[str, Any]], Error]:
        return self._list("/donations")

    # ------------------------------------------------------------------
    # Leaderboard
    # ------------------------------------------------------------------
    def leaderboard(self) -> Tuple[List[Dict[str, Any]], Error]:
        """Return ``[{"location", "count"}]`` rows, highest count first."""
        return self._list("/leaderboard")
