"""Student Records API client.

This module defines a small client wrapper around the REST API served
by ``student_records_api``.  It uses the ``requests`` library
internally and exposes one method per endpoint:

* :meth:`create_student` – create a student, returning its identifier.
* :meth:`list_students` – return every stored student.
* :meth:`get_student` – fetch a single student by its identifier.
* :meth:`find_by_name` – students whose name starts with a prefix.
* :meth:`find_by_age_range` – students within an inclusive age range.
* :meth:`update_student` – replace a student (PUT).
* :meth:`patch_student` – change some fields of a student (PATCH).
* :meth:`delete_student` – remove a student.

Every method returns a tuple ``(result, error)``.  On success
``error`` is ``None``; on failure ``result`` is empty and ``error`` is
a dictionary with keys ``status_code`` and ``message``.  Callers never
have to catch ``requests`` exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CREATED_MESSAGE_PREFIX = "A new student is successfully created with ID: "

Error = Dict[str, Any]


class StudentRecordsClient:
    """Client for interacting with the Student Records API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/students``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty responses such as
            204) and ``error`` is ``None``. On failure, ``data`` is
            ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
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
                    message = str(err_json.get("detail") or err_json.get("message") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def create_student(self, payload: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Create a student.

        Returns:
            A tuple ``(student_id, error)``.
        """
        data, error = self._request("POST", "/students", json_body=payload)
        if error:
            return None, error
        message = (data or {}).get("message", "")
        if message.startswith(CREATED_MESSAGE_PREFIX):
            return message[len(CREATED_MESSAGE_PREFIX):], None
        return None, {"status_code": None, "message": f"Unexpected response: {message}"}

    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/students/all")
        if error:
            return [], error
        return data or [], None

    def get_student(self, student_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/students/{student_id}")
        if error:
            return None, error
        return data, None

    def find_by_name(self, prefix: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Students whose name starts with ``prefix``.  A 204 yields an empty list."""
        data, error = self._request("GET", "/students", params={"name": prefix})
        if error:
            return [], error
        return data or [], None

    def find_by_age_range(self, min_age: int, max_age: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Students aged ``min_age`` to ``max_age`` inclusive.  A 204 yields an empty list."""
        data, error = self._request(
            "GET", "/students/age", params={"minAge": min_age, "maxAge": max_age}
        )
        if error:
            return [], error
        return data or [], None

    def update_student(self, student_id: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a student.  ``payload`` must contain every required field.

        Returns:
            A tuple ``(student, error)`` where ``student`` is the stored record.
        """
        data, error = self._request("PUT", f"/students/{student_id}", json_body=payload)
        if error:
            return None, error
        return data.get("student"), None

    def patch_student(self, student_id: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Change the fields present in ``payload``.

        Returns:
            A tuple ``(student, error)`` where ``student`` is the merged record.
        """
        data, error = self._request("PATCH", f"/students/{student_id}", json_body=payload)
        if error:
            return None, error
        return data.get("student"), None

    def delete_student(self, student_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/students/{student_id}")
        if error:
            return False, error
        return True, None
