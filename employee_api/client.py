"""Employee API client.

A thin wrapper around the Employee API's REST endpoints built on the
``requests`` library.  It mirrors the service's operations:

* :meth:`EmployeeAPI.create_employee` – ``POST /employee``
* :meth:`EmployeeAPI.list_employees` – ``GET /employees``
* :meth:`EmployeeAPI.get_employee` – ``GET /employee/{id or name}``
* :meth:`EmployeeAPI.update_employee` – ``PUT /employee/{id}``
* :meth:`EmployeeAPI.patch_employee` – ``PATCH /employee/{id}``
* :meth:`EmployeeAPI.delete_employee` – ``DELETE /employee/{id or name}``

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or empty) and ``error``
is a dictionary with keys ``status_code`` and ``message``.  Transport
failures are reported the same way with ``status_code`` set to
``None``.

Example::

    api = EmployeeAPI(base_url="http://127.0.0.1:8085")
    message, error = api.create_employee("Bob", 30)
    employee, error = api.get_employee("Bob")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class EmployeeAPI:
    """Client for interacting with the Employee API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service including any route
                prefix, e.g. ``http://127.0.0.1:8085``.
            session: Optional requests session.  Any object with a
                compatible ``request`` method may be used.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and split the result into data/error.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, etc.).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            payload = response.json() if response.content else None
        except ValueError:
            payload = None

        if response.status_code >= 400:
            message = ""
            if isinstance(payload, dict):
                message = payload.get("error") or payload.get("detail") or ""
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return payload, None

    @staticmethod
    def _token_path(name_or_id: Any) -> str:
        return f"/employee/{quote(str(name_or_id), safe='')}"

    @staticmethod
    def _unwrap(
        result: Tuple[Optional[Any], Optional[ApiError]], key: str
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        data, error = result
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get(key), None
        return None, None

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(self, name: str, age: int) -> Tuple[Optional[str], Optional[ApiError]]:
        """Create an employee and return the server's acknowledgement."""
        return self._unwrap(
            self._request("POST", "/employee", json_body={"name": name, "age": age}), "created"
        )

    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._unwrap(self._request("GET", "/employees"), "employees")
        return data or [], error

    def get_employee(self, name_or_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve an employee by numeric id or by name."""
        return self._unwrap(self._request("GET", self._token_path(name_or_id)), "employee")

    def update_employee(
        self, employee_id: int, name: str, age: int
    ) -> Tuple[Optional[str], Optional[ApiError]]:
        """Replace both fields of an employee."""
        return self._unwrap(
            self._request("PUT", f"/employee/{employee_id}", json_body={"name": name, "age": age}),
            "updated",
        )

    def patch_employee(self, employee_id: int, **fields: Any) -> Tuple[Optional[str], Optional[ApiError]]:
        """Update only the given fields, e.g. ``patch_employee(1, age=32)``."""
        return self._unwrap(
            self._request("PATCH", f"/employee/{employee_id}", json_body=fields), "updated"
        )

    def delete_employee(self, name_or_id: Any) -> Tuple[Optional[str], Optional[ApiError]]:
        return self._unwrap(self._request("DELETE", self._token_path(name_or_id)), "deleted")
