"""
In‑memory record store for employees.

The store keeps records in a list ordered by creation time and
allocates identifiers from a counter that only ever grows, so an id
is never reused after its record has been deleted.  Lookups are a
linear scan; when several records share a name, operations keyed by
name always act on the first one in store order.

Path segments that may denote either an id or a name (``GET`` and
``DELETE /employee/{token}``) are disambiguated by
:func:`parse_employee_id`: anything that parses as a positive integer
is an id, even if some employee happens to be called ``"5"``.

A single ``threading.RLock`` guards all state, so the store may be
shared between threads.  The async endpoints call it from the event
loop only.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import List, Optional

from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate


logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_MAX_ID = 2**63 - 1


class EmployeeNotFound(LookupError):
    """Raised when no record matches the requested id or name.

    ``key`` holds the value that was searched for.
    """

    def __init__(self, key: int | str, message: Optional[str] = None) -> None:
        self.key = key
        if message is None:
            kind = "id" if isinstance(key, int) else "name"
            message = f"No record exists for {kind} {key}"
        super().__init__(message)


def parse_employee_id(token: str) -> Optional[int]:
    """Return ``token`` as an employee id, or ``None`` if it is a name.

    Only plain base‑10 integers (with an optional sign) greater than
    zero count as ids.  Values beyond the signed 64-bit range are
    treated as names.
    """
    if not _INTEGER_RE.fullmatch(token):
        return None
    value = int(token)
    return value if 0 < value <= _MAX_ID else None


class EmployeeStore:
    """Ordered collection of employee records with id allocation."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._records: List[EmployeeRead] = []
        self._next_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def last_id(self) -> int:
        """Most recently allocated id (``0`` before the first create)."""
        with self._lock:
            return self._next_id

    # ------------------------------------------------------------------
    # Create / read
    # ------------------------------------------------------------------
    def create(self, data: EmployeeCreate) -> int:
        """Append a new record and return its freshly allocated id."""
        with self._lock:
            self._next_id += 1
            employee_id = self._next_id
            self._records.append(EmployeeRead(id=employee_id, name=data.name, age=data.age))
        logger.info("Created employee %s", employee_id)
        return employee_id

    def list_all(self) -> List[EmployeeRead]:
        with self._lock:
            return [record.model_copy() for record in self._records]

    def find_by_id(self, employee_id: int) -> EmployeeRead:
        with self._lock:
            index = self._index_of_id(employee_id)
            if index is None:
                raise EmployeeNotFound(employee_id)
            return self._records[index].model_copy()

    def find_by_name(self, name: str) -> EmployeeRead:
        """Return the earliest inserted record called ``name``."""
        with self._lock:
            index = self._index_of_name(name)
            if index is None:
                raise EmployeeNotFound(name)
            return self._records[index].model_copy()

    def resolve(self, token: str) -> EmployeeRead:
        """Look a record up by a path token that is either an id or a name."""
        employee_id = parse_employee_id(token)
        if employee_id is not None:
            return self.find_by_id(employee_id)
        return self.find_by_name(token)

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------
    def replace(self, employee_id: int, data: EmployeeCreate) -> EmployeeRead:
        """Overwrite every mutable field of a record.

        The id is kept; fields missing from ``data`` take the schema
        defaults rather than their previous values.
        """
        with self._lock:
            index = self._index_of_id(employee_id)
            if index is None:
                raise EmployeeNotFound(employee_id)
            record = EmployeeRead(id=employee_id, name=data.name, age=data.age)
            self._records[index] = record
        logger.info("Replaced employee %s", employee_id)
        return record.model_copy()

    def merge_update(self, employee_id: int, data: EmployeeUpdate) -> EmployeeRead:
        """Apply only the fields that were supplied in ``data``."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            index = self._index_of_id(employee_id)
            if index is None:
                raise EmployeeNotFound(employee_id)
            current = self._records[index]
            record = current.model_copy(update={**changes, "id": employee_id})
            self._records[index] = record
        logger.info("Updated employee %s fields %s", employee_id, sorted(changes))
        return record.model_copy()

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------
    def delete_by_id(self, employee_id: int) -> None:
        with self._lock:
            index = self._index_of_id(employee_id)
            if index is None:
                raise EmployeeNotFound(employee_id, f"No record exists for employee id {employee_id}")
            del self._records[index]
        logger.info("Deleted employee %s", employee_id)

    def delete_by_name(self, name: str) -> None:
        with self._lock:
            index = self._index_of_name(name)
            if index is None:
                raise EmployeeNotFound(name, f"No record exists for employee '{name}'")
            employee_id = self._records[index].id
            del self._records[index]
        logger.info("Deleted employee %s (name %r)", employee_id, name)

    def delete(self, token: str) -> str:
        """Delete by id or name and return an acknowledgement message."""
        employee_id = parse_employee_id(token)
        if employee_id is not None:
            self.delete_by_id(employee_id)
            return f"Employee with id {employee_id} deleted successfully"
        self.delete_by_name(token)
        return f"Employee with name {token} deleted successfully"

    # ------------------------------------------------------------------
    # Helpers (caller must hold the lock)
    # ------------------------------------------------------------------
    def _index_of_id(self, employee_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == employee_id:
                return index
        return None

    def _index_of_name(self, name: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.name == name:
                return index
        return None
