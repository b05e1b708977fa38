"""
Employee endpoints for API v1.

These routes expose create, read, full update, partial update and
delete operations over the in‑memory employee store.  ``GET`` and
``DELETE`` accept either a numeric id or a name in the same path
position; a segment that parses as a positive integer is always
treated as an id.

Responses wrap their payload under a single key: ``employees`` for
lists, ``employee`` for a single record and ``created`` / ``updated``
/ ``deleted`` for acknowledgement messages.  Errors are rendered as
``{"error": "..."}`` by the handlers registered in ``main``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status

from employee_api.app.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeStore

router = APIRouter()


def get_employee_store(request: Request) -> EmployeeStore:
    """Return the store owned by the running application."""
    return request.app.state.employee_store


@router.post("/employee", status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, Any]:
    """Create an employee; the id is allocated by the store."""
    employee_id = store.create(employee_in)
    return {"created": f"Employee with id {employee_id} created successfully"}


@router.get("/employees")
async def list_employees(store: EmployeeStore = Depends(get_employee_store)) -> Dict[str, Any]:
    """Return all employees in creation order."""
    return {"employees": [e.model_dump() for e in store.list_all()]}


@router.get("/employee/{name_or_id}")
async def get_employee(
    name_or_id: str,
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, Any]:
    """Retrieve a single employee by id or name.

    When several employees share a name, the earliest created one is
    returned.  Responds with HTTP 404 if nothing matches.
    """
    employee = store.resolve(name_or_id)
    return {"employee": employee.model_dump()}


@router.put("/employee/{employee_id}")
async def update_employee(
    employee_id: int,
    employee_in: EmployeeCreate,
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, Any]:
    """Replace an employee's name and age.

    Fields omitted from the body are reset to their defaults; an ``id``
    in the body is ignored.
    """
    store.replace(employee_id, employee_in)
    return {"updated": f"Employee id {employee_id} updated successfully"}


@router.patch("/employee/{employee_id}")
async def partial_update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, Any]:
    """Update only the fields present in the request body."""
    store.merge_update(employee_id, employee_in)
    return {"updated": f"Employee id {employee_id} updated successfully"}


@router.delete("/employee/{name_or_id}")
async def delete_employee(
    name_or_id: str,
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, Any]:
    """Delete an employee by id or name."""
    return {"deleted": store.delete(name_or_id)}
