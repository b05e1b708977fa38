"""
Unit tests for the in‑memory employee store: id allocation, lookups by
id and name, token disambiguation, full and partial updates, deletes.
"""

import threading

import pytest

from employee_api.app.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import (
    EmployeeNotFound,
    EmployeeStore,
    parse_employee_id,
)


def _create(store, name, age):
    return store.create(EmployeeCreate(name=name, age=age))


def test_ids_start_at_one_and_increase(store):
    assert store.last_id == 0
    ids = [_create(store, f"e{i}", i) for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert len(store) == 5


def test_ids_are_not_reused_after_delete(store):
    first = _create(store, "Bob", 30)
    second = _create(store, "Sara", 34)
    store.delete_by_id(second)
    store.delete_by_id(first)
    assert len(store) == 0
    assert _create(store, "Mike", 36) == 3


def test_find_by_id_returns_supplied_fields(store):
    employee_id = _create(store, "Bob", 30)
    employee = store.find_by_id(employee_id)
    assert employee.model_dump() == {"id": employee_id, "name": "Bob", "age": 30}


def test_find_by_id_missing_raises_with_key(store):
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.find_by_id(42)
    assert excinfo.value.key == 42
    assert str(excinfo.value) == "No record exists for id 42"


def test_find_by_name_returns_first_inserted(store):
    first = _create(store, "Bob", 30)
    _create(store, "Bob", 50)
    assert store.find_by_name("Bob").id == first


def test_find_by_name_missing_raises_with_key(store):
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.find_by_name("Nobody")
    assert excinfo.value.key == "Nobody"
    assert str(excinfo.value) == "No record exists for name Nobody"


def test_returned_records_are_copies(store):
    employee_id = _create(store, "Bob", 30)
    employee = store.find_by_id(employee_id)
    employee.age = 99
    assert store.find_by_id(employee_id).age == 30


@pytest.mark.parametrize(
    "token, expected",
    [
        ("5", 5),
        ("+7", 7),
        ("0", None),
        ("-3", None),
        ("Bob", None),
        ("5a", None),
        (" 5", None),
        ("1_000", None),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", None),
        ("99999999999999999999", None),
        ("", None),
    ],
)
def test_parse_employee_id(token, expected):
    assert parse_employee_id(token) == expected


def test_resolve_prefers_id_over_numeric_name(store):
    for i in range(4):
        _create(store, f"e{i}", i)
    _create(store, "Five", 55)  # id 5
    _create(store, "5", 99)
    assert store.resolve("5").name == "Five"


def test_resolve_numeric_name_is_never_found_by_name(store):
    _create(store, "7", 20)
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.resolve("7")
    assert excinfo.value.key == 7


def test_resolve_by_name_returns_first_match(store):
    _create(store, "Sara", 34)
    first_bob = _create(store, "Bob", 30)
    _create(store, "Bob", 40)
    assert store.resolve("Bob").id == first_bob


def test_resolve_non_positive_number_is_a_name(store):
    employee_id = _create(store, "0", 1)
    assert store.resolve("0").id == employee_id


def test_resolve_out_of_range_number_is_a_name(store):
    employee_id = _create(store, "99999999999999999999", 20)
    assert store.resolve("99999999999999999999").id == employee_id
    assert store.delete("99999999999999999999") == (
        "Employee with name 99999999999999999999 deleted successfully"
    )
    assert len(store) == 0


def test_replace_overwrites_all_fields(store):
    employee_id = _create(store, "Bob", 30)
    updated = store.replace(employee_id, EmployeeCreate(name="Bob2", age=32))
    assert updated.model_dump() == {"id": employee_id, "name": "Bob2", "age": 32}
    assert store.find_by_id(employee_id) == updated


def test_replace_resets_omitted_fields(store):
    employee_id = _create(store, "Bob", 30)
    store.replace(employee_id, EmployeeCreate(age=34))
    assert store.find_by_id(employee_id).model_dump() == {"id": employee_id, "name": "", "age": 34}


def test_replace_missing_raises(store):
    with pytest.raises(EmployeeNotFound):
        store.replace(1, EmployeeCreate(name="X", age=1))
    assert len(store) == 0


def test_merge_update_keeps_unset_fields(store):
    employee_id = _create(store, "Bob", 30)
    store.merge_update(employee_id, EmployeeUpdate(age=32))
    assert store.find_by_id(employee_id).model_dump() == {"id": employee_id, "name": "Bob", "age": 32}


def test_merge_update_distinguishes_zero_from_absent(store):
    employee_id = _create(store, "Bob", 30)
    store.merge_update(employee_id, EmployeeUpdate(age=0))
    assert store.find_by_id(employee_id).age == 0
    store.merge_update(employee_id, EmployeeUpdate(name="Robert"))
    assert store.find_by_id(employee_id).model_dump() == {"id": employee_id, "name": "Robert", "age": 0}


def test_merge_update_ignores_null(store):
    employee_id = _create(store, "Bob", 30)
    store.merge_update(employee_id, EmployeeUpdate(name=None, age=31))
    assert store.find_by_id(employee_id).name == "Bob"


def test_merge_update_missing_raises(store):
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.merge_update(9, EmployeeUpdate(age=1))
    assert excinfo.value.key == 9


def test_delete_by_id_preserves_order(seeded_store):
    seeded_store.delete_by_id(2)
    assert [e.name for e in seeded_store.list_all()] == ["Bob", "Mike"]
    with pytest.raises(EmployeeNotFound):
        seeded_store.find_by_id(2)


def test_delete_by_id_missing_message(store):
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.delete_by_id(3)
    assert str(excinfo.value) == "No record exists for employee id 3"


def test_delete_by_name_removes_first_match_only(store):
    _create(store, "Bob", 30)
    second = _create(store, "Bob", 40)
    store.delete_by_name("Bob")
    assert [e.id for e in store.list_all()] == [second]


def test_delete_by_name_missing_message(store):
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.delete_by_name("Bob")
    assert excinfo.value.key == "Bob"
    assert str(excinfo.value) == "No record exists for employee 'Bob'"


def test_delete_token_messages(seeded_store):
    assert seeded_store.delete("3") == "Employee with id 3 deleted successfully"
    assert seeded_store.delete("Bob") == "Employee with name Bob deleted successfully"
    assert [e.name for e in seeded_store.list_all()] == ["Sara"]


def test_not_found_leaves_state_untouched(seeded_store):
    before = seeded_store.list_all()
    for call in (
        lambda: seeded_store.find_by_id(99),
        lambda: seeded_store.delete("Nobody"),
        lambda: seeded_store.merge_update(99, EmployeeUpdate(age=1)),
    ):
        with pytest.raises(EmployeeNotFound):
            call()
    assert seeded_store.list_all() == before
    assert seeded_store.last_id == 3


def test_bob_and_sara_scenario(store):
    assert _create(store, "Bob", 30) == 1
    assert _create(store, "Sara", 34) == 2
    assert store.find_by_id(1).model_dump() == {"id": 1, "name": "Bob", "age": 30}
    store.merge_update(1, EmployeeUpdate(age=32))
    assert store.find_by_id(1).model_dump() == {"id": 1, "name": "Bob", "age": 32}
    store.delete_by_name("Bob")
    with pytest.raises(EmployeeNotFound) as excinfo:
        store.find_by_id(1)
    assert excinfo.value.key == 1
    assert [e.model_dump() for e in store.list_all()] == [{"id": 2, "name": "Sara", "age": 34}]


def test_concurrent_creates_allocate_unique_ids(store):
    def worker():
        for _ in range(50):
            _create(store, "w", 1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    ids = [e.id for e in store.list_all()]
    assert ids == list(range(1, 401))
