"""Tests for the in-memory employee store."""

from employee_api.app.schemas.employee import EmployeeRead
from employee_api.app.services.store import EmployeeStore


def test_new_store_is_empty(store):
    assert store.list() == []
    assert store.next_id() == 1


def test_replace_all_keeps_order(store):
    records = [
        EmployeeRead(id=2, name="Jane Smith", age=25),
        EmployeeRead(id=1, name="John Doe", age=30),
    ]
    store.replace_all(records)
    assert [e.id for e in store.list()] == [2, 1]


def test_set_next_id(store):
    store.set_next_id(7)
    assert store.next_id() == 7


def test_reset_clears_records_and_counter(store):
    store.replace_all([EmployeeRead(id=1, name="John Doe", age=30)])
    store.set_next_id(5)
    store.reset()
    assert store.list() == []
    assert store.next_id() == 1


def test_stores_are_independent():
    first, second = EmployeeStore(), EmployeeStore()
    first.replace_all([EmployeeRead(id=1, name="John Doe", age=30)])
    first.set_next_id(2)
    assert second.list() == []
    assert second.next_id() == 1
