"""Contract tests for StoreRepository implementations."""

import pytest

from petstore.domain.model import Store
from petstore.interfaces.repositories import RecordNotFoundError

# pylint: disable=magic-value-comparison


def test_save_assigns_id_and_round_trips(repos, make_store):
    saved = repos.stores.save(make_store())

    assert saved.store_id is not None
    assert repos.stores.get(saved.store_id) == saved
    assert saved.name == "Paws"
    assert saved.zip_code == "62701"


def test_save_does_not_mutate_argument(repos, make_store):
    store = make_store()
    repos.stores.save(store)
    assert store.store_id is None


def test_list_is_ordered_by_id(repos, make_store):
    ids = [repos.stores.save(make_store(name=n)).store_id for n in ("A", "B", "C")]

    assert [s.store_id for s in repos.stores.list()] == ids
    assert ids == sorted(ids)


def test_save_existing_id_updates(repos, make_store):
    saved = repos.stores.save(make_store())
    saved.name = "Claws"
    saved.city = None

    repos.stores.save(saved)

    stored = repos.stores.get(saved.store_id)
    assert stored is not None
    assert (stored.name, stored.city) == ("Claws", None)
    assert len(repos.stores.list()) == 1


def test_save_unknown_explicit_id_inserts(repos):
    repos.stores.save(Store(store_id=40, name="Explicit"))

    stored = repos.stores.get(40)
    assert stored is not None
    assert stored.name == "Explicit"


def test_save_without_id_after_explicit_id_gets_a_fresh_id(repos, make_store):
    repos.stores.save(Store(store_id=40, name="Explicit"))

    fresh = repos.stores.save(make_store())

    assert fresh.store_id == 41
    assert {s.store_id for s in repos.stores.list()} == {40, 41}


def test_explicit_id_below_the_largest_keeps_ids_unique(repos, make_store):
    first = repos.stores.save(make_store())
    second = repos.stores.save(make_store())
    repos.stores.delete(first.store_id)
    repos.stores.save(Store(store_id=first.store_id, name="Back again"))

    fresh = repos.stores.save(make_store())

    assert fresh.store_id not in (first.store_id, second.store_id)
    assert len(repos.stores.list()) == 3


def test_returned_records_are_detached(repos, make_store):
    saved = repos.stores.save(make_store())
    fetched = repos.stores.get(saved.store_id)
    fetched.name = "changed"

    assert repos.stores.get(saved.store_id).name == "Paws"


def test_get_missing_returns_none(repos):
    assert repos.stores.get(12345) is None


def test_delete_missing_raises(repos):
    with pytest.raises(RecordNotFoundError) as excinfo:
        repos.stores.delete(12345)
    assert (excinfo.value.kind, excinfo.value.record_id) == ("Store", 12345)


def test_delete_cascades_to_employees_and_memberships(
    repos, make_store, make_employee, make_customer
):
    """Employees go with their store; shared customers only lose the membership."""
    paws = repos.stores.save(make_store(name="Paws")).store_id
    claws = repos.stores.save(make_store(name="Claws")).store_id
    doomed = repos.employees.save(make_employee(paws)).employee_id
    kept = repos.employees.save(make_employee(claws)).employee_id
    shared = repos.customers.save(make_customer(paws, claws)).customer_id
    only_paws = repos.customers.save(make_customer(paws)).customer_id

    repos.stores.delete(paws)

    assert repos.stores.get(paws) is None
    assert repos.employees.get(doomed) is None
    assert repos.employees.get(kept) is not None
    assert repos.customers.get(shared).store_ids == {claws}
    assert repos.customers.get(only_paws).store_ids == set()
    assert repos.employees.list_by_store(paws) == []
    assert repos.customers.list_by_store(paws) == []
