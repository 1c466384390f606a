"""Unit tests for the entity records."""

from petstore.domain.model import Customer, Employee, Store

# pylint: disable=magic-value-comparison


class TestStore:
    """Tests for Store."""

    @staticmethod
    def test_new_until_id_assigned() -> None:
        store = Store(name="Paws")
        assert store.is_new
        store.store_id = 1
        assert not store.is_new


class TestEmployee:
    """Tests for Employee assignment."""

    @staticmethod
    def test_starts_unassigned() -> None:
        employee = Employee(first_name="Ada")
        assert employee.is_new
        assert not employee.is_assigned
        assert not employee.is_assigned_to(1)

    @staticmethod
    def test_assign_returns_previous_store() -> None:
        employee = Employee(employee_id=3)

        assert employee.assign_to(1) is None
        assert employee.is_assigned_to(1)

        assert employee.assign_to(2) == 1
        assert employee.store_id == 2
        assert not employee.is_assigned_to(1)


class TestCustomer:
    """Tests for Customer memberships."""

    @staticmethod
    def test_join_is_idempotent() -> None:
        customer = Customer(customer_id=1)
        customer.join(4)
        customer.join(4)
        assert customer.store_ids == {4}
        assert customer.is_member_of(4)

    @staticmethod
    def test_leave_only_removes_one_store() -> None:
        customer = Customer(customer_id=1, store_ids={1, 2})
        customer.leave(1)
        customer.leave(9)
        assert customer.store_ids == {2}

    @staticmethod
    def test_membership_sets_are_not_shared() -> None:
        first, second = Customer(), Customer()
        first.join(1)
        assert second.store_ids == set()
