"""Unit tests for the customer handlers."""

import logging

import pytest

from petstore.domain.errors import CustomerNotInStoreError, ScopeViolationError
from petstore.interfaces.repositories import RecordNotFoundError
from petstore.service_layer import commands, queries
from tests.unit.service_layer.handlers.base import HandlerTestBase

# pylint: disable=magic-value-comparison


class CustomerHandlerTest(HandlerTestBase):
    """Seeds two stores, ``s1`` and ``s2``."""

    def _seed_bus(self, request) -> None:
        self.s1 = self.add_store(name="Paws").store_id
        self.s2 = self.add_store(name="Claws").store_id


class TestAddCustomerToStore(CustomerHandlerTest):
    """Tests for add_customer_to_store."""

    def test_new_customer_is_linked_on_both_sides(self):
        result = self.add_customer(self.s1)

        assert result.store_ids == (self.s1,)
        assert self.store_customer_ids(self.s1) == [result.customer_id]
        self.assert_committed()

    def test_same_customer_in_two_stores(self):
        """Adding an existing customer to another store keeps the first membership."""
        first = self.add_customer(self.s1)

        second = self.add_customer(self.s2, customer_id=first.customer_id)

        assert second.customer_id == first.customer_id
        assert second.store_ids == (self.s1, self.s2)
        assert self.store_customer_ids(self.s1) == [first.customer_id]
        assert self.store_customer_ids(self.s2) == [first.customer_id]
        assert len(self.uow.customers.list()) == 1

    def test_adding_twice_to_same_store_is_idempotent(self):
        first = self.add_customer(self.s1)

        again = self.add_customer(self.s1, customer_id=first.customer_id, email="new@x")

        assert again.store_ids == (self.s1,)
        assert again.email == "new@x"
        assert self.store_customer_ids(self.s1) == [first.customer_id]

    def test_missing_store_is_not_found(self):
        with pytest.raises(RecordNotFoundError, match="Store with ID=404"):
            self.add_customer(404)
        assert self.uow.customers.list() == []
        self.assert_not_committed()

    def test_unknown_customer_id_is_not_found(self):
        with pytest.raises(RecordNotFoundError, match="Customer with ID=55"):
            self.add_customer(self.s1, customer_id=55)


class TestUpdateStoreCustomer(CustomerHandlerTest):
    """Tests for update_store_customer."""

    def test_updates_fields_and_keeps_memberships(self):
        customer = self.add_customer(self.s1)
        self.add_customer(self.s2, customer_id=customer.customer_id)

        result = self.bus.handle(
            commands.UpdateStoreCustomer(
                store_id=self.s2,
                customer_id=customer.customer_id,
                first_name="Ada",
                last_name="Byron",
            )
        )

        assert (result.first_name, result.last_name, result.email) == (
            "Ada",
            "Byron",
            None,
        )
        assert result.store_ids == (self.s1, self.s2)

    def test_non_member_is_a_scope_violation(self):
        customer = self.add_customer(self.s2, first_name="Grace")

        with pytest.raises(ScopeViolationError) as excinfo:
            self.bus.handle(
                commands.UpdateStoreCustomer(
                    store_id=self.s1,
                    customer_id=customer.customer_id,
                    first_name="Changed",
                )
            )

        assert isinstance(excinfo.value, CustomerNotInStoreError)
        stored = self.uow.customers.get(customer.customer_id)
        assert stored is not None
        assert stored.first_name == "Grace"
        self.assert_not_committed()


class TestRemoveCustomerFromStore(CustomerHandlerTest):
    """Tests for remove_customer_from_store."""

    def test_ends_one_membership_only(self):
        customer = self.add_customer(self.s1)
        self.add_customer(self.s2, customer_id=customer.customer_id)

        result = self.bus.handle(
            commands.RemoveCustomerFromStore(self.s1, customer.customer_id)
        )

        assert result.store_ids == (self.s2,)
        assert self.store_customer_ids(self.s1) == []
        assert self.store_customer_ids(self.s2) == [customer.customer_id]

    def test_customer_record_survives_last_membership(self):
        customer = self.add_customer(self.s1)

        self.bus.handle(commands.RemoveCustomerFromStore(self.s1, customer.customer_id))

        stored = self.uow.customers.get(customer.customer_id)
        assert stored is not None
        assert stored.store_ids == set()

    def test_non_member_is_a_scope_violation(self):
        customer = self.add_customer(self.s2)
        with pytest.raises(CustomerNotInStoreError):
            self.bus.handle(
                commands.RemoveCustomerFromStore(self.s1, customer.customer_id)
            )


class TestDeleteStoreCustomer(CustomerHandlerTest):
    """Tests for delete_store_customer."""

    def test_deletes_record(self):
        customer = self.add_customer(self.s1)

        self.bus.handle(commands.DeleteStoreCustomer(self.s1, customer.customer_id))

        assert self.uow.customers.get(customer.customer_id) is None
        assert self.store_customer_ids(self.s1) == []
        with pytest.raises(RecordNotFoundError):
            self.bus.handle(queries.GetStoreCustomer(self.s1, customer.customer_id))

    def test_delete_also_ends_other_memberships(self, caplog):
        customer = self.add_customer(self.s1)
        self.add_customer(self.s2, customer_id=customer.customer_id)

        with caplog.at_level(logging.WARNING, logger="petstore"):
            self.bus.handle(
                commands.DeleteStoreCustomer(self.s1, customer.customer_id)
            )

        assert self.store_customer_ids(self.s2) == []
        assert "also removed from stores" in caplog.text

    def test_non_member_is_a_scope_violation(self):
        customer = self.add_customer(self.s2)

        with pytest.raises(ScopeViolationError):
            self.bus.handle(
                commands.DeleteStoreCustomer(self.s1, customer.customer_id)
            )
        assert self.uow.customers.get(customer.customer_id) is not None
