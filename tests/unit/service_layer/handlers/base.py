"""Base class for handler tests."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest

from petstore.service_layer import commands

if TYPE_CHECKING:
    from petstore.service_layer.messagebus import MessageBus
    from petstore.service_layer.projections import (
        CustomerProjection,
        EmployeeProjection,
        StoreProjection,
    )

    from .fakes import FakeUoW


class HandlerTestBase:
    """Base class for handler tests providing common setup and utilities.

    Every test gets a fresh bus over a ``FakeUoW``. Subclasses seed records by
    overriding ``_seed_bus``; the ``add_*`` helpers go through the bus like
    any other caller.
    """

    bus: MessageBus

    # declare what fixtures seeding needs (subclasses can extend)
    seed_uses: tuple[str, ...] = (
        "make_store_params",
        "make_employee_params",
        "make_customer_params",
    )
    fx: SimpleNamespace

    @pytest.fixture(autouse=True)
    def _attach_bus(self, request, make_test_bus):
        """Fresh bus per test; seed using any fixtures declared in seed_uses."""
        self.bus = make_test_bus()

        fx = {name: request.getfixturevalue(name) for name in self.seed_uses}
        self.fx = SimpleNamespace(**fx)

        self._seed_bus(request)
        self.reset_committed()

    def _seed_bus(self, request) -> None:
        """Override to preload the bus. Use request.getfixturevalue(...) as needed."""

    @property
    def uow(self) -> FakeUoW:
        """The fake unit of work behind the bus."""
        return self.bus.uow  # type: ignore[return-value]

    # --- seeding helpers ---

    def add_store(self, **fields: Any) -> StoreProjection:
        """Create a store through the bus."""
        return self.bus.handle(
            commands.SaveStore(**self.fx.make_store_params(**fields))
        )

    def add_employee(self, store_id: int, **fields: Any) -> EmployeeProjection:
        """Create an employee in ``store_id`` through the bus."""
        return self.bus.handle(
            commands.AddEmployeeToStore(
                store_id=store_id, **self.fx.make_employee_params(**fields)
            )
        )

    def add_customer(
        self, store_id: int, customer_id: int | None = None, **fields: Any
    ) -> CustomerProjection:
        """Add a (new or existing) customer to ``store_id`` through the bus."""
        return self.bus.handle(
            commands.AddCustomerToStore(
                store_id=store_id,
                customer_id=customer_id,
                **self.fx.make_customer_params(**fields),
            )
        )

    # --- assertions ---

    def assert_committed(self) -> None:
        """Assert that the unit of work was committed."""
        assert self.uow.committed is True

    def assert_not_committed(self) -> None:
        """Assert that the unit of work was not committed."""
        assert self.uow.committed is False

    def reset_committed(self) -> None:
        """Reset the committed flag on the unit of work."""
        self.uow.committed = False

    def store_employee_ids(self, store_id: int) -> list[int]:
        """Ids in the store's employee index."""
        return [e.employee_id for e in self.uow.employees.list_by_store(store_id)]  # type: ignore[misc]

    def store_customer_ids(self, store_id: int) -> list[int]:
        """Ids in the store's customer index."""
        return [c.customer_id for c in self.uow.customers.list_by_store(store_id)]  # type: ignore[misc]
