"""Test the bootstrap function."""

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from petstore.adapters.unit_of_work import SqlAlchemyUnitOfWork
from petstore.bootstrap import DatabaseUrlNotSetError, UnsupportedDialect, bootstrap
from petstore.bootstrap.bootstrap import build_message_bus, build_uow
from petstore.interfaces.unit_of_work import AbstractUnitOfWork
from petstore.service_layer import commands, queries
from petstore.service_layer.commands import Command
from petstore.service_layer.queries import Query

# pylint: disable=too-few-public-methods
# pylint: disable=magic-value-comparison


class FakeUnitOfWork(AbstractUnitOfWork):
    """A test unit of work for testing purposes."""

    def __init__(self):
        self.committed = False

    def commit(self):
        self.committed = True

    def rollback(self):
        pass


@dataclass(frozen=True)
class CustomCommand(Command):
    """A custom command for testing."""


@dataclass(frozen=True)
class CustomQuery(Query):
    """A custom query for testing."""


class TestBuildUoW:
    """Tests for the build_uow function."""

    @staticmethod
    def test_returns_sqlalchemy_uow():
        uow = build_uow(url="sqlite:///:memory:")
        assert isinstance(uow, SqlAlchemyUnitOfWork)
        assert str(uow.engine.url) == "sqlite:///:memory:"

    @staticmethod
    def test_rejects_unsupported_backend():
        with pytest.raises(UnsupportedDialect):
            build_uow(url="mysql://u:p@localhost/petstore")


class TestBuildMessageBus:
    """Tests for the build_message_bus function."""

    @staticmethod
    def test_injects_uow_into_command_handlers():
        uow = FakeUnitOfWork()

        def sample_handler(cmd: CustomCommand, uow: FakeUnitOfWork):
            with uow:
                uow.commit()
            return "done"

        command_handlers: dict[type[Command], Callable[..., str]] = {
            CustomCommand: sample_handler,
        }
        bus = build_message_bus(uow, command_handlers, {})

        assert bus.handle(CustomCommand()) == "done"
        assert uow.committed is True

    @staticmethod
    def test_injects_uow_into_query_handlers():
        uow = FakeUnitOfWork()
        seen = []

        def sample_view(query: CustomQuery, uow: FakeUnitOfWork):
            seen.append(uow)
            return [query]

        bus = build_message_bus(uow, {}, {CustomQuery: sample_view})
        query = CustomQuery()

        assert bus.handle(query) == [query]
        assert seen == [uow]

    @staticmethod
    def test_handlers_without_uow_parameter():
        """Only dependencies a handler names are bound."""
        handled = []
        bus = build_message_bus(FakeUnitOfWork(), {CustomCommand: handled.append}, {})

        command_instance = CustomCommand()
        bus.handle(command_instance)

        assert handled == [command_instance]


class TestBootstrap:
    """Tests for the bootstrap function."""

    @staticmethod
    def test_uses_environment_url(monkeypatch, sqlite_url_file):
        monkeypatch.setenv("PETSTORE_DB_URL", sqlite_url_file)

        container = bootstrap()

        assert isinstance(container.message_bus.uow, SqlAlchemyUnitOfWork)
        assert str(container.message_bus.uow.engine.url) == sqlite_url_file

    @staticmethod
    def test_missing_url(monkeypatch):
        monkeypatch.delenv("PETSTORE_DB_URL", raising=False)
        with pytest.raises(DatabaseUrlNotSetError):
            bootstrap()

    @staticmethod
    def test_wired_bus_round_trips_a_store(sqlite_engine_file):
        """Every command and query type is routed on the wired bus."""
        url = sqlite_engine_file.url.render_as_string(hide_password=False)
        bus = bootstrap(url).message_bus

        created = bus.handle(commands.SaveStore(name="Paws", phone="555-0100"))
        fetched = bus.handle(queries.GetStore(created.store_id))

        assert fetched == created
        assert [s.store_id for s in bus.handle(queries.ListStores())] == [
            created.store_id
        ]
