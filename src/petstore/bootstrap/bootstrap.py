"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from petstore import config
from petstore.adapters.db.engine import make_engine
from petstore.adapters.unit_of_work import SqlAlchemyUnitOfWork
from petstore.service_layer.handlers import COMMAND_HANDLERS
from petstore.service_layer.messagebus import MessageBus
from petstore.service_layer.views import QUERY_HANDLERS

if TYPE_CHECKING:
    from petstore.interfaces.unit_of_work import AbstractUnitOfWork
    from petstore.service_layer.commands import Command
    from petstore.service_layer.queries import Query


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a new SQLAlchemy unit of work for the database at ``url``."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., Any]],
    query_handlers: Mapping[type[Query], Callable[..., Any]],
) -> MessageBus:
    """Build a message bus whose handlers have the unit of work injected."""
    dependencies = {"uow": uow}
    return MessageBus(
        uow,
        command_handlers={
            command_type: inject_dependencies(handler, dependencies)
            for command_type, handler in command_handlers.items()
        },
        query_handlers={
            query_type: inject_dependencies(handler, dependencies)
            for query_type, handler in query_handlers.items()
        },
    )


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Wire the application against ``db_url`` (default: ``PETSTORE_DB_URL``)."""
    uow = build_uow(db_url or config.get_db_url())
    message_bus = build_message_bus(uow, COMMAND_HANDLERS, QUERY_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler names in its signature.

    Returns a single-argument callable taking the message.
    """
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
