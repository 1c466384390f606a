"""Message bus routing commands and queries to their handlers."""

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from petstore.domain.errors import DomainError
from petstore.interfaces.repositories import RepositoryError
from petstore.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .queries import Query

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Message: TypeAlias = Command | Query


class NoHandlerForMessage(LookupError):
    """Exception raised when no handler is registered for a message type."""

    def __init__(self, message: Message) -> None:
        super().__init__(f"No handler found for message {type(message).__name__}")


class MessageBus:
    """A simple synchronous message bus.

    Routes each command or query to the one handler registered for its type
    and hands the handler's result back to the caller: a projection (or a
    list of them) for queries and saves, ``None`` for deletes. Rejections
    (domain and repository errors) are logged at INFO, anything else with its
    traceback; both are re-raised unchanged.

    Args:
        uow: The unit of work the handlers were built with. Handlers receive it
            through injection; it is exposed here for convenience.
        command_handlers: A mapping of command types to single-argument handlers.
        query_handlers: A mapping of query types to single-argument handlers.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
        query_handlers: dict[type[Query], Callable[..., Any]] | None = None,
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers
        self._query_handlers = query_handlers or {}

    def handle(self, message: Message) -> Any:
        """Dispatch a message to its handler and return the handler's result.

        Raises:
            NoHandlerForMessage: If no handler is registered for the message type.
            Exception: Whatever the handler raises.
        """

        handler = self._find_handler(message)
        if handler is None:
            logger.error("No handler found for message %s", type(message).__name__)
            raise NoHandlerForMessage(message)

        handler_name = self._get_handler_name(handler)
        logger.debug("Handling message %s with handler %s", message, handler_name)
        try:
            return handler(message)
        except (DomainError, RepositoryError) as e:
            logger.info("Message %s rejected: %s", message, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling message %s with handler %s", message, handler_name
            )
            raise

    def _find_handler(self, message: Message) -> Callable[..., Any] | None:
        if isinstance(message, Query):
            return self._query_handlers.get(type(message))
        return self._command_handlers.get(type(message))

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
