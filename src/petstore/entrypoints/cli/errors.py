"""Translation of service-layer errors into click exceptions.

Each error kind gets its own exit code so scripts can tell them apart:

| Error                 | Exit code |
|-----------------------|-----------|
| ValidationError       | 2         |
| RecordNotFoundError   | 4         |
| ScopeViolationError   | 5         |
| ConflictError         | 6         |

Anything else propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from petstore.domain.errors import ConflictError, ScopeViolationError, ValidationError
from petstore.interfaces.repositories import RecordNotFoundError

# pylint: disable=too-few-public-methods


class InvalidRecordException(click.ClickException):
    """A required field was missing or blank."""

    exit_code = 2


class NotFoundException(click.ClickException):
    """A record id did not resolve."""

    exit_code = 4


class ScopeViolationException(click.ClickException):
    """A record exists but is not associated with the given store."""

    exit_code = 5


class ConflictException(click.ClickException):
    """The requested relationship already exists."""

    exit_code = 6


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise service-layer errors as the matching click exception."""
    try:
        yield
    except ValidationError as e:
        raise InvalidRecordException(str(e)) from e
    except RecordNotFoundError as e:
        raise NotFoundException(str(e)) from e
    except ScopeViolationError as e:
        raise ScopeViolationException(str(e)) from e
    except ConflictError as e:
        raise ConflictException(str(e)) from e
