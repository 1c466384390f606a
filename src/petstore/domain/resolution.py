"""Tagged result of resolving an optional record id.

Create and update share one save path. Resolving the id a caller supplied
yields one of three outcomes, kept distinct so each save path can decide what
an unknown id means for it:

* ``New``: no id was supplied; the caller wants a fresh record.
* ``Existing``: the id was supplied and the record was found.
* ``Missing``: the id was supplied but nothing is stored under it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class New:
    """No id was supplied."""


@dataclass(frozen=True, slots=True)
class Existing(Generic[R]):
    """The supplied id resolved to a stored record."""

    record: R


@dataclass(frozen=True, slots=True)
class Missing:
    """The supplied id does not resolve to a stored record."""

    record_id: int


Resolution: TypeAlias = New | Existing[R] | Missing
