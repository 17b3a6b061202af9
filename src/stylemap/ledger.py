"""
Registration ledger.

Assigns suffixed names (``button-0``, ``button-1``) to registered styles,
keyframe sets and variables, and tracks whether each registration has been
flushed into emitted CSS.

Two modes:

- Default: every registration appends and takes the ledger size as its
  suffix, so names are never reused until :meth:`Ledger.reset`.
- Identity-aware: registrations carrying an identity (a call-site key)
  reuse their slot on repeat, so hot-reloading a module does not grow the
  ledger. Repeating before the previous registration was rendered raises
  :class:`DuplicateRegistrationError`.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .errors import DuplicateRegistrationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

IdentityResolver = Callable[[], "str | None"]


@dataclass(eq=False)
class Registered(Generic[T]):
    """A registered payload together with its generated name.

    ``str()`` returns the name, so a handle can be dropped straight into a
    selector (``f".{button}"``) or a property value.
    """

    payload: T
    name: str
    rendered: bool = False
    identity: str | None = field(default=None, repr=False)

    def unwrap(self) -> T:
        """Return the raw payload."""
        return self.payload

    def __str__(self) -> str:
        return self.name


def unwrap(value: Any) -> Any:
    """Return the payload of a :class:`Registered` handle, or *value* as-is."""
    return value.payload if isinstance(value, Registered) else value


class Ledger(Generic[T]):
    """Ordered registry of :class:`Registered` records."""

    def __init__(self, *, identity_aware: bool = False) -> None:
        self.identity_aware = identity_aware
        self._records: list[Registered[T]] = []
        self._slots: dict[tuple[str, str], int] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Registered[T]]:
        return iter(self._records)

    def register(self, base_name: str, payload: T, identity: str | None = None) -> Registered[T]:
        """Register *payload* under a name derived from *base_name*.

        Args:
            base_name: Name before the numeric suffix.
            payload: Style data to keep with the name.
            identity: Call-site key; only used in identity-aware mode.

        Returns:
            The new record.

        Raises:
            DuplicateRegistrationError: If *identity* registered before and
                that registration has not been rendered yet.
        """
        if self.identity_aware and identity is not None:
            slot_key = (identity, base_name)
            index = self._slots.get(slot_key)
            if index is not None:
                previous = self._records[index]
                if not previous.rendered:
                    raise DuplicateRegistrationError(identity, previous.name)
                record = Registered(payload, previous.name, identity=identity)
                self._records[index] = record
                logger.debug("Re-registered %s from %s", record.name, identity)
                return record
            self._slots[slot_key] = len(self._records)

        record = Registered(payload, f"{base_name}-{len(self._records)}", identity=identity)
        self._records.append(record)
        logger.debug("Registered %s", record.name)
        return record

    def mark_rendered(self) -> None:
        """Flag every current record as flushed to the stylesheet."""
        for record in self._records:
            record.rendered = True

    def reset(self) -> None:
        """Forget all records; handles still held by callers become unrendered."""
        for record in self._records:
            record.rendered = False
        self._records = []
        self._slots = {}


def caller_identity(skip_package: str = "stylemap") -> str | None:
    """Best-effort call-site identity: ``module:qualname@offset`` of the first
    frame outside *skip_package*.

    The offset is the bytecode position of the call inside its function, so
    two calls in one function get different keys while edits elsewhere in the
    module leave the key alone. Returns ``None`` when no such frame exists.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            module = frame.f_globals.get("__name__", "")
            if module != skip_package and not module.startswith(f"{skip_package}."):
                return f"{module}:{frame.f_code.co_qualname}@{frame.f_lasti}"
            frame = frame.f_back
        return None
    finally:
        del frame
