"""Dialect registry (Open/Closed Principle).

``DialectFactory`` maps dialect names to :class:`SQLDialect` classes so a
new dialect can be plugged in without editing the escaper::

    from sqlstring.dialects import DialectFactory, SQLDialect

    @DialectFactory.register("mssql")
    class MSSQLDialect(SQLDialect):
        ...

Unknown names never fail: they resolve to the generic (MySQL-style) rules.
Dialects hold no state, so one instance per name is built lazily and shared.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from sqlstring.dialects.base import SQLDialect

logger = logging.getLogger(__name__)

#: Name of the dialect used for ``None``, empty and unregistered names.
DEFAULT_DIALECT = "mysql"


class DialectFactory:
    """Name → dialect lookup with a generic fallback.

    ``create("postgres")`` always returns the same shared
    :class:`PostgresDialect`; ``create("oracle")`` returns the shared
    generic dialect, since there are no Oracle-specific rules.
    Re-registering a name replaces both the class and its cached instance.
    """

    _dialects: ClassVar[dict[str, type[SQLDialect]]] = {}
    _instances: ClassVar[dict[str, SQLDialect]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLDialect]], type[SQLDialect]]:
        """Class decorator form of :meth:`register_class`.

        The decorated class is returned unchanged, so it can still be
        instantiated and subclassed directly.
        """

        def decorator(dialect_cls: type[SQLDialect]) -> type[SQLDialect]:
            cls.register_class(name, dialect_cls)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[SQLDialect]) -> None:
        """Bind ``name`` to ``dialect_cls``.

        Any instance already handed out for ``name`` is dropped, so the next
        lookup uses the new rules.  Registering under ``DEFAULT_DIALECT``
        changes the fallback for every unregistered name as well.
        """
        cls._dialects[name] = dialect_cls
        cls._instances.pop(name, None)

    @classmethod
    def create(cls, name: str | None) -> SQLDialect:
        """Return the shared dialect instance for ``name``.

        Args:
            name: The dialect name; ``None``, ``""`` or an unregistered name
                selects ``DEFAULT_DIALECT``.  Lookup is case-sensitive.

        Returns:
            The :class:`SQLDialect` instance for that name.
        """
        key = name or DEFAULT_DIALECT
        if key not in cls._dialects:
            logger.debug(
                "Unknown dialect %r; falling back to %r rules", name, DEFAULT_DIALECT
            )
            key = DEFAULT_DIALECT

        dialect = cls._instances.get(key)
        if dialect is None:
            dialect = cls._instances[key] = cls._dialects[key]()
        return dialect

    @classmethod
    def resolve(cls, dialect: SQLDialect | str | None) -> SQLDialect:
        """Return ``dialect`` unchanged if it is already an instance, else create it."""
        if isinstance(dialect, SQLDialect):
            return dialect
        return cls.create(dialect)

    @classmethod
    def registered_dialects(cls) -> list[str]:
        """Names with their own rules, sorted; anything else gets ``DEFAULT_DIALECT``."""
        return sorted(cls._dialects)
