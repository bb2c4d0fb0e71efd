"""Identifier quoting."""
from __future__ import annotations

from sqlstring.errors import IdentifierTypeError


def escape_id(name: str, forbid_qualified: bool = False) -> str:
    """Quote a table or column name with backticks.

    Embedded backticks are doubled.  Unless ``forbid_qualified`` is set, each
    ``.`` separates a qualifier, so ``schema.table`` becomes
    ``` `schema`.`table` ```.

    Args:
        name: The identifier to quote.
        forbid_qualified: Treat ``.`` as part of the name.

    Returns:
        The quoted identifier.

    Raises:
        IdentifierTypeError: If ``name`` is not a ``str``.
    """
    if not isinstance(name, str):
        raise IdentifierTypeError(name)

    escaped = name.replace("`", "``")
    if not forbid_qualified:
        escaped = escaped.replace(".", "`.`")
    return f"`{escaped}`"
