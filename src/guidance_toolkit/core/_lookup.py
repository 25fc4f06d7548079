"""Enum-keyed lookup tables with an exhaustiveness check."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from guidance_toolkit.exceptions import LookupTableError

K = TypeVar("K", bound=Enum)
V = TypeVar("V")


def exhaustive_table(name: str, enum_type: type[K], entries: Mapping[K, V]) -> Mapping[K, V]:
    """Freeze a table after checking it has an entry for every enum member.

    Args:
        name: Table name used in the error message
        enum_type: Enumeration the table is keyed by
        entries: One value per member

    Returns:
        Read-only view of the table

    Raises:
        LookupTableError: If any member has no entry
    """
    missing = [member.name for member in enum_type if member not in entries]
    if missing:
        raise LookupTableError(name, missing)
    return MappingProxyType(dict(entries))
