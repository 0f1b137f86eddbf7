"""
Module Protocols
================
Type contracts for indicator table and view modules.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IndicatorTableModule(Protocol):
    """
    Contract for indicator table modules.

    Each module owns one yearly fact table: its DDL, column list,
    bulk load and ordered read.
    """

    TABLE_NAME: str
    COLUMNS: list[str]
    DDL: str

    def create(self) -> None:
        """Create the table if it does not exist."""
        ...

    def load(self, records: list[dict]) -> int:
        """Insert records. Returns row count."""
        ...

    def read(self) -> list[dict]:
        """All rows ordered by year."""
        ...


@runtime_checkable
class ViewModule(Protocol):
    """
    Contract for view modules.

    Each module owns one non-materialized view over the indicator tables.
    """

    VIEW_NAME: str
    SOURCE_TABLES: list[str]
    COLUMNS: list[str]
    DDL: str

    def build(self) -> None:
        """(Re)create the view."""
        ...

    def read(self) -> list[dict]:
        """All view rows ordered by year."""
        ...
