"""
Query Core
==========
Catalog entry type shared by the query sections.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportQuery:
    """A named, parameterless read query."""

    name: str
    section: str  # "exploration", "advanced" or "dashboard"
    description: str
    sql: str
    columns: tuple[str, ...]  # output columns, in select-list order
