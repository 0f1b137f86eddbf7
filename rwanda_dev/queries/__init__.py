"""
Query Catalog
=============
Fixed library of parameterless read queries, keyed by name.

Sections:
- exploration: per-table trends and a GDP/enrollment join
- advanced: moving averages, year-over-year changes, CTE filter, pivot
- dashboard: chart-ready result sets
"""

from rwanda_dev.db import read_query
from rwanda_dev.queries import advanced, dashboard, exploration
from rwanda_dev.queries.core import ReportQuery

SECTIONS = [exploration.SECTION, advanced.SECTION, dashboard.SECTION]

CATALOG: dict[str, ReportQuery] = {
    query.name: query for query in [*exploration.QUERIES, *advanced.QUERIES, *dashboard.QUERIES]
}


def get_query(name: str) -> ReportQuery:
    """
    Look up a catalog entry.

    Raises:
        KeyError: if no query has that name
    """
    try:
        return CATALOG[name]
    except KeyError:
        raise KeyError(f"Unknown query: {name!r}") from None


def list_queries(section: str | None = None) -> list[str]:
    """Query names in catalog order, optionally limited to one section."""
    return [q.name for q in CATALOG.values() if section is None or q.section == section]


def run_query(name: str) -> list[dict]:
    """
    Execute a catalog query.

    Args:
        name: Catalog key (e.g., 'five_year_moving_averages')

    Returns:
        Rows keyed by the query's output columns
    """
    return read_query(get_query(name).sql)


__all__ = [
    "CATALOG",
    "SECTIONS",
    "ReportQuery",
    "get_query",
    "list_queries",
    "run_query",
]
