"""
Database Client
===============
SQLAlchemy engine and helpers for the indicator tables, views and queries.

The engine is built from settings.database_url. SQLite (3.25+) and
PostgreSQL both run every statement in this package unchanged.
"""

from functools import lru_cache

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine

from rwanda_dev.config import get_settings


@lru_cache
def get_engine() -> Engine:
    """
    Get SQLAlchemy engine.

    Returns:
        Engine bound to settings.database_url
    """
    settings = get_settings()
    return create_engine(settings.database_url, echo=settings.echo_sql)


def execute(*statements: str) -> None:
    """
    Run one or more statements in a single transaction (DDL, cleanup).

    Args:
        statements: Raw SQL statements, executed in order
    """
    with get_engine().begin() as conn:
        for statement in statements:
            conn.execute(text(statement))


def insert_batch(
    table_name: str,
    records: list[dict],
    batch_size: int | None = None,
) -> int:
    """
    Insert records in batches (append-only, one row per record).

    Records may omit columns; missing values are inserted as NULL.

    Args:
        table_name: Target table (e.g., 'economic_indicators')
        records: List of records to insert
        batch_size: Records per batch (default: settings.batch_size)

    Returns:
        Number of records inserted
    """
    if not records:
        return 0

    batch_size = batch_size or get_settings().batch_size

    # Column order follows first appearance across records
    columns: list[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)

    statement = text(
        f"INSERT INTO {table_name} ({', '.join(columns)}) "
        f"VALUES ({', '.join(':' + c for c in columns)})"
    )
    rows = [{c: record.get(c) for c in columns} for record in records]
    total = 0

    with get_engine().begin() as conn:
        for i in range(0, len(rows), batch_size):
            batch = rows[i : i + batch_size]
            conn.execute(statement, batch)
            total += len(batch)

    return total


def read_query(sql: str) -> list[dict]:
    """
    Run a read query and return its rows.

    Args:
        sql: SELECT statement

    Returns:
        List of records keyed by output column name
    """
    with get_engine().connect() as conn:
        result = conn.execute(text(sql))
        return [dict(row) for row in result.mappings()]


def read_table(
    table_name: str,
    columns: str = "*",
    order_by: str | None = "year",
    limit: int | None = None,
) -> list[dict]:
    """
    Read records from a table or view.

    Args:
        table_name: Table or view name
        columns: Columns to select (default: all)
        order_by: Ordering column (default: year)
        limit: Optional row limit

    Returns:
        List of records
    """
    sql = f"SELECT {columns} FROM {table_name}"

    if order_by:
        sql += f" ORDER BY {order_by}"

    if limit:
        sql += f" LIMIT {int(limit)}"

    return read_query(sql)


def table_exists(name: str) -> bool:
    """Check whether a table or view exists in the connected database."""
    inspector = inspect(get_engine())
    return inspector.has_table(name) or name in inspector.get_view_names()


def check_columns(table_name: str, columns: list[str], records: list[dict]) -> None:
    """
    Reject records carrying keys the target table does not have.

    Raises:
        ValueError: naming the unknown keys
    """
    unknown = sorted({key for record in records for key in record} - set(columns))
    if unknown:
        raise ValueError(f"Unknown columns for {table_name}: {', '.join(unknown)}")
