"""
Indicators: economic_indicators
===============================
GDP growth, GDP per capita and inflation, one row per year.
"""

from rwanda_dev.db import check_columns, execute, insert_batch, read_table

TABLE_NAME = "economic_indicators"

COLUMNS = ["year", "gdp_growth", "gdp_per_capita", "inflation_rate"]

DDL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    year INTEGER PRIMARY KEY,
    gdp_growth FLOAT,
    gdp_per_capita FLOAT,
    inflation_rate FLOAT
)
"""


def create() -> None:
    """Create economic_indicators if it does not exist."""
    execute(DDL)


def load(records: list[dict]) -> int:
    """
    Insert yearly economic records.

    Args:
        records: Dicts keyed by COLUMNS (missing indicators become NULL)

    Returns:
        Number of records inserted
    """
    check_columns(TABLE_NAME, COLUMNS, records)
    return insert_batch(TABLE_NAME, records)


def read() -> list[dict]:
    """All economic rows ordered by year."""
    return read_table(TABLE_NAME)
