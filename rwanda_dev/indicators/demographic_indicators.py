"""
Indicators: demographic_indicators
==================================
Total population, urbanisation and life expectancy, one row per year.
"""

from rwanda_dev.db import check_columns, execute, insert_batch, read_table

TABLE_NAME = "demographic_indicators"

COLUMNS = ["year", "total_population", "urban_population_percent", "life_expectancy"]

# total_population passes 13M by 2023, so BIGINT rather than INT
DDL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    year INTEGER PRIMARY KEY,
    total_population BIGINT,
    urban_population_percent FLOAT,
    life_expectancy FLOAT
)
"""


def create() -> None:
    """Create demographic_indicators if it does not exist."""
    execute(DDL)


def load(records: list[dict]) -> int:
    """Insert yearly demographic records. Returns row count."""
    check_columns(TABLE_NAME, COLUMNS, records)
    return insert_batch(TABLE_NAME, records)


def read() -> list[dict]:
    return read_table(TABLE_NAME)
