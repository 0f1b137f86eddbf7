"""
Indicators: health_indicators
=============================
Infant mortality (per 1000 live births), health spending (% of GDP)
and hospital beds (per 1000 people), one row per year.
"""

from rwanda_dev.db import check_columns, execute, insert_batch, read_table

TABLE_NAME = "health_indicators"

COLUMNS = [
    "year",
    "infant_mortality_rate",
    "health_expenditure_percent_gdp",
    "hospital_beds_per_1000",
]

DDL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    year INTEGER PRIMARY KEY,
    infant_mortality_rate FLOAT,
    health_expenditure_percent_gdp FLOAT,
    hospital_beds_per_1000 FLOAT
)
"""


def create() -> None:
    """Create health_indicators if it does not exist."""
    execute(DDL)


def load(records: list[dict]) -> int:
    """Insert yearly health records. Returns row count."""
    check_columns(TABLE_NAME, COLUMNS, records)
    return insert_batch(TABLE_NAME, records)


def read() -> list[dict]:
    """All health rows ordered by year."""
    return read_table(TABLE_NAME)
