"""
Indicators: education_indicators
================================
Primary and secondary enrollment and adult literacy, one row per year.

Enrollment rates are gross rates and can exceed 100.
"""

from rwanda_dev.db import check_columns, execute, insert_batch, read_table

TABLE_NAME = "education_indicators"

COLUMNS = ["year", "primary_enrollment_rate", "secondary_enrollment_rate", "literacy_rate"]

DDL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    year INTEGER PRIMARY KEY,
    primary_enrollment_rate FLOAT,
    secondary_enrollment_rate FLOAT,
    literacy_rate FLOAT
)
"""


def create() -> None:
    execute(DDL)


def load(records: list[dict]) -> int:
    """
    Insert yearly education records.

    Args:
        records: Dicts keyed by COLUMNS

    Returns:
        Number of records inserted
    """
    check_columns(TABLE_NAME, COLUMNS, records)
    return insert_batch(TABLE_NAME, records)


def read() -> list[dict]:
    """All education rows ordered by year."""
    return read_table(TABLE_NAME)
