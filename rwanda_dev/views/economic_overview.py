"""
View: economic_overview
=======================
Economic indicators alongside total population, for easy querying.
"""

from rwanda_dev.db import execute, read_table

VIEW_NAME = "economic_overview"
SOURCE_TABLES = ["economic_indicators", "demographic_indicators"]

COLUMNS = ["year", "gdp_growth", "gdp_per_capita", "inflation_rate", "total_population"]

DDL = f"""
CREATE VIEW {VIEW_NAME} AS
SELECT e.year, e.gdp_growth, e.gdp_per_capita, e.inflation_rate, d.total_population
FROM economic_indicators e
JOIN demographic_indicators d ON e.year = d.year
"""


def build() -> None:
    """
    (Re)create the view.

    Drop-then-create rather than CREATE OR REPLACE, which SQLite lacks.
    """
    execute(f"DROP VIEW IF EXISTS {VIEW_NAME}", DDL)


def read() -> list[dict]:
    """All view rows ordered by year."""
    return read_table(VIEW_NAME)
