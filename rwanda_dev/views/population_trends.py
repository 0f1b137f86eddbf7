"""
View: population_trends
=======================
Total population and urban share over time.
"""

from rwanda_dev.db import execute, read_table

VIEW_NAME = "population_trends"
SOURCE_TABLES = ["demographic_indicators"]

COLUMNS = ["year", "total_population", "urban_population_percent"]

DDL = f"""
CREATE VIEW {VIEW_NAME} AS
SELECT year, total_population, urban_population_percent
FROM demographic_indicators
"""


def build() -> None:
    execute(f"DROP VIEW IF EXISTS {VIEW_NAME}", DDL)


def read() -> list[dict]:
    return read_table(VIEW_NAME)
