"""
View: education_health_summary
==============================
Enrollment next to infant mortality and health spending, for comparative
analysis.
"""

from rwanda_dev.db import execute, read_table

VIEW_NAME = "education_health_summary"
SOURCE_TABLES = ["education_indicators", "health_indicators"]

COLUMNS = [
    "year",
    "primary_enrollment_rate",
    "secondary_enrollment_rate",
    "infant_mortality_rate",
    "health_expenditure_percent_gdp",
]

DDL = f"""
CREATE VIEW {VIEW_NAME} AS
SELECT e.year, e.primary_enrollment_rate, e.secondary_enrollment_rate,
       h.infant_mortality_rate, h.health_expenditure_percent_gdp
FROM education_indicators e
JOIN health_indicators h ON e.year = h.year
"""


def build() -> None:
    """(Re)create the view."""
    execute(f"DROP VIEW IF EXISTS {VIEW_NAME}", DDL)


def read() -> list[dict]:
    """All view rows ordered by year."""
    return read_table(VIEW_NAME)
