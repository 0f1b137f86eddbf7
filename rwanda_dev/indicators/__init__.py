"""
Indicator Tables
================
Yearly fact tables keyed by year: economic, demographic, education, health.
"""

from rwanda_dev.indicators import (
    demographic_indicators,
    economic_indicators,
    education_indicators,
    health_indicators,
)

# Creation and reporting order
ALL_TABLES = [
    economic_indicators,
    demographic_indicators,
    education_indicators,
    health_indicators,
]


def create_all() -> list[str]:
    """Create every indicator table. Returns the table names."""
    for module in ALL_TABLES:
        module.create()
    return [module.TABLE_NAME for module in ALL_TABLES]


__all__ = [
    "ALL_TABLES",
    "create_all",
    "economic_indicators",
    "demographic_indicators",
    "education_indicators",
    "health_indicators",
]
