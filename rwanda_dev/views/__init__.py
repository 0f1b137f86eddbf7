"""
Views Layer
===========
Non-materialized views over the indicator tables, for dashboard clients.
"""

from rwanda_dev.views import economic_overview, education_health_summary, population_trends

ALL_VIEWS = [
    economic_overview,
    education_health_summary,
    population_trends,
]


def build_all() -> list[str]:
    """(Re)create every view. Returns the view names."""
    for module in ALL_VIEWS:
        module.build()
    return [module.VIEW_NAME for module in ALL_VIEWS]


__all__ = [
    "ALL_VIEWS",
    "build_all",
    "economic_overview",
    "education_health_summary",
    "population_trends",
]
