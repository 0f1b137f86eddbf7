"""
Exploration Queries
===================
Per-table trend selects plus one cross-table join, ordered by year.
"""

from rwanda_dev.queries.core import ReportQuery

SECTION = "exploration"

QUERIES = [
    ReportQuery(
        name="economic_growth_trend",
        section=SECTION,
        description="GDP growth and GDP per capita over the years",
        sql="""
            SELECT year, gdp_growth, gdp_per_capita
            FROM economic_indicators
            ORDER BY year
        """,
        columns=("year", "gdp_growth", "gdp_per_capita"),
    ),
    ReportQuery(
        name="population_urbanization_trend",
        section=SECTION,
        description="Total population and urban population percentage",
        sql="""
            SELECT year, total_population, urban_population_percent
            FROM demographic_indicators
            ORDER BY year
        """,
        columns=("year", "total_population", "urban_population_percent"),
    ),
    ReportQuery(
        name="education_progress",
        section=SECTION,
        description="Primary and secondary enrollment rates and literacy rate",
        sql="""
            SELECT year, primary_enrollment_rate, secondary_enrollment_rate, literacy_rate
            FROM education_indicators
            ORDER BY year
        """,
        columns=("year", "primary_enrollment_rate", "secondary_enrollment_rate", "literacy_rate"),
    ),
    ReportQuery(
        name="health_improvements",
        section=SECTION,
        description="Infant mortality rate and health expenditure over time",
        sql="""
            SELECT year, infant_mortality_rate, health_expenditure_percent_gdp
            FROM health_indicators
            ORDER BY year
        """,
        columns=("year", "infant_mortality_rate", "health_expenditure_percent_gdp"),
    ),
    # Inner join: years missing from either table are dropped
    ReportQuery(
        name="gdp_vs_enrollment",
        section=SECTION,
        description="GDP growth next to primary and secondary enrollment",
        sql="""
            SELECT e.year, e.gdp_growth, ed.primary_enrollment_rate, ed.secondary_enrollment_rate
            FROM economic_indicators e
            JOIN education_indicators ed ON e.year = ed.year
            ORDER BY e.year
        """,
        columns=("year", "gdp_growth", "primary_enrollment_rate", "secondary_enrollment_rate"),
    ),
]
