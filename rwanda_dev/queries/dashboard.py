"""
Dashboard Queries
=================
Result sets shaped for the dashboard charts (line, dual-axis, stacked bar,
multi-line, summary table).
"""

from rwanda_dev.queries.core import ReportQuery

SECTION = "dashboard"

QUERIES = [
    ReportQuery(
        name="gdp_growth_chart",
        section=SECTION,
        description="Line chart of GDP growth over time",
        sql="SELECT year, gdp_growth FROM economic_indicators ORDER BY year",
        columns=("year", "gdp_growth"),
    ),
    ReportQuery(
        name="population_vs_urbanization_chart",
        section=SECTION,
        description="Dual-axis chart of population growth and urbanization rate",
        sql="""
            SELECT year, total_population, urban_population_percent
            FROM demographic_indicators ORDER BY year
        """,
        columns=("year", "total_population", "urban_population_percent"),
    ),
    ReportQuery(
        name="enrollment_rates_chart",
        section=SECTION,
        description="Stacked bar chart of primary and secondary enrollment rates",
        sql="""
            SELECT year, primary_enrollment_rate, secondary_enrollment_rate
            FROM education_indicators ORDER BY year
        """,
        columns=("year", "primary_enrollment_rate", "secondary_enrollment_rate"),
    ),
    ReportQuery(
        name="health_indicators_chart",
        section=SECTION,
        description="Multi-line chart of health indicators",
        sql="""
            SELECT year, infant_mortality_rate, health_expenditure_percent_gdp
            FROM health_indicators ORDER BY year
        """,
        columns=("year", "infant_mortality_rate", "health_expenditure_percent_gdp"),
    ),
    ReportQuery(
        name="combined_indicators_summary",
        section=SECTION,
        description="Summary of key indicators across all sectors",
        sql="""
            SELECT e.year, e.gdp_growth, d.urban_population_percent,
                   ed.primary_enrollment_rate, h.infant_mortality_rate
            FROM economic_indicators e
            JOIN demographic_indicators d ON e.year = d.year
            JOIN education_indicators ed ON e.year = ed.year
            JOIN health_indicators h ON e.year = h.year
            ORDER BY e.year
        """,
        columns=(
            "year",
            "gdp_growth",
            "urban_population_percent",
            "primary_enrollment_rate",
            "infant_mortality_rate",
        ),
    ),
]
