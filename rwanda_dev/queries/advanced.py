"""
Advanced Queries
================
Window functions, CTEs and conditional aggregation over the indicator tables.

- five_year_moving_averages: centered 5-year window (2 preceding, 2 following).
  Boundary years average whatever rows the window holds.
- yearly_changes / significant_changes: lag-1 deltas across the 4-way join.
  The first year has NULL deltas, never zero.
- gdp_growth_change: lag-1 delta of GDP growth on the economic table alone.
- above_average_gdp_growth: strict comparison against the full-table mean.
- education_pivot: unpivot then re-pivot the education columns (identity).
"""

from rwanda_dev.queries.core import ReportQuery

SECTION = "advanced"

# Every year present in all four tables; years missing anywhere are dropped
JOINED_INDICATORS = """
    FROM economic_indicators e
    JOIN demographic_indicators d ON e.year = d.year
    JOIN education_indicators ed ON e.year = ed.year
    JOIN health_indicators h ON e.year = h.year
"""

# Absolute year-over-year change that makes a year significant
CHANGE_THRESHOLDS = {
    "gdp_growth_change": 2,  # percentage points
    "urban_pop_change": 1,  # percentage points
    "enrollment_change": 5,  # percentage points
    "mortality_change": 5,  # per 1000 births
}

CHANGE_COLUMNS = ("year", *CHANGE_THRESHOLDS)

YEARLY_CHANGES_CTE = f"""
    WITH yearly_changes AS (
        SELECT
            e.year,
            e.gdp_growth - LAG(e.gdp_growth) OVER (ORDER BY e.year) AS gdp_growth_change,
            d.urban_population_percent
                - LAG(d.urban_population_percent) OVER (ORDER BY e.year) AS urban_pop_change,
            ed.primary_enrollment_rate
                - LAG(ed.primary_enrollment_rate) OVER (ORDER BY e.year) AS enrollment_change,
            h.infant_mortality_rate
                - LAG(h.infant_mortality_rate) OVER (ORDER BY e.year) AS mortality_change
        {JOINED_INDICATORS}
    )
"""

_SIGNIFICANT = "\n               OR ".join(
    f"ABS({column}) > {limit}" for column, limit in CHANGE_THRESHOLDS.items()
)

_WINDOW = "OVER (ORDER BY e.year ROWS BETWEEN 2 PRECEDING AND 2 FOLLOWING)"

QUERIES = [
    ReportQuery(
        name="five_year_moving_averages",
        section=SECTION,
        description="Centered 5-year moving averages smoothing short-term fluctuations",
        sql=f"""
            SELECT
                e.year,
                AVG(e.gdp_growth) {_WINDOW} AS gdp_growth_5yr_avg,
                AVG(d.urban_population_percent) {_WINDOW} AS urban_pop_5yr_avg,
                AVG(ed.primary_enrollment_rate) {_WINDOW} AS primary_enrollment_5yr_avg,
                AVG(h.infant_mortality_rate) {_WINDOW} AS infant_mortality_5yr_avg
            {JOINED_INDICATORS}
            ORDER BY e.year
        """,
        columns=(
            "year",
            "gdp_growth_5yr_avg",
            "urban_pop_5yr_avg",
            "primary_enrollment_5yr_avg",
            "infant_mortality_5yr_avg",
        ),
    ),
    ReportQuery(
        name="yearly_changes",
        section=SECTION,
        description="Year-over-year change of key indicators across all sectors",
        sql=f"""
            {YEARLY_CHANGES_CTE}
            SELECT year, gdp_growth_change, urban_pop_change, enrollment_change, mortality_change
            FROM yearly_changes
            ORDER BY year
        """,
        columns=CHANGE_COLUMNS,
    ),
    ReportQuery(
        name="significant_changes",
        section=SECTION,
        description="Years where any key indicator shifted past its threshold",
        sql=f"""
            {YEARLY_CHANGES_CTE}
            SELECT year, gdp_growth_change, urban_pop_change, enrollment_change, mortality_change
            FROM yearly_changes
            WHERE {_SIGNIFICANT}
            ORDER BY year
        """,
        columns=CHANGE_COLUMNS,
    ),
    ReportQuery(
        name="gdp_growth_change",
        section=SECTION,
        description="Change in GDP growth from the previous year",
        sql="""
            SELECT year,
                   gdp_growth,
                   gdp_growth - LAG(gdp_growth) OVER (ORDER BY year) AS gdp_growth_change
            FROM economic_indicators
            ORDER BY year
        """,
        columns=("year", "gdp_growth", "gdp_growth_change"),
    ),
    ReportQuery(
        name="above_average_gdp_growth",
        section=SECTION,
        description="Years with GDP growth strictly above the all-years average",
        sql="""
            WITH avg_gdp AS (
                SELECT AVG(gdp_growth) AS avg_gdp_growth
                FROM economic_indicators
            )
            SELECT ei.year, ei.gdp_growth
            FROM economic_indicators ei
            CROSS JOIN avg_gdp
            WHERE ei.gdp_growth > avg_gdp.avg_gdp_growth
            ORDER BY ei.year
        """,
        columns=("year", "gdp_growth"),
    ),
    ReportQuery(
        name="education_pivot",
        section=SECTION,
        description="Education indicators side by side via conditional aggregation",
        sql="""
            SELECT year,
                   MAX(CASE WHEN indicator = 'primary_enrollment_rate' THEN value END)
                       AS primary_enrollment,
                   MAX(CASE WHEN indicator = 'secondary_enrollment_rate' THEN value END)
                       AS secondary_enrollment,
                   MAX(CASE WHEN indicator = 'literacy_rate' THEN value END) AS literacy_rate
            FROM (
                SELECT year, 'primary_enrollment_rate' AS indicator, primary_enrollment_rate AS value
                FROM education_indicators
                UNION ALL
                SELECT year, 'secondary_enrollment_rate', secondary_enrollment_rate
                FROM education_indicators
                UNION ALL
                SELECT year, 'literacy_rate', literacy_rate
                FROM education_indicators
            ) AS unpivoted
            GROUP BY year
            ORDER BY year
        """,
        columns=("year", "primary_enrollment", "secondary_enrollment", "literacy_rate"),
    ),
]
