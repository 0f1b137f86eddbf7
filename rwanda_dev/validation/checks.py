"""
Data Quality Checks
===================
Individual check functions organized by category.

Every function takes `tables`: table name -> rows (list of dicts, as read
from the database). Tables absent from the mapping are skipped.
"""

from rwanda_dev.validation.core import DQReport, add_check, add_stat, format_years

# Up to two missing years of 24 warns; more fails
YEAR_WARN_BAND = 10

# (table, column) -> (minimum, maximum); None means unbounded
VALUE_BOUNDS: dict[tuple[str, str], tuple[float | None, float | None]] = {
    ("economic_indicators", "gdp_per_capita"): (0, None),
    ("demographic_indicators", "total_population"): (0, None),
    ("demographic_indicators", "urban_population_percent"): (0, 100),
    ("demographic_indicators", "life_expectancy"): (0, None),
    # Gross enrollment can exceed 100
    ("education_indicators", "primary_enrollment_rate"): (0, None),
    ("education_indicators", "secondary_enrollment_rate"): (0, None),
    ("education_indicators", "literacy_rate"): (0, 100),
    ("health_indicators", "infant_mortality_rate"): (0, None),
    ("health_indicators", "health_expenditure_percent_gdp"): (0, 100),
    ("health_indicators", "hospital_beds_per_1000"): (0, None),
}


def _years(rows: list[dict]) -> set[int]:
    return {r["year"] for r in rows if r.get("year") is not None}


def check_required_fields(
    report: DQReport,
    tables: dict[str, list[dict]],
    columns: dict[str, list[str]],
) -> None:
    """Check that year is always set and indicators are mostly populated."""
    for table, rows in tables.items():
        if not rows:
            continue

        add_check(
            report,
            "REQUIRED_FIELD",
            f"{table}.year NOT NULL",
            sum(1 for r in rows if r.get("year") is not None),
            len(rows),
        )

        for column in columns.get(table, []):
            if column == "year":
                continue
            nulls = [r for r in rows if r.get(column) is None]
            missing = _years(nulls)
            add_check(
                report,
                "REQUIRED_FIELD",
                f"{table}.{column} populated",
                len(rows) - len(nulls),
                len(rows),
                message=f"NULL in: {format_years(missing)}" if missing else "",
                threshold=95,
            )


def check_uniqueness(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """Check one row per year."""
    for table, rows in tables.items():
        with_year = [r["year"] for r in rows if r.get("year") is not None]
        if not with_year:
            continue

        unique = set(with_year)
        duplicates = sorted(y for y in unique if with_year.count(y) > 1)
        add_check(
            report,
            "UNIQUENESS",
            f"{table}.year is unique",
            len(unique),
            len(with_year),
            message=f"Duplicated: {format_years(duplicates)}" if duplicates else "OK",
        )


def check_year_coverage(
    report: DQReport,
    tables: dict[str, list[dict]],
    start_year: int,
    end_year: int,
) -> None:
    """Check each table has a row for every year of the analysis window."""
    expected = set(range(start_year, end_year + 1))

    for table, rows in tables.items():
        years = _years(rows)
        missing = expected - years
        outside = years - expected

        message = f"Missing: {format_years(missing)}" if missing else "OK"
        if outside:
            message += f" (outside {start_year}-{end_year}: {format_years(outside)})"

        add_check(
            report,
            "COVERAGE",
            f"{table} covers {start_year}-{end_year}",
            len(expected & years),
            len(expected),
            message=message,
            warn_band=YEAR_WARN_BAND,
        )


def check_referential_integrity(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """
    Check year alignment across tables.

    Joined queries use inner joins on year, so a year missing from any
    table silently disappears from every cross-table result. This check
    reports those years per table.
    """
    if not tables:
        return

    year_sets = {table: _years(rows) for table, rows in tables.items()}
    common = set.intersection(*year_sets.values())

    for table, years in year_sets.items():
        if not years:
            continue

        dropped = years - common
        add_check(
            report,
            "REFERENTIAL_INTEGRITY",
            f"{table}.year present in all tables",
            len(years & common),
            len(years),
            message=f"Dropped by joins: {format_years(dropped)}" if dropped else "OK",
            warn_band=YEAR_WARN_BAND,
        )

    add_stat(
        report,
        "COVERAGE",
        "Years in all tables",
        f"{len(common):,} ({format_years(common)})",
        description="Rows available to joined queries and views",
    )


def check_business_logic(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """Check indicator values fall within plausible bounds."""
    for (table, column), (low, high) in VALUE_BOUNDS.items():
        values = [r for r in tables.get(table, []) if r.get(column) is not None]
        if not values:
            continue

        out_of_range = sorted(
            r["year"]
            for r in values
            if (low is not None and r[column] < low) or (high is not None and r[column] > high)
        )
        bounds = f"{low} to {high}" if high is not None else f">= {low}"
        add_check(
            report,
            "BUSINESS_LOGIC",
            f"{table}.{column} within {bounds}",
            len(values) - len(out_of_range),
            len(values),
            message=f"Out of range in: {format_years(out_of_range)}" if out_of_range else "",
        )


def collect_statistics(report: DQReport, tables: dict[str, list[dict]]) -> None:
    """Collect informational statistics."""
    for table, rows in tables.items():
        years = _years(rows)
        add_stat(
            report,
            "VOLUME",
            f"{table} rows",
            f"{len(rows):,}",
            description=f"{min(years)}-{max(years)}" if years else "empty",
        )
