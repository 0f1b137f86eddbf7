#!/usr/bin/env python3
"""
Run Reports Flow
================
Executes the query catalog (or one section of it) and reports row counts.

Usage:
    python -m rwanda_dev.flows.reports
    python -m rwanda_dev.flows.reports --section advanced
"""

import argparse

from prefect import flow, get_run_logger, task
from prefect.events import emit_event

from rwanda_dev.config import get_settings
from rwanda_dev.queries import SECTIONS, list_queries, run_query


@task(name="run-report-query")
def run_report(name: str) -> list[dict]:
    """Execute one catalog query."""
    logger = get_run_logger()

    rows = run_query(name)
    logger.info(f"   {name}: {len(rows):,} rows")

    return rows


@flow(name="run-reports", log_prints=True)
def run_reports_flow(section: str | None = None) -> dict:
    """
    Execute catalog queries.

    Args:
        section: Limit to one section ('exploration', 'advanced', 'dashboard')

    Returns:
        Row counts per query and the rows themselves
    """
    logger = get_run_logger()
    settings = get_settings()

    names = list_queries(section)
    logger.info(f"📊 Running {len(names)} report queries ({section or 'all sections'})")
    logger.info("-" * 40)

    results = {name: run_report(name) for name in names}

    summary = {
        "section": section,
        "counts": {name: len(rows) for name, rows in results.items()},
    }

    empty = [name for name, count in summary["counts"].items() if count == 0]
    if empty:
        logger.warning(f"⚠️  {len(empty)} queries returned no rows: {', '.join(empty)}")

    emit_event(
        event="rwanda.reports.complete",
        resource={"prefect.resource.id": f"rwanda-dev.{settings.environment}.run-reports"},
        payload=summary,
    )

    logger.info(f"✅ Ran {len(names)} queries")
    return {**summary, "results": results}


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Run the report query catalog")
    parser.add_argument("--section", choices=SECTIONS, help="Limit to one section")
    args = parser.parse_args()

    result = run_reports_flow(section=args.section)

    print("\nReports complete!")
    for name, count in result["counts"].items():
        print(f"   {name}: {count:,} rows")


if __name__ == "__main__":
    main()
