#!/usr/bin/env python3
"""
Validate Flow
=============
Runs data quality checks on the indicator tables.

Emits Prefect events on DQ failures for alerting.

Usage:
    python -m rwanda_dev.flows.validate
"""

from prefect import flow, get_run_logger
from prefect.events import emit_event

from rwanda_dev.config import get_settings
from rwanda_dev.db import read_table, table_exists
from rwanda_dev.indicators import ALL_TABLES
from rwanda_dev.validation.data_quality import validate_data_quality


@flow(name="validate-indicators", log_prints=True)
def validate_flow() -> dict:
    """
    Run data quality checks on the indicator tables.

    Reads current state and validates:
    - Required fields
    - Year uniqueness
    - Year coverage
    - Year alignment across tables (inner-join drops)
    - Value ranges

    Returns:
        DQ report summary
    """
    logger = get_run_logger()
    settings = get_settings()
    logger.info("🔍 Starting validate-indicators flow")

    # ==================== READ INDICATOR TABLES ====================
    logger.info("\n📊 Reading indicator tables")
    logger.info("-" * 40)

    tables = {}
    for module in ALL_TABLES:
        # A missing table validates as empty (fails coverage)
        if table_exists(module.TABLE_NAME):
            tables[module.TABLE_NAME] = read_table(module.TABLE_NAME)
        else:
            logger.warning(f"   ⚠️  {module.TABLE_NAME} does not exist")
            tables[module.TABLE_NAME] = []
        logger.info(f"   {module.TABLE_NAME}: {len(tables[module.TABLE_NAME]):,} rows")

    # ==================== RUN DQ CHECKS ====================
    logger.info("\n✅ Running data quality checks")
    logger.info("-" * 40)

    dq_report = validate_data_quality(tables)

    # ==================== HANDLE RESULTS ====================
    summary = dq_report.summary()
    resource = {"prefect.resource.id": f"rwanda-dev.{settings.environment}.validate-indicators"}

    if dq_report.failed > 0:
        logger.error(f"❌ DQ FAILED: {dq_report.failed} checks failed")

        failed_checks = dq_report.by_status("FAIL")
        emit_event(
            event="rwanda.dq.failure",
            resource=resource,
            payload={
                "failed_count": dq_report.failed,
                "total_checks": dq_report.total,
                "failed_checks": [
                    {"check": c["check"], "percentage": c["percentage"], "message": c["message"]}
                    for c in failed_checks
                ],
            },
        )
    else:
        logger.info(f"✅ DQ PASSED: {dq_report.passed}/{dq_report.total} checks passed")

        emit_event(
            event="rwanda.dq.success",
            resource=resource,
            payload=summary,
        )

    return summary


def main():
    """CLI entry point."""
    result = validate_flow()

    print("\nValidation complete!")
    print(f"Passed: {result['passed']}/{result['total_checks']}")
    print(f"Warnings: {result['warnings']}")
    print(f"Failed: {result['failed']}")


if __name__ == "__main__":
    main()
