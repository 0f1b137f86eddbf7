"""
Data Quality Validation
=======================
Runs every indicator check and logs a summary.
"""

from prefect import get_run_logger, task

from rwanda_dev.config import get_settings
from rwanda_dev.indicators import ALL_TABLES
from rwanda_dev.validation.checks import (
    check_business_logic,
    check_referential_integrity,
    check_required_fields,
    check_uniqueness,
    check_year_coverage,
    collect_statistics,
)
from rwanda_dev.validation.core import DQReport


@task(name="validate-data-quality")
def validate_data_quality(tables: dict[str, list[dict]]) -> DQReport:
    """
    Run data quality checks on the indicator tables.

    Args:
        tables: Table name -> rows, as read from the database

    Returns:
        DQReport with checks and statistics
    """
    logger = get_run_logger()
    settings = get_settings()
    report = DQReport()
    columns = {module.TABLE_NAME: module.COLUMNS for module in ALL_TABLES}

    logger.info("🔍 Running data quality validation...")

    logger.info("   Checking required fields...")
    check_required_fields(report, tables, columns)

    logger.info("   Checking year uniqueness...")
    check_uniqueness(report, tables)

    logger.info(f"   Checking coverage {settings.start_year}-{settings.end_year}...")
    check_year_coverage(report, tables, settings.start_year, settings.end_year)

    logger.info("   Checking year alignment across tables...")
    check_referential_integrity(report, tables)

    logger.info("   Checking value ranges...")
    check_business_logic(report, tables)

    logger.info("   Recording statistics...")
    collect_statistics(report, tables)

    # ==================== SUMMARY ====================
    logger.info("✅ DQ validation complete:")
    logger.info(f"   Total checks: {report.total}")
    logger.info(f"   ✅ Passed: {report.passed}")
    logger.info(f"   ⚠️  Warnings: {report.warnings}")
    logger.info(f"   ❌ Failed: {report.failed}")

    for check in report.by_status("WARN"):
        logger.warning(f"   ⚠️  {check['check']}: {check['percentage']} {check['message']}")
    for check in report.by_status("FAIL"):
        logger.warning(f"   ❌ {check['check']}: {check['percentage']} {check['message']}")

    return report
