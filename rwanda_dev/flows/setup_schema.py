#!/usr/bin/env python3
"""
Setup Schema Flow
=================
Creates the indicator tables and (re)creates the dashboard views.

Order matters: views reference the tables.

Usage:
    python -m rwanda_dev.flows.setup_schema
"""

from prefect import flow, get_run_logger, task

from rwanda_dev import indicators, views


@task(name="create-indicator-tables")
def create_tables() -> list[str]:
    """Create the four indicator tables (no-op where they exist)."""
    logger = get_run_logger()

    created = indicators.create_all()
    for table in created:
        logger.info(f"   ✅ {table}")

    return created


@task(name="build-views")
def build_views() -> list[str]:
    """Drop and recreate every view."""
    logger = get_run_logger()

    built = views.build_all()
    for view in built:
        logger.info(f"   ✅ {view}")

    return built


@flow(name="setup-schema", log_prints=True)
def setup_schema_flow() -> dict:
    """
    Create tables, then views.

    Returns:
        Names of the tables and views in place
    """
    logger = get_run_logger()
    logger.info("🚀 Starting setup-schema flow")

    logger.info("\n🗄️  Creating indicator tables")
    logger.info("-" * 40)
    tables = create_tables()

    logger.info("\n🔨 Building views")
    logger.info("-" * 40)
    built = build_views()

    logger.info(f"✅ Schema ready: {len(tables)} tables, {len(built)} views")
    return {"tables": tables, "views": built}


def main():
    """CLI entry point."""
    result = setup_schema_flow()

    print("\nSchema setup complete!")
    print(f"Tables: {', '.join(result['tables'])}")
    print(f"Views: {', '.join(result['views'])}")


if __name__ == "__main__":
    main()
