"""
Pytest Configuration
====================
Shared fixtures for all tests.
"""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def set_test_env():
    """Set up test environment variables before any tests run."""
    os.environ["ENVIRONMENT"] = os.environ.get("ENVIRONMENT", "dev")
    os.environ["START_YEAR"] = "2000"
    os.environ["END_YEAR"] = "2023"

    # Clear any cached settings
    from rwanda_dev.config import get_settings

    get_settings.cache_clear()

    yield

    # Clean up after tests
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Provide settings instance for tests."""
    from rwanda_dev.config import get_settings

    return get_settings()


@pytest.fixture
def database(tmp_path, monkeypatch):
    """
    Fresh SQLite database with tables and views created.

    Points DATABASE_URL at a per-test file and resets the cached
    settings and engine around the test.
    """
    from rwanda_dev import indicators, views
    from rwanda_dev.config import get_settings
    from rwanda_dev.db import get_engine

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'rwanda.db'}")
    get_settings.cache_clear()
    get_engine.cache_clear()

    indicators.create_all()
    views.build_all()

    yield get_engine()

    get_engine().dispose()
    get_engine.cache_clear()
    get_settings.cache_clear()


def _records_for(years: list[int]) -> dict[str, list[dict]]:
    economic, demographic, education, health = [], [], [], []

    for i, year in enumerate(years):
        economic.append(
            {
                "year": year,
                "gdp_growth": 6.0 + (i % 5),
                "gdp_per_capita": 250.0 + 30 * i,
                "inflation_rate": 5.0 + (i % 3),
            }
        )
        demographic.append(
            {
                "year": year,
                "total_population": 8_000_000 + 250_000 * i,
                "urban_population_percent": 14.0 + 0.2 * i,
                "life_expectancy": 48.0 + 0.8 * i,
            }
        )
        education.append(
            {
                "year": year,
                "primary_enrollment_rate": 100.0 + i,
                "secondary_enrollment_rate": 15.0 + 1.5 * i,
                "literacy_rate": 65.0 + 0.5 * i,
            }
        )
        health.append(
            {
                "year": year,
                "infant_mortality_rate": 110.0 - 3.5 * i,
                "health_expenditure_percent_gdp": 4.0 + 0.1 * i,
                "hospital_beds_per_1000": 1.0 + 0.02 * i,
            }
        )

    return {
        "economic_indicators": economic,
        "demographic_indicators": demographic,
        "education_indicators": education,
        "health_indicators": health,
    }


@pytest.fixture
def make_records():
    """Build plausible rows for all four tables: make_records(years) -> {table: rows}."""
    return _records_for


@pytest.fixture
def load_tables(database):
    """Insert {table: rows} into the test database."""
    from rwanda_dev.indicators import ALL_TABLES

    modules = {module.TABLE_NAME: module for module in ALL_TABLES}

    def _load(tables: dict[str, list[dict]]) -> dict[str, int]:
        return {name: modules[name].load(rows) for name, rows in tables.items()}

    return _load
