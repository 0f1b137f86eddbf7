"""
Module Contract Tests
=====================
Validates that all indicator, view and query modules follow the defined contracts.
"""

import importlib
import pkgutil

from rwanda_dev.protocols import IndicatorTableModule, ViewModule


def test_indicator_modules_have_required_attributes():
    """All indicator modules must have TABLE_NAME, COLUMNS, DDL, create, load and read."""
    from rwanda_dev import indicators

    for _, name, _ in pkgutil.iter_modules(indicators.__path__):
        if name.startswith("_"):
            continue

        module = importlib.import_module(f"rwanda_dev.indicators.{name}")

        assert isinstance(module, IndicatorTableModule), f"indicators.{name} breaks the contract"
        assert module.TABLE_NAME == name, f"indicators.{name}.TABLE_NAME should match module name"


def test_indicator_tables_are_keyed_by_year():
    """Every indicator table leads with year and declares it as primary key."""
    from rwanda_dev.indicators import ALL_TABLES

    assert len(ALL_TABLES) == 4

    for module in ALL_TABLES:
        assert module.COLUMNS[0] == "year"
        assert "year INTEGER PRIMARY KEY" in module.DDL
        for column in module.COLUMNS:
            assert column in module.DDL, f"{module.TABLE_NAME}.{column} missing from DDL"


def test_view_modules_have_required_attributes():
    """All view modules must have VIEW_NAME, SOURCE_TABLES, COLUMNS, DDL, build and read."""
    from rwanda_dev import views

    for _, name, _ in pkgutil.iter_modules(views.__path__):
        if name.startswith("_"):
            continue

        module = importlib.import_module(f"rwanda_dev.views.{name}")

        assert isinstance(module, ViewModule), f"views.{name} breaks the contract"
        assert module.VIEW_NAME == name


def test_view_source_tables_are_indicator_tables():
    """All view SOURCE_TABLES must reference indicator tables."""
    from rwanda_dev.indicators import ALL_TABLES
    from rwanda_dev.views import ALL_VIEWS

    table_names = {module.TABLE_NAME for module in ALL_TABLES}

    for module in ALL_VIEWS:
        for source in module.SOURCE_TABLES:
            assert source in table_names, f"{module.VIEW_NAME} reads unknown table: {source}"
            assert source in module.DDL


def test_catalog_entries_are_well_formed():
    """Every catalog query has a known section, a SELECT and unique output columns."""
    from rwanda_dev.queries import CATALOG, SECTIONS

    assert len(CATALOG) == 16

    for name, query in CATALOG.items():
        assert query.name == name
        assert query.section in SECTIONS
        assert "SELECT" in query.sql
        assert query.columns[0] == "year"
        assert len(set(query.columns)) == len(query.columns)


def test_catalog_sections():
    from rwanda_dev.queries import list_queries

    assert list_queries("exploration") == [
        "economic_growth_trend",
        "population_urbanization_trend",
        "education_progress",
        "health_improvements",
        "gdp_vs_enrollment",
    ]
    assert list_queries("advanced") == [
        "five_year_moving_averages",
        "yearly_changes",
        "significant_changes",
        "gdp_growth_change",
        "above_average_gdp_growth",
        "education_pivot",
    ]
    assert len(list_queries("dashboard")) == 5
    assert len(list_queries()) == 16
