"""
Flow Tests
==========
Runs the Prefect flows end to end against a temporary SQLite database.
"""

from unittest.mock import MagicMock

import pytest
from prefect.testing.utilities import prefect_test_harness

from rwanda_dev import indicators, views
from rwanda_dev.db import table_exists
from rwanda_dev.flows.reports import run_reports_flow
from rwanda_dev.flows.setup_schema import setup_schema_flow
from rwanda_dev.flows.validate import validate_flow
from rwanda_dev.queries import list_queries

YEARS = list(range(2000, 2024))
TABLE_NAMES = [module.TABLE_NAME for module in indicators.ALL_TABLES]
VIEW_NAMES = [module.VIEW_NAME for module in views.ALL_VIEWS]


@pytest.fixture(scope="module", autouse=True)
def prefect_backend():
    with prefect_test_harness():
        yield


@pytest.fixture
def events(monkeypatch):
    """Capture emit_event calls from the flows."""
    emitted = []

    def _record(**kwargs):
        emitted.append(kwargs)

    monkeypatch.setattr("rwanda_dev.flows.validate.emit_event", _record)
    monkeypatch.setattr("rwanda_dev.flows.reports.emit_event", _record)
    return emitted


@pytest.fixture
def empty_database(tmp_path, monkeypatch):
    """SQLite database with no tables yet."""
    from rwanda_dev.config import get_settings
    from rwanda_dev.db import get_engine

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'empty.db'}")
    get_settings.cache_clear()
    get_engine.cache_clear()

    yield get_engine()

    get_engine().dispose()
    get_engine.cache_clear()
    get_settings.cache_clear()


def _without_year(tables: dict[str, list[dict]], table: str, year: int) -> dict:
    tables[table] = [r for r in tables[table] if r["year"] != year]
    return tables


# =============================================================================
# setup-schema
# =============================================================================


class TestSetupSchemaFlow:
    def test_creates_tables_then_views(self, empty_database, monkeypatch):
        calls = []
        create_all, build_all = indicators.create_all, views.build_all

        def _create_all():
            calls.append("tables")
            return create_all()

        def _build_all():
            calls.append("views")
            return build_all()

        monkeypatch.setattr(indicators, "create_all", _create_all)
        monkeypatch.setattr(views, "build_all", _build_all)

        result = setup_schema_flow()

        assert calls == ["tables", "views"]
        assert result == {"tables": TABLE_NAMES, "views": VIEW_NAMES}
        assert all(table_exists(name) for name in TABLE_NAMES)

    def test_rerun_is_harmless(self, database, load_tables, make_records):
        load_tables(make_records(YEARS))

        result = setup_schema_flow()

        assert result["views"] == VIEW_NAMES
        # Existing rows survive
        assert len(indicators.economic_indicators.read()) == len(YEARS)


# =============================================================================
# run-reports
# =============================================================================


class TestRunReportsFlow:
    def test_counts_per_query(self, load_tables, make_records, events, settings):
        load_tables(_without_year(make_records(YEARS), "health_indicators", 2010))

        result = run_reports_flow(section="advanced")

        assert result["section"] == "advanced"
        assert list(result["counts"]) == list_queries("advanced")
        # Joined queries lose the year missing from health
        assert result["counts"]["yearly_changes"] == 23
        assert result["counts"]["five_year_moving_averages"] == 23
        assert result["counts"]["gdp_growth_change"] == 24
        assert result["counts"]["education_pivot"] == 24
        assert len(result["results"]["yearly_changes"]) == 23

        assert [e["event"] for e in events] == ["rwanda.reports.complete"]
        assert events[0]["payload"] == {"section": "advanced", "counts": result["counts"]}
        assert events[0]["resource"]["prefect.resource.id"] == (
            f"rwanda-dev.{settings.environment}.run-reports"
        )

    def test_all_sections_by_default(self, load_tables, make_records, events):
        load_tables(make_records(YEARS))

        result = run_reports_flow()

        assert result["section"] is None
        assert list(result["counts"]) == list_queries()
        assert result["counts"]["economic_growth_trend"] == 24

    def test_empty_results_warn(self, database, events, monkeypatch):
        logger = MagicMock()
        monkeypatch.setattr("rwanda_dev.flows.reports.get_run_logger", lambda: logger)

        result = run_reports_flow(section="dashboard")

        assert set(result["counts"].values()) == {0}
        warning = logger.warning.call_args.args[0]
        assert f"{len(list_queries('dashboard'))} queries returned no rows" in warning
        assert events[0]["event"] == "rwanda.reports.complete"


# =============================================================================
# validate-indicators
# =============================================================================


def _check(summary: dict, name: str) -> dict:
    return next(c for c in summary["checks"] if c["check"] == name)


class TestValidateFlow:
    def test_clean_data_passes(self, load_tables, make_records, events):
        load_tables(make_records(YEARS))

        summary = validate_flow()

        assert summary["failed"] == 0
        assert summary["warnings"] == 0
        assert summary["passed"] == summary["total_checks"]
        assert [e["event"] for e in events] == ["rwanda.dq.success"]

    def test_misaligned_years_warn(self, load_tables, make_records, events, settings):
        load_tables(_without_year(make_records(YEARS), "health_indicators", 2010))

        summary = validate_flow()

        assert (summary["total_checks"], summary["passed"]) == (38, 34)
        assert (summary["warnings"], summary["failed"]) == (4, 0)
        assert _check(summary, "health_indicators covers 2000-2023")["message"] == "Missing: 2010"
        assert _check(summary, "economic_indicators.year present in all tables")[
            "message"
        ] == "Dropped by joins: 2010"

        assert [e["event"] for e in events] == ["rwanda.dq.success"]
        assert events[0]["payload"] == summary
        assert events[0]["resource"]["prefect.resource.id"] == (
            f"rwanda-dev.{settings.environment}.validate-indicators"
        )

    def test_empty_table_fails(self, load_tables, make_records, events):
        tables = make_records(YEARS)
        del tables["health_indicators"]
        load_tables(tables)

        summary = validate_flow()

        # Health coverage plus every other table's join alignment
        assert summary["failed"] == 4
        assert [e["event"] for e in events] == ["rwanda.dq.failure"]

        payload = events[0]["payload"]
        assert payload["failed_count"] == 4
        assert payload["total_checks"] == summary["total_checks"]
        failed = {c["check"]: c["message"] for c in payload["failed_checks"]}
        assert failed["health_indicators covers 2000-2023"] == "Missing: 2000-2023"

    def test_missing_tables_fail(self, empty_database, events):
        summary = validate_flow()

        assert summary["failed"] == len(TABLE_NAMES)
        assert events[0]["event"] == "rwanda.dq.failure"
