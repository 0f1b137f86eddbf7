#!/usr/bin/env python3
"""
Export Reports Script
=====================
Runs catalog queries and writes one JSON file per result set, for the
dashboard/BI tool to pick up.

Usage:
    python scripts/export_reports.py
    python scripts/export_reports.py --section dashboard
    python scripts/export_reports.py --query five_year_moving_averages --query education_pivot
    python scripts/export_reports.py --output-dir /tmp/reports
    python scripts/export_reports.py --list
"""

import argparse
import json
import sys
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from rwanda_dev.config import get_settings
from rwanda_dev.queries import CATALOG, SECTIONS, get_query, list_queries, run_query

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class ExportResult:
    """Result of exporting a single query."""

    query: str
    success: bool
    rows: int = 0
    path: str | None = None
    error: str | None = None


# =============================================================================
# Pure Functions (easy to test)
# =============================================================================


def select_queries(section: str | None = None, names: list[str] | None = None) -> list[str]:
    """
    Resolve which queries to export.

    Explicit names win over section; unknown names raise KeyError.

    Args:
        section: Catalog section, or None for all
        names: Explicit query names

    Returns:
        Query names in catalog order
    """
    if names:
        for name in names:
            get_query(name)
        return [name for name in CATALOG if name in names]

    return list_queries(section)


def json_default(value):
    """json.dumps fallback for database types (PostgreSQL NUMERIC -> float)."""
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_payload(name: str, rows: list[dict]) -> dict:
    """Wrap a result set with its catalog metadata."""
    query = get_query(name)
    return {
        "query": query.name,
        "section": query.section,
        "description": query.description,
        "columns": list(query.columns),
        "rows": rows,
    }


def output_path(output_dir: Path, name: str) -> Path:
    """Target file for one query."""
    return output_dir / f"{name}.json"


# =============================================================================
# IO Functions
# =============================================================================


def write_report(payload: dict, path: Path) -> None:
    """Write one payload to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, default=json_default))


def export_query(name: str, output_dir: Path) -> ExportResult:
    """
    Run one query and write its result set.

    Args:
        name: Catalog query name
        output_dir: Directory for JSON files

    Returns:
        ExportResult with row count or error
    """
    try:
        rows = run_query(name)
        path = output_path(output_dir, name)
        write_report(build_payload(name, rows), path)
        return ExportResult(query=name, success=True, rows=len(rows), path=str(path))

    except Exception as e:
        return ExportResult(query=name, success=False, error=str(e))


# =============================================================================
# Main Orchestrator
# =============================================================================


def run_export(
    names: list[str],
    output_dir: Path,
    stop_on_error: bool = False,
) -> list[ExportResult]:
    """
    Export each query in turn.

    Args:
        names: Query names to export
        output_dir: Directory for JSON files
        stop_on_error: Stop on first failure

    Returns:
        List of results for each query processed
    """
    print(f"\n{'=' * 60}")
    print(f"EXPORT: {len(names)} queries → {output_dir}")
    print(f"{'=' * 60}")

    results = []

    for i, name in enumerate(names, 1):
        result = export_query(name, output_dir)
        results.append(result)

        if result.success:
            print(f"[{i}/{len(names)}] ✅ {name}: {result.rows:,} rows")
        else:
            print(f"[{i}/{len(names)}] ❌ {name}: {result.error}")

            if stop_on_error:
                print("\nStopping on error.")
                break

    succeeded = sum(1 for r in results if r.success)
    failed = sum(1 for r in results if not r.success)

    print(f"\n{'=' * 60}")
    print(f"COMPLETE: {succeeded} succeeded, {failed} failed")
    print(f"{'=' * 60}")

    return results


# =============================================================================
# CLI
# =============================================================================


def main():
    parser = argparse.ArgumentParser(description="Export report query result sets as JSON")

    parser.add_argument("--section", choices=SECTIONS, help="Limit to one catalog section")
    parser.add_argument("--query", action="append", dest="queries", help="Query name (repeatable)")
    parser.add_argument("--output-dir", help="Output directory (default: settings.report_dir)")
    parser.add_argument("--stop-on-error", action="store_true", help="Stop on first failure")
    parser.add_argument("--list", action="store_true", help="List queries and exit")

    args = parser.parse_args()

    if args.list:
        for name in list_queries(args.section):
            query = get_query(name)
            print(f"{query.section:12} {name:36} {query.description}")
        return

    try:
        names = select_queries(args.section, args.queries)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        sys.exit(1)

    output_dir = Path(args.output_dir or get_settings().report_dir)
    results = run_export(names, output_dir, stop_on_error=args.stop_on_error)

    if any(not r.success for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
