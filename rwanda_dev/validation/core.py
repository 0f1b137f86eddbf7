"""
Data Quality Core
=================
Report accumulator and helpers shared by the indicator checks.

Yearly tables are small (24 rows for 2000-2023), so a single missing year
already costs about 4 points. Checks pick their WARN band accordingly.
"""

from collections import Counter
from dataclasses import dataclass, field

STATUSES = ("PASS", "WARN", "FAIL")


@dataclass
class DQReport:
    """Data quality report accumulator."""

    checks: list = field(default_factory=list)
    statistics: list = field(default_factory=list)

    def by_status(self, status: str) -> list[dict]:
        """Checks with the given status, in the order they ran."""
        return [c for c in self.checks if c["status"] == status]

    def status_counts(self) -> dict[str, int]:
        counts = Counter(c["status"] for c in self.checks)
        return {status: counts.get(status, 0) for status in STATUSES}

    @property
    def passed(self) -> int:
        return self.status_counts()["PASS"]

    @property
    def warnings(self) -> int:
        return self.status_counts()["WARN"]

    @property
    def failed(self) -> int:
        return self.status_counts()["FAIL"]

    @property
    def total(self) -> int:
        return len(self.checks)

    def summary(self) -> dict:
        """Counts plus the check and statistic rows, as returned by flows."""
        return {
            "total_checks": self.total,
            "passed": self.passed,
            "warnings": self.warnings,
            "failed": self.failed,
            "checks": self.checks,
            "statistics": self.statistics,
        }


def add_check(
    report: DQReport,
    category: str,
    check_name: str,
    passed: int,
    total: int,
    message: str = "",
    threshold: int = 100,
    warn_band: int = 15,
) -> None:
    """
    Record a DQ check result.

    Status is PASS at or above threshold, WARN within warn_band points
    below it, FAIL otherwise. An empty check (total == 0) counts as 0%.

    Args:
        report: DQReport to add check to
        category: Check category (e.g., 'COVERAGE')
        check_name: Name of the check
        passed: Number of rows or years that passed
        total: Number of rows or years checked
        message: Optional message (usually the offending years)
        threshold: Pass threshold percentage (default 100)
        warn_band: Width of the WARN band below threshold, in points
    """
    pct = (passed / total * 100) if total > 0 else 0

    if pct >= threshold:
        status = "PASS"
    elif pct >= threshold - warn_band:
        status = "WARN"
    else:
        status = "FAIL"

    report.checks.append(
        {
            "category": category,
            "check": check_name,
            "status": status,
            "passed": passed,
            "total": total,
            "percentage": f"{pct:.1f}%",
            "message": message,
        }
    )


def add_stat(
    report: DQReport,
    category: str,
    metric: str,
    value: str,
    description: str = "",
) -> None:
    """Record a statistic (informational, no pass/fail)."""
    report.statistics.append(
        {
            "category": category,
            "metric": metric,
            "value": value,
            "description": description,
        }
    )


def format_years(years) -> str:
    """Compact year list: [2000, 2001, 2002, 2005] -> '2000-2002, 2005'."""
    ordered = sorted(set(years))
    if not ordered:
        return "none"

    spans = []
    start = prev = ordered[0]
    for year in ordered[1:]:
        if year != prev + 1:
            spans.append((start, prev))
            start = year
        prev = year
    spans.append((start, prev))

    return ", ".join(str(a) if a == b else f"{a}-{b}" for a, b in spans)
