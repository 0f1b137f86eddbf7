"""
Validation Layer
================
Data quality checks for the indicator tables.
"""

from rwanda_dev.validation.core import DQReport, add_check, add_stat
from rwanda_dev.validation.data_quality import validate_data_quality

__all__ = [
    "DQReport",
    "add_check",
    "add_stat",
    "validate_data_quality",
]
