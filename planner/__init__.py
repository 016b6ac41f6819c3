"""Planner package — reading plan generation and date lookup."""

from planner.calendar_index import period_index_for_date
from planner.generator import (
    AUTO,
    format_period_title,
    generate_monthly_plan,
    generate_plan,
    partition_units,
    resolve_units_per_period,
)

__all__ = [
    "AUTO",
    "format_period_title",
    "generate_monthly_plan",
    "generate_plan",
    "partition_units",
    "resolve_units_per_period",
    "period_index_for_date",
]
