# disaster_core/state.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

import pandas as pd

from disaster_core.charts.colors import ColorRegistry

ChartKind = Literal["bar", "line", "pie"]
CHART_KINDS: tuple[str, ...] = ("bar", "line", "pie")
ALL_YEARS = "all"

YearSelection = Union[str, int]


def coerce_year(value) -> YearSelection:
    """
    Normalize a year selection: "all" stays "all", "2020"/2020 -> 2020.
    Selectbox values arrive as text, records hold ints.
    """
    if isinstance(value, str):
        v = value.strip()
        if v.lower() == ALL_YEARS:
            return ALL_YEARS
        try:
            return int(v)
        except ValueError as exc:
            raise ValueError(f"Invalid year selection: {value!r}") from exc
    if isinstance(value, bool):
        raise ValueError(f"Invalid year selection: {value!r}")
    if isinstance(value, int):
        return value
    # numpy integers and friends
    try:
        if int(value) == value:
            return int(value)
    except (TypeError, ValueError):
        pass
    raise ValueError(f"Invalid year selection: {value!r}")


def get_filtered_records(records: pd.DataFrame, year: YearSelection = ALL_YEARS) -> pd.DataFrame:
    """All records for "all", else the rows of exactly that year (original order kept)."""
    y = coerce_year(year)
    if y == ALL_YEARS:
        return records
    return records[records["year"] == y]


@dataclass
class FilterState:
    year: YearSelection = ALL_YEARS
    chart_kind: ChartKind = "bar"


@dataclass
class AppState:
    """Everything one render pass reads. Records are loaded once and never mutated."""

    records: pd.DataFrame
    filters: FilterState = field(default_factory=FilterState)
    colors: ColorRegistry = field(default_factory=ColorRegistry)

    def set_year(self, year) -> None:
        self.filters.year = coerce_year(year)

    def set_chart_kind(self, kind: ChartKind) -> None:
        if kind not in CHART_KINDS:
            raise ValueError(f"chart kind must be one of {CHART_KINDS}, got {kind!r}")
        self.filters.chart_kind = kind

    def filtered_records(self) -> pd.DataFrame:
        return get_filtered_records(self.records, self.filters.year)
