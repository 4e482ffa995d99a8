from __future__ import annotations

import math
from typing import Sequence

import pandas as pd

UNKNOWN_CATEGORY = "Unknown"


def _empty() -> pd.DataFrame:
    return pd.DataFrame({"key": pd.Series(dtype=object), "count": pd.Series(dtype="int64")})


def _count_by(keys: pd.Series) -> pd.DataFrame:
    """Counts per key in first-occurrence order."""
    if keys.empty:
        return _empty()
    counts = keys.groupby(keys, sort=False).size()
    return pd.DataFrame({"key": counts.index.tolist(), "count": counts.to_numpy().astype("int64")})


def _sort_desc(agg: pd.DataFrame) -> pd.DataFrame:
    # mergesort is stable: equal counts keep first-occurrence order
    return agg.sort_values("count", ascending=False, kind="mergesort").reset_index(drop=True)


def by_region(records: pd.DataFrame, top_n: int = 20) -> pd.DataFrame:
    """Top-N regions by number of records, descending."""
    if records is None or records.empty:
        return _empty()
    return _sort_desc(_count_by(records["region"])).head(top_n).reset_index(drop=True)


def by_year(records: pd.DataFrame) -> pd.DataFrame:
    """
    Records per year, ascending by year.
    Callers pass the full record set: the trend view is not narrowed by the year filter.
    """
    if records is None or records.empty:
        return _empty()
    agg = _count_by(records["year"].astype(int))
    agg["key"] = agg["key"].astype(int)
    return agg.sort_values("key", kind="mergesort").reset_index(drop=True)


def by_category(records: pd.DataFrame) -> pd.DataFrame:
    """Records per category, descending; empty categories count as "Unknown"."""
    if records is None or records.empty:
        return _empty()
    cats = records["category"].fillna("").astype(str)
    cats = cats.where(cats.str.strip() != "", UNKNOWN_CATEGORY)
    return _sort_desc(_count_by(cats))


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def percent_labels(counts: Sequence[int]) -> list[int]:
    """Integer share of the total per count, rounded half up."""
    counts = [int(c) for c in counts]
    total = sum(counts)
    if total <= 0:
        return [0 for _ in counts]
    return [round_half_up(c / total * 100) for c in counts]
