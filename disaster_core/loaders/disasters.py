# disaster_core/loaders/disasters.py
from __future__ import annotations

import io
import logging

import pandas as pd
import requests

from disaster_core.config import (
    COL_DECLARATION_DATE,
    COL_INCIDENT_TYPE,
    COL_STATE,
    DEFAULT_DATA_URL,
)

logger = logging.getLogger(__name__)

REQUIRED_COLS = (COL_STATE, COL_DECLARATION_DATE, COL_INCIDENT_TYPE)


class LoadError(Exception):
    """The disaster CSV could not be fetched or parsed."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source
        self.message = message


def fetch_csv_text(url: str, timeout: int = 60) -> str:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text


def _present(col: pd.Series) -> pd.Series:
    return col.fillna("").astype(str).str.strip() != ""


def parse_disaster_records(text: str) -> pd.DataFrame:
    """
    Parse raw CSV text into normalized records.
    Keeps rows with state, declaration date and incident type present and a parseable date.
    Adds region / declaration_date (UTC) / year / category; other columns pass through.
    """
    df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False, index_col=False)

    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        logger.warning("CSV is missing expected column(s): %s", ", ".join(missing))
        for c in missing:
            df[c] = ""

    n_raw = len(df)
    keep = _present(df[COL_STATE]) & _present(df[COL_DECLARATION_DATE]) & _present(df[COL_INCIDENT_TYPE])
    df = df[keep].copy()

    dates = pd.to_datetime(df[COL_DECLARATION_DATE], errors="coerce", utc=True, format="mixed")
    df = df[dates.notna()].copy()
    dates = dates[dates.notna()]

    df["region"] = df[COL_STATE]
    df["declaration_date"] = dates
    df["year"] = dates.dt.year.astype(int)
    df["category"] = df[COL_INCIDENT_TYPE]

    logger.info("Parsed %d of %d rows (%d dropped)", len(df), n_raw, n_raw - len(df))
    return df.reset_index(drop=True)


def load_disasters(url: str = DEFAULT_DATA_URL, timeout: int = 60) -> pd.DataFrame:
    """Fetch and parse the declarations CSV; any fetch/parse failure becomes LoadError."""
    logger.info("Fetching disaster data from %s", url)
    try:
        text = fetch_csv_text(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.error("Fetch failed for %s: %s", url, exc)
        raise LoadError(url, f"Could not fetch data: {exc}") from exc

    try:
        return parse_disaster_records(text)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        logger.error("Could not parse CSV from %s: %s", url, exc)
        raise LoadError(url, f"Could not parse data as CSV: {exc}") from exc


def observed_years(records: pd.DataFrame) -> list[int]:
    """Distinct years in the records, ascending."""
    if records is None or records.empty:
        return []
    return sorted(int(y) for y in records["year"].unique())
