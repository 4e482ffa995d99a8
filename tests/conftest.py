import sys
from pathlib import Path

import pandas as pd
import pytest

# Add repo root to Python path so `import disaster_core...` works in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def make_records(rows):
    """Records frame shaped like parse_disaster_records output."""
    df = pd.DataFrame(rows, columns=["region", "year", "category"])
    df["year"] = df["year"].astype(int)
    df["declaration_date"] = pd.to_datetime(df["year"].astype(str) + "-06-01", utc=True)
    return df


@pytest.fixture
def scenario_records():
    return make_records([
        ("TX", 2020, "Flood"),
        ("TX", 2021, "Flood"),
        ("CA", 2020, "Fire"),
    ])
