"""Raw → clean transformation nodes for the NOAA storm-events extract.

Each function is a Kedro node: pure input → output, no side effects.
Together they take the compressed StormData CSV, keep the health and
damage columns, and turn the PROPDMG/CROPDMG figures plus their
magnitude codes into plain dollar amounts.
"""

from __future__ import annotations

import logging
import numbers
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

# ── Raw column → cleaned column ──────────────────────────────────
COLUMN_NAMES: dict[str, str] = {
    "evtype": "event_type",
    "fatalities": "fatalities",
    "injuries": "injuries",
    "propdmg": "property_damage",
    "propdmgexp": "property_damage_exp",
    "cropdmg": "crop_damage",
    "cropdmgexp": "crop_damage_exp",
}

NUMERIC_COLUMNS: list[str] = [
    "fatalities",
    "injuries",
    "property_damage",
    "crop_damage",
]

# ── Multipliers for magnitude codes like "K", "m", "5" ───────────
# Letters are matched case-insensitively. Every single digit scales by
# ten. Anything not listed ("?", "-", blank, missing) scales to zero.
_MAGNITUDE_MULTIPLIERS: dict[str, float] = {
    "B": 1_000_000_000,
    "M": 1_000_000,
    "K": 1_000,
    "H": 100,
    "+": 1,
    **{str(digit): 10 for digit in range(10)},
}


# ── Node 1 ───────────────────────────────────────────────────────
def load_storm_data(raw_data_path: str) -> pd.DataFrame:
    """Read the storm-events CSV into a DataFrame.

    Compression is inferred from the suffix, so the ``.csv.bz2`` file
    fetched by ``python -m storm_impact.download`` is read as-is.

    Args:
        raw_data_path: Path to the raw (optionally compressed) CSV.

    Returns:
        Raw DataFrame with lower-cased column names.
    """
    path = Path(raw_data_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Storm data not found at {path}. "
            "Run `python -m storm_impact.download` first."
        )

    df = pd.read_csv(path, low_memory=False)
    df.columns = df.columns.str.strip().str.lower()

    logger.info(
        "Loaded %s: %s rows, %s columns",
        path.name,
        f"{len(df):,}",
        len(df.columns),
    )
    return df


# ── Node 2 ───────────────────────────────────────────────────────
def select_and_clean_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Keep the health and damage columns and coerce their types.

    Numeric columns that are missing or unparseable become 0, matching
    the zero-for-unknown policy of the magnitude codes. Event-type labels
    are kept exactly as recorded: "TSTM WIND" and "Tstm Wind" stay two
    distinct types.

    Args:
        df: Raw DataFrame from ``load_storm_data``.

    Returns:
        DataFrame with the seven cleaned columns.
    """
    missing = [c for c in COLUMN_NAMES if c not in df.columns]
    if missing:
        raise KeyError(f"Expected columns not found in data: {missing}")

    before_cols = len(df.columns)
    cleaned = df[list(COLUMN_NAMES)].rename(columns=COLUMN_NAMES).copy()

    for col in NUMERIC_COLUMNS:
        parsed = pd.to_numeric(cleaned[col], errors="coerce")
        n_missing = parsed.isna().sum()
        if n_missing > 0:
            logger.warning(
                "%s: %s missing or non-numeric values treated as 0",
                col,
                f"{n_missing:,}",
            )
        cleaned[col] = parsed.fillna(0)

    logger.info(
        "Column selection: kept %d of %d columns, %s distinct event types",
        len(cleaned.columns),
        before_cols,
        f"{cleaned['event_type'].nunique():,}",
    )
    return cleaned


# ── Magnitude codes ──────────────────────────────────────────────
def magnitude_multiplier(code: object) -> float:
    """Return the scale factor for a single magnitude code.

    Digit codes may arrive as integers when pandas infers the column as
    numeric, so integral numbers 0–9 are treated like their string form.
    """
    if code is None or pd.isna(code):
        return 0.0
    if isinstance(code, numbers.Real) and not isinstance(code, bool):
        return 10.0 if code in range(10) else 0.0
    return float(_MAGNITUDE_MULTIPLIERS.get(str(code).upper(), 0))


def _as_amount(value: object) -> float:
    if value is None or pd.isna(value):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if pd.isna(amount) else amount


def normalize_damage(raw_value: object, code: object) -> float:
    """Convert a raw damage figure and its magnitude code to dollars.

    Never raises: a missing figure counts as 0 and an unrecognized code
    scales to 0.

    Examples:
        (2.5, "K") → 2500.0
        (2.5, "9") → 25.0
        (2.5, "?") → 0.0
    """
    return _as_amount(raw_value) * magnitude_multiplier(code)


def normalize_damage_column(values: pd.Series, codes: pd.Series) -> pd.Series:
    """Vectorized ``normalize_damage`` over a value column and a code column."""
    amounts = pd.to_numeric(values, errors="coerce").fillna(0.0).astype(float)
    multipliers = codes.map(magnitude_multiplier).astype(float)
    return amounts * multipliers


# ── Node 3 ───────────────────────────────────────────────────────
def compute_economic_damage(df: pd.DataFrame) -> pd.DataFrame:
    """Add dollar-denominated property, crop and total damage columns.

    Creates:
        - property_damage_dollars: PROPDMG × multiplier(PROPDMGEXP)
        - crop_damage_dollars: CROPDMG × multiplier(CROPDMGEXP)
        - total_damage_dollars: sum of the two
        - total_damage_billions: total in units of $1B, used for ranking

    Keeps the raw figures and codes for auditability.

    Args:
        df: Cleaned DataFrame from ``select_and_clean_columns``.

    Returns:
        DataFrame with the four damage columns added.
    """
    df = df.copy()

    for value_col, code_col, new_col in [
        ("property_damage", "property_damage_exp", "property_damage_dollars"),
        ("crop_damage", "crop_damage_exp", "crop_damage_dollars"),
    ]:
        df[new_col] = normalize_damage_column(df[value_col], df[code_col])

        zeroed = (df[value_col] > 0) & (df[new_col] == 0)
        n_zeroed = zeroed.sum()
        if n_zeroed > 0:
            bad_samples = df.loc[zeroed, code_col].unique()[:10]
            logger.warning(
                "%s: %s non-zero values zeroed by unrecognized codes. "
                "Samples: %s",
                value_col,
                f"{n_zeroed:,}",
                list(bad_samples),
            )

    df["total_damage_dollars"] = (
        df["property_damage_dollars"] + df["crop_damage_dollars"]
    )
    df["total_damage_billions"] = df["total_damage_dollars"] / 1e9

    logger.info(
        "Economic damage computed: $%s property + $%s crops = $%s total",
        f"{df['property_damage_dollars'].sum():,.0f}",
        f"{df['crop_damage_dollars'].sum():,.0f}",
        f"{df['total_damage_dollars'].sum():,.0f}",
    )
    return df
