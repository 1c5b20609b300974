"""Load additional food catalog entries from a CSV file.

The CSV needs a `food_name` column (`name` is accepted too) and may carry
any of the nutrient columns `calories`, `protein`, `carbs`, `fat`, `fiber`,
`sugar`, `sodium`, all per 100 g. Blank nutrient cells count as 0; rows
with a blank name or a non-numeric nutrient value are skipped.
"""
from __future__ import annotations

from typing import Dict
import logging
import pandas as pd

from database.models import NUTRIENT_FIELDS

logger = logging.getLogger("data.ingest_foods")

NAME_COLUMNS = ("food_name", "name")


def parse_foods_csv(csv_path: str) -> Dict[str, Dict[str, float]]:
    """Parse the CSV into a mapping of lower-cased food name to nutrients.

    Later rows win when a name appears twice.

    Args:
        csv_path: Path to the foods CSV file.

    Returns:
        Dict of food name to a dict holding every nutrient field.

    Raises:
        ValueError: If the file has no name column.
    """
    logger.info("Parsing foods CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8", dtype=str, keep_default_na=False)
    df = df.rename(columns=lambda s: s.strip().lower())

    name_col = next((c for c in NAME_COLUMNS if c in df.columns), None)
    if name_col is None:
        raise ValueError(f"{csv_path}: expected one of the columns {', '.join(NAME_COLUMNS)}")

    df["__name"] = df[name_col].str.strip().str.lower()
    df = df[df["__name"] != ""]

    numeric = pd.DataFrame(index=df.index)
    for field in NUTRIENT_FIELDS:
        raw = df[field].str.strip() if field in df.columns else pd.Series("", index=df.index)
        numeric[field] = pd.to_numeric(raw.replace("", "0"), errors="coerce")

    invalid = numeric.isna().any(axis=1)
    for name in df.loc[invalid, "__name"]:
        logger.warning("Skipping food %r: non-numeric nutrient value", name)

    valid = numeric[~invalid]
    foods = {}
    for name, values in zip(df.loc[~invalid, "__name"], valid.to_dict(orient="records")):
        foods[name] = {field: float(values[field]) for field in NUTRIENT_FIELDS}

    logger.info("Parsed %s foods from CSV", len(foods))
    return foods


if __name__ == "__main__":
    import argparse

    p = argparse.ArgumentParser("Show the foods a catalog CSV would add")
    p.add_argument("csv_path", nargs="?", default="data/fixtures/extra_foods.csv")
    args = p.parse_args()
    for food_name, nutrients in parse_foods_csv(args.csv_path).items():
        print(food_name, nutrients)
