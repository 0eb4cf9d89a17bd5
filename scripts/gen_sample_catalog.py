#!/usr/bin/env python3
"""Sample catalog generator for performance testing.

Writes a synthetic spreadsheet export (CSV) in the storefront's column layout:
set, number, name, category, rarity, condition, qty, price_bnd, status,
image_direct, image_url, notes. A small share of rows is deliberately dirty
(unparseable price plus a quoted comma in the notes) so the loader's degraded
paths are exercised as well.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

COLUMNS = [
    "set", "number", "name", "category", "rarity", "condition",
    "qty", "price_bnd", "status", "image_direct", "image_url", "notes",
]
SETS = ["Base Set", "Jungle", "Fossil", "Team Rocket", "Neo Genesis", "Scarlet & Violet"]
RARITIES = ["Common", "Uncommon", "Rare", "Holo Rare", "Ultra Rare", "Secret Rare"]
CONDITIONS = ["NM", "LP", "MP", "HP"]
CATEGORIES = ["Single", "Single", "Single", "Sealed", "Graded", ""]
STATUSES = ["AVAILABLE", "AVAILABLE", "AVAILABLE", "HOLD", "SOLD"]


def generate_catalog(rows: int, seed: int = 42, dirty_ratio: float = 0.01) -> pd.DataFrame:
    """Generate a synthetic catalog DataFrame (all cells as text).

    Args:
        rows: Number of data rows to generate
        seed: Random seed for reproducible data
        dirty_ratio: Share of rows given an unparseable price

    Returns:
        DataFrame with the export columns
    """
    rng = np.random.default_rng(seed)
    prices = np.round(rng.gamma(shape=1.5, scale=12.0, size=rows)).clip(1, 500).astype(int)
    data = {
        "set": rng.choice(SETS, rows),
        "number": [f"{n}/{rng.integers(60, 200)}" for n in rng.integers(1, 200, rows)],
        "name": [f"Card {i}" for i in range(1, rows + 1)],
        "category": rng.choice(CATEGORIES, rows),
        "rarity": rng.choice(RARITIES, rows),
        "condition": rng.choice(CONDITIONS, rows),
        "qty": rng.integers(0, 5, rows).astype(str),
        "price_bnd": prices.astype(str),
        "status": rng.choice(STATUSES, rows),
        "image_direct": "",
        "image_url": [f"https://img.example/{i}.png" for i in range(1, rows + 1)],
        "notes": "",
    }
    df = pd.DataFrame(data, columns=COLUMNS)

    dirty = rng.random(rows) < dirty_ratio
    df.loc[dirty, "price_bnd"] = "ask"
    df.loc[dirty, "notes"] = "price on request, see shop"
    return df


def write_catalog(df: pd.DataFrame, path: Path, line_terminator: str = "\r\n") -> Path:
    """Write the DataFrame as a spreadsheet-style CSV export."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, lineterminator=line_terminator)
    return path


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a synthetic card catalog CSV export")
    parser.add_argument("--rows", type=int, default=50_000, help="Number of data rows")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--dirty-ratio", type=float, default=0.01, help="Share of rows with bad prices")
    parser.add_argument("--output", type=Path, default=Path("data/perf_catalog.csv"), help="Output CSV path")
    args = parser.parse_args()

    if args.rows <= 0:
        print("rows must be positive", file=sys.stderr)
        return 1
    df = generate_catalog(args.rows, seed=args.seed, dirty_ratio=args.dirty_ratio)
    out = write_catalog(df, args.output)
    print(f"wrote {len(df)} rows to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
