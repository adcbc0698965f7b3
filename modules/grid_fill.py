# modules/grid_fill.py
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

import pandas as pd

from modules.fill_settings import default_seed_rows, max_fill_rows
from modules.smart_fill import predict


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def fill_cells(cells: Sequence[Any], seed_rows: int = 2) -> List[Any]:
    """
    Drag-fill one column slice. The leading `seed_rows` cells are the
    samples (blank ones are ignored); every cell after them is overwritten
    with the predicted continuation. With no usable seed the cells are
    returned unchanged.
    """
    cells = list(cells)
    if len(cells) < 2:
        return cells
    n_seeds = max(1, min(seed_rows, len(cells) - 1))
    seeds = [v for v in cells[:n_seeds] if not is_blank(v)]
    if not seeds:
        return cells
    return cells[:n_seeds] + predict(seeds, len(cells) - n_seeds)


def _check_row(df: pd.DataFrame, row: int, label: str) -> int:
    row = int(row)
    if row < 0 or row >= len(df):
        raise ValueError(f"{label} {row} is outside the table (0..{len(df) - 1})")
    return row


def fill_range(
    df: pd.DataFrame,
    start_row: int,
    end_row: int,
    columns: Optional[Iterable[str]] = None,
    *,
    seed_rows: Optional[int] = None,
    read_only: Iterable[str] = (),
    max_rows: Optional[int] = None,
) -> pd.DataFrame:
    """
    Apply the fill handle to rows start_row..end_row (positional, inclusive)
    of the given columns and return the updated copy.

    Seeds are read from start_row in the drag direction, so an end_row above
    start_row fills upward. Columns listed in `read_only` are left untouched.
    """
    start_row = _check_row(df, start_row, "start_row")
    end_row = _check_row(df, end_row, "end_row")

    seed_rows = default_seed_rows() if seed_rows is None else int(seed_rows)
    if seed_rows < 1:
        raise ValueError("seed_rows must be at least 1")

    limit = max_fill_rows() if max_rows is None else int(max_rows)
    span = abs(end_row - start_row) + 1
    if span > limit:
        raise ValueError(f"Fill range of {span} rows exceeds the limit of {limit}")

    columns = list(df.columns) if columns is None else list(columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Unknown column(s): {', '.join(map(str, missing))}")

    out = df.copy()
    if span < 2:
        return out

    step = 1 if end_row >= start_row else -1
    rows = list(range(start_row, end_row + step, step))
    locked = set(read_only)

    for col in columns:
        if col in locked:
            continue
        col_idx = out.columns.get_loc(col)
        filled = fill_cells(out.iloc[rows, col_idx].tolist(), seed_rows)
        # mixed results (text next to numbers) need an object column
        out[col] = out[col].astype(object)
        for row, value in zip(rows, filled):
            out.iat[row, col_idx] = value
    return out
