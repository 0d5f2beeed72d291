"""Demo workflow — load a dataset, keep recent years, rank groups by their total."""

import pandas as pd

from tg_blockr.core.errors import TgBlockrError

YEAR_COLUMN = "jahr"


class MissingColumnError(TgBlockrError):
    """Raised when the loaded dataset lacks a column the demo workflow needs."""

    def __init__(self, column: str, available: list[str]) -> None:
        self.column = column
        super().__init__(
            f"Failed to run demo: column '{column}' not in dataset"
            f" (available: {', '.join(available)})"
        )


def rank_groups(
    frame: pd.DataFrame, by: str, value: str, since: int, top: int
) -> pd.DataFrame:
    """
    Summarize *value* per *by* group for rows from year *since* on.

    The result has one row per group with ``total``, ``mean`` and ``years``
    columns, sorted by ``total`` descending and cut to the first *top* rows.

    Raises:
        MissingColumnError: if the year, *by* or *value* column is absent.
    """
    for column in (YEAR_COLUMN, by, value):
        if column not in frame.columns:
            raise MissingColumnError(column=column, available=list(frame.columns))

    recent = frame[frame[YEAR_COLUMN] >= since]
    summary = recent.groupby(by)[value].agg(
        total="sum", mean="mean", years="count"
    )
    return summary.sort_values("total", ascending=False).head(top).reset_index()
