"""In-repo stand-in for a data lake loader module."""

import pandas as pd

calls: list[str] = []


def get_data(dataset_id: str) -> pd.DataFrame:
    calls.append(dataset_id)
    return pd.DataFrame({"jahr": [2022], "wert": [3.0]}).assign(dataset=dataset_id)
