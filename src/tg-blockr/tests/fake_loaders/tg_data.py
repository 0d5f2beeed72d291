"""In-repo stand-in for a direct-fetch loader module — ``fetch_<id>`` functions plus get_dataset."""

import pandas as pd

# Non-callable attributes that happen to share the prefix must be ignored.
fetch_timeout_seconds = 30


def _frame(dataset_id: str) -> pd.DataFrame:
    return pd.DataFrame(
        {"jahr": [2020, 2021], "bfsnr": [4401, 4401], "wert": [1.5, 2.5]}
    ).assign(dataset=dataset_id)


def fetch_json(url: str) -> dict[str, object]:
    return {"url": url}


def fetch_energie_emiss_co2() -> pd.DataFrame:
    return _frame("energie_emiss_co2")


def fetch_abfall_menge_art() -> pd.DataFrame:
    return _frame("abfall_menge_art")


def fetch_heizsysteme() -> pd.DataFrame:
    return _frame("heizsysteme")


calls: list[dict[str, object]] = []


def get_dataset(dataset_id: str, add_labels: bool = True, validate: bool = True) -> pd.DataFrame:
    calls.append(
        {"dataset_id": dataset_id, "add_labels": add_labels, "validate": validate}
    )
    frame = _frame(dataset_id)
    if add_labels:
        frame = frame.assign(bfsnr_name="Frauenfeld")
    return frame


def get_raw(dataset_id: str) -> list[str]:
    return [dataset_id]


def fail_dataset(dataset_id: str) -> pd.DataFrame:
    raise RuntimeError(f"validation failed for {dataset_id}")
