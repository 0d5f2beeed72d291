"""Dataset entry model — one dataset of an explicitly declared registry."""

from pydantic import BaseModel, Field


class DatasetEntry(BaseModel, frozen=True):
    """A dataset declared in config; loader functions default to the configured ones."""

    dataset_id: str = Field(min_length=1, pattern=r"^[A-Za-z0-9_]+$")
    title: str = ""
    cache_function: str | None = None
    fetch_function: str | None = None
