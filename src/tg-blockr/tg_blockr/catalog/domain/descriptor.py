"""DatasetDescriptor — one entry of an explicitly declared dataset registry."""

from pydantic import BaseModel, Field


class DatasetDescriptor(BaseModel, frozen=True):
    """Declares a dataset together with the two functions able to load it.

    ``cache_function`` reads the pre-processed data lake copy;
    ``fetch_function`` fetches and validates it from the original source.
    Both are dotted import paths resolved only when an expression is evaluated.
    """

    dataset_id: str = Field(min_length=1, pattern=r"^[A-Za-z0-9_]+$")
    title: str = ""
    cache_function: str = Field(min_length=1)
    fetch_function: str = Field(min_length=1)
