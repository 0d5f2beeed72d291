"""DatasetCatalog Protocol — structural interface for listing loadable datasets."""

from typing import Protocol

type DatasetId = str


class DatasetCatalog(Protocol):
    """Lists the dataset identifiers a TG Data block can offer.

    Implementations return identifiers sorted lexicographically, without
    duplicates. An empty list is a valid catalog.
    """

    def list_datasets(self) -> list[DatasetId]: ...
