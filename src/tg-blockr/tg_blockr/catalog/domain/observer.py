"""Observer port for the catalog domain — defines events in domain language."""

from typing import Protocol


class CatalogObserver(Protocol):
    def catalog_resolved(self, source: str, total_datasets: int) -> None: ...

    def catalog_discovery_failed(self, source: str, reason: str) -> None: ...
