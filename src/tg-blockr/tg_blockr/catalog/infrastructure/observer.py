"""Structlog implementation of the CatalogObserver port."""

import structlog


class StructlogCatalogObserver:
    """Delegates catalog domain events to structlog.

    Satisfies the CatalogObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def catalog_resolved(self, source: str, total_datasets: int) -> None:
        self._log.info(
            "catalog.resolved", source=source, total_datasets=total_datasets
        )

    def catalog_discovery_failed(self, source: str, reason: str) -> None:
        self._log.warning(
            "catalog.discovery_failed",
            source=source,
            reason=reason,
            message="Dataset catalog is empty; no datasets can be selected",
        )
