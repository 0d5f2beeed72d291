"""NamespaceDatasetCatalog — lists datasets by scanning a fetch module's loader functions."""

import importlib
from collections.abc import Sequence

from tg_blockr.catalog.domain.catalog import DatasetId
from tg_blockr.catalog.domain.discovery import discover_dataset_ids
from tg_blockr.catalog.domain.observer import CatalogObserver

_DEFAULT_PREFIX = "fetch_"
_DEFAULT_DENYLIST = ("json",)


class NamespaceDatasetCatalog:
    """Satisfies the DatasetCatalog protocol from a module's ``fetch_<id>`` functions.

    The module is imported on first use and the listing is kept for the
    lifetime of the instance. A module that cannot be imported degrades to an
    empty catalog.
    """

    def __init__(
        self,
        module_name: str,
        observer: CatalogObserver,
        prefix: str = _DEFAULT_PREFIX,
        denylist: Sequence[str] = _DEFAULT_DENYLIST,
    ) -> None:
        self._module_name = module_name
        self._observer = observer
        self._prefix = prefix
        self._denylist = tuple(denylist)
        self._dataset_ids: list[DatasetId] | None = None

    def list_datasets(self) -> list[DatasetId]:
        if self._dataset_ids is None:
            self._dataset_ids = self._discover()
        return list(self._dataset_ids)

    def _discover(self) -> list[DatasetId]:
        # Importing or inspecting a loader module may fail with any error.
        try:
            module = importlib.import_module(self._module_name)
            dataset_ids = discover_dataset_ids(
                namespace=module, prefix=self._prefix, denylist=self._denylist
            )
        except Exception as exc:  # noqa: BLE001
            self._observer.catalog_discovery_failed(
                source=self._module_name, reason=str(exc)
            )
            return []

        self._observer.catalog_resolved(
            source=self._module_name, total_datasets=len(dataset_ids)
        )
        return dataset_ids
