"""StaticDatasetCatalog — an explicitly declared registry of dataset descriptors."""

from collections import Counter
from collections.abc import Iterable

from tg_blockr.catalog.domain.catalog import DatasetId
from tg_blockr.catalog.domain.descriptor import DatasetDescriptor
from tg_blockr.catalog.domain.observer import CatalogObserver
from tg_blockr.catalog.infrastructure.errors import (
    DuplicateDatasetError,
    UnknownDatasetError,
)

_SOURCE = "static"


class StaticDatasetCatalog:
    """Satisfies the DatasetCatalog protocol from a fixed set of descriptors."""

    def __init__(
        self,
        descriptors: Iterable[DatasetDescriptor],
        observer: CatalogObserver,
    ) -> None:
        descriptors = list(descriptors)
        counts = Counter(d.dataset_id for d in descriptors)
        duplicates = [dataset_id for dataset_id, n in counts.items() if n > 1]
        if duplicates:
            raise DuplicateDatasetError(dataset_ids=duplicates)

        self._descriptors: dict[DatasetId, DatasetDescriptor] = {
            d.dataset_id: d for d in descriptors
        }
        self._observer = observer
        self._observer.catalog_resolved(
            source=_SOURCE, total_datasets=len(self._descriptors)
        )

    def list_datasets(self) -> list[DatasetId]:
        return sorted(self._descriptors)

    def get(self, dataset_id: DatasetId) -> DatasetDescriptor:
        """
        Return the descriptor registered for *dataset_id*.

        Raises:
            UnknownDatasetError: if no descriptor is registered under that id.
        """
        try:
            return self._descriptors[dataset_id]
        except KeyError:
            raise UnknownDatasetError(dataset_id=dataset_id) from None

    def __contains__(self, dataset_id: object) -> bool:
        return dataset_id in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def loaders_for(self, dataset_id: DatasetId) -> DatasetDescriptor:
        """Satisfies the LoaderResolver protocol: each descriptor names its own loaders."""
        return self.get(dataset_id)
