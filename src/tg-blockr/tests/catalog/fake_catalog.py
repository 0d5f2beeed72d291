"""FakeDatasetCatalog — in-memory DatasetCatalog implementation for use in tests."""


class FakeDatasetCatalog:
    """Satisfies the DatasetCatalog protocol. Returns the ids it was given, sorted."""

    def __init__(self, dataset_ids: list[str]) -> None:
        self._dataset_ids = dataset_ids
        self.calls = 0

    def list_datasets(self) -> list[str]:
        self.calls += 1
        return sorted(set(self._dataset_ids))
