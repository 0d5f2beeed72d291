"""Error types raised by catalog infrastructure."""

from tg_blockr.core.errors import TgBlockrError


class UnknownDatasetError(TgBlockrError):
    """Raised when a dataset id is not part of the catalog."""

    def __init__(self, dataset_id: str) -> None:
        self.dataset_id = dataset_id
        super().__init__(f"Failed to find dataset: unknown dataset id '{dataset_id}'")


class DuplicateDatasetError(TgBlockrError):
    """Raised when an explicit dataset registry declares the same id twice."""

    def __init__(self, dataset_ids: list[str]) -> None:
        self.dataset_ids = dataset_ids
        id_list = ", ".join(sorted(dataset_ids))
        super().__init__(f"Failed to build dataset catalog: duplicate ids: {id_list}")
