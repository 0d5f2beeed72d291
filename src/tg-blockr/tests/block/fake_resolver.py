"""FakeLoaderResolver — records which datasets were resolved."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FakeLoaders:
    cache_function: str = "tg_plot.get_data"
    fetch_function: str = "tg_data.get_dataset"


class FakeLoaderResolver:
    """Satisfies the LoaderResolver protocol and records every lookup."""

    def __init__(self, loaders: FakeLoaders | None = None) -> None:
        self._loaders = loaders or FakeLoaders()
        self.lookups: list[str] = []

    def loaders_for(self, dataset_id: str) -> FakeLoaders:
        self.lookups.append(dataset_id)
        return self._loaders
