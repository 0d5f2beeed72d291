"""Loader ports — where a block finds the functions its expressions call."""

from typing import Protocol


class LoaderFunctions(Protocol):
    """Dotted import paths of the cache-read and direct-fetch functions."""

    @property
    def cache_function(self) -> str: ...

    @property
    def fetch_function(self) -> str: ...


class LoaderResolver(Protocol):
    """Returns the loader functions responsible for a given dataset id."""

    def loaders_for(self, dataset_id: str) -> LoaderFunctions: ...


class FixedLoaderResolver:
    """Satisfies LoaderResolver by answering every dataset with the same loaders."""

    def __init__(self, loaders: LoaderFunctions) -> None:
        self._loaders = loaders

    def loaders_for(self, dataset_id: str) -> LoaderFunctions:
        return self._loaders
