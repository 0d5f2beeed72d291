"""Builds the dataset catalog and loader resolver a config describes."""

from tg_blockr.block.domain.loaders import FixedLoaderResolver, LoaderResolver
from tg_blockr.catalog.domain.catalog import DatasetCatalog
from tg_blockr.catalog.domain.descriptor import DatasetDescriptor
from tg_blockr.catalog.domain.observer import CatalogObserver
from tg_blockr.catalog.infrastructure.namespace_catalog import NamespaceDatasetCatalog
from tg_blockr.catalog.infrastructure.static_catalog import StaticDatasetCatalog
from tg_blockr.config.domain.config import TgBlockrConfig


def build_catalog(
    config: TgBlockrConfig, observer: CatalogObserver
) -> tuple[DatasetCatalog, LoaderResolver]:
    """Return the catalog and loader resolver for *config*.

    Declared datasets form a StaticDatasetCatalog whose descriptors fall back to
    the configured loader functions. Without declared datasets the catalog is
    discovered from the fetch namespace and every dataset shares the configured
    loaders.
    """
    loaders = config.loaders
    if not config.datasets:
        namespace_catalog = NamespaceDatasetCatalog(
            module_name=loaders.fetch_namespace,
            observer=observer,
            prefix=loaders.fetch_prefix,
            denylist=loaders.denylist,
        )
        return namespace_catalog, FixedLoaderResolver(loaders=loaders)

    descriptors = [
        DatasetDescriptor(
            dataset_id=entry.dataset_id,
            title=entry.title,
            cache_function=entry.cache_function or loaders.cache_function,
            fetch_function=entry.fetch_function or loaders.fetch_function,
        )
        for entry in config.datasets
    ]
    static_catalog = StaticDatasetCatalog(descriptors=descriptors, observer=observer)
    return static_catalog, static_catalog
