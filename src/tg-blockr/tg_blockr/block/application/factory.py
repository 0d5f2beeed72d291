"""new_tgdata_block — the block constructor handed to the host registry."""

from tg_blockr.block.application.block import TgDataBlock
from tg_blockr.block.domain.loaders import FixedLoaderResolver, LoaderResolver
from tg_blockr.block.domain.observer import BlockObserver
from tg_blockr.block.domain.state import BlockState
from tg_blockr.block.infrastructure.observer import StructlogBlockObserver
from tg_blockr.catalog.domain.catalog import DatasetCatalog
from tg_blockr.catalog.infrastructure.namespace_catalog import NamespaceDatasetCatalog
from tg_blockr.catalog.infrastructure.observer import StructlogCatalogObserver
from tg_blockr.config.domain.loaders import LoaderConfig


def new_tgdata_block(
    dataset: str = "",
    use_data_lake: bool = True,
    add_labels: bool = True,
    validate: bool = True,
    *,
    catalog: DatasetCatalog | None = None,
    resolver: LoaderResolver | None = None,
    loaders: LoaderConfig | None = None,
    observer: BlockObserver | None = None,
) -> TgDataBlock:
    """Create a TG Data block.

    With no collaborators given, datasets are discovered from the ``fetch_*``
    functions of ``loaders.fetch_namespace`` and every dataset is loaded
    through the functions named in ``loaders``.

    Example::

        block = new_tgdata_block("energie_emiss_co2", use_data_lake=False)
        block.expression.render()
        # "tg_data.get_dataset('energie_emiss_co2', add_labels=True, validate=True)"
    """
    loaders = loaders or LoaderConfig()
    if catalog is None:
        catalog = NamespaceDatasetCatalog(
            module_name=loaders.fetch_namespace,
            observer=StructlogCatalogObserver(),
            prefix=loaders.fetch_prefix,
            denylist=loaders.denylist,
        )
    state = BlockState(
        dataset=dataset,
        use_data_lake=use_data_lake,
        add_labels=add_labels,
        validate_data=validate,
    )
    return TgDataBlock(
        state=state,
        catalog=catalog,
        resolver=resolver or FixedLoaderResolver(loaders=loaders),
        observer=observer or StructlogBlockObserver(),
    )
