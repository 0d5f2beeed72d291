"""Top-level TgBlockrConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from tg_blockr.block.domain.state import BlockState
from tg_blockr.config.domain.dataset import DatasetEntry
from tg_blockr.config.domain.loaders import LoaderConfig


class TgBlockrConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a TG Data block installation.

    An empty ``datasets`` list means the catalog is discovered from
    ``loaders.fetch_namespace`` at runtime.
    """

    loaders: LoaderConfig = Field(default_factory=LoaderConfig)
    defaults: BlockState = Field(default_factory=BlockState)
    datasets: list[DatasetEntry] = Field(default_factory=list)
