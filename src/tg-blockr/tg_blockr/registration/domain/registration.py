"""BlockRegistration — what the TG Data block announces to a host registry."""

from pydantic import BaseModel, Field


class BlockRegistration(BaseModel, frozen=True):
    """Registration record for one block constructor.

    The host builds the block by importing ``package`` and calling its
    ``ctor`` attribute.
    """

    ctor: str = Field(default="new_tgdata_block", min_length=1)
    name: str = Field(default="TG Data", min_length=1)
    description: str = "Load datasets from Canton Thurgau, Switzerland"
    uid: str = Field(default="tgdata_block", min_length=1)
    category: str = Field(default="input", min_length=1)
    icon: str | None = "database"
    package: str = Field(default="tg_blockr.block.application.factory", min_length=1)
    overwrite: bool = True
