"""BlockState — the four-valued configuration a TG Data block persists."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class BlockState(BaseModel, frozen=True, populate_by_name=True):
    """Immutable configuration of one TG Data block.

    This is the block's whole persisted payload: ``model_dump(by_alias=True)``
    produces the keys ``dataset``, ``use_data_lake``, ``add_labels`` and
    ``validate``. ``add_labels`` and ``validate`` only take effect when
    ``use_data_lake`` is False. A ``None`` dataset means no selection.
    """

    dataset: str = ""
    use_data_lake: bool = True
    add_labels: bool = True
    # "validate" would shadow BaseModel.validate; persisted under its alias.
    validate_data: bool = Field(default=True, alias="validate")

    @field_validator("dataset", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_dataset(self) -> bool:
        return bool(self.dataset)
