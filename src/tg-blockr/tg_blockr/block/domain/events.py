"""Block events — one per UI input, discriminated on the `input_id` field."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator


class DatasetSelected(BaseModel, frozen=True):
    """The dataset dropdown changed; an empty string clears the selection."""

    input_id: Literal["dataset"] = "dataset"
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DataLakeToggled(BaseModel, frozen=True):
    input_id: Literal["use_data_lake"] = "use_data_lake"
    value: bool


class AddLabelsToggled(BaseModel, frozen=True):
    input_id: Literal["add_labels"] = "add_labels"
    value: bool


class ValidateToggled(BaseModel, frozen=True):
    input_id: Literal["validate"] = "validate"
    value: bool


type BlockEvent = Annotated[
    DatasetSelected | DataLakeToggled | AddLabelsToggled | ValidateToggled,
    Field(discriminator="input_id"),
]

INPUT_IDS: tuple[str, ...] = ("dataset", "use_data_lake", "add_labels", "validate")
